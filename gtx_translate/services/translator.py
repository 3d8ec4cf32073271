"""
Translator service for Google's public ``translate_a/single`` endpoint.

One async core (``translate``) does the work: build the request, perform a
single HTTP attempt, decode the body. The other three entry points are thin
adapters over it:

    translate                     async,    raises TranslationError
    translate_catching            async,    returns Outcome
    translate_blocking            blocking, raises TranslationError
    translate_blocking_catching   blocking, returns Outcome

No retries and no timeout policy of its own; whatever the httpx client is
configured with applies. Cancelling the task awaiting ``translate`` aborts
the in-flight request.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Coroutine, Optional, TypeVar, Union

import httpx

from gtx_translate.config.settings import DEBUG_PRINT
from gtx_translate.domain.models.language import Language
from gtx_translate.domain.models.outcome import Outcome
from gtx_translate.domain.models.translation import TranslationRequest, TranslationResult
from gtx_translate.errors import EmptyBodyError, HttpStatusError, TransportError
from gtx_translate.utils.language_resolver import resolve_language
from gtx_translate.utils.request_builder import build_request

logger = logging.getLogger(__name__)

LanguageRef = Union[Language, str]
T = TypeVar("T")


class Translator:
    """A translator that uses Google's translate endpoint.

    ``client`` is an optional caller-owned ``httpx.AsyncClient``; it is used
    as is and never closed here. Without it, a client is opened per call from
    ``client_options`` (``timeout``, ``proxy``, ``transport``, ...) and closed
    when the call ends.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, **client_options: Any) -> None:
        if client is not None and client_options:
            raise TypeError("Pass either an httpx client or client options, not both")
        self._client = client
        self._client_options = client_options
        # private loop for the blocking calls, started on first use
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._loop_thread: Optional[threading.Thread] = None
        self._loop_lock = threading.Lock()

    def __enter__(self) -> Translator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Stop the private loop used by the blocking calls, if it was started.

        An injected client is still left open; closing it is up to the caller.
        """
        with self._loop_lock:
            loop, thread = self._loop, self._loop_thread
            self._loop = self._loop_thread = None
        if loop is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        thread.join()
        loop.close()

    async def translate(
        self,
        text: str,
        target: LanguageRef,
        source: LanguageRef = Language.AUTO,
    ) -> TranslationResult:
        """Translate ``text`` into ``target``.

        ``target`` and ``source`` accept Language members or anything
        :func:`resolve_language` understands.

        Raises:
            InvalidArgumentError: target is Language.AUTO (before any I/O).
            UnknownLanguageError: a language string did not resolve.
            TransportError / HttpStatusError / EmptyBodyError: HTTP failed.
            MalformedResponseError: the body did not have the expected shape.
        """

        request = TranslationRequest(
            text=text,
            target=resolve_language(target),
            source=resolve_language(source),
        )

        async with self._open_client() as client:
            http_request = build_request(request, client)
            url = str(http_request.url)
            if DEBUG_PRINT:
                logger.info("GET %s", url)
            body = await self._execute(client, http_request)

        result = TranslationResult.from_response(
            target_language=request.target,
            source_text=request.text,
            raw_data=body,
            url=url,
        )
        if DEBUG_PRINT:
            logger.info("Decoded %s", result)
        return result

    async def translate_catching(
        self,
        text: str,
        target: LanguageRef,
        source: LanguageRef = Language.AUTO,
    ) -> Outcome[TranslationResult]:
        """Like :meth:`translate`, returning an Outcome instead of raising."""
        try:
            return Outcome.success(await self.translate(text, target, source))
        except Exception as exc:
            return Outcome.failure(exc)

    def translate_blocking(
        self,
        text: str,
        target: LanguageRef,
        source: LanguageRef = Language.AUTO,
    ) -> TranslationResult:
        """Run :meth:`translate`, blocking the calling thread until it completes.

        Every blocking call runs on the same private event loop, so an
        injected client keeps a single loop for its pooled connections. Do
        not share that client with :meth:`translate` on another loop.
        """
        return self._run_blocking(self.translate(text, target, source))

    def translate_blocking_catching(
        self,
        text: str,
        target: LanguageRef,
        source: LanguageRef = Language.AUTO,
    ) -> Outcome[TranslationResult]:
        """Blocking variant of :meth:`translate_catching`."""
        return self._run_blocking(self.translate_catching(text, target, source))

    # ----------------- Blocking helpers -----------------

    def _run_blocking(self, coro: Coroutine[Any, Any, T]) -> T:
        future = asyncio.run_coroutine_threadsafe(coro, self._ensure_loop())
        return future.result()

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        with self._loop_lock:
            if self._loop is None:
                loop = asyncio.new_event_loop()
                thread = threading.Thread(
                    target=loop.run_forever,
                    name="gtx-translate-loop",
                    daemon=True,
                )
                thread.start()
                self._loop, self._loop_thread = loop, thread
            return self._loop

    # ----------------- HTTP helpers -----------------

    @asynccontextmanager
    async def _open_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(**self._client_options) as client:
            yield client

    @staticmethod
    async def _execute(client: httpx.AsyncClient, http_request: httpx.Request) -> str:
        """Perform exactly one attempt and return the body text."""
        try:
            response = await client.send(http_request)
        except httpx.RequestError as exc:
            logger.warning("Translate request failed: %s", exc)
            raise TransportError(cause=exc) from exc

        if not response.is_success:
            logger.warning("Translate request returned HTTP %s", response.status_code)
            raise HttpStatusError(response.status_code)

        body = response.text
        if not body:
            logger.warning("Translate request returned an empty body")
            raise EmptyBodyError()
        return body
