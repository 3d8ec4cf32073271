import sys
from pathlib import Path

import httpx
import pytest

# Ensure project root is on sys.path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from gtx_translate.services.translator import Translator  # noqa: E402
from gtx_translate.utils import language_resolver  # noqa: E402


HOLA_BODY = '[[["Hola","Hello",null,null]],null,"en"]'


class TransportSpy:
    """Records every request and answers with a canned response."""

    def __init__(self, status_code=200, text=HOLA_BODY, exc=None):
        self.status_code = status_code
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, text=self.text)

    @property
    def calls(self):
        return len(self.requests)


@pytest.fixture
def spy():
    return TransportSpy()


@pytest.fixture
def make_translator():
    created = []

    def _make(spy: TransportSpy, **client_options) -> Translator:
        translator = Translator(transport=httpx.MockTransport(spy), **client_options)
        created.append(translator)
        return translator

    yield _make
    for translator in created:
        translator.close()


@pytest.fixture(autouse=True)
def _reset_resolve_cache():
    language_resolver.RESOLVE_CACHE.clear()
    yield
    language_resolver.RESOLVE_CACHE.clear()
