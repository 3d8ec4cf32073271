from __future__ import annotations

from typing import List, Optional, Tuple

import httpx

from gtx_translate.config.settings import DT_PARAMS, FIXED_PARAMS, TRANSLATE_URL, USER_AGENT
from gtx_translate.domain.models.translation import TranslationRequest


def build_query_params(request: TranslationRequest) -> List[Tuple[str, str]]:
    """Return the ordered query parameters for ``request``.

    Constant parameters come first, then ``sl``, ``tl``, ``hl`` and ``q``.
    """

    params: List[Tuple[str, str]] = [("client", "gtx")]
    params.extend(("dt", dt) for dt in DT_PARAMS)
    params.extend(FIXED_PARAMS)

    params.append(("sl", request.source.code))
    params.append(("tl", request.target.code))
    params.append(("hl", request.target.code))
    params.append(("q", request.text))
    return params


def build_request(
    request: TranslationRequest,
    client: Optional[httpx.AsyncClient] = None,
) -> httpx.Request:
    """Build the GET request for ``request``.

    When ``client`` is given the request picks up its defaults (timeout,
    extra headers). The User-Agent is always set on the request itself so a
    caller-supplied client cannot drop it.
    """

    params = build_query_params(request)
    headers = {"User-Agent": USER_AGENT}
    if client is not None:
        return client.build_request("GET", TRANSLATE_URL, params=params, headers=headers)
    return httpx.Request("GET", TRANSLATE_URL, params=params, headers=headers)
