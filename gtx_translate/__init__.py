"""Free Google translate client: no API key, one request per call."""

import logging

from gtx_translate.domain.models.language import Language
from gtx_translate.domain.models.outcome import Outcome
from gtx_translate.domain.models.translation import TranslationRequest, TranslationResult
from gtx_translate.errors import (
    EmptyBodyError,
    HttpStatusError,
    InvalidArgumentError,
    MalformedResponseError,
    TranslationError,
    TransportError,
    UnknownLanguageError,
)
from gtx_translate.services.translator import Translator
from gtx_translate.utils.language_resolver import resolve_language

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.1.2"

__all__ = [
    "EmptyBodyError",
    "HttpStatusError",
    "InvalidArgumentError",
    "Language",
    "MalformedResponseError",
    "Outcome",
    "TranslationError",
    "TranslationRequest",
    "TranslationResult",
    "Translator",
    "TransportError",
    "UnknownLanguageError",
    "resolve_language",
]
