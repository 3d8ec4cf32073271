from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gtx_translate.domain.models.language import Language
from gtx_translate.errors import InvalidArgumentError
from gtx_translate.utils.response_decoder import decode_response


@dataclass(frozen=True)
class TranslationRequest:
    """A single text to translate. Never persisted."""

    text: str
    target: Language
    source: Language = field(default=Language.AUTO)

    def __post_init__(self) -> None:
        if self.target is Language.AUTO:
            raise InvalidArgumentError(
                "The target language cannot be Language.AUTO!",
                {"target": self.target.code},
            )


class TranslationResult(BaseModel):
    """
    Result of a translation request.

    - target_language: language translated to
    - source_text: original, untranslated text
    - raw_data: raw body received from the endpoint
    - url: URL the request was made to
    - translated_text / translated_pronunciation / source_pronunciation /
      source_language: decoded from ``raw_data``

    Pronunciations are generally None when the language uses the Latin
    alphabet. ``source_language`` is useful when the request used AUTO.
    """

    model_config = ConfigDict(frozen=True)

    target_language: Language
    source_text: str
    raw_data: str = Field(..., repr=False)
    url: str = Field(..., repr=False)

    translated_text: str
    translated_pronunciation: Optional[str] = None
    source_pronunciation: Optional[str] = None
    source_language: Language

    @classmethod
    def from_response(
        cls,
        target_language: Language,
        source_text: str,
        raw_data: str,
        url: str,
    ) -> "TranslationResult":
        """Decode ``raw_data`` and build the result. Raises MalformedResponseError."""
        decoded = decode_response(raw_data)
        return cls(
            target_language=target_language,
            source_text=source_text,
            raw_data=raw_data,
            url=url,
            translated_text=decoded.translated_text,
            translated_pronunciation=decoded.translated_pronunciation,
            source_pronunciation=decoded.source_pronunciation,
            source_language=decoded.source_language,
        )

    @property
    def pronunciation(self) -> Optional[str]:
        """Deprecated alias of ``translated_pronunciation``."""
        warnings.warn(
            "TranslationResult.pronunciation is replaced by translated_pronunciation",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.translated_pronunciation

    def __str__(self) -> str:
        return (
            f"Translation({self.source_language} -> {self.target_language}, "
            f"{self.source_text} -> {self.translated_text})"
        )
