"""Decoder for the ``translate_a/single`` response body.

The endpoint answers with an undocumented, positionally addressed JSON array.
Every index assumption about that array lives in this module:

    R[0]     list of sentence entries
    R[0][i]  [translated fragment, source fragment, ...]
    R[0][-1] phonetics block, either the entry's trailing list or the entry
             itself: [.., .., translated pronunciation, source pronunciation]
    R[2]     detected (or confirmed) source language code

The body is validated right after parsing; callers only see
:class:`DecodedResponse` and its named accessors.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Optional

from gtx_translate.domain.models.language import Language
from gtx_translate.errors import MalformedResponseError, UnknownLanguageError
from gtx_translate.utils.language_resolver import resolve_language_code

SENTENCES_INDEX = 0
SOURCE_LANGUAGE_INDEX = 2
FRAGMENT_INDEX = 0
TRANSLATED_PRONUNCIATION_INDEX = 2
SOURCE_PRONUNCIATION_INDEX = 3


@dataclass(frozen=True)
class DecodedResponse:
    """Validated view of a response body."""

    sentences: tuple
    phonetics: Optional[tuple]
    source_language_code: str

    @property
    def translated_text(self) -> str:
        # Every sentence/line comes back separately; join them back.
        fragments = (_text_at(entry, FRAGMENT_INDEX) for entry in self.sentences)
        return "".join(fragment for fragment in fragments if fragment is not None)

    @property
    def translated_pronunciation(self) -> Optional[str]:
        if self.phonetics is None:
            return None
        return _text_at(self.phonetics, TRANSLATED_PRONUNCIATION_INDEX)

    @property
    def source_pronunciation(self) -> Optional[str]:
        if self.phonetics is None or len(self.phonetics) <= SOURCE_PRONUNCIATION_INDEX:
            return None
        return _text_at(self.phonetics, SOURCE_PRONUNCIATION_INDEX)

    @property
    def source_language(self) -> Language:
        try:
            return resolve_language_code(self.source_language_code)
        except UnknownLanguageError as exc:
            raise MalformedResponseError(
                f"Unknown source language in response: {self.source_language_code!r}",
                {"source_language": self.source_language_code},
            ) from exc


def decode_response(raw: str) -> DecodedResponse:
    """Parse ``raw`` and validate the minimum array shape.

    Raises MalformedResponseError when the body is not JSON, the root is not
    an array with at least 3 elements, ``R[0]`` or one of its entries is not
    an array, or ``R[2]`` is not a string.
    """

    try:
        root = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError("Response body is not valid JSON", {"error": str(exc)}) from exc

    if not isinstance(root, list):
        raise MalformedResponseError(
            "Response root is not an array", {"type": type(root).__name__}
        )
    if len(root) <= SOURCE_LANGUAGE_INDEX:
        raise MalformedResponseError(
            "Response array is too short", {"length": len(root)}
        )

    sentences = root[SENTENCES_INDEX]
    if not isinstance(sentences, list):
        raise MalformedResponseError(
            "Sentence block is not an array", {"type": type(sentences).__name__}
        )
    for position, entry in enumerate(sentences):
        if not isinstance(entry, list):
            raise MalformedResponseError(
                "Sentence entry is not an array", {"index": position}
            )

    source_code = root[SOURCE_LANGUAGE_INDEX]
    if not isinstance(source_code, str) or not source_code:
        raise MalformedResponseError(
            "Source language is missing from response", {"value": source_code}
        )

    return DecodedResponse(
        sentences=tuple(tuple(entry) for entry in sentences),
        phonetics=_phonetics_block(sentences),
        source_language_code=source_code,
    )


def _phonetics_block(sentences: List[list]) -> Optional[tuple]:
    if not sentences:
        return None
    last = sentences[-1]
    # A trailing list only counts when its pronunciation slots hold text;
    # other trailing lists (alignment data) leave the entry itself in charge.
    if last and isinstance(last[-1], list) and _has_text_slots(last[-1]):
        return tuple(last[-1])
    return tuple(last)


def _has_text_slots(block: list) -> bool:
    slots = block[TRANSLATED_PRONUNCIATION_INDEX:SOURCE_PRONUNCIATION_INDEX + 1]
    return all(value is None or isinstance(value, str) for value in slots)


def _text_at(block, index: int) -> Optional[str]:
    if len(block) <= index:
        return None
    return unjson(block[index])


def unjson(value: Any) -> Optional[str]:
    """Turn a decoded JSON value into text; JSON null stays absent.

    ``json.loads`` already strips the quoting and converts ``\\n`` escapes
    into real newlines. Non-string scalars keep their JSON spelling.

    Only JSON ``null`` is absent. The string ``"null"`` is kept as text on
    purpose, so a translation that really is the word "null" is not lost;
    stripping quotes first and comparing to ``null`` would drop it.
    """

    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    raise MalformedResponseError(
        "Expected a text value in response", {"type": type(value).__name__}
    )
