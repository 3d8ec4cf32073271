# utils/language_resolver.py
from typing import Dict, List, Optional, TypedDict

from gtx_translate.domain.models.language import Language
from gtx_translate.errors import UnknownLanguageError


class _LanguageCacheEntry(TypedDict):
    """Internal lowercase view of a Language member used for matching."""

    language: Language
    code: str
    names: List[str]
    aliases: List[str]


LANGUAGE_CACHE: Optional[List[_LanguageCacheEntry]] = None
RESOLVE_CACHE: Dict[str, Language] = {}


def get_language_cache() -> List[_LanguageCacheEntry]:
    """Return the lowercase lookup table, building it on first access."""

    global LANGUAGE_CACHE
    if LANGUAGE_CACHE is not None:
        return LANGUAGE_CACHE

    cache: List[_LanguageCacheEntry] = []
    for language in Language:
        cache.append(
            _LanguageCacheEntry(
                language=language,
                code=language.code.lower(),
                # canonical name first, then the member name ("CHINESE_SIMPLIFIED" -> "chinese simplified")
                names=[language.display_name.lower(), language.name.replace("_", " ").lower()],
                aliases=[alias.lower() for alias in language.aliases],
            )
        )

    LANGUAGE_CACHE = cache
    return LANGUAGE_CACHE


# ==============================================================================
# Flexible Resolver
# ==============================================================================

def resolve_language(raw_value) -> Language:
    """
    Resolve a language reference into a :class:`Language` member.

    Matching is case-insensitive and ignores surrounding whitespace:
    1. exact code ('en', 'zh-cn')
    2. exact canonical name ('English') or member name ('chinese simplified')
    3. alias ('eng', 'iw', 'farsi')
    4. partial match: prefix of a name, then substring of a name or code

    Raises UnknownLanguageError when nothing matches or the value is blank.
    """

    if isinstance(raw_value, Language):
        return raw_value

    s = _normalize_key(raw_value)
    if s in RESOLVE_CACHE:
        return RESOLVE_CACHE[s]

    languages = get_language_cache()

    result = (
        _find_by_code(languages, s)
        or _find_by_name(languages, s)
        or _find_by_alias(languages, s)
        or _find_by_prefix(languages, s)
        or _find_by_contains(languages, s)
    )
    if result is None:
        raise UnknownLanguageError(raw_value)

    RESOLVE_CACHE[s] = result
    return result


def resolve_language_code(raw_value) -> Language:
    """
    Strict lookup for codes returned by the endpoint.

    Only an exact code or alias matches (case-insensitive). Raises
    UnknownLanguageError for anything else, so an unlisted code is never
    mistaken for a similar-looking language.
    """

    if isinstance(raw_value, Language):
        return raw_value

    s = _normalize_key(raw_value)
    languages = get_language_cache()

    result = _find_by_code(languages, s) or _find_by_alias(languages, s)
    if result is None:
        raise UnknownLanguageError(raw_value)
    return result


def _normalize_key(raw_value) -> str:
    s = str(raw_value or "").strip().lower()
    if not s:
        raise UnknownLanguageError(raw_value, "Language value is empty")
    return s


def _find_by_code(languages: List[_LanguageCacheEntry], s: str) -> Optional[Language]:
    for entry in languages:
        if entry["code"] == s:
            return entry["language"]
    return None


def _find_by_name(languages: List[_LanguageCacheEntry], s: str) -> Optional[Language]:
    for entry in languages:
        if s in entry["names"]:
            return entry["language"]
    return None


def _find_by_alias(languages: List[_LanguageCacheEntry], s: str) -> Optional[Language]:
    for entry in languages:
        if s in entry["aliases"]:
            return entry["language"]
    return None


def _find_by_prefix(languages: List[_LanguageCacheEntry], s: str) -> Optional[Language]:
    for entry in languages:
        if any(name.startswith(s) for name in entry["names"]):
            return entry["language"]
    return None


def _find_by_contains(languages: List[_LanguageCacheEntry], s: str) -> Optional[Language]:
    for entry in languages:
        if any(s in name for name in entry["names"]) or s in entry["code"]:
            return entry["language"]
    return None
