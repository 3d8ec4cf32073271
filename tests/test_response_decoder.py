import pytest

from gtx_translate.domain.models.language import Language
from gtx_translate.errors import MalformedResponseError
from gtx_translate.utils.response_decoder import decode_response, unjson


def test_simple_body_without_pronunciation():
    decoded = decode_response('[[["Hola","Hello",null,null]],null,"en"]')

    assert decoded.translated_text == "Hola"
    assert decoded.source_language is Language.ENGLISH
    assert decoded.translated_pronunciation is None
    assert decoded.source_pronunciation is None


def test_trailing_phonetics_array_with_four_elements():
    decoded = decode_response(
        '[[["Hola","Hello",null,["","", "OH-lah", "HEH-loh"]]],null,"en"]'
    )

    assert decoded.translated_pronunciation == "OH-lah"
    assert decoded.source_pronunciation == "HEH-loh"


def test_live_layout_with_transliteration_entry():
    # The endpoint appends [null, null, translit, source translit] to R[0].
    decoded = decode_response(
        '[[["こんにちは","Hello",null,null,10],[null,null,"Kon\'nichiwa"]],null,"en"]'
    )

    assert decoded.translated_text == "こんにちは"
    assert decoded.translated_pronunciation == "Kon'nichiwa"
    # three elements only, so no source pronunciation
    assert decoded.source_pronunciation is None


def test_multiple_sentences_are_joined_without_separator():
    decoded = decode_response(
        '[[["Hola. ","Hello. ",null,null],["Adiós.","Bye.",null,null]],null,"en"]'
    )

    assert decoded.translated_text == "Hola. Adiós."


def test_null_fragments_are_skipped():
    decoded = decode_response('[[["Uno",null],[null,"x"],[],["Dos"]],null,"es"]')

    assert decoded.translated_text == "UnoDos"
    assert decoded.source_language is Language.SPANISH


def test_empty_sentence_block_gives_empty_text():
    decoded = decode_response('[[],null,"en"]')

    assert decoded.translated_text == ""
    assert decoded.translated_pronunciation is None
    assert decoded.source_pronunciation is None


def test_escaped_newlines_become_real_newlines():
    decoded = decode_response(r'[[["line one\nline two","a",null,null]],null,"en"]')

    assert decoded.translated_text == "line one\nline two"


def test_word_null_is_kept_as_text():
    decoded = decode_response('[[["null","null",null,null]],null,"en"]')

    assert decoded.translated_text == "null"


def test_detected_chinese_code_resolves():
    decoded = decode_response('[[["Hello","你好",null,null]],null,"zh-CN"]')

    assert decoded.source_language is Language.CHINESE_SIMPLIFIED


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "",
        '{"sentences": []}',
        '"just a string"',
        '[[["Hola"]],null]',
        '[null,null,"en"]',
        '["Hola",null,"en"]',
        '[["Hola"],null,"en"]',
        '[[["Hola"]],null,null]',
        '[[["Hola"]],null,42]',
    ],
)
def test_malformed_bodies_raise(body):
    with pytest.raises(MalformedResponseError):
        decode_response(body)


def test_unknown_source_language_is_malformed():
    decoded = decode_response('[[["Hola"]],null,"xx-klingon"]')

    with pytest.raises(MalformedResponseError) as exc_info:
        decoded.source_language

    assert exc_info.value.details == {"source_language": "xx-klingon"}


@pytest.mark.parametrize("code", ["ba", "ch", "ve"])
def test_unlisted_source_code_is_not_guessed(code):
    # each is a prefix or substring of some language name
    decoded = decode_response(f'[[["Hola","Hello",null,null]],null,"{code}"]')

    with pytest.raises(MalformedResponseError) as exc_info:
        decoded.source_language

    assert exc_info.value.details == {"source_language": code}


def test_detected_code_alias_resolves():
    decoded = decode_response('[[["שלום","Hello",null,null]],null,"iw"]')

    assert decoded.source_language is Language.HEBREW


@pytest.mark.parametrize(
    "body",
    [
        '[[["Hola","Hello",null,null,10,[[1],[2],[3]]]],null,"en"]',
        '[[["Hola","Hello",null,null,10,[[0,5],[1,2],[3],[4]]]],null,"en"]',
    ],
)
def test_trailing_alignment_list_is_not_phonetics(body):
    decoded = decode_response(body)

    assert decoded.translated_text == "Hola"
    assert decoded.translated_pronunciation is None
    assert decoded.source_pronunciation is None


@pytest.mark.parametrize(
    "value,expected",
    [(None, None), ("text", "text"), (10, "10"), (True, "true")],
)
def test_unjson(value, expected):
    assert unjson(value) == expected


def test_unjson_rejects_containers():
    with pytest.raises(MalformedResponseError):
        unjson(["nested"])
