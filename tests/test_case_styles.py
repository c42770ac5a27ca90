"""Tests for acronyms and case style conversion."""

import pytest

from wordcase.acronym import acronym
from wordcase.applying import applying
from wordcase.camel_case_words import camel_case_words
from wordcase.case_style import CaseStyle
from wordcase.dash_delimited import dash_delimited
from wordcase.lower_camel_cased import lower_camel_cased
from wordcase.snake_cased import snake_cased
from wordcase.upper_camel_cased import upper_camel_cased
from wordcase.word_option import WordOption


def test_acronym() -> None:
    """Verify acronyms take the first letter of each word."""
    assert acronym("let's invent some acronym") == "LISA"


def test_acronym_with_leading_apostrophe() -> None:
    """Verify a leading apostrophe is stripped before taking the initial."""
    assert acronym("let's 'nvent some acroynm") == "LNSA"


def test_acronym_empty() -> None:
    """Verify letterless input gives an empty acronym."""
    assert acronym("") == ""
    assert acronym("1 2 3") == ""


def test_dash_delimited() -> None:
    """Verify dash joining keeps case and honors caller options only."""
    assert dash_delimited("someObjectId") == "some-Object-Id"
    assert dash_delimited("I'm here") == "I'm-here"
    assert dash_delimited("I'm here", WordOption.STRIP_APOSTROPHES) == "Im-here"


def test_lower_camel_case() -> None:
    """Verify the first word is lowercased."""
    assert lower_camel_cased("HelloWorld") == "helloWorld"


def test_lower_camel_case_acronym() -> None:
    """Verify common acronyms are uppercased."""
    assert lower_camel_cased("someObjectId") == "someObjectID"


def test_lower_camel_case_acronym_back_to_back() -> None:
    """Verify an acronym directly after another acronym is lowercased."""
    assert lower_camel_cased("someObjectIdUrlApi") == "someObjectIDurlAPI"


def test_lower_camel_case_leading_acronym() -> None:
    """Verify a leading acronym is lowercased and does not block the next one."""
    assert lower_camel_cased("id url") == "idURL"


def test_upper_camel_case() -> None:
    """Verify every word is title-cased."""
    assert upper_camel_cased("someObject") == "SomeObject"


def test_upper_camel_case_acronym() -> None:
    """Verify common acronyms are uppercased."""
    assert upper_camel_cased("someObjectId") == "SomeObjectID"


def test_upper_camel_case_acronym_back_to_back() -> None:
    """Verify an acronym directly after another acronym is lowercased."""
    assert upper_camel_cased("someObjectIdUrlApi") == "SomeObjectIDurlAPI"


def test_upper_camel_case_title_cases_mixed_words() -> None:
    """Verify mixed-case words are title-cased."""
    assert upper_camel_cased("hello wORLD") == "HelloWorld"
    assert upper_camel_cased("HTTP server") == "HTTPServer"


def test_snake_case() -> None:
    """Verify words are joined with underscores and lowercased."""
    assert snake_cased("someObjectIdUrlApi") == "some_object_id_url_api"


@pytest.mark.parametrize(
    "text",
    ["someObjectIdUrlApi", "The thick-skulled programmers.", "I'm 'bout it", ""],
)
def test_snake_case_idempotent(text: str) -> None:
    """Verify snake casing its own output changes nothing."""
    once = snake_cased(text)
    assert snake_cased(once) == once


@pytest.mark.parametrize(
    "options",
    [WordOption.NONE, WordOption.DISTINGUISH_HYPHENATED_WORDS, WordOption.STRIP_HYPHENS],
)
def test_casing_always_strips_apostrophes_and_hyphens(options: WordOption) -> None:
    """Verify case styles never keep apostrophes or hyphens."""
    text = "don't be thick-skulled"
    for style in CaseStyle:
        result = applying(text, style, options)
        assert "'" not in result
        assert "-" not in result


def test_applying_dispatches() -> None:
    """Verify each style reaches its converter."""
    text = "someObjectIdUrlApi"
    assert applying(text, CaseStyle.UPPER_CAMEL_CASE) == "SomeObjectIDurlAPI"
    assert applying(text, CaseStyle.LOWER_CAMEL_CASE) == "someObjectIDurlAPI"
    assert applying(text, CaseStyle.SNAKE_CASE) == "some_object_id_url_api"


def test_applying_with_custom_acronyms() -> None:
    """Verify custom acronyms flow through to the camel case styles."""
    assert applying("json id", CaseStyle.UPPER_CAMEL_CASE, acronyms=["json"]) == (
        "JSONId"
    )


def test_camel_case_words_looks_back_at_rewritten_word() -> None:
    """Verify the uppercase look-back uses the already rewritten previous word."""
    assert camel_case_words(["A", "B", "C"], lower_first=False) == ["A", "b", "C"]
    assert camel_case_words(["A", "B", "C"], lower_first=True) == ["a", "B", "c"]


def test_case_style_parse() -> None:
    """Verify style names are parsed leniently and rejected when unknown."""
    assert CaseStyle.parse("Snake-Case") is CaseStyle.SNAKE_CASE
    assert CaseStyle.parse("lower_camel_case") is CaseStyle.LOWER_CAMEL_CASE
    with pytest.raises(ValueError, match="Unknown case style"):
        CaseStyle.parse("kebab")
