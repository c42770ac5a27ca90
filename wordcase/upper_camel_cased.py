"""Logic for converting text to UpperCamelCase."""

from collections.abc import Iterable

from wordcase.camel_case_words import CAMEL_CASE_OPTIONS, camel_case_words
from wordcase.word_option import WordOption
from wordcase.words import words


def upper_camel_cased(
    text: str,
    options: WordOption = WordOption.NONE,
    *,
    acronyms: Iterable[str] | None = None,
) -> str:
    """Convert ``text`` to UpperCamelCase: "some object id" -> "SomeObjectID"."""
    parts = words(text, options | CAMEL_CASE_OPTIONS, acronyms=acronyms)
    return "".join(camel_case_words(parts, lower_first=False))
