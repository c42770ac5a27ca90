"""Logic for joining words with dashes."""

from collections.abc import Iterable

from wordcase.word_option import WordOption
from wordcase.words import words


def dash_delimited(
    text: str,
    options: WordOption = WordOption.NONE,
    *,
    acronyms: Iterable[str] | None = None,
) -> str:
    """Join the words of ``text`` with "-", leaving their case untouched."""
    return "-".join(words(text, options, acronyms=acronyms))
