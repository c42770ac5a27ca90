"""Logic for building an acronym from the words of a phrase."""

from collections.abc import Iterable

from wordcase.characters import iter_characters
from wordcase.word_option import WordOption
from wordcase.words import words


def acronym(
    text: str,
    options: WordOption = WordOption.NONE,
    *,
    acronyms: Iterable[str] | None = None,
) -> str:
    """Uppercase the first character of every word: "let's invent" -> "LI"."""
    options |= WordOption.STRIP_HYPHENS | WordOption.STRIP_APOSTROPHES
    initials = (
        next(iter_characters(word), "")
        for word in words(text, options, acronyms=acronyms)
    )
    return "".join(initials).upper()
