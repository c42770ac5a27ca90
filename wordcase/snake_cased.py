"""Logic for converting text to snake_case."""

from collections.abc import Iterable

from wordcase.word_option import WordOption
from wordcase.words import words


def snake_cased(
    text: str,
    options: WordOption = WordOption.NONE,
    *,
    acronyms: Iterable[str] | None = None,
) -> str:
    """Convert ``text`` to snake_case: "someObjectId" -> "some_object_id"."""
    options |= WordOption.STRIP_HYPHENS | WordOption.STRIP_APOSTROPHES
    return "_".join(words(text, options, acronyms=acronyms)).lower()
