"""Entry point for splitting text into words."""

from collections.abc import Iterable

from wordcase.tokenizer import Tokenizer
from wordcase.word_option import WordOption


def words(
    text: str,
    options: WordOption = WordOption.NONE,
    *,
    acronyms: Iterable[str] | None = None,
) -> list[str]:
    """Split ``text`` into words, each guaranteed to contain a letter."""
    return Tokenizer(options, acronyms).tokenize(text)
