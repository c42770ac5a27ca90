"""Character segmentation and classification used by the tokenizer.

Text is consumed one user-perceived character at a time: a base code point
together with any combining marks, variation selectors or emoji modifiers that
follow it, and an emoji glued on with a zero width joiner.
"""

from collections.abc import Iterator
from unicodedata import category

ZERO_WIDTH_JOINER = "\u200d"

_MARK_CATEGORIES = {"Mn", "Mc", "Me"}
_UPPERCASE_CATEGORIES = {"Lu", "Lt"}


def _extends_cluster(ch: str) -> bool:
    code = ord(ch)
    return (
        category(ch) in _MARK_CATEGORIES
        or ch == ZERO_WIDTH_JOINER
        or 0xFE00 <= code <= 0xFE0F  # variation selectors
        or 0x1F3FB <= code <= 0x1F3FF  # emoji skin tone modifiers
        or 0xE0100 <= code <= 0xE01EF  # variation selectors supplement
    )


def _is_emoji(ch: str) -> bool:
    code = ord(ch)
    return 0x1F000 <= code <= 0x1FAFF or 0x2600 <= code <= 0x27BF


def iter_characters(text: str) -> Iterator[str]:
    """Yield the grapheme clusters of ``text`` in order."""
    cluster = ""
    joined = False
    for ch in text:
        if cluster and ((joined and _is_emoji(ch)) or _extends_cluster(ch)):
            cluster += ch
        else:
            if cluster:
                yield cluster
            cluster = ch
        joined = ch == ZERO_WIDTH_JOINER
    if cluster:
        yield cluster


def is_letter(character: str) -> bool:
    """Return True if the cluster is a letter, with any extenders after it."""
    if not character or category(character[0])[0] not in "LM":
        return False
    return all(_extends_cluster(ch) for ch in character[1:])


def is_uppercase_letter(character: str) -> bool:
    """Return True for an uppercase or titlecase letter, extenders allowed after it."""
    if not character or category(character[0]) not in _UPPERCASE_CATEGORIES:
        return False
    # Classified by the base letter: a decomposed "E\u0301" counts as uppercase,
    # unlike classifiers that require every code point to be an uppercase letter.
    return all(_extends_cluster(ch) for ch in character[1:])


def contains_letter(text: str) -> bool:
    """Return True if ``text`` has at least one letter code point."""
    return any(category(ch)[0] == "L" for ch in text)


def is_uppercase(word: str) -> bool:
    """Return True if uppercasing ``word`` would leave it unchanged."""
    return word == word.upper()
