"""Flags controlling how text is split into words."""

from enum import Flag


class WordOption(Flag):
    """Independent, combinable switches for the word tokenizer."""

    NONE = 0

    # "thick-skinned" -> "thick", "skinned"
    DISTINGUISH_HYPHENATED_WORDS = 1

    # "thick-skinned" -> "thickskinned"
    STRIP_HYPHENS = 2

    # "won't" -> "wont"
    STRIP_APOSTROPHES = 4

    # "Url" -> "URL"
    AUTOMATICALLY_UPPERCASE_COMMON_ACRONYMS = 8
