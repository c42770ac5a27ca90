"""Shared capitalization pass for the camel case styles."""

from wordcase.characters import is_uppercase
from wordcase.word_option import WordOption

CAMEL_CASE_OPTIONS = (
    WordOption.STRIP_HYPHENS
    | WordOption.STRIP_APOSTROPHES
    | WordOption.AUTOMATICALLY_UPPERCASE_COMMON_ACRONYMS
)


def camel_case_words(words: list[str], *, lower_first: bool) -> list[str]:
    """Capitalize each word for camel case joining.

    Uppercase words (typically acronyms) keep their case, except when the word
    before them, as already rewritten, is uppercase too: "ID", "URL", "API"
    becomes "ID", "url", "API". Everything else is title-cased. With
    ``lower_first`` the first word is lowercased unconditionally.
    """
    result: list[str] = []
    for index, word in enumerate(words):
        if index == 0 and lower_first:
            result.append(word.lower())
        elif is_uppercase(word):
            if index > 0 and is_uppercase(result[index - 1]):
                result.append(word.lower())
            else:
                result.append(word)
        else:
            result.append(word.capitalize())
    return result
