"""Logic for splitting free text into words."""

from collections.abc import Iterable

from wordcase.characters import (
    contains_letter,
    is_letter,
    is_uppercase_letter,
    iter_characters,
)
from wordcase.word_option import WordOption

COMMON_ACRONYMS = frozenset({"api", "url", "id"})

HYPHEN = "-"
APOSTROPHE = "'"


class Tokenizer:
    """Splits text on case changes, punctuation, digits and whitespace."""

    def __init__(
        self,
        options: WordOption = WordOption.NONE,
        acronyms: Iterable[str] | None = None,
    ) -> None:
        """Initialize the tokenizer with option flags and known acronyms."""
        self.options = options
        if acronyms is None:
            self.acronyms = COMMON_ACRONYMS
        else:
            self.acronyms = frozenset(a.lower() for a in acronyms)

    def tokenize(self, text: str) -> list[str]:
        """Split ``text`` into words in a single left-to-right pass.

        Rules, per character:
        1. Uppercase letters extend an empty or all-uppercase word, otherwise they
           start a new one.
        2. Apostrophes always stay inside the word.
        3. Hyphens stay inside the word unless hyphenated words are distinguished.
        4. Other letters extend the word, except that an uppercase run of two or
           more characters is emitted on its own first ("WOWit" -> "WOW", "it").
        5. Anything else ends the current word and is dropped.
        """
        words: list[str] = []
        current: list[str] = []
        # True while `current` holds nothing but uppercase letters (or nothing)
        upper_run = True
        distinguish_hyphens = WordOption.DISTINGUISH_HYPHENATED_WORDS in self.options

        for character in iter_characters(text):
            if is_uppercase_letter(character):
                if not upper_run:
                    self._save_word(current, words)
                    current = []
                current.append(character)
                upper_run = True
            elif character == APOSTROPHE or (
                character == HYPHEN and not distinguish_hyphens
            ):
                current.append(character)
                upper_run = False
            elif is_letter(character):
                if upper_run and len(current) > 1:
                    self._save_word(current, words)
                    current = []
                current.append(character)
                upper_run = False
            else:
                self._save_word(current, words)
                current = []
                upper_run = True

        self._save_word(current, words)
        return words

    def _save_word(self, characters: list[str], words: list[str]) -> None:
        """Clean up a finished word and append it if it still has a letter."""
        word = "".join(characters).strip(HYPHEN)
        if WordOption.STRIP_HYPHENS in self.options:
            word = word.replace(HYPHEN, "")
        if WordOption.STRIP_APOSTROPHES in self.options:
            word = word.replace(APOSTROPHE, "")

        if (
            WordOption.AUTOMATICALLY_UPPERCASE_COMMON_ACRONYMS in self.options
            and word.lower() in self.acronyms
        ):
            word = word.upper()

        if word and contains_letter(word):
            words.append(word)
