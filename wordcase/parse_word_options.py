"""Logic for turning option names from config or the command line into flags."""

from collections.abc import Iterable

from wordcase.word_option import WordOption


def parse_word_options(names: Iterable[str]) -> WordOption:
    """Combine option names such as "strip-hyphens" into a single WordOption."""
    options = WordOption.NONE
    for name in names:
        key = name.strip().upper().replace("-", "_")
        try:
            options |= WordOption[key]
        except KeyError:
            msg = f"Unknown word option: {name!r}"
            raise ValueError(msg) from None
    return options
