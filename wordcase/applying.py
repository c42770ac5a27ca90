"""Dispatch from a CaseStyle to the matching conversion."""

from collections.abc import Callable, Iterable

from wordcase.case_style import CaseStyle
from wordcase.lower_camel_cased import lower_camel_cased
from wordcase.snake_cased import snake_cased
from wordcase.upper_camel_cased import upper_camel_cased
from wordcase.word_option import WordOption

CONVERTERS: dict[CaseStyle, Callable[..., str]] = {
    CaseStyle.UPPER_CAMEL_CASE: upper_camel_cased,
    CaseStyle.LOWER_CAMEL_CASE: lower_camel_cased,
    CaseStyle.SNAKE_CASE: snake_cased,
}


def applying(
    text: str,
    case_style: CaseStyle,
    options: WordOption = WordOption.NONE,
    *,
    acronyms: Iterable[str] | None = None,
) -> str:
    """Convert ``text`` to ``case_style``."""
    return CONVERTERS[case_style](text, options, acronyms=acronyms)
