"""Case styles that a word sequence can be joined into."""

from enum import Enum


class CaseStyle(Enum):
    """Supported identifier case styles."""

    UPPER_CAMEL_CASE = "upper_camel_case"
    LOWER_CAMEL_CASE = "lower_camel_case"
    SNAKE_CASE = "snake_case"

    @classmethod
    def parse(cls, name: str) -> "CaseStyle":
        """Look up a style by name, accepting dashes and any letter case."""
        key = name.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(style.value for style in cls)
            msg = f"Unknown case style: {name!r} (expected one of: {choices})"
            raise ValueError(msg) from None
