"""Command-line front end for splitting and re-casing text."""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING, Any

from wordcase.acronym import acronym
from wordcase.applying import applying
from wordcase.case_style import CaseStyle
from wordcase.dash_delimited import dash_delimited
from wordcase.load_config import load_config
from wordcase.parse_word_options import parse_word_options
from wordcase.words import words

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wordcase.word_option import WordOption

logger = logging.getLogger(__name__)

EXTRA_STYLES = ("words", "acronym", "dash_delimited")
STYLE_CHOICES = EXTRA_STYLES + tuple(style.value for style in CaseStyle)


def convert(
    text: str,
    style: str,
    options: WordOption,
    acronyms: list[str] | None = None,
) -> str:
    """Render ``text`` in the named style as a single output line."""
    if style == "words":
        return " ".join(words(text, options, acronyms=acronyms))
    if style == "acronym":
        return acronym(text, options, acronyms=acronyms)
    if style == "dash_delimited":
        return dash_delimited(text, options, acronyms=acronyms)
    return applying(text, CaseStyle.parse(style), options, acronyms=acronyms)


def _resolve_style(args: argparse.Namespace, config: dict[str, Any]) -> str:
    style = args.style or str(config.get("case_style") or "")
    key = style.strip().lower().replace("-", "_")
    if key not in STYLE_CHOICES:
        msg = f"Unknown style: {style!r} (expected one of: {', '.join(STYLE_CHOICES)})"
        raise ValueError(msg)
    return key


def run(args: argparse.Namespace) -> int:
    """Convert every text argument and print one result per line."""
    config = load_config(args.config)
    try:
        style = _resolve_style(args, config)
        options = parse_word_options(config.get("options") or [])
        options |= parse_word_options(args.option)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    logger.debug("Converting %d input(s) to %s with %s", len(args.text), style, options)
    acronyms = config.get("acronyms")
    for text in args.text:
        print(convert(text, style, options, acronyms))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the conversion."""
    ap = argparse.ArgumentParser(
        description="Split text into words and join them in a chosen case style.",
    )
    ap.add_argument("text", nargs="+", help="Text to convert")
    ap.add_argument(
        "--style",
        help=(
            f"Output style, one of: {', '.join(STYLE_CHOICES)} "
            "(default: case_style from the config, else snake_case)"
        ),
    )
    ap.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="NAME",
        help="Word option such as strip-hyphens; may be repeated",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
