"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from wordcase.tokenizer import COMMON_ACRONYMS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "case_style": "snake_case",
    "options": [],
    "acronyms": sorted(COMMON_ACRONYMS),
}

LIST_KEYS = ("options", "acronyms")


def _as_list(value: Any) -> list[Any]:
    # A lone YAML scalar ("acronyms: json") means a one-item list
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Overlay user settings on ``base``.

    'acronyms' is additive and lowercased; 'options' replaces the base list;
    any other key replaces the base value.
    """
    result = base.copy()
    for key, value in update.items():
        if key == "acronyms":
            merged = {str(a).lower() for a in _as_list(result.get(key))}
            merged.update(str(a).lower() for a in _as_list(value))
            result[key] = sorted(merged)
        elif key in LIST_KEYS:
            result[key] = [str(v) for v in _as_list(value)]
        else:
            result[key] = value
    return result


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = merge_config(config, user_config)
        else:
            logger.info("Config file %s not found, using defaults", p)
    logger.debug("Known acronyms: %s", config.get("acronyms"))
    return config
