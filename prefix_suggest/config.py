"""Persistent settings for the suggestion CLI."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import MISSING, asdict, dataclass, fields

log = logging.getLogger(__name__)


@dataclass
class SuggestConfig:
    dictionary_path: str | None = None
    top_k: int = 5
    wordfreq_lang: str = "en"
    wordfreq_size: int = 80_000
    cache_size: int = 2048


CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".prefix_suggest")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")

ENV_DICT_PATH = "PREFIX_SUGGEST_DICT"


def _valid(value, default) -> bool:
    # None defaults (dictionary_path) accept a str or None
    if default is None:
        return value is None or isinstance(value, str)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    return isinstance(value, type(default))


def load_config(path: str = CONFIG_FILE) -> SuggestConfig:
    """Return saved settings or defaults if unavailable.

    Unknown keys and values of the wrong type are dropped, so each
    field falls back to its default on its own.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return SuggestConfig()
    if not isinstance(data, dict):
        return SuggestConfig()

    kwargs = {}
    for field in fields(SuggestConfig):
        if field.name not in data:
            continue
        value = data[field.name]
        default = field.default if field.default is not MISSING else None
        if _valid(value, default):
            kwargs[field.name] = value
        else:
            log.warning("Ignoring invalid %s=%r in %s", field.name, value, path)
    return SuggestConfig(**kwargs)


def save_config(config: SuggestConfig, path: str = CONFIG_FILE) -> None:
    """Persist ``config`` to ``path`` in JSON format."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(config), f)
