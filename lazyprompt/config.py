"""Persistent JSON config helpers.

Reads the single-line headroom threshold, color preference, and git query
timeout. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .layout import MIN_HEADROOM

logger = logging.getLogger(__name__)

APP_NAME = "lazyprompt"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_GIT_TIMEOUT_SECONDS = 1.0


@dataclass(frozen=True)
class PromptConfig:
    min_headroom: int = MIN_HEADROOM
    no_color: bool = False
    git_timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_nonnegative_int(value: object, default: int) -> int:
    """Booleans and non-integers are treated as invalid."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def _coerce_positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return float(value)


def load_prompt_config() -> PromptConfig:
    """Read the prompt settings, substituting defaults for invalid entries."""
    data = load_config()
    no_color = data.get("no_color")
    return PromptConfig(
        min_headroom=_coerce_nonnegative_int(data.get("min_headroom"), MIN_HEADROOM),
        no_color=no_color if isinstance(no_color, bool) else False,
        git_timeout_seconds=_coerce_positive_float(data.get("git_timeout_seconds"), DEFAULT_GIT_TIMEOUT_SECONDS),
    )
