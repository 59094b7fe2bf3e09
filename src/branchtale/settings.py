"""Configuration helpers for running stories from the command line."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _normalise_path(value: str | None) -> Path | None:
    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    return Path(trimmed).expanduser()


def _parse_delay(value: str | None, *, name: str, default: float) -> float:
    if value is None or not value.strip():
        return default

    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of seconds.") from exc
    if not math.isfinite(parsed) or parsed < 0:
        raise ValueError(f"{name} must be a finite, non-negative number.")
    return parsed


def _parse_count(value: str | None, *, name: str, default: int) -> int:
    if value is None or not value.strip():
        return default

    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a whole number.") from exc
    if parsed < 0:
        raise ValueError(f"{name} must not be negative.")
    return parsed


def _parse_flag(value: str | None, *, name: str, default: bool) -> bool:
    if value is None or not value.strip():
        return default

    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{name} must be one of: {', '.join(sorted(_TRUTHY | _FALSY))}.")


@dataclass(frozen=True)
class PlaySettings:
    """Settings for a command-line playthrough.

    Values come from environment variables so a story and its pacing can be
    chosen without extra flags. Empty strings behave as if the variable was
    unset.
    """

    scene_path: Path | None = None
    text_delay: float = 0.0
    pause_delay: float = 0.25
    pause_dots: int = 3
    plain: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PlaySettings":
        """Return settings populated from ``environ``.

        Args:
            environ: Optional mapping of environment variables. When omitted,
                :data:`os.environ` is used.
        """

        source = environ if environ is not None else os.environ

        return cls(
            scene_path=_normalise_path(source.get("BRANCHTALE_SCENE_PATH")),
            text_delay=_parse_delay(
                source.get("BRANCHTALE_TEXT_DELAY"),
                name="BRANCHTALE_TEXT_DELAY",
                default=0.0,
            ),
            pause_delay=_parse_delay(
                source.get("BRANCHTALE_PAUSE_DELAY"),
                name="BRANCHTALE_PAUSE_DELAY",
                default=0.25,
            ),
            pause_dots=_parse_count(
                source.get("BRANCHTALE_PAUSE_DOTS"),
                name="BRANCHTALE_PAUSE_DOTS",
                default=3,
            ),
            plain=_parse_flag(
                source.get("BRANCHTALE_PLAIN"),
                name="BRANCHTALE_PLAIN",
                default=False,
            ),
        )


__all__ = ["PlaySettings"]
