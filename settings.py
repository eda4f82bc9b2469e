"""Display configuration and its JSON persistence."""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-hijri-calendar-settings.json")


@dataclass(frozen=True)
class DisplayConfig:
    """How today's Hijri date is shown.

    ``correction`` shifts the Gregorian input by whole days, for regions whose
    observed month start differs from the arithmetic calendar.
    """

    show_week_day: bool = True
    show_greg_date: bool = False
    separator: str = "-"
    week_day_lang: str = "ar"
    hijri_lang: str = "ar"
    greg_lang: str = "ar"
    correction: int = 0

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> "DisplayConfig":
        """Merge ``overrides`` over the defaults.

        Unknown keys and values of the wrong type are ignored, so a partly
        broken settings file still yields a usable config.
        """
        values: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if not overrides or f.name not in overrides:
                continue
            value = overrides[f.name]
            if _type_ok(f.default, value):
                values[f.name] = value
            else:
                logger.debug("Ignoring %s=%r (expected %s)", f.name, value,
                             type(f.default).__name__)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


def _type_ok(default: Any, value: Any) -> bool:
    # bool is a subclass of int; keep the two apart
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(default, bool) and isinstance(value, bool)
    return isinstance(value, type(default))


def load_settings(path: str | None = None) -> DisplayConfig:
    """Load settings from disk, returning defaults for missing keys."""
    path = path or _SETTINGS_PATH
    stored: dict[str, Any] = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            stored = data
        else:
            logger.warning("Settings file %s is not a JSON object; using defaults", path)
    except FileNotFoundError:
        pass
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
    return DisplayConfig.from_overrides(stored)


def save_settings(config: DisplayConfig, path: str | None = None) -> None:
    """Persist settings to disk."""
    path = path or _SETTINGS_PATH
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
    logger.debug("Saved settings to %s", path)
