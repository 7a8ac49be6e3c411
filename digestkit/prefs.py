"""Stored preferences and the choice of enabled hash functions."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

from .digest_format import DigestFormat

logger = logging.getLogger(__name__)

KEY_DIGEST_FORMAT = "digest-format"
KEY_HASH_FUNCS = "hash-functions"
KEY_SHOW_TOOLBAR = "show-toolbar"
KEY_VIEW = "view"
KEY_WINDOW_HEIGHT = "window-height"
KEY_WINDOW_MAX = "window-max"
KEY_WINDOW_WIDTH = "window-width"


class PreferencesError(Exception):
    """Preferences could not be read, written or applied."""


class View(Enum):
    """What the main window shows."""

    FILE = "file"
    TEXT = "text"
    FILE_LIST = "file-list"

    @classmethod
    def from_pref(cls, name: str) -> "View":
        """Return the view stored under ``name``."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown view {name!r}") from None

    def to_pref(self) -> str:
        """Return the name under which this view is stored."""
        return self.value


def choose_hash_funcs(
    names: Iterable[str], supported: Iterable[str], defaults: Iterable[str]
) -> list[str]:
    """Pick the hash functions to enable.

    Requested names that are supported are enabled; unknown ones are
    reported. If none remain, the supported defaults are used, and failing
    that the first supported function. Results follow ``supported`` order.
    """
    supported = list(supported)
    available = set(supported)

    requested = set()
    for name in names:
        if name in available:
            requested.add(name)
        else:
            logger.warning('Unknown Hash Function name "%s"', name)
    if requested:
        return [name for name in supported if name in requested]

    default_set = set(defaults)
    enabled = [name for name in supported if name in default_set]
    if enabled:
        return enabled
    if supported:
        return [supported[0]]
    raise PreferencesError("Failed to enable any supported hash functions.")


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key, default)
    if kind is int and isinstance(value, bool):
        raise PreferencesError(f"preference {key!r} must be {kind.__name__}")
    if not isinstance(value, kind):
        raise PreferencesError(f"preference {key!r} must be {kind.__name__}")
    return value


@dataclass
class Preferences:
    """User preferences kept between runs."""

    hash_functions: list[str] = field(default_factory=list)
    digest_format: DigestFormat = DigestFormat.HEX_LOWER
    view: View | None = None
    show_toolbar: bool = True
    window_max: bool = False
    window_width: int = 0
    window_height: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the preferences under their stored key names."""
        data: dict[str, Any] = {
            KEY_HASH_FUNCS: list(self.hash_functions),
            KEY_DIGEST_FORMAT: self.digest_format.to_pref(),
            KEY_SHOW_TOOLBAR: self.show_toolbar,
            KEY_WINDOW_MAX: self.window_max,
            KEY_WINDOW_WIDTH: self.window_width,
            KEY_WINDOW_HEIGHT: self.window_height,
        }
        if self.view is not None:
            data[KEY_VIEW] = self.view.to_pref()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Preferences":
        """Build preferences from stored keys; unknown format or view names are ignored."""
        prefs = cls()

        funcs = _get(data, KEY_HASH_FUNCS, list, [])
        if not all(isinstance(name, str) for name in funcs):
            raise PreferencesError(f"preference {KEY_HASH_FUNCS!r} must hold strings")
        prefs.hash_functions = list(funcs)

        fmt = data.get(KEY_DIGEST_FORMAT)
        if isinstance(fmt, str):
            try:
                prefs.digest_format = DigestFormat.from_pref(fmt)
            except ValueError:
                pass

        view = data.get(KEY_VIEW)
        if isinstance(view, str):
            try:
                prefs.view = View.from_pref(view)
            except ValueError:
                pass

        prefs.show_toolbar = _get(data, KEY_SHOW_TOOLBAR, bool, prefs.show_toolbar)
        prefs.window_max = _get(data, KEY_WINDOW_MAX, bool, prefs.window_max)
        prefs.window_width = _get(data, KEY_WINDOW_WIDTH, int, prefs.window_width)
        prefs.window_height = _get(data, KEY_WINDOW_HEIGHT, int, prefs.window_height)
        return prefs


def load_preferences(path: str | os.PathLike) -> Preferences:
    """Read preferences from a JSON file, or the defaults if there is none."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        logger.warning('Preferences file "%s" not found - using default preferences', os.fspath(path))
        return Preferences()
    except (OSError, ValueError) as exc:
        raise PreferencesError(f"cannot read preferences: {exc}") from exc
    if not isinstance(data, dict):
        raise PreferencesError("preferences file must hold an object")
    return Preferences.from_dict(data)


def save_preferences(prefs: Preferences, path: str | os.PathLike) -> None:
    """Write preferences to a JSON file."""
    try:
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(prefs.to_dict(), fh, indent=2)
            fh.write("\n")
    except OSError as exc:
        raise PreferencesError(f"cannot write preferences: {exc}") from exc