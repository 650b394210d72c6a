"""
Configuration & Constants
=========================
This module serves as the central registry for the fixed constants of the
fractal and the drawing surface.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (1200, 600, 80, 11, 500) scattered
   throughout the code.
2. Overrides: Values can be overridden through QSettings (group "tree/"),
   which makes it possible to tweak the animation without code changes.

Exports:
    TreeConfig: Frozen dataclass with all the constants.
    DEFAULT_CONFIG: The built-in defaults.
    load_config: Reads overrides from QSettings.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

SETTINGS_GROUP = "tree"

# 2**(MAX_DEPTH_LIMIT + 1) - 1 squares at most per rebuild
MAX_DEPTH_LIMIT = 16

# cache_max_entries values that mean "never evict"
UNBOUNDED_CACHE = ("0", "none", "unbounded")


@dataclass(frozen=True)
class TreeConfig:
    scene_width: float = 1200.0
    scene_height: float = 600.0
    base_width: float = 80.0
    maximum_depth: int = 11
    tick_interval_ms: int = 500
    cache_max_entries: Optional[int] = 4096


DEFAULT_CONFIG = TreeConfig()


def _convert(name: str, raw: Any) -> Any:
    """Convert a raw QSettings value to the type of the field's default."""
    if name == "cache_max_entries" and (raw is None or str(raw).strip().lower() in UNBOUNDED_CACHE):
        return None
    return type(getattr(DEFAULT_CONFIG, name))(raw)


def _is_valid(name: str, value: Any) -> bool:
    if value is None:
        return name == "cache_max_entries"
    if not math.isfinite(value):
        return False
    if name == "maximum_depth":
        return 0 <= value <= MAX_DEPTH_LIMIT
    return value > 0


def load_config(settings: Optional[QSettings] = None) -> TreeConfig:
    """
    Build a TreeConfig from QSettings, falling back to the defaults.

    Invalid values (wrong type, non-finite or non-positive sizes, depth
    outside [0, MAX_DEPTH_LIMIT]) are logged and replaced by the default for
    that field. ``tree/cache_max_entries`` set to 0 or "none" disables
    cache eviction.
    """
    if settings is None:
        from PySide6.QtCore import QSettings
        settings = QSettings()

    overrides: dict[str, Any] = {}
    for f in fields(TreeConfig):
        key = f"{SETTINGS_GROUP}/{f.name}"
        if not settings.contains(key):
            continue

        default = getattr(DEFAULT_CONFIG, f.name)
        raw = settings.value(key)
        try:
            value = _convert(f.name, raw)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Ignoring setting '{key}': cannot convert {raw!r} to {type(default).__name__}.")
            continue

        if not _is_valid(f.name, value):
            logger.warning(f"Ignoring setting '{key}': {value!r} is out of range, using {default!r}.")
            continue

        overrides[f.name] = value

    if overrides:
        logger.info(f"Loaded config overrides: {overrides}")
    return replace(DEFAULT_CONFIG, **overrides)
