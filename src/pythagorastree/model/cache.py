"""
Calculation Cache
=================
Memoizes Geometry Solver results.

Why is this file needed?
------------------------
1. Reuse: the same square width appears in many subtrees on the same level,
   and every pointer move rebuilds the whole tree.
2. Bounded keys: inputs are rounded to 2 decimals before keying, which folds
   pointer jitter into a small set of distinct keys.
3. Bounded memory: entries are evicted least-recently-used once
   ``max_entries`` is reached. ``max_entries=None`` keeps everything.

Classes:
    CalculationCache: The memoizer.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Optional

from pythagorastree.model.geometry import CalcResult, solve

logger = logging.getLogger(__name__)

KEY_DELIMITER = "_"
KEY_DECIMALS = 2


def _fmt(value: float) -> str:
    rounded = round(value, KEY_DECIMALS)
    if rounded == 0.0:
        # -0.00 and 0.00 must map to the same key
        rounded = 0.0
    return f"{rounded:.{KEY_DECIMALS}f}"


class CalculationCache:
    """LRU memoizer for :func:`solve` keyed by the rounded input triple."""

    def __init__(self, max_entries: Optional[int] = 4096) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be >= 1 or None, got {max_entries}.")
        self.max_entries: Optional[int] = max_entries
        self._entries: OrderedDict[str, CalcResult] = OrderedDict()

        self.hits: int = 0
        self.misses: int = 0
        self.evictions: int = 0

    @staticmethod
    def key(width: float, height_factor: float, lean: float) -> str:
        """Round each value to 2 decimals and join them into a single key."""
        return KEY_DELIMITER.join(_fmt(v) for v in (width, height_factor, lean))

    def get_or_compute(self, width: float, height_factor: float, lean: float) -> CalcResult:
        """Return the cached result for the rounded inputs, solving on a miss."""
        k = self.key(width, height_factor, lean)

        result = self._entries.get(k)
        if result is not None:
            self.hits += 1
            self._entries.move_to_end(k)
            return result

        self.misses += 1
        result = solve(width, height_factor, lean)
        self._entries[k] = result

        if self.max_entries is not None and len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            self.evictions += 1
            logger.debug(f"Cache full ({self.max_entries}), evicted '{evicted}'.")

        return result

    def clear(self) -> None:
        """Drop all entries and reset the counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return (
            f"CalculationCache(size={len(self)}, max_entries={self.max_entries}, "
            f"hits={self.hits}, misses={self.misses}, evictions={self.evictions})"
        )
