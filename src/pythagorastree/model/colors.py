"""
Color Ramp
==========
Maps a normalized depth value to a fill color.

The ramp is a fixed, precomputed list of hex colors sampled from a
matplotlib colormap. Lookup uses floor truncation, so ``t == 1.0`` lands on
the last entry and never past it. Values outside ``[0, 1]`` get the
fallback color.
"""
from __future__ import annotations

import math

from matplotlib import colormaps
from matplotlib.colors import to_hex

DEFAULT_COLORMAP = "viridis"
DEFAULT_RESOLUTION = 256
FALLBACK_COLOR = "#000000"


class ColorRamp:
    def __init__(
        self,
        colormap: str = DEFAULT_COLORMAP,
        resolution: int = DEFAULT_RESOLUTION,
        fallback: str = FALLBACK_COLOR,
    ) -> None:
        if resolution < 1:
            raise ValueError(f"resolution must be >= 1, got {resolution}.")

        cmap = colormaps[colormap].resampled(resolution)
        self.colors: list[str] = [to_hex(cmap(i)) for i in range(resolution)]
        self.fallback: str = fallback

    def color_for(self, t: float) -> str:
        """Color for a normalized value in [0, 1]."""
        if math.isnan(t) or t < 0.0 or t > 1.0:
            return self.fallback
        return self.colors[math.floor(t * (len(self.colors) - 1))]

    def depth_color(self, level: int, depth_limit: int) -> str:
        """Color for a node at ``level`` in a tree grown up to ``depth_limit``."""
        if depth_limit == 0:
            return self.color_for(0.0)
        return self.color_for(level / depth_limit)

    def __len__(self) -> int:
        return len(self.colors)
