"""
Interaction Handler
===================
Turns pointer positions into shape parameters.

Vertical position drives the height factor (top of the scene gives the
tallest triangles), horizontal position drives the lean (left side leans
the apex to the right). Coordinates outside the scene are clamped.
"""
from __future__ import annotations

import logging
import math

from PySide6.QtCore import QObject

from pythagorastree.controller.store import FractalStore
from pythagorastree.model.state import ShapeParameters

logger = logging.getLogger(__name__)

MAX_HEIGHT_FACTOR = 0.8
MAX_LEAN = 0.5


class InvalidBoundsError(ValueError):
    """Raised when the drawing bounds cannot be used for normalization."""


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def shape_from_pointer(x: float, y: float, bounds_w: float, bounds_h: float) -> ShapeParameters:
    """
    Map a pointer position in scene coordinates to shape parameters.

    Returns:
        ShapeParameters with height_factor in [0, 0.8] and lean in [-0.5, 0.5].

    Raises:
        InvalidBoundsError: If a bound is non-positive or not finite.
    """
    for name, bound in (("bounds_w", bounds_w), ("bounds_h", bounds_h)):
        if not math.isfinite(bound) or bound <= 0:
            raise InvalidBoundsError(f"{name} must be a positive finite number, got {bound!r}.")

    height_factor = (clamp(y, 0, bounds_h) * -MAX_HEIGHT_FACTOR) / bounds_h + MAX_HEIGHT_FACTOR
    lean = (clamp(x, 0, bounds_w) * -1.0) / bounds_w + MAX_LEAN

    return ShapeParameters(height_factor=height_factor, lean=lean)


class InteractionHandler(QObject):
    """Pushes pointer-derived parameters into the store. Depth is left alone."""

    def __init__(self, store: FractalStore, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store

    def on_pointer_move(self, x: int, y: int) -> ShapeParameters:
        config = self.store.state.config
        params = shape_from_pointer(x, y, config.scene_width, config.scene_height)
        logger.debug(f"Pointer at ({x}, {y}) -> {params}")
        self.store.set_params(params)
        return params
