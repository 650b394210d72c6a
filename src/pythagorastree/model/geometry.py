"""
Geometry Solver
===============
Right-triangle construction on top of a square.

The top edge of a square of edge length ``width`` is the hypotenuse base of a
right triangle. Its apex sits ``height_factor * width`` above the edge and is
shifted sideways by ``lean``. The two legs of that triangle are the bottom
edges of the two child squares.

Classes:
    CalcResult: Child edge lengths and rotation angles.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import atan2, degrees, sqrt


@dataclass(frozen=True)
class CalcResult:
    """Edge lengths of the two child squares and their rotation in degrees."""
    next_left: float
    next_right: float
    angle_left: float
    angle_right: float


def solve(width: float, height_factor: float, lean: float) -> CalcResult:
    """
    Compute the child squares sitting on a square of the given width.

    Args:
        width: Edge length of the parent square (non-negative).
        height_factor: Triangle height relative to ``width``.
        lean: Horizontal shift of the apex, 0.0 is centered.

    Returns:
        CalcResult with both hypotenuses and both base angles.
    """
    h = height_factor * width

    # horizontal distances of the apex from the left/right base corner
    l = width * (0.5 - lean)
    r = width * (0.5 + lean)

    return CalcResult(
        next_left=sqrt(h ** 2 + l ** 2),
        next_right=sqrt(h ** 2 + r ** 2),
        angle_left=degrees(atan2(h, l)),
        angle_right=degrees(atan2(h, r)),
    )
