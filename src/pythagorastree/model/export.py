"""
Absolute Geometry & SVG Export
Composes the local node transforms into absolute scene coordinates and
writes the current frame to an .svg file.
"""
from __future__ import annotations

import logging
from math import cos, radians, sin
from typing import TYPE_CHECKING

import numpy as np

from pythagorastree.config import DEFAULT_CONFIG, TreeConfig
from pythagorastree.model.colors import ColorRamp

if TYPE_CHECKING:
    import numpy.typing as npt
    from pythagorastree.model.tree import Node, PythagorasTree

logger = logging.getLogger(__name__)


def translation(dx: float, dy: float) -> npt.NDArray[np.float64]:
    return np.array([
        [1.0, 0.0, dx],
        [0.0, 1.0, dy],
        [0.0, 0.0, 1.0],
    ])


def rotation_about(angle_deg: float, px: float, py: float) -> npt.NDArray[np.float64]:
    """Rotation in a y-down frame (positive = clockwise on screen) about (px, py)."""
    a = radians(angle_deg)
    rot = np.array([
        [cos(a), -sin(a), 0.0],
        [sin(a), cos(a), 0.0],
        [0.0, 0.0, 1.0],
    ])
    return translation(px, py) @ rot @ translation(-px, -py)


def local_transform(node: Node) -> npt.NDArray[np.float64]:
    """Translate to (x, y), then rotate about the node's pivot."""
    px, py = node.pivot
    return translation(node.x, node.y) @ rotation_about(node.rotation, px, py)


def node_polygons(tree: PythagorasTree) -> npt.NDArray[np.float64]:
    """
    Absolute corner coordinates of every node.

    Returns:
        Array of shape (N, 4, 2) indexed like ``tree.nodes``. Corner order is
        top-left, top-right, bottom-right, bottom-left in the node's local
        frame.
    """
    polygons = np.empty((len(tree), 4, 2), dtype=np.float64)
    absolute: dict[int, npt.NDArray[np.float64]] = {}
    parents: dict[int, int] = {}

    for index, node in tree.walk():
        m = local_transform(node)
        if index in parents:
            m = absolute[parents[index]] @ m
        absolute[index] = m

        for child in tree.children(index):
            parents[child] = index

        w = node.width
        corners = np.array([
            [0.0, 0.0, 1.0],
            [w, 0.0, 1.0],
            [w, w, 1.0],
            [0.0, w, 1.0],
        ])
        polygons[index] = (m @ corners.T).T[:, :2]

    return polygons


def tree_to_svg(
    tree: PythagorasTree,
    ramp: ColorRamp,
    config: TreeConfig = DEFAULT_CONFIG,
) -> str:
    """Serialize the tree as an SVG document of filled polygons."""
    polygons = node_polygons(tree)

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{config.scene_width:g}" height="{config.scene_height:g}" '
        f'viewBox="0 0 {config.scene_width:g} {config.scene_height:g}">'
    ]
    for index, node in tree.walk():
        points = " ".join(f"{x:.3f},{y:.3f}" for x, y in polygons[index])
        fill = ramp.depth_color(node.level, tree.depth_limit)
        lines.append(f'  <polygon points="{points}" fill="{fill}"/>')
    lines.append("</svg>")

    return "\n".join(lines) + "\n"


def save_svg(
    tree: PythagorasTree,
    filepath: str,
    ramp: ColorRamp,
    config: TreeConfig = DEFAULT_CONFIG,
) -> None:
    logger.info(f"Exporting {len(tree)} squares to: {filepath}")
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(tree_to_svg(tree, ramp, config))
