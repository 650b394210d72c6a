"""
Pythagoras Tree (Arena + Builder)
=================================
The fractal is stored as a flat arena of nodes. Children are referenced by
their index in the arena instead of by nested objects, so the whole tree is
disposed of by dropping a single list.

Positions are local: ``x``/``y`` are offsets in the parent's coordinate
frame and ``rotation`` is applied about the node's pivot after translation.

Classes:
    Branch: Which side of the parent a node grows on.
    Node: One square of the fractal.
    PythagorasTree: The node arena.

Functions:
    build_tree: Recursively constructs the arena for given shape parameters.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, TYPE_CHECKING

from pythagorastree.config import DEFAULT_CONFIG, TreeConfig

if TYPE_CHECKING:
    from pythagorastree.model.cache import CalculationCache
    from pythagorastree.model.state import ShapeParameters

logger = logging.getLogger(__name__)

# Squares narrower than this are never subdivided
MIN_WIDTH = 1.0


class Branch(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Node:
    branch: Branch
    level: int
    x: float
    y: float
    width: float
    rotation: float = 0.0
    left: Optional[int] = None
    right: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def pivot(self) -> tuple[float, float]:
        """Rotation center in the node's local frame (a bottom corner)."""
        if self.branch is Branch.RIGHT:
            return self.width, self.width
        return 0.0, self.width


@dataclass
class PythagorasTree:
    """Arena of nodes, root at index 0."""
    depth_limit: int
    nodes: list[Node] = field(default_factory=list)

    @property
    def root(self) -> Node:
        return self.nodes[0]

    def add(self, node: Node) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def children(self, index: int) -> list[int]:
        """Indices of the existing children, left first."""
        node = self.nodes[index]
        return [i for i in (node.left, node.right) if i is not None]

    def walk(self, index: int = 0) -> Iterator[tuple[int, Node]]:
        """Pre-order traversal, left subtree before right."""
        stack = [index]
        while stack:
            i = stack.pop()
            yield i, self.nodes[i]
            stack.extend(reversed(self.children(i)))

    def max_level(self) -> int:
        return max(node.level for node in self.nodes)

    def reset(self) -> None:
        self.nodes.clear()

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)


def build_tree(
    params: ShapeParameters,
    depth_limit: int,
    cache: CalculationCache,
    config: TreeConfig = DEFAULT_CONFIG,
) -> PythagorasTree:
    """
    Build the whole fractal for the given shape parameters.

    The root sits centered horizontally and flush with the bottom of the
    scene. Every node below ``depth_limit`` that is at least ``MIN_WIDTH``
    wide gets two children, left first.

    Args:
        params: Shape parameters shared by every node of this tree.
        depth_limit: Highest level allowed in the tree.
        cache: Calculation cache consulted (and filled) for every split.
        config: Scene size and base square width.

    Returns:
        A freshly allocated PythagorasTree.

    Raises:
        ValueError: If depth_limit is negative.
    """
    if depth_limit < 0:
        raise ValueError(f"depth_limit must be non-negative, got {depth_limit}.")

    tree = PythagorasTree(depth_limit=depth_limit)
    root = Node(
        branch=Branch.NONE,
        level=0,
        x=(config.scene_width - config.base_width) / 2,
        y=config.scene_height - config.base_width,
        width=config.base_width,
    )
    _grow(tree, tree.add(root), params, depth_limit, cache)

    logger.debug(f"Built tree: depth_limit={depth_limit}, nodes={len(tree)}, params={params}")
    return tree


def _grow(
    tree: PythagorasTree,
    index: int,
    params: ShapeParameters,
    depth_limit: int,
    cache: CalculationCache,
) -> None:
    node = tree.nodes[index]
    if node.level >= depth_limit or node.width < MIN_WIDTH:
        return

    calc = cache.get_or_compute(node.width, params.height_factor, params.lean)

    left = Node(
        branch=Branch.LEFT,
        level=node.level + 1,
        x=0.0,
        y=-calc.next_left,
        width=calc.next_left,
        rotation=-calc.angle_left,
    )
    node.left = tree.add(left)
    _grow(tree, node.left, params, depth_limit, cache)

    right = Node(
        branch=Branch.RIGHT,
        level=node.level + 1,
        x=node.width - calc.next_right,
        y=-calc.next_right,
        width=calc.next_right,
        rotation=calc.angle_right,
    )
    node.right = tree.add(right)
    _grow(tree, node.right, params, depth_limit, cache)
