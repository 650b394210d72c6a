"""
Fractal State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the shape parameters, the current depth limit,
   the calculation cache and the active tree in one place.
2. Decoupling: Views read from this object; Controllers write to this object.

Classes:
    ShapeParameters: Height factor and lean shared by the whole tree.
    FractalState: The main container class.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from pythagorastree.config import DEFAULT_CONFIG, TreeConfig
from pythagorastree.model.cache import CalculationCache
from pythagorastree.model.tree import PythagorasTree, build_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeParameters:
    height_factor: float = 0.4
    lean: float = 0.0


@dataclass
class FractalState:
    """
    Holds everything a rebuild needs. The cache outlives individual trees;
    the tree itself is replaced on every rebuild.
    """
    config: TreeConfig = DEFAULT_CONFIG
    params: ShapeParameters = field(default_factory=ShapeParameters)
    depth_limit: int = 0
    cache: Optional[CalculationCache] = None
    tree: Optional[PythagorasTree] = None

    def __post_init__(self) -> None:
        if self.cache is None:
            self.cache = CalculationCache(max_entries=self.config.cache_max_entries)

    def rebuild(self) -> PythagorasTree:
        """Discard the current tree and build a new one from scratch."""
        self.tree = build_tree(self.params, self.depth_limit, self.cache, self.config)
        return self.tree

    def reset(self) -> None:
        """Back to the startup state. The cache is kept."""
        self.params = ShapeParameters()
        self.depth_limit = 0
        self.tree = None
        logger.info("Fractal state has been reset.")
