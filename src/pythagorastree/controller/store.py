from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from pythagorastree.model.state import FractalState, ShapeParameters
from pythagorastree.model.tree import PythagorasTree

logger = logging.getLogger(__name__)


class FractalStore(QObject):
    """Central state store. Every mutation triggers one full rebuild."""
    tree_changed = Signal(object)
    params_changed = Signal(object)
    depth_changed = Signal(int)

    def __init__(self, state: Optional[FractalState] = None) -> None:
        super().__init__()
        self.state = state if state is not None else FractalState()

    @property
    def params(self) -> ShapeParameters:
        return self.state.params

    @property
    def depth_limit(self) -> int:
        return self.state.depth_limit

    @property
    def tree(self) -> Optional[PythagorasTree]:
        return self.state.tree

    def set_params(self, params: ShapeParameters) -> None:
        self.state.params = params
        self.params_changed.emit(params)
        self.rebuild()

    def set_depth_limit(self, depth: int) -> None:
        depth = max(0, min(depth, self.state.config.maximum_depth))
        self.state.depth_limit = depth
        self.depth_changed.emit(depth)
        self.rebuild()

    def rebuild(self) -> PythagorasTree:
        tree = self.state.rebuild()
        logger.debug(f"Rebuilt tree with {len(tree)} nodes ({self.state.cache!r}).")
        self.tree_changed.emit(tree)
        return tree

    def reset(self) -> None:
        self.state.reset()
        self.params_changed.emit(self.state.params)
        self.depth_changed.emit(self.state.depth_limit)
        self.rebuild()
