from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QColor, QTransform
from PySide6.QtWidgets import QGraphicsItem, QGraphicsRectItem, QGraphicsScene

from pythagorastree.config import DEFAULT_CONFIG, TreeConfig
from pythagorastree.model.colors import ColorRamp
from pythagorastree.model.tree import Node, PythagorasTree

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------------
# Transforms
# -------------------------------------------------------------------------------

def node_transform(node: Node) -> QTransform:
    """Local transform of a node: translate(x, y) then rotate about the pivot."""
    px, py = node.pivot
    t = QTransform()
    t.translate(node.x, node.y)
    if node.rotation:
        t.translate(px, py)
        t.rotate(node.rotation)
        t.translate(-px, -py)
    return t

# -------------------------------------------------------------------------------
# Renderer
# -------------------------------------------------------------------------------

class TreeRenderer:
    """
    Draws a PythagorasTree into a QGraphicsScene.

    Every node becomes one QGraphicsRectItem parented to its tree parent's
    item, so the local transforms compose the same way they do in the model.
    The scene is cleared and rebuilt on every call to `render`.
    """
    def __init__(
        self,
        scene: Optional[QGraphicsScene] = None,
        ramp: Optional[ColorRamp] = None,
        config: TreeConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self.ramp = ramp if ramp is not None else ColorRamp()
        self.scene = scene if scene is not None else QGraphicsScene()
        self.scene.setSceneRect(QRectF(0.0, 0.0, config.scene_width, config.scene_height))
        self._items: list[QGraphicsRectItem] = []

    def render(self, tree: Optional[PythagorasTree]) -> None:
        self.clear()
        if tree is None or len(tree) == 0:
            return

        parents: dict[int, QGraphicsItem] = {}
        for index, node in tree.walk():
            item = QGraphicsRectItem(0.0, 0.0, node.width, node.width, parents.get(index))
            item.setTransform(node_transform(node))
            item.setPen(Qt.NoPen)
            item.setBrush(QBrush(QColor(self.ramp.depth_color(node.level, tree.depth_limit))))

            if index == 0:
                self.scene.addItem(item)
            for child in tree.children(index):
                parents[child] = item
            self._items.append(item)

        logger.debug(f"Rendered {len(self._items)} squares.")

    def clear(self) -> None:
        self.scene.clear()
        self._items.clear()

    def item_count(self) -> int:
        return len(self._items)

    def items(self) -> list[QGraphicsRectItem]:
        return list(self._items)
