"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the drawing canvas and
the Status Bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the event sources (timer, pointer) to the
   controllers, and the store back to the renderer.
"""
import logging
import os
from typing import Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QFileDialog, QLabel, QMainWindow, QMessageBox

from pythagorastree.app import VISIBLE_APP_NAME
from pythagorastree.controller.growth import GrowthScheduler
from pythagorastree.controller.interaction import InteractionHandler
from pythagorastree.controller.store import FractalStore
from pythagorastree.model.export import save_svg
from pythagorastree.model.tree import PythagorasTree
from pythagorastree.view.canvas import FractalCanvas
from pythagorastree.view.renderer import TreeRenderer

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Optional[FractalStore] = None) -> None:
        super().__init__()
        self.store: FractalStore = store if store is not None else FractalStore()
        config = self.store.state.config

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(int(config.scene_width), int(config.scene_height) + 60)

        # --- MODEL <-> VIEW ---
        self.renderer = TreeRenderer(config=config)
        self.canvas = FractalCanvas(self.renderer.scene)
        self.setCentralWidget(self.canvas)

        # --- CONTROLLERS ---
        self.scheduler = GrowthScheduler(
            maximum_depth=config.maximum_depth,
            interval_ms=config.tick_interval_ms,
            parent=self,
        )
        self.scheduler.sync_depth(self.store.depth_limit)
        self.interaction = InteractionHandler(self.store, parent=self)

        # --- STATUS BAR ---
        self.status_label = QLabel()
        self.statusBar().addPermanentWidget(self.status_label)

        # --- SIGNAL CONNECTIONS ---
        # 1. Timer tick -> new depth limit -> rebuild
        self.scheduler.depth_changed.connect(self.store.set_depth_limit)
        # the store owns the depth; the scheduler counts on from it
        self.store.depth_changed.connect(self.scheduler.sync_depth)

        # 2. Pointer move -> new shape parameters -> rebuild
        self.canvas.pointer_moved.connect(self.interaction.on_pointer_move)

        # 3. Any rebuild -> redraw
        self.store.tree_changed.connect(self.on_tree_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.store.rebuild()

    def _create_actions(self) -> None:
        self.act_export_svg = QAction("Export SVG...", self)
        self.act_export_svg.setShortcut("Ctrl+E")
        self.act_export_svg.triggered.connect(self.on_export_svg)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_restart = QAction("Restart Growth", self)
        self.act_restart.setShortcut("Ctrl+R")
        self.act_restart.triggered.connect(self.restart_growth)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_export_svg)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        tree_menu = menu_bar.addMenu("&Tree")
        tree_menu.addAction(self.act_restart)

    # --- SLOTS ---
    def start_growth(self) -> None:
        self.scheduler.start()

    def restart_growth(self) -> None:
        """Start over from depth 0. Shape parameters and cache survive."""
        self.scheduler.stop()
        self.store.set_depth_limit(0)
        self.scheduler.start()

    def on_tree_changed(self, tree: PythagorasTree) -> None:
        self.renderer.render(tree)
        self.update_status()

    def update_status(self) -> None:
        params = self.store.params
        cache = self.store.state.cache
        tree = self.store.tree
        n_nodes = len(tree) if tree is not None else 0
        self.status_label.setText(
            f"depth {self.store.depth_limit}/{self.scheduler.maximum_depth}  |  "
            f"squares {n_nodes}  |  "
            f"height {params.height_factor:.2f}  lean {params.lean:+.2f}  |  "
            f"cache {len(cache)} ({cache.hits} hits, {cache.misses} misses)"
        )

    def on_export_svg(self) -> None:
        if self.store.tree is None:
            return

        filepath, _ = QFileDialog.getSaveFileName(
            self, "Export SVG", os.path.expanduser("~/pythagoras_tree.svg"), "SVG Files (*.svg)"
        )
        if not filepath:
            return
        if not filepath.lower().endswith(".svg"):
            filepath += ".svg"

        self.export_svg(filepath)

    def export_svg(self, filepath: str) -> bool:
        """Write the current frame to `filepath`. Returns False on failure."""
        tree = self.store.tree
        if tree is None:
            return False

        try:
            save_svg(tree, filepath, self.renderer.ramp, self.store.state.config)
        except OSError as e:
            logger.error(f"SVG export failed: {e}")
            QMessageBox.critical(self, "Export failed", f"Could not write '{filepath}':\n{e}")
            return False

        self.statusBar().showMessage(f"Exported to {filepath}", 5000)
        return True
