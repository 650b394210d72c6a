"""
Growth Scheduler
================
Raises the depth limit by one on every tick until the maximum depth.

The next tick is requested only after the current one has been handled
(single-shot QTimer, re-armed from the tick handler). A slow rebuild
therefore delays the following tick instead of overlapping with it.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from pythagorastree.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class GrowthScheduler(QObject):
    depth_changed = Signal(int)
    finished = Signal()

    def __init__(
        self,
        maximum_depth: int = DEFAULT_CONFIG.maximum_depth,
        interval_ms: int = DEFAULT_CONFIG.tick_interval_ms,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.maximum_depth = maximum_depth
        self.interval_ms = interval_ms
        self.depth_limit = 0

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def is_running(self) -> bool:
        return self._timer.isActive()

    def is_finished(self) -> bool:
        return self.depth_limit >= self.maximum_depth

    def start(self) -> None:
        """Arm the first tick. Does nothing if running or already grown."""
        if self.is_running() or self.is_finished():
            return
        logger.info(f"Growth started at depth {self.depth_limit} (max {self.maximum_depth}, every {self.interval_ms} ms).")
        self._timer.start()

    def stop(self) -> None:
        """Halt the chain. The reached depth is kept."""
        self._timer.stop()

    def reset(self) -> None:
        self.stop()
        self.depth_limit = 0
        logger.info("Growth reset to depth 0.")

    def sync_depth(self, depth: int) -> None:
        """
        Follow a depth limit set elsewhere (e.g. a store reset), so the next
        tick continues from ``depth + 1``. The timer chain is left as is.
        """
        depth = max(0, min(depth, self.maximum_depth))
        if depth != self.depth_limit:
            logger.debug(f"Growth depth synced from {self.depth_limit} to {depth}.")
            self.depth_limit = depth

    def tick(self) -> None:
        """Advance one level immediately, as if the timer had fired."""
        self._timer.stop()
        self._on_tick()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_tick(self) -> None:
        if self.is_finished():
            return

        self.depth_limit += 1
        logger.debug(f"Growth tick: depth limit {self.depth_limit}.")
        # listeners rebuild synchronously before the next tick is requested
        self.depth_changed.emit(self.depth_limit)

        if self.is_finished():
            logger.info(f"Growth finished at depth {self.depth_limit}.")
            self.finished.emit()
        else:
            self._timer.start()
