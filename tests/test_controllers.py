"""Tests for the store and the pointer Interaction Handler."""
import math

import pytest

from pythagorastree.controller.interaction import (
    InteractionHandler,
    InvalidBoundsError,
    clamp,
    shape_from_pointer,
)
from pythagorastree.controller.store import FractalStore
from pythagorastree.model.state import ShapeParameters


@pytest.fixture
def store(qtbot):
    return FractalStore()


class TestShapeFromPointer:

    @pytest.mark.parametrize("x, y, height_factor, lean", [
        (0, 0, 0.8, 0.5),
        (1200, 600, 0.0, -0.5),
        (600, 300, 0.4, 0.0),
        (300, 150, 0.6, 0.25),
    ])
    def test_mapping(self, x, y, height_factor, lean):
        params = shape_from_pointer(x, y, 1200, 600)

        assert params.height_factor == pytest.approx(height_factor)
        assert params.lean == pytest.approx(lean)

    def test_outside_bounds_is_clamped(self):
        assert shape_from_pointer(-50, 900, 1200, 600) == shape_from_pointer(0, 600, 1200, 600)
        assert shape_from_pointer(5000, -10, 1200, 600) == shape_from_pointer(1200, 0, 1200, 600)

    @pytest.mark.parametrize("bounds", [(0, 600), (1200, -1), (math.inf, 600), (1200, math.nan)])
    def test_invalid_bounds(self, bounds):
        with pytest.raises(InvalidBoundsError):
            shape_from_pointer(10, 10, *bounds)

    def test_invalid_bounds_is_value_error(self):
        assert issubclass(InvalidBoundsError, ValueError)

    def test_clamp(self):
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10
        assert clamp(5, 0, 10) == 5


class TestFractalStore:

    def test_rebuild_emits_tree(self, qtbot, store):
        with qtbot.waitSignal(store.tree_changed) as blocker:
            store.rebuild()

        assert blocker.args[0] is store.tree
        assert len(store.tree) == 1

    def test_set_params_rebuilds_once(self, store):
        trees = []
        store.tree_changed.connect(trees.append)
        params = ShapeParameters(height_factor=0.3, lean=-0.2)

        store.set_params(params)

        assert len(trees) == 1
        assert store.params == params

    def test_set_depth_limit(self, store):
        depths = []
        store.depth_changed.connect(depths.append)

        store.set_depth_limit(2)

        assert depths == [2]
        assert store.depth_limit == 2
        assert store.tree.max_level() == 2

    @pytest.mark.parametrize("requested, expected", [(-3, 0), (99, 11)])
    def test_depth_limit_is_clamped(self, store, requested, expected):
        store.set_depth_limit(requested)

        assert store.depth_limit == expected

    def test_reset(self, store):
        store.set_depth_limit(3)
        store.set_params(ShapeParameters(0.2, 0.2))

        store.reset()

        assert store.depth_limit == 0
        assert store.params == ShapeParameters()
        assert len(store.tree) == 1


class TestInteractionHandler:

    def test_pointer_move_updates_params_and_keeps_depth(self, store):
        handler = InteractionHandler(store)
        store.set_depth_limit(3)
        trees = []
        store.tree_changed.connect(trees.append)

        params = handler.on_pointer_move(600, 300)

        assert params.height_factor == pytest.approx(0.4)
        assert params.lean == pytest.approx(0.0)
        assert store.params == params
        assert store.depth_limit == 3
        assert len(trees) == 1
        assert trees[0].depth_limit == 3

    def test_pointer_move_fills_cache(self, store):
        handler = InteractionHandler(store)
        store.set_depth_limit(2)
        before = len(store.state.cache)

        handler.on_pointer_move(100, 100)

        assert len(store.state.cache) > before
