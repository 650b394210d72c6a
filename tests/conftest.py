"""
Shared fixtures.

Qt tests use pytest-qt's `qtbot`; the offscreen platform lets them run on
headless machines.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from pythagorastree.config import TreeConfig
from pythagorastree.model.cache import CalculationCache
from pythagorastree.model.state import ShapeParameters


@pytest.fixture
def config():
    return TreeConfig()


@pytest.fixture
def cache():
    return CalculationCache(max_entries=None)


@pytest.fixture
def square_params():
    """45 degree branches, each child 1/sqrt(2) of its parent."""
    return ShapeParameters(height_factor=0.5, lean=0.0)
