"""Tests for absolute geometry and SVG export."""
import numpy as np
import pytest

from pythagorastree.model.colors import ColorRamp
from pythagorastree.model.export import node_polygons, save_svg, tree_to_svg
from pythagorastree.model.state import ShapeParameters
from pythagorastree.model.tree import build_tree

TOP_LEFT, TOP_RIGHT, BOTTOM_RIGHT, BOTTOM_LEFT = range(4)


@pytest.fixture
def tree(square_params, cache, config):
    return build_tree(square_params, 1, cache, config)


def test_root_polygon(tree):
    polygons = node_polygons(tree)

    assert polygons.shape == (3, 4, 2)
    np.testing.assert_allclose(polygons[0], [[560, 520], [640, 520], [640, 600], [560, 600]])


def test_children_sit_on_the_triangle(tree):
    root, left, right = node_polygons(tree)
    apex = [600.0, 480.0]

    np.testing.assert_allclose(left[BOTTOM_LEFT], root[TOP_LEFT], atol=1e-9)
    np.testing.assert_allclose(left[BOTTOM_RIGHT], apex, atol=1e-9)
    np.testing.assert_allclose(right[BOTTOM_LEFT], apex, atol=1e-9)
    np.testing.assert_allclose(right[BOTTOM_RIGHT], root[TOP_RIGHT], atol=1e-9)


def test_leaning_children_meet_at_apex(cache, config):
    params = ShapeParameters(height_factor=0.3, lean=0.2)
    tree = build_tree(params, 3, cache, config)
    polygons = node_polygons(tree)

    for index, node in tree.walk():
        if node.is_leaf:
            continue
        left = polygons[node.left]
        right = polygons[node.right]
        parent = polygons[index]
        np.testing.assert_allclose(left[BOTTOM_RIGHT], right[BOTTOM_LEFT], atol=1e-6)
        np.testing.assert_allclose(left[BOTTOM_LEFT], parent[TOP_LEFT], atol=1e-6)
        np.testing.assert_allclose(right[BOTTOM_RIGHT], parent[TOP_RIGHT], atol=1e-6)


def test_svg_document(tree, config):
    ramp = ColorRamp()
    svg = tree_to_svg(tree, ramp, config)

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="1200" height="600"')
    assert svg.count("<polygon") == len(tree)
    assert ramp.colors[0] in svg
    assert ramp.colors[-1] in svg
    assert svg.rstrip().endswith("</svg>")


def test_save_svg(tree, config, tmp_path):
    path = tmp_path / "tree.svg"
    save_svg(tree, str(path), ColorRamp(), config)

    assert path.read_text(encoding="utf-8").count("<polygon") == 3


def test_save_svg_to_missing_directory(tree, tmp_path):
    with pytest.raises(OSError):
        save_svg(tree, str(tmp_path / "missing" / "tree.svg"), ColorRamp())
