import pytest

from treealign import Tree
from treealign.diagram_components import (
    ConnectorOverlay,
    FrameRegistry,
    Point,
    Rect,
    connector_endpoints,
)
from treealign.errors import MeasurementIncompleteError


def test_connector_runs_from_parent_bottom_center_to_child_top_center():
    start, end = connector_endpoints(Rect(0, 0, 100, 50), Rect(20, 80, 60, 40))
    assert start == Point(50, 50)
    assert end == Point(50, 80)


def test_overlay_emits_one_connector_per_edge_parent_first():
    a1 = Tree("a1")
    a = Tree("a", children=[a1])
    b = Tree("b")
    root = Tree("root", children=[a, b])
    frames = FrameRegistry({
        root.id: Rect(10, 0, 10, 2),
        a.id: Rect(0, 4, 6, 2),
        b.id: Rect(20, 4, 6, 2),
        a1.id: Rect(0, 8, 4, 2),
    })

    connectors = ConnectorOverlay(root, frames).connectors()

    assert [(c.parent_id, c.child_id) for c in connectors] == [
        (root.id, a.id),
        (a.id, a1.id),
        (root.id, b.id),
    ]
    assert connectors[0].start == Point(15, 2)
    assert connectors[0].end == Point(3, 4)
    assert connectors[1].start == Point(3, 6)
    assert connectors[1].end == Point(2, 8)


def test_leaf_tree_has_no_connectors():
    leaf = Tree("only")
    frames = FrameRegistry({leaf.id: Rect(0, 0, 1, 1)})
    assert ConnectorOverlay(leaf, frames).connectors() == []


def test_overlay_before_measurement_fails_instead_of_guessing():
    child = Tree("child")
    root = Tree("root", children=[child])
    frames = FrameRegistry({root.id: Rect(0, 0, 4, 2)})
    with pytest.raises(MeasurementIncompleteError):
        ConnectorOverlay(root, frames).connectors()
