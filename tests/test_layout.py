import pytest

from treealign import Tree
from treealign.diagram_components import AlignmentLevels, Box, DiagramLayout, Rect, layout_pass
from treealign.errors import ConfigurationError


# -----------------------------------------------------------------------------
# Centering over guides
# -----------------------------------------------------------------------------

def test_leaf_root_sits_at_origin(measure):
    root = Tree(6)
    frames = measure(root)
    assert frames.lookup(root.id) == Rect(0, 0, 6, 2)


def test_parent_centers_between_two_middle_children(measure):
    wide, narrow = Tree(20), Tree(6)
    root = Tree(10, children=[wide, narrow])

    frames = measure(root)

    assert frames.lookup(wide.id) == Rect(0, 4, 20, 2)
    assert frames.lookup(narrow.id) == Rect(24, 4, 6, 2)
    assert frames.lookup(root.id) == Rect(13.5, 0, 10, 2)
    midpoint = (frames.lookup(wide.id).center.x + frames.lookup(narrow.id).center.x) / 2
    assert frames.lookup(root.id).center.x == midpoint


def test_parent_centers_over_middle_child_of_odd_row(measure):
    a, b, c = Tree(4), Tree(6), Tree(8)
    root = Tree(10, children=[a, b, c])

    frames = measure(root)

    assert [frames.lookup(node.id).x for node in (a, b, c)] == [0, 8, 18]
    assert frames.lookup(root.id).center.x == frames.lookup(b.id).center.x == 11


def test_even_rows_use_middle_pair_not_geometric_centroid(measure):
    children = [Tree(2), Tree(2), Tree(2), Tree(30)]
    root = Tree(2, children=children)

    frames = measure(root)

    middle = (frames.lookup(children[1].id).center.x + frames.lookup(children[2].id).center.x) / 2
    assert frames.lookup(root.id).center.x == middle == 10


def test_centering_composes_across_depths(measure):
    a1, a2, a3 = Tree(2), Tree(2), Tree(30)
    a = Tree(10, children=[a1, a2, a3])
    b = Tree(4)
    root = Tree(2, children=[a, b])

    frames = measure(root)

    # a sits over its own middle child, unaffected by the level above
    assert frames.lookup(a.id).center.x == frames.lookup(a2.id).center.x == 7
    assert frames.lookup(b.id).x == 46
    # the root follows a's node center, not the center of a's whole subtree
    assert frames.lookup(root.id).center.x == (7 + 48) / 2
    assert frames.lookup(a1.id).y == 8


def test_rows_are_spaced_by_configured_gaps(measure):
    left, right = Tree(3), Tree(3)
    root = Tree(3, children=[left, right])

    frames = measure(root, horizontal_spacing=1, vertical_spacing=5)

    assert frames.lookup(right.id).x - frames.lookup(left.id).max_x == 1
    assert frames.lookup(left.id).y - frames.lookup(root.id).max_y == 5


def test_single_child_chain_is_vertically_aligned(measure):
    leaf = Tree(3)
    middle = Tree(9, children=[leaf])
    root = Tree(5, children=[middle])

    frames = measure(root)

    centers = {frames.lookup(node.id).center.x for node in (root, middle, leaf)}
    assert centers == {4.5}


def test_frames_never_overlap(measure):
    tree = Tree(8, children=[
        Tree(12, children=[Tree(3), Tree(3), Tree(3), Tree(3)]),
        Tree(4),
        Tree(20, children=[Tree(5, children=[Tree(40)])]),
    ])

    frames = measure(tree)
    rects = [frames.lookup(node.id) for node, _ in tree.walk()]

    assert len(frames) == len(tree)
    for i, first in enumerate(rects):
        for second in rects[i + 1:]:
            separated = (
                first.max_x <= second.min_x
                or second.max_x <= first.min_x
                or first.max_y <= second.min_y
                or second.max_y <= first.min_y
            )
            assert separated


# -----------------------------------------------------------------------------
# Builder details
# -----------------------------------------------------------------------------

def test_layout_creates_one_anchor_per_row(fixed_width_node):
    levels = AlignmentLevels()
    layout = DiagramLayout(fixed_width_node, levels=levels)
    assert layout.levels is levels
    layout_pass(layout.build(Tree(2, children=[Tree(2, children=[Tree(2)])])))
    assert len(levels) == 4


def test_decorator_sees_every_node(fixed_width_node):
    seen = []
    tree = Tree(2, children=[Tree(3), Tree(4)])
    layout = DiagramLayout(fixed_width_node, decorate=lambda node, box: seen.append((node.value, box.node_id)))
    layout.build(tree)
    assert seen == [(node.value, node.id) for node, _ in tree.walk()]


def test_renderer_must_return_a_box():
    layout = DiagramLayout(lambda tree: "not a box")
    with pytest.raises(ConfigurationError):
        layout.build(Tree("x"))


@pytest.mark.parametrize("value", [-1, 1.5, "4", None, True])
def test_invalid_spacing_is_rejected(value):
    with pytest.raises(ConfigurationError):
        DiagramLayout(horizontal_spacing=value)
    with pytest.raises(ConfigurationError):
        DiagramLayout(vertical_spacing=value)


def test_default_renderer_draws_text_boxes():
    tree = Tree("Root")
    content = DiagramLayout().build(tree).children[0]
    assert isinstance(content, Box)
    assert content.intrinsic_size == (8, 3)
