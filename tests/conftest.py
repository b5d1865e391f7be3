"""
Shared fixtures.

Trees whose values are integers are laid out with ``fixed_width_node``: the
value is the box width and every box is two cells tall, which keeps expected
coordinates easy to work out by hand.
"""

import pytest

from treealign import Tree
from treealign.diagram_components import Box, DiagramLayout, layout_pass


@pytest.fixture
def fixed_width_node():
    def render(tree):
        return Box(tree.value, 2)

    return render


@pytest.fixture
def measure(fixed_width_node):
    """Lay out a tree of integer widths with h=4, v=2 and return its frames."""

    def run(tree, **kwargs):
        kwargs.setdefault("horizontal_spacing", 4)
        kwargs.setdefault("vertical_spacing", 2)
        layout = DiagramLayout(fixed_width_node, **kwargs)
        return layout_pass(layout.build(tree))

    return run


@pytest.fixture
def sample():
    return Tree(
        "Root",
        children=[
            Tree("First Child With Some More Text"),
            Tree("Second"),
        ],
    )
