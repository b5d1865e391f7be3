from .diagram_components import (
    AlignmentLevels,
    BoxChars,
    Canvas,
    Connector,
    ConnectorOverlay,
    Diagram,
    DiagramLayout,
    FrameRegistry,
    HStack,
    NodeBox,
    Rect,
    Tree,
    VStack,
    compute_guide_ids,
    merge,
    text_node,
)
from .editor import sample_tree, TreeEditor

__all__ = [
    "Tree",
    "Diagram",
    "DiagramLayout",
    "FrameRegistry",
    "AlignmentLevels",
    "ConnectorOverlay",
    "Connector",
    "Rect",
    "BoxChars",
    "Canvas",
    "NodeBox",
    "VStack",
    "HStack",
    "compute_guide_ids",
    "merge",
    "text_node",
    "TreeEditor",
    "sample_tree",
]
