from .alignment import CENTER, LEADING, TOP, TRAILING, Anchor, AlignmentLevels, compute_guide_ids, contribution_anchor
from .canvas import Canvas
from .connectors import Connector, ConnectorOverlay, connector_endpoints
from .core import Axis, BoxChars, Point, Rect, Size, UnitPoint
from .diagram import Diagram, DiagramLayoutResult
from .frames import FrameRegistry, merge
from .layout import DiagramLayout
from .node import NodeBox, text_node
from .stack import Box, Element, HStack, VStack, hit_test, layout_pass
from .tree import Tree

__all__ = [
    "Anchor",
    "AlignmentLevels",
    "Axis",
    "Box",
    "BoxChars",
    "CENTER",
    "Canvas",
    "Connector",
    "ConnectorOverlay",
    "Diagram",
    "DiagramLayout",
    "DiagramLayoutResult",
    "Element",
    "FrameRegistry",
    "HStack",
    "LEADING",
    "NodeBox",
    "Point",
    "Rect",
    "Size",
    "TOP",
    "TRAILING",
    "Tree",
    "UnitPoint",
    "VStack",
    "compute_guide_ids",
    "connector_endpoints",
    "contribution_anchor",
    "hit_test",
    "layout_pass",
    "merge",
    "text_node",
]
