from .tree_diagram import *
from .errors import *

__version__ = "0.1.0"
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
    "DiagramError",
    "ConfigurationError",
    "LayoutError",
    "MeasurementIncompleteError",
    "LayoutOverflowError",
]
