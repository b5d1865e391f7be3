import uuid
from dataclasses import dataclass
from typing import List, Tuple

from .core import Point, Rect
from .frames import FrameRegistry
from .tree import Tree


@dataclass(frozen=True)
class Connector:
    parent_id: uuid.UUID
    child_id: uuid.UUID
    start: Point
    end: Point


def connector_endpoints(parent_frame: Rect, child_frame: Rect) -> Tuple[Point, Point]:
    return parent_frame.bottom, child_frame.top


class ConnectorOverlay:
    """Straight parent-to-child connectors read from a completed registry."""

    def __init__(self, tree: Tree, frames: FrameRegistry) -> None:
        self.tree = tree
        self.frames = frames

    def connectors(self) -> List[Connector]:
        collected: List[Connector] = []
        self._collect(self.tree, collected)
        return collected

    def _collect(self, node: Tree, collected: List[Connector]) -> None:
        frame = self.frames.lookup(node.id)
        for child in node.children:
            start, end = connector_endpoints(frame, self.frames.lookup(child.id))
            collected.append(Connector(node.id, child.id, start, end))
            self._collect(child, collected)
