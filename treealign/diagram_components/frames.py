import uuid
from typing import Dict, Iterator, Optional, Tuple

from ..errors import MeasurementIncompleteError
from .core import Rect


class FrameRegistry:
    """Node identity to measured frame, in the diagram's coordinate space.

    Registries are collected per subtree and merged upwards; a consumer reads
    them only after the whole layout pass has returned.
    """

    def __init__(self, frames: Optional[Dict[uuid.UUID, Rect]] = None) -> None:
        self._frames: Dict[uuid.UUID, Rect] = dict(frames or {})

    def report(self, node_id: uuid.UUID, frame: Rect) -> "FrameRegistry":
        self._frames[node_id] = frame
        return self

    def merged(self, other: "FrameRegistry") -> "FrameRegistry":
        combined = FrameRegistry(self._frames)
        combined._frames.update(other._frames)
        return combined

    def lookup(self, node_id: uuid.UUID) -> Rect:
        try:
            return self._frames[node_id]
        except KeyError:
            raise MeasurementIncompleteError(
                f"No frame measured for node {node_id}; connectors must be "
                "built after the layout pass completes."
            ) from None

    def items(self) -> Iterator[Tuple[uuid.UUID, Rect]]:
        return iter(self._frames.items())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._frames

    def __iter__(self) -> Iterator[uuid.UUID]:
        return iter(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return f"FrameRegistry({len(self._frames)} frames)"


def merge(a: FrameRegistry, b: FrameRegistry) -> FrameRegistry:
    return a.merged(b)
