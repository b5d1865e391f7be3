"""Alignment anchors and the depth-indexed family used to center parents.

A node at depth ``k`` that its row nominates as a center guide publishes its
horizontal center under ``levels[k]``; every other node publishes under the
plain ``CENTER`` anchor and so has no say. The stack holding a node above its
children row aligns on ``levels[k + 1]``, the anchor only the children's guides
populate. Because each depth owns a distinct anchor, a guide two levels down
never pulls on a grandparent.
"""

import uuid
from dataclasses import dataclass
from typing import Dict, Sequence, Set

from ..errors import ConfigurationError, LayoutError
from .core import Axis, Size
from .tree import Tree


@dataclass(frozen=True)
class Anchor:
    name: str
    axis: Axis = Axis.HORIZONTAL
    fraction: float = 0.5

    def default_value(self, size: Size) -> float:
        return size.extent(self.axis) * self.fraction


LEADING = Anchor("leading", Axis.HORIZONTAL, 0.0)
CENTER = Anchor("center", Axis.HORIZONTAL, 0.5)
TRAILING = Anchor("trailing", Axis.HORIZONTAL, 1.0)

TOP = Anchor("top", Axis.VERTICAL, 0.0)
MIDDLE = Anchor("middle", Axis.VERTICAL, 0.5)
BOTTOM = Anchor("bottom", Axis.VERTICAL, 1.0)


class AlignmentLevels:
    """Lazily created node-center anchors, one per tree depth."""

    def __init__(self, prefix: str = "node-center") -> None:
        self._prefix = prefix
        self._anchors: Dict[int, Anchor] = {}

    def __getitem__(self, depth: int) -> Anchor:
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ConfigurationError(f"Alignment depth must be a non-negative integer, got {depth!r}.")
        anchor = self._anchors.get(depth)
        if anchor is None:
            anchor = Anchor(f"{self._prefix}[{depth}]", Axis.HORIZONTAL, 0.5)
            self._anchors[depth] = anchor
        return anchor

    def __len__(self) -> int:
        return len(self._anchors)


def compute_guide_ids(children: Sequence[Tree]) -> Set[uuid.UUID]:
    count = len(children)
    if count == 0:
        raise LayoutError("Guide set requested for a row without children.")
    center_idx = count // 2
    ids = {children[center_idx].id}
    if count % 2 == 0:
        ids.add(children[center_idx - 1].id)
    return ids


def contribution_anchor(levels: AlignmentLevels, depth: int, is_center_guide: bool) -> Anchor:
    return levels[depth] if is_center_guide else CENTER
