"""A small retained-mode box layout engine.

Elements are measured bottom-up, then placed top-down. Placement returns the
frames reported by tagged boxes, merged subtree by subtree, so the registry a
caller receives from ``layout_pass`` is complete by construction.
"""

import logging
import uuid
from functools import reduce
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..errors import ConfigurationError, LayoutError
from .alignment import CENTER, MIDDLE, Anchor
from .core import Axis, Point, Rect, Size
from .frames import FrameRegistry, merge

logger = logging.getLogger(__name__)

GuideFunction = Callable[[Size], float]
TapHandler = Callable[["Box"], None]


class Element:

    def __init__(self) -> None:
        self.size: Optional[Size] = None
        self.frame: Optional[Rect] = None

    def measure(self) -> Size:
        raise NotImplementedError

    def place(self, x: float, y: float) -> FrameRegistry:
        raise NotImplementedError

    def boxes(self) -> Iterator["Box"]:
        raise NotImplementedError

    def explicit_guide(self, anchor: Anchor) -> Optional[float]:
        return None

    def guide(self, anchor: Anchor) -> float:
        value = self.explicit_guide(anchor)
        if value is None:
            value = anchor.default_value(self._measured())
        return value

    def _measured(self) -> Size:
        if self.size is None:
            raise LayoutError(f"{type(self).__name__} was used before it was measured.")
        return self.size


class Box(Element):
    """Fixed-size leaf element."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__()
        if width < 0 or height < 0:
            raise ConfigurationError("Box dimensions must not be negative.")
        self.intrinsic_size = Size(width, height)
        self.node_id: Optional[uuid.UUID] = None
        self._guides: Dict[Anchor, GuideFunction] = {}
        self._tap_handlers: List[TapHandler] = []

    def alignment_guide(self, anchor: Anchor, compute: GuideFunction) -> "Box":
        self._guides[anchor] = compute
        return self

    def measure_frame(self, node_id: uuid.UUID) -> "Box":
        self.node_id = node_id
        return self

    def on_tap(self, handler: TapHandler) -> "Box":
        self._tap_handlers.append(handler)
        return self

    @property
    def tappable(self) -> bool:
        return bool(self._tap_handlers)

    def tap(self) -> None:
        for handler in self._tap_handlers:
            handler(self)

    def measure(self) -> Size:
        self.size = self.intrinsic_size
        return self.size

    def explicit_guide(self, anchor: Anchor) -> Optional[float]:
        compute = self._guides.get(anchor)
        if compute is None:
            return None
        return compute(self._measured())

    def place(self, x: float, y: float) -> FrameRegistry:
        size = self._measured()
        self.frame = Rect(x, y, size.width, size.height)
        registry = FrameRegistry()
        if self.node_id is not None:
            registry.report(self.node_id, self.frame)
        return registry

    def boxes(self) -> Iterator["Box"]:
        yield self


class Stack(Element):
    """Children along ``axis``, lined up on ``alignment`` across it.

    The stack's own value for any anchor is the mean of the explicit values
    its children declare for that anchor, so a parent aligned to a row whose
    two middle children declare a guide lands halfway between them.
    """

    axis = Axis.VERTICAL

    def __init__(self, children: Iterable[Element], *, alignment: Anchor, spacing: float = 0) -> None:
        super().__init__()
        if alignment.axis is self.axis:
            raise ConfigurationError(
                f"{type(self).__name__} alignment must run across the stack, got {alignment.name!r}."
            )
        if spacing < 0:
            raise ConfigurationError("spacing must not be negative.")
        self.children: List[Element] = list(children)
        self.alignment = alignment
        self.spacing = spacing
        self._offsets: List[Tuple[float, float]] = []

    @property
    def cross_axis(self) -> Axis:
        return Axis.HORIZONTAL if self.axis is Axis.VERTICAL else Axis.VERTICAL

    def _local(self, main: float, cross: float) -> Tuple[float, float]:
        if self.axis is Axis.VERTICAL:
            return cross, main
        return main, cross

    def measure(self) -> Size:
        sizes = [child.measure() for child in self.children]
        guides = [child.guide(self.alignment) for child in self.children]
        line = max(guides, default=0.0)

        offsets: List[Tuple[float, float]] = []
        main = 0.0
        cross_extent = 0.0
        for size, guide in zip(sizes, guides):
            cross = line - guide
            offsets.append(self._local(main, cross))
            cross_extent = max(cross_extent, cross + size.extent(self.cross_axis))
            main += size.extent(self.axis) + self.spacing
        main_extent = main - self.spacing if self.children else 0.0

        self._offsets = offsets
        width, height = self._local(main_extent, cross_extent)
        self.size = Size(width, height)
        return self.size

    def explicit_guide(self, anchor: Anchor) -> Optional[float]:
        self._measured()
        values = []
        for child, (dx, dy) in zip(self.children, self._offsets):
            value = child.explicit_guide(anchor)
            if value is not None:
                values.append(value + (dx if anchor.axis is Axis.HORIZONTAL else dy))
        if not values:
            return None
        return sum(values) / len(values)

    def place(self, x: float, y: float) -> FrameRegistry:
        size = self._measured()
        self.frame = Rect(x, y, size.width, size.height)
        registries = [
            child.place(x + dx, y + dy) for child, (dx, dy) in zip(self.children, self._offsets)
        ]
        return reduce(merge, registries, FrameRegistry())

    def boxes(self) -> Iterator[Box]:
        for child in self.children:
            yield from child.boxes()


class VStack(Stack):

    axis = Axis.VERTICAL

    def __init__(self, children: Iterable[Element], *, alignment: Anchor = CENTER, spacing: float = 0) -> None:
        super().__init__(children, alignment=alignment, spacing=spacing)


class HStack(Stack):

    axis = Axis.HORIZONTAL

    def __init__(self, children: Iterable[Element], *, alignment: Anchor = MIDDLE, spacing: float = 0) -> None:
        super().__init__(children, alignment=alignment, spacing=spacing)


def layout_pass(root: Element, origin: Point = Point(0, 0)) -> FrameRegistry:
    size = root.measure()
    frames = root.place(origin.x, origin.y)
    logger.debug("Layout pass placed %d frames in %.1fx%.1f", len(frames), size.width, size.height)
    return frames


def hit_test(root: Element, x: float, y: float) -> Optional[Box]:
    for box in root.boxes():
        if box.frame is None:
            raise LayoutError("Hit test requires a completed layout pass.")
        if (box.node_id is not None or box.tappable) and box.frame.contains(x, y):
            return box
    return None
