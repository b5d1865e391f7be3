import logging
import math
import uuid
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from ..errors import ConfigurationError
from .canvas import Canvas
from .connectors import Connector, ConnectorOverlay
from .core import BoxChars, Point
from .frames import FrameRegistry
from .layout import DiagramLayout
from .node import NodeBox, NodeRenderer, display_width, style_runs, text_node
from .stack import Box, Element, hit_test, layout_pass
from .tree import Tree

logger = logging.getLogger(__name__)

TapCallback = Callable[[Tree], None]


@dataclass(frozen=True)
class DiagramLayoutResult:
    root: Element
    frames: FrameRegistry


def _cell(value: float) -> int:
    # cell c is covered by a span when its midpoint c + 0.5 lies inside it
    return math.ceil(value - 0.5)


def _column(center: float) -> int:
    return math.floor(center - 0.5)


def _nearest(value: float) -> int:
    return math.floor(value + 0.5)


class Diagram:
    """Renders a tree with each parent centered over its middle children.

    Rendering is two-phase: the layout pass measures and places every node
    and returns the merged frame registry, and only then are connectors built
    from that registry and drawn.
    """

    def __init__(
        self,
        tree: Tree,
        node: Optional[NodeRenderer] = None,
        *,
        horizontal_spacing: int = 4,
        vertical_spacing: int = 4,
        max_box_width: Optional[int] = 36,
        box_style: Optional[Union[str, BoxChars]] = None,
        connector_style: Optional[str] = None,
        node_style: Optional[str] = None,
        on_tap: Optional[TapCallback] = None,
    ):
        if not isinstance(tree, Tree):
            raise ConfigurationError("tree must be a Tree instance.")
        if max_box_width is not None and (isinstance(max_box_width, bool) or not isinstance(max_box_width, int)):
            raise ConfigurationError("max_box_width must be an integer.")
        if max_box_width is not None and max_box_width < 10:
            raise ConfigurationError("max_box_width must be at least 10 characters.")
        if connector_style is not None and not isinstance(connector_style, str):
            raise ConfigurationError("connector_style must be a string when provided.")
        if node_style is not None and not isinstance(node_style, str):
            raise ConfigurationError("node_style must be a string when provided.")
        if on_tap is not None and not callable(on_tap):
            raise ConfigurationError("on_tap must be callable.")

        if isinstance(box_style, BoxChars):
            self.chars = box_style
        else:
            style_key = box_style or "rounded"
            if not isinstance(style_key, str):
                raise ConfigurationError("box_style must be a string or BoxChars instance.")
            try:
                self.chars = BoxChars.for_style(style_key)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        self.tree = tree
        self.node = node or text_node(max_box_width, style=node_style)
        self.connector_style = connector_style
        self.on_tap = on_tap
        self._settings = dict(
            horizontal_spacing=horizontal_spacing,
            vertical_spacing=vertical_spacing,
            max_box_width=max_box_width,
            box_style=self.chars,
            connector_style=connector_style,
            node_style=node_style,
        )
        self._layout = DiagramLayout(
            self.node,
            horizontal_spacing=horizontal_spacing,
            vertical_spacing=vertical_spacing,
            decorate=self._attach_tap if on_tap else None,
        )
        self._last: Optional[DiagramLayoutResult] = None

    def with_tree(self, tree: Tree) -> "Diagram":
        return Diagram(tree, self.node, on_tap=self.on_tap, **self._settings)

    def _attach_tap(self, tree: Tree, box: Box) -> None:
        box.on_tap(lambda _box: self.on_tap(tree))

    def layout(self) -> DiagramLayoutResult:
        root = self._layout.build(self.tree)
        frames = layout_pass(root, Point(0, 0))
        self._last = DiagramLayoutResult(root, frames)
        return self._last

    def frames(self) -> FrameRegistry:
        result = self._last or self.layout()
        return result.frames

    def connectors(self, result: Optional[DiagramLayoutResult] = None) -> List[Connector]:
        if result is None:
            result = self._last or self.layout()
        return ConnectorOverlay(self.tree, result.frames).connectors()

    def _style_tokens(self, style: Optional[str]) -> Optional[Tuple[str, str]]:
        if not style:
            return None
        tag = style.strip()
        if not tag:
            return None
        open_tag = tag if tag.startswith("[") else f"[{tag}]"
        return open_tag, "[/]"

    def _set_styled(self, canvas: Canvas, x: int, y: int, char: str, style: Optional[str]) -> None:
        canvas.set(x, y, char)
        tokens = self._style_tokens(style)
        if tokens:
            canvas.insert_markup(x, y, tokens[0], position="prefix")
            canvas.insert_markup(x, y, tokens[1], position="suffix")

    def _draw_box(self, canvas: Canvas, box: Box) -> None:
        x, y = _cell(box.frame.x), _cell(box.frame.y)
        w, h = int(box.intrinsic_size.width), int(box.intrinsic_size.height)
        style = getattr(box, "style", None)
        if w < 2 or h < 2:
            return

        self._set_styled(canvas, x, y, self.chars.top_left, style)
        self._set_styled(canvas, x + w - 1, y, self.chars.top_right, style)
        self._set_styled(canvas, x, y + h - 1, self.chars.bottom_left, style)
        self._set_styled(canvas, x + w - 1, y + h - 1, self.chars.bottom_right, style)
        for i in range(1, w - 1):
            self._set_styled(canvas, x + i, y, self.chars.horizontal, style)
            self._set_styled(canvas, x + i, y + h - 1, self.chars.horizontal, style)
        for j in range(1, h - 1):
            self._set_styled(canvas, x, y + j, self.chars.vertical, style)
            self._set_styled(canvas, x + w - 1, y + j, self.chars.vertical, style)

        if isinstance(box, NodeBox):
            self._draw_text(canvas, box, x, y, w)

    def _draw_text(self, canvas: Canvas, box: NodeBox, x: int, y: int, w: int) -> None:
        inner_width = w - 2
        for idx, line in enumerate(box.glyph_lines):
            line_y = y + 1 + idx
            cursor = x + 1 + max((inner_width - display_width(line)) // 2, 0)
            for run in style_runs(line):
                first = cursor
                for glyph in run:
                    canvas.set(cursor, line_y, glyph.char, width=glyph.width)
                    last = cursor
                    cursor += glyph.width
                if run[0].style:
                    canvas.insert_markup(first, line_y, f"[{run[0].style}]", position="prefix")
                    canvas.insert_markup(last, line_y, "[/]", position="suffix")

    def _draw_connector(self, canvas: Canvas, connector: Connector) -> None:
        x0, x1 = _column(connector.start.x), _column(connector.end.x)
        top, bottom = _cell(connector.start.y), _cell(connector.end.y) - 1
        if bottom < top:
            return
        style = self.connector_style

        # a shared stem under the parent, then one step per row towards the child
        self._set_styled(canvas, x0, top, self.chars.vertical, style)
        rows = bottom - top
        dx = x1 - x0
        step = 1 if dx > 0 else -1
        diagonal = self.chars.diagonal_right if step > 0 else self.chars.diagonal_left
        previous = x0
        for i in range(1, rows + 1):
            y = top + i
            end = _nearest(x0 + dx * i / rows)
            if end == previous:
                self._set_styled(canvas, end, y, self.chars.vertical, style)
                continue
            for x in range(previous + step, end, step):
                self._set_styled(canvas, x, y, self.chars.horizontal, style)
            self._set_styled(canvas, end, y, diagonal, style)
            previous = end

    def render(self, include_markup: bool = False) -> str:
        result = self.layout()
        connectors = self.connectors(result)

        size = result.root.size
        canvas = Canvas(width=math.ceil(size.width) + 2, height=math.ceil(size.height) + 2)
        boxes = list(result.root.boxes())
        for box in boxes:
            self._draw_box(canvas, box)
        for connector in connectors:
            self._draw_connector(canvas, connector)

        logger.debug("Rendered %d nodes and %d connectors", len(boxes), len(connectors))
        return canvas.render(crop=True, include_markup=include_markup)

    def hit_box(self, column: int, row: int) -> Optional[Box]:
        result = self._last or self.layout()
        return hit_test(result.root, column + 0.5, row + 0.5)

    def hit_test(self, column: int, row: int) -> Optional[uuid.UUID]:
        box = self.hit_box(column, row)
        return box.node_id if box else None

    def tap(self, column: int, row: int) -> Optional[uuid.UUID]:
        box = self.hit_box(column, row)
        if box is None:
            return None
        logger.debug("Tap at (%d, %d) hit node %s", column, row, box.node_id)
        box.tap()
        return box.node_id

    def __str__(self) -> str:
        return self.render()

    def render_markup(self) -> str:
        return self.render(include_markup=True)
