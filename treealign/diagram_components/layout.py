import logging
from typing import Callable, List, Optional

from ..errors import ConfigurationError
from .alignment import TOP, AlignmentLevels, compute_guide_ids, contribution_anchor
from .node import NodeRenderer, text_node
from .stack import Box, Element, HStack, VStack
from .tree import Tree

logger = logging.getLogger(__name__)

NodeDecorator = Callable[[Tree, Box], None]


class DiagramLayout:
    """Turns a tree into nested stacks whose alignment centers each parent.

    Every node becomes a ``VStack`` of its content box above an ``HStack`` of
    its children. The ``VStack`` aligns on the anchor for the children's depth,
    which only the row's center guides declare a value for.
    """

    def __init__(
        self,
        node: Optional[NodeRenderer] = None,
        *,
        horizontal_spacing: int = 4,
        vertical_spacing: int = 4,
        levels: Optional[AlignmentLevels] = None,
        decorate: Optional[NodeDecorator] = None,
    ) -> None:
        for name, value in (
            ("horizontal_spacing", horizontal_spacing),
            ("vertical_spacing", vertical_spacing),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer.")
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative.")

        self.node = node or text_node()
        self.h_spacing = horizontal_spacing
        self.v_spacing = vertical_spacing
        self.levels = levels if levels is not None else AlignmentLevels()
        self.decorate = decorate

    def build(self, tree: Tree) -> Element:
        logger.debug("Building layout for %d nodes", len(tree))
        return self._build_node(tree, is_center_guide=True, depth=0)

    def _build_node(self, tree: Tree, is_center_guide: bool, depth: int) -> Element:
        content = self.node(tree)
        if not isinstance(content, Box):
            raise ConfigurationError("Node renderer must return a Box.")
        content.measure_frame(tree.id)
        content.alignment_guide(
            contribution_anchor(self.levels, depth, is_center_guide),
            lambda size: size.width / 2,
        )
        if self.decorate is not None:
            self.decorate(tree, content)

        items: List[Element] = [content]
        if tree.children:
            guide_ids = compute_guide_ids(tree.children)
            row = HStack(
                [
                    self._build_node(child, is_center_guide=child.id in guide_ids, depth=depth + 1)
                    for child in tree.children
                ],
                alignment=TOP,
                spacing=self.h_spacing,
            )
            items.append(row)

        return VStack(items, alignment=self.levels[depth + 1], spacing=self.v_spacing)
