import logging
from typing import Callable, List, NamedTuple, Optional

from rich.errors import MarkupError
from rich.text import Text
from wcwidth import wcwidth

from ..errors import ConfigurationError
from .stack import Box
from .tree import Tree

logger = logging.getLogger(__name__)


class Glyph(NamedTuple):
    char: str
    width: int
    style: Optional[str] = None


GlyphLine = List[Glyph]


def parse_label(text: str) -> Text:
    """Parse rich console markup; labels that are not valid markup stay literal.

    Only rich's own tag grammar counts as markup, so ``list[0]`` keeps its
    brackets while ``[bold]x[/bold]`` becomes a styled ``x``.
    """
    try:
        return Text.from_markup(text, emoji=False)
    except MarkupError as exc:
        logger.debug("Label %r kept literal: %s", text, exc)
        return Text(text)


def char_width(char: str) -> int:
    return max(wcwidth(char), 1)


def to_glyphs(label: Text) -> GlyphLine:
    plain = label.plain
    styles: List[List[str]] = [[] for _ in plain]
    for span in label.spans:
        name = str(span.style)
        if not name or name == "none":
            continue
        for index in range(span.start, min(span.end, len(plain))):
            styles[index].append(name)
    return [
        Glyph(char, 0 if char == "\n" else char_width(char), " ".join(names) or None)
        for char, names in zip(plain, styles)
    ]


def wrap_glyphs(glyphs: GlyphLine, limit: Optional[int]) -> List[GlyphLine]:
    """Break on newlines, then greedily at ``limit`` cells; styles travel with each glyph."""
    lines: List[GlyphLine] = [[]]
    used = 0
    for glyph in glyphs:
        if glyph.char == "\n":
            lines.append([])
            used = 0
            continue
        if limit and used and used + glyph.width > limit:
            lines.append([])
            used = 0
        lines[-1].append(glyph)
        used += glyph.width
    return lines


def display_width(line: GlyphLine) -> int:
    return sum(glyph.width for glyph in line)


def style_runs(line: GlyphLine) -> List[GlyphLine]:
    """Split a line into maximal runs of glyphs sharing one style."""
    runs: List[GlyphLine] = []
    for glyph in line:
        if runs and runs[-1][-1].style == glyph.style:
            runs[-1].append(glyph)
        else:
            runs.append([glyph])
    return runs


class NodeBox(Box):
    """Bordered text box: one border cell and ``padding`` blank cells per side."""

    def __init__(self, text: str, *, padding: int = 1, max_width: Optional[int] = None, style: Optional[str] = None) -> None:
        if not isinstance(text, str):
            raise ConfigurationError("Node text must be a string.")
        if padding < 0:
            raise ConfigurationError("padding must not be negative.")
        if max_width is not None and max_width < 2 * padding + 3:
            raise ConfigurationError("max_width leaves no room for node text.")

        content_limit = max_width - 2 - 2 * padding if max_width else None
        self.text = text
        self.padding = padding
        self.style = style
        self.glyph_lines = wrap_glyphs(to_glyphs(parse_label(text)), content_limit)
        self.lines = ["".join(glyph.char for glyph in line).rstrip() for line in self.glyph_lines]
        inner_width = max(display_width(line) for line in self.glyph_lines)
        super().__init__(inner_width + 2 + 2 * padding, len(self.glyph_lines) + 2)


NodeRenderer = Callable[[Tree], Box]


def text_node(max_width: Optional[int] = None, *, padding: int = 1, style: Optional[str] = None) -> NodeRenderer:
    def render(tree: Tree) -> Box:
        return NodeBox(str(tree.value), padding=padding, max_width=max_width, style=style)

    return render
