import pytest

from treealign import Tree
from treealign.diagram_components import NodeBox, text_node
from treealign.diagram_components.node import Glyph, parse_label, style_runs, to_glyphs, wrap_glyphs
from treealign.errors import ConfigurationError


def test_box_is_sized_from_text_plus_border_and_padding():
    box = NodeBox("Second")
    assert box.intrinsic_size == (10, 3)
    assert box.lines == ["Second"]


def test_padding_is_configurable():
    assert NodeBox("abc", padding=0).intrinsic_size == (5, 3)
    assert NodeBox("abc", padding=3).intrinsic_size == (11, 3)


def test_markup_tags_take_no_width():
    box = NodeBox("[bold]Hi[/bold]")
    assert box.intrinsic_size == (6, 3)
    assert box.lines == ["Hi"]


def test_wide_characters_count_double():
    assert NodeBox("漢字").intrinsic_size == (8, 3)


def test_newlines_start_new_lines():
    box = NodeBox("one\nthree")
    assert box.lines == ["one", "three"]
    assert box.intrinsic_size == (9, 4)


def test_long_text_wraps_at_max_width():
    box = NodeBox("aaaa bbbb", max_width=10)
    assert box.lines == ["aaaa b", "bbb"]
    assert box.intrinsic_size == (10, 4)


def test_wrapped_lines_keep_their_styles():
    lines = wrap_glyphs(to_glyphs(parse_label("[red]abcd[/red]")), 2)
    assert lines == [
        [Glyph("a", 1, "red"), Glyph("b", 1, "red")],
        [Glyph("c", 1, "red"), Glyph("d", 1, "red")],
    ]


def test_nested_tags_combine_styles():
    glyphs = to_glyphs(parse_label("[bold]a[red]b[/red][/bold]c"))
    assert glyphs == [Glyph("a", 1, "bold"), Glyph("b", 1, "bold red"), Glyph("c", 1, None)]
    assert [len(run) for run in style_runs(glyphs)] == [1, 1, 1]


def test_brackets_that_are_not_tags_stay_literal():
    box = NodeBox("list[0]")
    assert box.lines == ["list[0]"]
    assert box.intrinsic_size == (11, 3)
    assert NodeBox("[bold]x[/bold] [0]").lines == ["x [0]"]


def test_unbalanced_closing_tag_keeps_the_label_literal():
    assert NodeBox("a[/b]").lines == ["a[/b]"]


def test_escaped_brackets_are_literal_text():
    assert NodeBox("\\[bold]x").lines == ["[bold]x"]


def test_empty_text_still_has_a_box():
    assert NodeBox("").intrinsic_size == (4, 3)


def test_invalid_node_settings_are_rejected():
    with pytest.raises(ConfigurationError):
        NodeBox(42)
    with pytest.raises(ConfigurationError):
        NodeBox("x", padding=-1)
    with pytest.raises(ConfigurationError):
        NodeBox("x", max_width=4)


def test_text_node_renders_the_tree_value():
    render = text_node(style="cyan")
    box = render(Tree(1234))
    assert box.lines == ["1234"]
    assert box.style == "cyan"
