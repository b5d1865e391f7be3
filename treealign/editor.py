import logging
import uuid
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from .diagram_components import Diagram, Tree

logger = logging.getLogger(__name__)

DEFAULT_NEW_VALUE = "A New Node"
QUIT_WORDS = {"q", "quit", "exit"}


def sample_tree() -> Tree:
    return Tree(
        "Root",
        children=[
            Tree("First Child With Some More Text"),
            Tree("Second"),
        ],
    )


class TreeEditor:
    """Owns the current tree; every tap appends ``new_value`` under the tapped node."""

    def __init__(self, tree: Optional[Tree] = None, *, new_value: str = DEFAULT_NEW_VALUE, **diagram_kwargs) -> None:
        self.tree = tree if tree is not None else sample_tree()
        self.new_value = new_value
        self._diagram_kwargs = diagram_kwargs
        self.diagram = self._make_diagram()

    def _make_diagram(self) -> Diagram:
        return Diagram(self.tree, on_tap=self._on_node_tap, **self._diagram_kwargs)

    def _on_node_tap(self, node: Tree) -> None:
        self.tap_node(node.id)

    def tap_node(self, node_id: uuid.UUID) -> Tree:
        updated = self.tree.insert(self.new_value, node_id)
        if updated is self.tree:
            logger.debug("Tap on unknown node %s ignored", node_id)
            return self.tree
        self.tree = updated
        self.diagram = self._make_diagram()
        return self.tree

    def tap(self, column: int, row: int) -> Optional[uuid.UUID]:
        return self.diagram.tap(column, row)

    def render(self, include_markup: bool = False) -> str:
        return self.diagram.render(include_markup=include_markup)


def _node_table(editor: TreeEditor) -> Table:
    frames = editor.diagram.frames()
    table = Table(title="Nodes", show_lines=False)
    table.add_column("Node")
    table.add_column("Column", justify="right")
    table.add_column("Row", justify="right")
    for node, depth in editor.tree.walk():
        frame = frames.lookup(node.id)
        table.add_row("  " * depth + str(node.value), str(int(frame.center.x)), str(int(frame.center.y)))
    return table


def run(editor: Optional[TreeEditor] = None, console: Optional[Console] = None) -> TreeEditor:
    editor = editor or TreeEditor(connector_style="[#0a7e89]")
    console = console or Console()

    while True:
        console.print(editor.render(include_markup=True), highlight=False)
        console.print(_node_table(editor))
        answer = Prompt.ask("Tap at [bold]column row[/bold] (q to quit)", console=console, default="q")
        if answer.strip().lower() in QUIT_WORDS:
            return editor
        try:
            column, row = (int(part) for part in answer.replace(",", " ").split())
        except ValueError:
            console.print("[red]Enter two integers, for example[/red] [bold]12 1[/bold].")
            continue
        if editor.tap(column, row) is None:
            console.print(f"[yellow]No node at ({column}, {row}).[/yellow]")


def main() -> None:
    run()
