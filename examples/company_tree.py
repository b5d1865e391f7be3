from rich import print

from treealign import Diagram, Tree


def build_company() -> Tree:
    return Tree(
        "[bold]Company[/bold]",
        children=[
            Tree("Engineering", children=[Tree("Frontend"), Tree("Backend"), Tree("Platform & Infrastructure")]),
            Tree("Sales"),
            Tree("Operations", children=[Tree("Finance"), Tree("People")]),
            Tree("Research"),
        ],
    )


def main() -> None:
    diagram = Diagram(build_company(), connector_style="[#0a7e89]", node_style="[cyan]")
    print(diagram.render(include_markup=True))


if __name__ == "__main__":
    main()
