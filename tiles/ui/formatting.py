"""Rich rendering of projected layouts for the CLI."""

from typing import Optional, Union

from rich.tree import Tree

from ..layout import LeafView, SplitView, ViewNode

AXIS_ICONS = {
    "horizontal": "⇆",
    "vertical": "⇅",
}


def format_node_label(view: ViewNode) -> str:
    """One-line label for a node: the panel title, or the split axis and id."""
    if isinstance(view, LeafView):
        return f"[green]{view.title}[/green]"
    icon = AXIS_ICONS[view.axis.value]
    label = f"{icon} [bold]{view.axis.value}[/bold] split"
    if view.panel_id is not None:
        label += f" [dim]#{view.panel_id}[/dim]"
    return label


def render_layout_tree(view: Optional[ViewNode], title: str = "Layout") -> Tree:
    """Build a rich Tree showing the structure of a projected layout."""
    tree = Tree(f"[bold]{title}[/bold]")
    if view is None:
        tree.add("[yellow]empty[/yellow]")
        return tree
    _add_view_to_tree(tree, view)
    return tree


def _add_view_to_tree(parent_tree: Tree, view: Union[LeafView, SplitView]) -> None:
    """Recursively add a view node and its children to the tree."""
    branch = parent_tree.add(format_node_label(view))
    if isinstance(view, SplitView):
        _add_view_to_tree(branch, view.lhs)
        _add_view_to_tree(branch, view.rhs)
