"""Rendering dependency trees for the console."""

from rich.tree import Tree

from go_resolve.models.tree import DependencyTreeNode


def _label(node: DependencyTreeNode) -> str:
    if node.is_root:
        return f"[bold]{node.name}[/bold]"

    label = node.name
    revision = node.descriptor.revision if node.descriptor else None
    if revision:
        label += f" [cyan]@{revision}[/cyan]"
    if node.unresolved:
        label += " [red](unrecognized)[/red]"
    elif node.truncated:
        label += " [yellow](cycle)[/yellow]"
    elif node.name != node.root_path:
        label += f" [dim]→ {node.root_path}[/dim]"
    return label


def to_rich_tree(node: DependencyTreeNode) -> Tree:
    """Convert a dependency tree into a Rich tree."""
    tree = Tree(_label(node))
    for child in node.children:
        tree.children.append(to_rich_tree(child))
    return tree
