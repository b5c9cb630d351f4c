"""Rich console rendering of debug trees.

Requires ``pip install 'viewscope[rich]'``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from viewscope.inspectors import ContainerInspector, DebugNode, ViewInspector

if TYPE_CHECKING:
    from rich.console import Console
    from rich.tree import Tree

    from viewscope.resolve import Inspector


def _require_rich() -> None:
    """Raise a clear error if rich is not installed."""
    try:
        import rich  # noqa: F401
    except ImportError:
        raise ImportError(
            "The 'rich' package is required for debug tree rendering. Install it with: pip install 'viewscope[rich]' or pip install rich"
        ) from None


def build_rich_tree(inspector: Inspector) -> Tree:
    """Build a rich Tree for a view or container inspector.

    Views list their template nodes, then their child views and containers.
    Containers list their views.
    """
    _require_rich()
    from rich.tree import Tree

    tree = Tree(_label(inspector))
    _fill(tree, inspector)
    return tree


def print_debug_tree(inspector: Inspector, console: Console | None = None) -> None:
    """Print the debug tree of ``inspector`` to a rich console."""
    _require_rich()
    from rich.console import Console

    (console or Console()).print(build_rich_tree(inspector))


def _fill(tree: Any, inspector: Inspector) -> None:
    if isinstance(inspector, ContainerInspector):
        for view in inspector.views:
            _fill(tree.add(_label(view)), view)
        return

    _add_debug_nodes(tree, inspector.nodes)
    for child in inspector.child_views:
        _fill(tree.add(_label(child)), child)


def _add_debug_nodes(tree: Any, nodes: list[DebugNode] | None) -> None:
    for debug_node in nodes or []:
        branch = tree.add(_escape(debug_node.html or "(no native node)"))
        _add_debug_nodes(branch, debug_node.nodes)
        if debug_node.component is not None:
            component = branch.add(_label(debug_node.component))
            _fill(component, debug_node.component)


def _label(inspector: Inspector) -> str:
    if isinstance(inspector, ViewInspector):
        tview = inspector.details.tview
        name = getattr(tview, "name", "") or "view"
        state = "attached" if inspector.flags.attached else "detached"
        return f"[bold]{_escape(name)}[/bold] [dim]({state})[/dim]"
    return f"[bold]container[/bold] [dim](active {inspector.active_index})[/dim]"


def _escape(text: str) -> str:
    from rich.markup import escape

    return escape(text)
