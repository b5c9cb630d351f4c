"""Flatten a view's debug tree into a NetworkX graph for tooling.

Node IDs are dotted sibling paths ("0", "0.1", ...). Nodes that host a
nested component view carry its tree beneath them, with IDs prefixed by the
host's ID and a slash ("0.1/0", ...).

Usage:
    G = to_flat_graph(to_debug(view))
    G.nodes["0.1"]["html"]        # '<span>'
    get_children(G, "0")          # ['0.0', '0.1']
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from viewscope.inspectors import DebugNode, ViewInspector


def to_flat_graph(inspector: ViewInspector) -> nx.DiGraph:
    """Build a DiGraph of every debug node under a view.

    Node attributes:
        parent: ID of the parent node, None at the top level
        html: Opening tag or text of the node
        depth: Nesting depth, counting component boundaries
        node_type: "COMPONENT" if the slot holds a nested view, else "NODE"

    Args:
        inspector: Inspector of the view to flatten

    Returns:
        DiGraph with parent -> child edges
    """
    G = nx.DiGraph()
    _add_nodes(G, inspector.nodes, parent_id=None, prefix="", depth=0)
    return G


def _add_nodes(
    G: nx.DiGraph,
    nodes: list[DebugNode] | None,
    parent_id: str | None,
    prefix: str,
    depth: int,
) -> None:
    """Recursive helper for to_flat_graph."""
    for position, debug_node in enumerate(nodes or []):
        node_id = f"{prefix}{position}"
        G.add_node(
            node_id,
            parent=parent_id,
            html=debug_node.html,
            depth=depth,
            node_type="COMPONENT" if debug_node.component is not None else "NODE",
        )
        if parent_id is not None:
            G.add_edge(parent_id, node_id)

        _add_nodes(G, debug_node.nodes, node_id, f"{node_id}.", depth + 1)
        if debug_node.component is not None:
            _add_nodes(G, debug_node.component.nodes, node_id, f"{node_id}/", depth + 1)


def get_children(G: nx.DiGraph, parent_id: str) -> list[str]:
    """Get direct children of a node, in insertion order.

    Example:
        >>> G = nx.DiGraph()
        >>> G.add_node('0', parent=None)
        >>> G.add_node('0.0', parent='0')
        >>> get_children(G, '0')
        ['0.0']
    """
    return [
        node_id
        for node_id, attrs in G.nodes(data=True)
        if attrs.get("parent") == parent_id
    ]
