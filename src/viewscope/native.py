"""Native node access and HTML snippets for debug output.

The host rendering surface is external; anything exposing the
:class:`NativeNode` attributes is accepted as a native node.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

from viewscope.records import HOST


class NodeType(IntEnum):
    """DOM-compatible node type codes."""

    ELEMENT = 1
    TEXT = 3
    COMMENT = 8


@runtime_checkable
class NativeNode(Protocol):
    """Node owned by the host rendering surface."""

    node_type: int
    text_content: str | None
    outer_html: str | None
    inner_html: str | None


def unwrap_native(value: Any) -> NativeNode | None:
    """Follow HOST slots through wrapping records down to a native node.

    View Records, Container Records and styling wrappers all keep the native
    node (or another wrapper) in their HOST slot.

    Args:
        value: Raw slot value

    Returns:
        The native node, or None if the chain does not end in one
    """
    while isinstance(value, list):
        if not value:
            return None
        value = value[HOST]
    if isinstance(value, NativeNode):
        return value
    return None


def to_html(value: Any, include_children: bool = False) -> str | None:
    """Render a possibly wrapped native node as an HTML snippet.

    Args:
        value: Raw slot value, possibly wrapped in records
        include_children: If True, serialize the whole element (like
            ``outerHTML``). If False, return only the opening tag.

    Returns:
        The snippet, the text content for text nodes, or None when there is
        no native node or the opening tag comes out empty. Elements with no
        inner markup always come out empty (the cut lands at position 0), so
        a childless ``<br>`` renders as None without include_children.

    Examples:
        >>> to_html(div)  # outer_html '<div>hi<b>x</b></div>'
        '<div>'
        >>> to_html(div, include_children=True)
        '<div>hi<b>x</b></div>'
    """
    node = unwrap_native(value)
    if node is None:
        return None

    is_text = node.node_type == NodeType.TEXT
    outer_html = (node.text_content if is_text else node.outer_html) or ""
    if include_children or is_text:
        return outer_html

    # Opening tag is everything before the first copy of the inner markup.
    # Attribute text that repeats the inner markup cuts the tag short.
    inner_html = node.inner_html or ""
    cut = outer_html.find(inner_html)
    head = outer_html if cut < 0 else outer_html[:cut]
    return head or None
