"""Human-readable inspectors over View and Container Records.

Records are flat lists, which makes them hard to reason about in a debugger:

    ViewRecord(20) [None, <StaticTemplate>, 196, ...]

Inspectors decode them on demand instead:

    ViewInspector(flags=ViewFlagsInfo(attached=True, ...), nodes=[
        DebugNode(html='<div id="123">', nodes=[
            DebugNode(html='<span>', nodes=None, ...)
        ], ...)
    ])

Nothing is cached; every property re-reads the underlying record, so the
output always reflects the engine's current state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from viewscope.native import NativeNode, to_html, unwrap_native
from viewscope.records import (
    ACTIVE_INDEX,
    BINDING_INDEX,
    CHILD_HEAD,
    CHILD_TAIL,
    CLEANUP,
    CONTENT_QUERIES,
    CONTEXT,
    DECLARATION_VIEW,
    FLAGS,
    HEADER_OFFSET,
    HOST,
    INDEX_WITHIN_INIT_PHASE_SHIFT,
    INIT_PHASE_STATE_MASK,
    INJECTOR,
    NATIVE,
    NEXT,
    PARENT,
    QUERIES,
    RENDERER,
    RENDERER_FACTORY,
    SANITIZER,
    T_HOST,
    TVIEW,
    VIEWS,
    ContainerRecord,
    InitPhaseState,
    StaticTemplate,
    TemplateNode,
    ViewFlags,
    ViewRecord,
    read_slot,
)
from viewscope.resolve import Inspector, to_debug

# Shortest list treated as a View Record by read_view_value
MIN_VIEW_RECORD_LENGTH = HEADER_OFFSET - 1


@dataclass(frozen=True)
class ViewFlagsInfo:
    """FLAGS slot of a View Record unpacked into named fields."""

    raw_value: int
    init_phase_state: InitPhaseState
    creation_mode: bool
    first_view_pass: bool
    check_always: bool
    dirty: bool
    attached: bool
    destroyed: bool
    is_root: bool
    index_within_init_phase: int


@dataclass(frozen=True)
class ViewDetails:
    """Rarely needed View Record fields, kept apart from the main properties."""

    tview: StaticTemplate
    cleanup: list[Any] | None
    injector: Any
    renderer_factory: Any
    renderer: Any
    sanitizer: Any
    child_head: Inspector | None
    next: Inspector | None
    child_tail: Inspector | None
    declaration_view: ViewInspector | None
    content_queries: Any
    queries: Any
    t_host: Any
    binding_index: int | None


@dataclass(frozen=True)
class ContainerDetails:
    """Rarely needed Container Record fields."""

    next: Inspector | None


@dataclass(frozen=True)
class DebugNode:
    """One position of a view's template, joined with its runtime value.

    Attributes:
        html: Opening tag (or text) of the native node, if any
        native: The unwrapped native node, if any
        nodes: Child positions, or None for a leaf
        component: Inspector for a nested component view held in this slot
    """

    html: str | None
    native: NativeNode | None
    nodes: list[DebugNode] | None
    component: ViewInspector | None


class ViewInspector:
    """Read-only debug view of a single View Record."""

    __slots__ = ("_raw_view",)

    def __init__(self, view: ViewRecord) -> None:
        self._raw_view = view

    @property
    def raw(self) -> ViewRecord:
        """The underlying record."""
        return self._raw_view

    @property
    def flags(self) -> ViewFlagsInfo:
        """Flags associated with the view, unpacked into a readable form."""
        flags = self._raw_view[FLAGS]
        return ViewFlagsInfo(
            raw_value=flags,
            init_phase_state=InitPhaseState(flags & INIT_PHASE_STATE_MASK),
            creation_mode=bool(flags & ViewFlags.CREATION_MODE),
            first_view_pass=bool(flags & ViewFlags.FIRST_VIEW_PASS),
            check_always=bool(flags & ViewFlags.CHECK_ALWAYS),
            dirty=bool(flags & ViewFlags.DIRTY),
            attached=bool(flags & ViewFlags.ATTACHED),
            destroyed=bool(flags & ViewFlags.DESTROYED),
            is_root=bool(flags & ViewFlags.IS_ROOT),
            index_within_init_phase=flags >> INDEX_WITHIN_INIT_PHASE_SHIFT,
        )

    @property
    def parent(self) -> Inspector | None:
        return to_debug(self._raw_view[PARENT])

    @property
    def host(self) -> str | None:
        return to_html(self._raw_view[HOST], include_children=True)

    @property
    def context(self) -> Any:
        return self._raw_view[CONTEXT]

    @property
    def nodes(self) -> list[DebugNode] | None:
        """The template's node tree with this view's values filled in."""
        view = self._raw_view
        return build_debug_nodes(view[TVIEW].first_child, view)

    @property
    def details(self) -> ViewDetails:
        """Additional fields hidden behind one property.

        The extra level of indirection keeps the main properties free of
        fields that are only rarely relevant.
        """
        view = self._raw_view
        return ViewDetails(
            tview=view[TVIEW],
            cleanup=view[CLEANUP],
            injector=view[INJECTOR],
            renderer_factory=view[RENDERER_FACTORY],
            renderer=view[RENDERER],
            sanitizer=view[SANITIZER],
            child_head=to_debug(view[CHILD_HEAD]),
            next=to_debug(view[NEXT]),
            child_tail=to_debug(view[CHILD_TAIL]),
            declaration_view=to_debug(view[DECLARATION_VIEW]),
            content_queries=view[CONTENT_QUERIES],
            queries=view[QUERIES],
            t_host=view[T_HOST],
            binding_index=view[BINDING_INDEX],
        )

    @property
    def child_views(self) -> list[Inspector]:
        """Child views and containers attached at this location, in order."""
        child_views: list[Inspector] = []
        child = self.details.child_head
        while child is not None:
            child_views.append(child)
            child = child.details.next
        return child_views

    def __repr__(self) -> str:
        tview = self._raw_view[TVIEW]
        name = getattr(tview, "name", "") or "?"
        return f"ViewInspector(template={name!r}, host={self.host!r})"


class ContainerInspector:
    """Read-only debug view of a single Container Record."""

    __slots__ = ("_raw_container",)

    def __init__(self, container: ContainerRecord) -> None:
        self._raw_container = container

    @property
    def raw(self) -> ContainerRecord:
        """The underlying record."""
        return self._raw_container

    @property
    def active_index(self) -> int:
        return self._raw_container[ACTIVE_INDEX]

    @property
    def views(self) -> list[ViewInspector]:
        """Inspectors for the contained views, in display order."""
        return [to_debug(view) for view in self._raw_container[VIEWS]]

    @property
    def parent(self) -> Inspector | None:
        return to_debug(self._raw_container[PARENT])

    @property
    def queries(self) -> Any:
        return self._raw_container[QUERIES]

    @property
    def host(self) -> Any:
        """Native node, styling wrapper, or the inspector of a host view."""
        host = self._raw_container[HOST]
        if isinstance(host, ViewRecord):
            return to_debug(host)
        return host

    @property
    def native(self) -> Any:
        """Anchor node marking where the views are inserted."""
        return self._raw_container[NATIVE]

    @property
    def details(self) -> ContainerDetails:
        return ContainerDetails(next=to_debug(self._raw_container[NEXT]))

    def __repr__(self) -> str:
        count = len(self._raw_container[VIEWS])
        return f"ContainerInspector(active_index={self.active_index}, views={count})"


def build_debug_nodes(
    tnode: TemplateNode | None, view: ViewRecord
) -> list[DebugNode] | None:
    """Turn a view's flat slots into a tree by walking the Template Node graph.

    Covers ``tnode`` and all of its ``next`` siblings, recursing into each
    one's first child. The graph is assumed to be finite and acyclic.

    Args:
        tnode: First Template Node of a sibling list, or None
        view: View Record owning the slots

    Returns:
        One DebugNode per sibling, or None if ``tnode`` is None
    """
    if tnode is None:
        return None

    debug_nodes: list[DebugNode] = []
    cursor: TemplateNode | None = tnode
    while cursor is not None:
        raw_value = read_slot(view, cursor)
        debug_nodes.append(
            DebugNode(
                html=to_html(raw_value),
                native=unwrap_native(raw_value),
                nodes=build_debug_nodes(cursor.child, view),
                component=to_debug(read_view_value(raw_value)),
            )
        )
        cursor = cursor.next
    return debug_nodes


def read_view_value(value: Any) -> ViewRecord | None:
    """Find the View Record held in (or wrapped by) a slot value.

    Any list at least MIN_VIEW_RECORD_LENGTH long counts as a View Record;
    shorter lists are followed through their HOST slot. The length test can
    mistake a large enough styling wrapper for a view, which is acceptable
    for debug output only.

    Args:
        value: Raw slot value

    Returns:
        The View Record, or None if none is found
    """
    while isinstance(value, list) and value:
        if len(value) >= MIN_VIEW_RECORD_LENGTH:
            return value
        value = value[HOST]
    return None
