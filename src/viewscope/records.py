"""Runtime record layouts shared with the rendering engine.

A View Record is a flat list: a fixed header of engine metadata followed by
one dynamic slot per Template Node. A Container Record is a shorter flat list
describing a dynamic placement point. The slot constants below are the only
place the layouts are spelled out.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any

# =============================================================================
# View Record header
# =============================================================================

HOST = 0
TVIEW = 1
FLAGS = 2
PARENT = 3
NEXT = 4
QUERIES = 5
T_HOST = 6
BINDING_INDEX = 7
CLEANUP = 8
CONTEXT = 9
INJECTOR = 10
RENDERER_FACTORY = 11
RENDERER = 12
SANITIZER = 13
CHILD_HEAD = 14
CHILD_TAIL = 15
CONTENT_QUERIES = 16
DECLARATION_VIEW = 17

# First dynamic slot; Template Node indices start here
HEADER_OFFSET = 18

# =============================================================================
# Container Record layout
# =============================================================================
# HOST, PARENT, NEXT and QUERIES sit at the same offsets as in a View Record.

ACTIVE_INDEX = 1
VIEWS = 2
NATIVE = 6

CONTAINER_HEADER_OFFSET = 7


# =============================================================================
# Flags
# =============================================================================


class ViewFlags(IntFlag):
    """Single-bit flags stored in a View Record's FLAGS slot."""

    CREATION_MODE = 0b000000000100
    FIRST_VIEW_PASS = 0b000000001000
    CHECK_ALWAYS = 0b000000010000
    DIRTY = 0b000000100000
    ATTACHED = 0b000001000000
    DESTROYED = 0b000010000000
    IS_ROOT = 0b000100000000


# Low two bits hold the init phase; everything from bit 9 up counts hooks run
INIT_PHASE_STATE_MASK = 0b000000000011
INDEX_WITHIN_INIT_PHASE_SHIFT = 9


class InitPhaseState(IntEnum):
    """Which lifecycle init hooks still need to run for a view."""

    ON_INIT_HOOKS_TO_BE_RUN = 0
    AFTER_CONTENT_INIT_HOOKS_TO_BE_RUN = 1
    AFTER_VIEW_INIT_HOOKS_TO_BE_RUN = 2
    INIT_PHASE_COMPLETED = 3


# =============================================================================
# Records
# =============================================================================


class ViewRecord(list):
    """Flat per-instance storage for one rendered view.

    Behaves exactly like a list for the engine. The ``debug`` slot is a
    companion attribute outside the indexed storage; it is only written by
    the debug attacher.
    """

    __slots__ = ("debug",)


class ContainerRecord(list):
    """Flat per-instance storage for a dynamic placeholder of child views."""

    __slots__ = ("debug",)


@dataclass(eq=False)
class TemplateNode:
    """One structural position in a template, shared by every instance.

    Attributes:
        index: Absolute slot index of this node's value in a View Record
        child: First child Template Node, if any
        next: Next sibling Template Node, if any
    """

    index: int
    child: TemplateNode | None = None
    next: TemplateNode | None = None


@dataclass(eq=False)
class StaticTemplate:
    """Per-template-type metadata holding the first top-level Template Node."""

    first_child: TemplateNode | None = None
    name: str = ""


def read_slot(view: ViewRecord, tnode: TemplateNode) -> Any:
    """Read the dynamic slot that belongs to ``tnode`` in ``view``."""
    return view[tnode.index]


def new_view_record(
    template: StaticTemplate,
    slots: list[Any] | None = None,
    *,
    host: Any = None,
    parent: ViewRecord | ContainerRecord | None = None,
    context: Any = None,
    flags: int = 0,
    **header: Any,
) -> ViewRecord:
    """Build a View Record with a full header and the given dynamic slots.

    Extra header slots can be given by lower-case name, e.g.
    ``new_view_record(t, child_head=child, binding_index=20)``.

    Raises:
        KeyError: If a header keyword does not name a header slot
    """
    view = ViewRecord([None] * HEADER_OFFSET)
    view[HOST] = host
    view[TVIEW] = template
    view[FLAGS] = flags
    view[PARENT] = parent
    view[CONTEXT] = context
    for name, value in header.items():
        view[_VIEW_HEADER_SLOTS[name]] = value
    view.extend(slots or [])
    return view


def new_container_record(
    host: Any = None,
    views: list[ViewRecord] | None = None,
    *,
    native: Any = None,
    parent: ViewRecord | ContainerRecord | None = None,
    active_index: int = -1,
    next: ViewRecord | ContainerRecord | None = None,
    queries: Any = None,
) -> ContainerRecord:
    """Build a Container Record."""
    container = ContainerRecord([None] * CONTAINER_HEADER_OFFSET)
    container[HOST] = host
    container[ACTIVE_INDEX] = active_index
    container[VIEWS] = list(views or [])
    container[PARENT] = parent
    container[NEXT] = next
    container[QUERIES] = queries
    container[NATIVE] = native
    return container


_VIEW_HEADER_SLOTS: dict[str, int] = {
    "host": HOST,
    "tview": TVIEW,
    "flags": FLAGS,
    "parent": PARENT,
    "next": NEXT,
    "queries": QUERIES,
    "t_host": T_HOST,
    "binding_index": BINDING_INDEX,
    "cleanup": CLEANUP,
    "context": CONTEXT,
    "injector": INJECTOR,
    "renderer_factory": RENDERER_FACTORY,
    "renderer": RENDERER,
    "sanitizer": SANITIZER,
    "child_head": CHILD_HEAD,
    "child_tail": CHILD_TAIL,
    "content_queries": CONTENT_QUERIES,
    "declaration_view": DECLARATION_VIEW,
}
