"""Lookup from raw records to their attached debug wrappers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union, overload

from viewscope.exceptions import MissingDebugRepresentationError

if TYPE_CHECKING:
    from viewscope.inspectors import ContainerInspector, ViewInspector
    from viewscope.records import ContainerRecord, ViewRecord

Inspector = Union["ViewInspector", "ContainerInspector"]


@overload
def to_debug(obj: ViewRecord) -> ViewInspector: ...
@overload
def to_debug(obj: ContainerRecord) -> ContainerInspector: ...
@overload
def to_debug(obj: None) -> None: ...
@overload
def to_debug(obj: Any) -> Inspector | None: ...


def to_debug(obj: Any) -> Inspector | None:
    """Return the debug wrapper attached to a record.

    Args:
        obj: A View Record, a Container Record, or None

    Returns:
        The attached ViewInspector or ContainerInspector, or None for None

    Raises:
        MissingDebugRepresentationError: If ``obj`` is not None and carries
            no debug wrapper
    """
    if obj is None:
        return None
    debug = getattr(obj, "debug", None)
    if debug is None:
        raise MissingDebugRepresentationError(obj_type=type(obj).__name__)
    return debug
