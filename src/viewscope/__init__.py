"""viewscope - Debug inspectors for a rendering engine's flat view records."""

from viewscope._config import ViewscopeConfig, is_dev_mode, load_config, set_dev_mode
from viewscope.attach import attach_container_debug, attach_view_debug
from viewscope.exceptions import MissingDebugRepresentationError
from viewscope.flat import get_children, to_flat_graph
from viewscope.inspectors import (
    MIN_VIEW_RECORD_LENGTH,
    ContainerDetails,
    ContainerInspector,
    DebugNode,
    ViewDetails,
    ViewFlagsInfo,
    ViewInspector,
    build_debug_nodes,
    read_view_value,
)
from viewscope.native import NativeNode, NodeType, to_html, unwrap_native
from viewscope.records import (
    HEADER_OFFSET,
    ContainerRecord,
    InitPhaseState,
    StaticTemplate,
    TemplateNode,
    ViewFlags,
    ViewRecord,
    new_container_record,
    new_view_record,
    read_slot,
)
from viewscope.resolve import Inspector, to_debug

__all__ = [
    # Records
    "ViewRecord",
    "ContainerRecord",
    "StaticTemplate",
    "TemplateNode",
    "ViewFlags",
    "InitPhaseState",
    "HEADER_OFFSET",
    "new_view_record",
    "new_container_record",
    "read_slot",
    # Attach and resolve
    "attach_view_debug",
    "attach_container_debug",
    "to_debug",
    "Inspector",
    # Inspectors
    "ViewInspector",
    "ContainerInspector",
    "ViewFlagsInfo",
    "ViewDetails",
    "ContainerDetails",
    "DebugNode",
    "build_debug_nodes",
    "read_view_value",
    "MIN_VIEW_RECORD_LENGTH",
    # Native nodes
    "NativeNode",
    "NodeType",
    "to_html",
    "unwrap_native",
    # Tooling
    "to_flat_graph",
    "get_children",
    # Config
    "ViewscopeConfig",
    "is_dev_mode",
    "set_dev_mode",
    "load_config",
    # Errors
    "MissingDebugRepresentationError",
]
