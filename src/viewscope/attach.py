"""Attach debug wrappers to records as the engine creates them.

The engine calls these right after building a record. Outside developer mode
they return immediately, so records keep no wrapper and cost nothing extra.
"""

from __future__ import annotations

import logging

from viewscope._config import is_dev_mode
from viewscope.inspectors import ContainerInspector, ViewInspector
from viewscope.records import ContainerRecord, ViewRecord

logger = logging.getLogger(__name__)


def attach_view_debug(view: ViewRecord) -> None:
    """Attach a fresh ViewInspector to ``view`` (developer mode only)."""
    if not is_dev_mode():
        return
    if getattr(view, "debug", None) is not None:
        logger.debug("Replacing debug wrapper on view record %#x", id(view))
    view.debug = ViewInspector(view)


def attach_container_debug(container: ContainerRecord) -> None:
    """Attach a fresh ContainerInspector to ``container`` (developer mode only)."""
    if not is_dev_mode():
        return
    if getattr(container, "debug", None) is not None:
        logger.debug("Replacing debug wrapper on container record %#x", id(container))
    container.debug = ContainerInspector(container)
