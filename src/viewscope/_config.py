"""Developer-mode configuration.

Debug wrappers are only attached in developer mode. The flag comes from an
explicit :func:`set_dev_mode` call, or else from the ``VIEWSCOPE_DEV_MODE``
environment variable, read once on first use:

    VIEWSCOPE_DEV_MODE=1 python app.py
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEV_MODE_ENV_VAR = "VIEWSCOPE_DEV_MODE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class ViewscopeConfig:
    """Settings read from the process environment."""

    dev_mode: bool = False


_override: bool | None = None
_loaded: ViewscopeConfig | None = None


def load_config(environ: Mapping[str, str] | None = None) -> ViewscopeConfig:
    """Build the config from ``environ`` (defaults to ``os.environ``).

    Unset or unrecognized values leave developer mode off.
    """
    env = os.environ if environ is None else environ
    raw = env.get(DEV_MODE_ENV_VAR, "")
    return ViewscopeConfig(dev_mode=raw.strip().lower() in _TRUTHY)


def is_dev_mode() -> bool:
    """True if debug wrappers should be attached to new records."""
    global _loaded
    if _override is not None:
        return _override
    if _loaded is None:
        _loaded = load_config()
    return _loaded.dev_mode


def set_dev_mode(enabled: bool | None) -> None:
    """Force developer mode on or off. ``None`` falls back to the environment."""
    global _override
    _override = enabled
