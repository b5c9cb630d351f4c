"""Shared fixtures for viewscope tests."""

import pytest

from viewscope import set_dev_mode


@pytest.fixture(autouse=True)
def dev_mode():
    """Run every test in developer mode so records get debug wrappers."""
    set_dev_mode(True)
    yield
    set_dev_mode(None)
