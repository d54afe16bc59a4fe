"""Shared fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """``setup_logging`` replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
