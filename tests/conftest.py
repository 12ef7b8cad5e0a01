# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

import logging

try:
    import visitorintent  # noqa: F401
except ImportError:
    raise ImportError("visitorintent is not installed. Run: pip install -e '.[dev]'") from None

import pytest


@pytest.fixture
def restore_root_logging():
    """Undo logging_config.configure() side effects on the root logger."""
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    yield
    root.handlers[:] = old_handlers
    root.setLevel(old_level)
