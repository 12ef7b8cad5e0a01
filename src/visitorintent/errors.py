# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Visitor intent exception hierarchy.

Classification itself never raises; these cover the batch/CLI surface only.
Callers can catch VisitorIntentError for any package failure.
"""

from __future__ import annotations


class VisitorIntentError(Exception):
    """Base exception for all visitor intent errors."""


class BatchInputError(VisitorIntentError):
    """A batch input record could not be parsed."""

    def __init__(self, message: str, *, line_no: int = 0) -> None:
        super().__init__(f"line {line_no}: {message}" if line_no else message)
        self.line_no = line_no
