# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Ordered rule tables — first match wins.

Each classifier is a module-level tuple of ``Rule`` entries evaluated in
sequence.  Precedence is therefore the tuple order and can be inspected
(``visitorintent.cli rules``) and tested directly.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Rule(Generic[T, R]):
    """A named predicate and the result it yields when it holds."""

    name: str
    predicate: Callable[[T], bool]
    result: R


def first_match(rules: Iterable[Rule[T, R]], value: T) -> Rule[T, R] | None:
    """Return the first rule whose predicate holds for *value*, or None."""
    return next((rule for rule in rules if rule.predicate(value)), None)


def contains_any(markers: Sequence[str]) -> Callable[[str], bool]:
    """Build a substring-containment predicate over *markers*."""
    frozen = tuple(markers)
    return lambda text: any(m in text for m in frozen)


def describe(rules: Iterable[Rule[Any, Any]]) -> list[tuple[int, str, str]]:
    """(position, name, result) rows for display."""
    return [(i, rule.name, str(rule.result)) for i, rule in enumerate(rules, start=1)]
