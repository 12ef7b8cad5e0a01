# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""URL path → candidate intent.

Case-sensitive substring matching; rule groups are checked in order and the
first hit wins.  Seller landing markers outrank buyer markers, and the broad
``/business`` / ``/opportunities`` markers only apply when neither fired.
"""

from __future__ import annotations

from . import Intent
from .rules import Rule, contains_any, first_match

SELLER_MARKERS: tuple[str, ...] = ("/for-sellers", "/sell", "/list-business", "/seller", "/valuation")
BUYER_MARKERS: tuple[str, ...] = ("/search", "/buy", "/for-buyers", "/listings", "/discover")
# Weaker seller hints: business profile and opportunity pages
SELLER_WEAK_MARKERS: tuple[str, ...] = ("/business", "/opportunities")

PATH_RULES: tuple[Rule[str, Intent], ...] = (
    Rule("path_seller", contains_any(SELLER_MARKERS), Intent.SELLER),
    Rule("path_buyer", contains_any(BUYER_MARKERS), Intent.BUYER),
    Rule("path_seller_weak", contains_any(SELLER_WEAK_MARKERS), Intent.SELLER),
)


def classify_path(pathname: str) -> Intent:
    """Map a URL path to buyer, seller, or neutral."""
    rule = first_match(PATH_RULES, pathname or "")
    return rule.result if rule else Intent.NEUTRAL
