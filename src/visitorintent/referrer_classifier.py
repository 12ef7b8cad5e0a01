# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Referrer URL → candidate intent (case-insensitive keyword match)."""

from __future__ import annotations

from . import Intent
from .rules import Rule, contains_any, first_match

SELLER_KEYWORDS: tuple[str, ...] = ("business-sale", "sell-business", "business-broker", "company-sale")
BUYER_KEYWORDS: tuple[str, ...] = ("buy-business", "business-acquisition", "company-acquisition")

REFERRER_RULES: tuple[Rule[str, Intent], ...] = (
    Rule("referrer_seller", contains_any(SELLER_KEYWORDS), Intent.SELLER),
    Rule("referrer_buyer", contains_any(BUYER_KEYWORDS), Intent.BUYER),
)


def classify_referrer(referrer: str | None = None) -> Intent:
    if not referrer:
        return Intent.NEUTRAL
    rule = first_match(REFERRER_RULES, referrer.lower())
    return rule.result if rule else Intent.NEUTRAL
