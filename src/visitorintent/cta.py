# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Intent → CTA pair lookup.

Buyer and neutral visitors get fixed pairs.  Sellers get the valuation hook
on valuation and seller landing pages, and the listing flow elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import ActionId, CTADescriptor, Intent

STYLE_PRIMARY_SELLER = "cta-primary-seller"
STYLE_PRIMARY_BUYER = "cta-primary-buyer"
STYLE_PRIMARY_NEUTRAL = "cta-primary-neutral"
STYLE_SECONDARY = "cta-secondary"


@dataclass(frozen=True, slots=True)
class CTAPair:
    primary: CTADescriptor
    secondary: CTADescriptor


_FIXED_PAIRS: dict[Intent, CTAPair] = {
    Intent.BUYER: CTAPair(
        primary=CTADescriptor("Find Businesses", ActionId.SIGNUP_BUYER, STYLE_PRIMARY_BUYER),
        secondary=CTADescriptor("Sell Your Business", ActionId.EXPLORE_ALTERNATIVE, STYLE_SECONDARY),
    ),
    Intent.NEUTRAL: CTAPair(
        primary=CTADescriptor("Get Started", ActionId.SIGNUP_NEUTRAL, STYLE_PRIMARY_NEUTRAL),
        secondary=CTADescriptor("Log in", ActionId.LOGIN, STYLE_SECONDARY),
    ),
}

_SELLER_SECONDARY = CTADescriptor("Browse Businesses", ActionId.EXPLORE_ALTERNATIVE, STYLE_SECONDARY)


def _seller_primary(pathname: str) -> CTADescriptor:
    is_valuation_page = "/valuation" in pathname
    is_seller_landing = "/for-sellers" in pathname
    text = "Get Free Valuation" if is_valuation_page else "List Your Business"
    action = (
        ActionId.BUSINESS_VALUATION if is_valuation_page or is_seller_landing else ActionId.BUSINESS_LISTING
    )
    return CTADescriptor(text, action, STYLE_PRIMARY_SELLER)


def generate_cta(intent: Intent, pathname: str) -> CTAPair:
    """Return the primary/secondary CTA pair for *intent* on *pathname*."""
    if intent == Intent.SELLER:
        return CTAPair(primary=_seller_primary(pathname or ""), secondary=_SELLER_SECONDARY)
    return _FIXED_PAIRS.get(intent, _FIXED_PAIRS[Intent.NEUTRAL])
