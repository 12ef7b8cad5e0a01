# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Visitor intent: rule-based buyer/seller inference for marketplace visitors.

Fuses weak navigation signals into a single immutable result:
- intent: buyer, seller, or neutral (undetermined)
- confidence: high, medium, or low
- primary/secondary CTA descriptors for the UI to render

Usage:
    from visitorintent import detect_user_context

    info = detect_user_context("/valuation", search_params="utm_campaign=spring")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Intent(StrEnum):
    """Inferred visitor goal."""

    BUYER = "buyer"
    SELLER = "seller"
    NEUTRAL = "neutral"


class Confidence(StrEnum):
    """Grade of trust in an inferred intent. Ordinal, never combined."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK: dict[Confidence, int] = {
    Confidence.LOW: 0,
    Confidence.MEDIUM: 1,
    Confidence.HIGH: 2,
}


class ActionId(StrEnum):
    """Closed set of actions a CTA button can trigger."""

    SIGNUP_BUYER = "signup-buyer"
    SIGNUP_SELLER = "signup-seller"
    SIGNUP_NEUTRAL = "signup-neutral"
    BUSINESS_VALUATION = "business-valuation"
    BUSINESS_LISTING = "business-listing"
    LOGIN = "login"
    EXPLORE_ALTERNATIVE = "explore-alternative"


@dataclass(frozen=True, slots=True)
class CTADescriptor:
    """A single call-to-action button."""

    text: str
    action: ActionId
    style_token: str  # opaque to the classifier; resolved by the renderer


@dataclass(frozen=True, slots=True)
class SignalInputs:
    """Read-only snapshot of every signal available at evaluation time."""

    pathname: str
    referrer: str | None = None
    explicit_intent_param: Intent | None = None
    utm_campaign: str | None = None


@dataclass(frozen=True, slots=True)
class ContextInfo:
    """Classification result consumed by role selection, signup and CTA UI."""

    intent: Intent
    confidence: Confidence
    primary_cta: CTADescriptor
    secondary_cta: CTADescriptor
    page_context: str  # pathname the result was computed for

    @property
    def requires_confirmation(self) -> bool:
        """Only a high-confidence guess may skip the role confirmation prompt."""
        return self.confidence != Confidence.HIGH

    @property
    def recommended_role(self) -> Intent | None:
        """Role card to pre-select, or None when the user should choose freely."""
        if self.confidence == Confidence.HIGH and self.intent != Intent.NEUTRAL:
            return self.intent
        return None

    def role_order(self) -> tuple[Intent, Intent]:
        """Display order of the buyer/seller role cards (recommended first)."""
        if self.recommended_role == Intent.SELLER:
            return (Intent.SELLER, Intent.BUYER)
        return (Intent.BUYER, Intent.SELLER)


from .context import detect_user_context, evaluate, read_signal_inputs  # noqa: E402

__all__ = [
    "ActionId",
    "CTADescriptor",
    "Confidence",
    "ContextInfo",
    "Intent",
    "SignalInputs",
    "detect_user_context",
    "evaluate",
    "read_signal_inputs",
]
