# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Signal fusion: strict precedence across the four intent signals.

Signals can disagree (path says seller, campaign says buyer), so they are
never weighed against each other.  ``FUSION_RULES`` is a total order:

  1. explicit ``intent`` query parameter      → high
  2. path classification (non-neutral)        → high
  3. UTM campaign mentions sell/seller        → medium
  4. UTM campaign mentions buy/buyer          → medium
  5. referrer classification (non-neutral)    → medium
  6. fallback                                 → neutral, low
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from . import Confidence, Intent
from .rules import Rule, first_match

logger = logging.getLogger(__name__)

_VALID_INTENTS: frozenset[str] = frozenset(i.value for i in Intent)


@dataclass(frozen=True, slots=True)
class FusionSignals:
    """Per-source candidate intents plus the raw campaign text."""

    path_intent: Intent
    referrer_intent: Intent
    explicit_intent_param: str | None = None
    utm_campaign: str | None = None  # already lower-cased


@dataclass(frozen=True, slots=True)
class Verdict:
    """What a fusion rule yields: which intent to take, and how sure."""

    label: str
    confidence: Confidence
    pick: Callable[[FusionSignals], Intent]

    def __str__(self) -> str:
        return f"{self.label} ({self.confidence})"


@dataclass(frozen=True, slots=True)
class FusionResult:
    intent: Intent
    confidence: Confidence
    rule: str  # name of the rule that decided


def _utm_mentions(*terms: str) -> Callable[[FusionSignals], bool]:
    return lambda s: bool(s.utm_campaign) and any(t in s.utm_campaign for t in terms)


FUSION_RULES: tuple[Rule[FusionSignals, Verdict], ...] = (
    Rule(
        "explicit_param",
        lambda s: s.explicit_intent_param in _VALID_INTENTS,
        Verdict("intent param", Confidence.HIGH, lambda s: Intent(s.explicit_intent_param)),
    ),
    Rule(
        "path",
        lambda s: s.path_intent != Intent.NEUTRAL,
        Verdict("path intent", Confidence.HIGH, lambda s: s.path_intent),
    ),
    Rule(
        "utm_seller",
        _utm_mentions("seller", "sell"),
        Verdict("seller", Confidence.MEDIUM, lambda s: Intent.SELLER),
    ),
    Rule(
        "utm_buyer",
        _utm_mentions("buyer", "buy"),
        Verdict("buyer", Confidence.MEDIUM, lambda s: Intent.BUYER),
    ),
    Rule(
        "referrer",
        lambda s: s.referrer_intent != Intent.NEUTRAL,
        Verdict("referrer intent", Confidence.MEDIUM, lambda s: s.referrer_intent),
    ),
    Rule(
        "fallback",
        lambda s: True,
        Verdict("neutral", Confidence.LOW, lambda s: Intent.NEUTRAL),
    ),
)


def resolve(
    path_intent: Intent,
    referrer_intent: Intent,
    explicit_intent_param: str | None = None,
    utm_campaign: str | None = None,
) -> FusionResult:
    """Fuse the candidate intents into a final intent and confidence grade.

    Args:
        path_intent: result of ``classify_path``
        referrer_intent: result of ``classify_referrer``
        explicit_intent_param: raw ``intent`` query value; ignored unless it
            names a known intent (exact, case-sensitive)
        utm_campaign: raw ``utm_campaign`` query value (matched lower-cased)

    Returns:
        FusionResult naming the rule that decided.
    """
    signals = FusionSignals(
        path_intent=path_intent,
        referrer_intent=referrer_intent,
        explicit_intent_param=explicit_intent_param,
        utm_campaign=utm_campaign.lower() if utm_campaign else None,
    )
    rule = first_match(FUSION_RULES, signals)
    if rule is None:
        return FusionResult(Intent.NEUTRAL, Confidence.LOW, "fallback")

    verdict = rule.result
    result = FusionResult(verdict.pick(signals), verdict.confidence, rule.name)
    logger.debug("Fusion rule %s fired: intent=%s confidence=%s", rule.name, result.intent, result.confidence)
    return result
