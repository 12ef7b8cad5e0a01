# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for detect_user_context — the public entry point."""

from __future__ import annotations

import dataclasses

import pytest

from visitorintent import (
    ActionId,
    Confidence,
    ContextInfo,
    Intent,
    SignalInputs,
    detect_user_context,
    evaluate,
    read_signal_inputs,
)

# ---------------------------------------------------------------------------
# Documented behaviour
# ---------------------------------------------------------------------------


class TestDocumentedBehaviour:
    def test_default_is_neutral_low(self):
        info = detect_user_context("/", None, None)
        assert (info.intent, info.confidence) == (Intent.NEUTRAL, Confidence.LOW)
        assert info.primary_cta.action == ActionId.SIGNUP_NEUTRAL
        assert info.secondary_cta.action == ActionId.LOGIN

    def test_path_beats_utm(self):
        info = detect_user_context("/for-sellers", None, {"utm_campaign": "buyer-retargeting"})
        assert (info.intent, info.confidence) == (Intent.SELLER, Confidence.HIGH)

    def test_utm_fallback(self):
        info = detect_user_context("/", None, {"utm_campaign": "spring-seller-promo"})
        assert (info.intent, info.confidence) == (Intent.SELLER, Confidence.MEDIUM)

    def test_referrer_fallback(self):
        info = detect_user_context("/", "https://example.com/business-broker-directory")
        assert (info.intent, info.confidence) == (Intent.SELLER, Confidence.MEDIUM)

    def test_valuation_cta(self):
        info = detect_user_context("/valuation")
        assert info.primary_cta.text == "Get Free Valuation"
        assert info.primary_cta.action == ActionId.BUSINESS_VALUATION

    @pytest.mark.parametrize(
        "pathname,referrer",
        [
            ("/for-sellers", None),
            ("/valuation", "https://example.com/business-sale"),
            ("/", "https://example.com/company-sale"),
            ("", None),
        ],
    )
    def test_param_buyer_always_wins(self, pathname, referrer):
        info = detect_user_context(pathname, referrer, {"intent": "buyer", "utm_campaign": "sell"})
        assert (info.intent, info.confidence) == (Intent.BUYER, Confidence.HIGH)

    def test_page_context_is_pathname(self):
        assert detect_user_context("/listings/42").page_context == "/listings/42"


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------


class TestPurity:
    @pytest.mark.parametrize(
        "args",
        [
            ("/",),
            ("/valuation", "https://example.com/buy-business"),
            ("/about", None, "utm_campaign=buyers&intent=seller"),
        ],
    )
    def test_repeated_calls_are_equal(self, args):
        first = detect_user_context(*args)
        second = detect_user_context(*args)
        assert first == second
        assert first is not second

    def test_result_is_immutable(self):
        info = detect_user_context("/sell")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.intent = Intent.BUYER  # type: ignore[misc]

    def test_search_params_not_mutated(self):
        params = {"intent": ["seller"], "utm_campaign": ["x"]}
        detect_user_context("/", None, params)
        assert params == {"intent": ["seller"], "utm_campaign": ["x"]}


# ---------------------------------------------------------------------------
# Query parameter forms
# ---------------------------------------------------------------------------


class TestSearchParams:
    def test_query_string(self):
        assert detect_user_context("/", None, "intent=seller").intent == Intent.SELLER

    def test_query_string_with_leading_question_mark(self):
        assert detect_user_context("/", None, "?utm_campaign=buyer-week").intent == Intent.BUYER

    def test_multi_value_mapping_uses_first(self):
        info = detect_user_context("/", None, {"intent": ["seller", "buyer"]})
        assert info.intent == Intent.SELLER

    def test_repeated_key_in_query_string_uses_first(self):
        assert detect_user_context("/", None, "intent=buyer&intent=seller").intent == Intent.BUYER

    def test_explicit_neutral_overrides_path(self):
        info = detect_user_context("/for-sellers", None, "intent=neutral")
        assert (info.intent, info.confidence) == (Intent.NEUTRAL, Confidence.HIGH)
        assert info.primary_cta.action == ActionId.SIGNUP_NEUTRAL


# ---------------------------------------------------------------------------
# Fail open to neutral
# ---------------------------------------------------------------------------


class TestFailOpen:
    @pytest.mark.parametrize(
        "pathname,referrer,params",
        [
            ("", "", ""),
            ("%%%", "not a url", "%%%&&=="),
            ("/", None, {"intent": "BUYER"}),
            ("/", None, {"intent": 5, "utm_campaign": None}),
            ("/", None, {"intent": [], "utm_campaign": [3]}),
            ("/", None, {}),
        ],
    )
    def test_garbage_falls_through(self, pathname, referrer, params):
        info = detect_user_context(pathname, referrer, params)
        assert (info.intent, info.confidence) == (Intent.NEUTRAL, Confidence.LOW)


# ---------------------------------------------------------------------------
# Snapshot + consumer helpers
# ---------------------------------------------------------------------------


class TestSignalInputs:
    def test_read_signal_inputs(self):
        inputs = read_signal_inputs("/x", "", "intent=buyer&utm_campaign=Spring")
        assert inputs == SignalInputs(
            pathname="/x",
            referrer=None,
            explicit_intent_param=Intent.BUYER,
            utm_campaign="Spring",
        )

    def test_unknown_intent_dropped(self):
        assert read_signal_inputs("/", None, "intent=admin").explicit_intent_param is None

    def test_evaluate_matches_detect(self):
        inputs = SignalInputs(pathname="/discover", referrer="https://example.com/business-sale")
        assert evaluate(inputs) == detect_user_context("/discover", "https://example.com/business-sale")


class TestConsumerHelpers:
    def test_high_confidence_preselects_role(self):
        info = detect_user_context("/valuation")
        assert info.requires_confirmation is False
        assert info.recommended_role == Intent.SELLER
        assert info.role_order() == (Intent.SELLER, Intent.BUYER)

    def test_medium_confidence_asks(self):
        info = detect_user_context("/", None, "utm_campaign=seller")
        assert info.requires_confirmation is True
        assert info.recommended_role is None
        assert info.role_order() == (Intent.BUYER, Intent.SELLER)

    def test_high_confidence_neutral_has_no_recommendation(self):
        info = detect_user_context("/", None, "intent=neutral")
        assert info.requires_confirmation is False
        assert info.recommended_role is None

    def test_buyer_first_when_recommended(self):
        info = detect_user_context("/search")
        assert info.role_order() == (Intent.BUYER, Intent.SELLER)

    def test_context_info_is_a_value(self):
        info = detect_user_context("/")
        assert isinstance(info, ContextInfo)
        assert hash(info) == hash(detect_user_context("/"))
