# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""detect_user_context — single entry point for UI collaborators.

Pure function of its arguments: callers pass the pathname, referrer and query
parameters explicitly; nothing here reads the environment or the current
location.  Every call builds a fresh ``ContextInfo``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import parse_qs

from . import ContextInfo, Intent, SignalInputs
from .cta import generate_cta
from .path_classifier import classify_path
from .referrer_classifier import classify_referrer
from .signal_fusion import FusionResult, resolve

INTENT_PARAM = "intent"
UTM_CAMPAIGN_PARAM = "utm_campaign"

_INTENT_VALUES: frozenset[str] = frozenset(i.value for i in Intent)

QueryParams = str | Mapping[str, str] | Mapping[str, Sequence[str]]


def _first_value(search_params: QueryParams | None, key: str) -> str | None:
    """First value for *key*, mirroring ``URLSearchParams.get``."""
    if not search_params:
        return None
    if isinstance(search_params, str):
        parsed = parse_qs(search_params.lstrip("?"), keep_blank_values=True)
        values: object = parsed.get(key)
    else:
        values = search_params.get(key)
    if values is None:
        return None
    if isinstance(values, str):
        return values
    if isinstance(values, Sequence) and values:
        first = values[0]
        return first if isinstance(first, str) else None
    return None


def read_signal_inputs(
    pathname: str,
    referrer: str | None = None,
    search_params: QueryParams | None = None,
) -> SignalInputs:
    """Snapshot the caller-supplied signals.

    Unrecognised ``intent`` values are dropped here; they never reach fusion.
    """
    raw_intent = _first_value(search_params, INTENT_PARAM)
    explicit = Intent(raw_intent) if raw_intent in _INTENT_VALUES else None
    return SignalInputs(
        pathname=pathname or "",
        referrer=referrer or None,
        explicit_intent_param=explicit,
        utm_campaign=_first_value(search_params, UTM_CAMPAIGN_PARAM),
    )


def fuse(inputs: SignalInputs) -> FusionResult:
    """Run both classifiers and the precedence resolver on *inputs*."""
    return resolve(
        classify_path(inputs.pathname),
        classify_referrer(inputs.referrer),
        inputs.explicit_intent_param,
        inputs.utm_campaign,
    )


def evaluate(inputs: SignalInputs) -> ContextInfo:
    """Evaluate a prebuilt ``SignalInputs`` snapshot."""
    fused = fuse(inputs)
    ctas = generate_cta(fused.intent, inputs.pathname)
    return ContextInfo(
        intent=fused.intent,
        confidence=fused.confidence,
        primary_cta=ctas.primary,
        secondary_cta=ctas.secondary,
        page_context=inputs.pathname,
    )


def detect_user_context(
    pathname: str,
    referrer: str | None = None,
    search_params: QueryParams | None = None,
) -> ContextInfo:
    """Infer buyer/seller intent, its confidence, and the CTA pair to show.

    Args:
        pathname: current URL path (e.g. ``/for-sellers``)
        referrer: referring URL, if any
        search_params: query string, or a mapping of query keys to a value or
            list of values; ``intent`` and ``utm_campaign`` are recognised

    Returns:
        ContextInfo — never raises for any string input.
    """
    return evaluate(read_signal_inputs(pathname, referrer, search_params))
