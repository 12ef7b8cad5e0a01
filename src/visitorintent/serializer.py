# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""ContextInfo serialization for JSON consumers and table output."""

from __future__ import annotations

import json
from typing import Any

from . import CTADescriptor, ContextInfo

TABLE_HEADERS: tuple[str, ...] = ("Path", "Intent", "Confidence", "Primary CTA", "Action", "Confirm?")


def _cta_dict(cta: CTADescriptor) -> dict[str, str]:
    return {"text": cta.text, "action": str(cta.action), "style_token": cta.style_token}


def to_dict(info: ContextInfo, *, rule: str | None = None) -> dict[str, Any]:
    """Serialize ContextInfo to plain JSON-compatible types.

    Args:
        info: result to serialize
        rule: fusion rule name to include (``--explain``)
    """
    return {
        "intent": str(info.intent),
        "confidence": str(info.confidence),
        "primary_cta": _cta_dict(info.primary_cta),
        "secondary_cta": _cta_dict(info.secondary_cta),
        "page_context": info.page_context,
        "requires_confirmation": info.requires_confirmation,
        **({"rule": rule} if rule else {}),
    }


def to_json(info: ContextInfo, indent: int = 2, *, rule: str | None = None) -> str:
    return json.dumps(to_dict(info, rule=rule), ensure_ascii=False, indent=indent)


def to_table_row(info: ContextInfo) -> list[str]:
    """One row matching ``TABLE_HEADERS``."""
    return [
        info.page_context or "/",
        str(info.intent),
        str(info.confidence),
        info.primary_cta.text,
        str(info.primary_cta.action),
        "yes" if info.requires_confirmation else "no",
    ]
