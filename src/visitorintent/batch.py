# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""JSON Lines batch input.

One object per line::

    {"pathname": "/valuation", "referrer": "https://x.com/business-broker", "query": "utm_campaign=spring"}

``pathname`` is required; ``referrer`` and ``query`` are optional.  ``query``
may be a query string or an object of key → value.  Blank lines and lines
starting with ``#`` are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from . import SignalInputs
from .context import read_signal_inputs
from .errors import BatchInputError

logger = logging.getLogger(__name__)


def parse_record(line: str, line_no: int = 0) -> SignalInputs:
    try:
        record = json.loads(line)
    except json.JSONDecodeError as e:
        raise BatchInputError(f"invalid JSON ({e.msg})", line_no=line_no) from e
    if not isinstance(record, dict):
        raise BatchInputError("expected a JSON object", line_no=line_no)

    pathname = record.get("pathname")
    if not isinstance(pathname, str):
        raise BatchInputError("'pathname' must be a string", line_no=line_no)

    referrer = record.get("referrer")
    if referrer is not None and not isinstance(referrer, str):
        raise BatchInputError("'referrer' must be a string", line_no=line_no)

    query = record.get("query")
    if query is not None and not isinstance(query, str | dict):
        raise BatchInputError("'query' must be a string or an object", line_no=line_no)

    return read_signal_inputs(pathname, referrer, query)


def read_batch(lines: Iterable[str]) -> list[SignalInputs]:
    """Parse every record; the first malformed line raises BatchInputError."""
    inputs: list[SignalInputs] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        inputs.append(parse_record(line, line_no))
    logger.info("Read %d batch records", len(inputs))
    return inputs
