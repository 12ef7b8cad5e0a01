# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Visitor intent CLI: classify, batch, rules commands.

Usage:
    python -m visitorintent.cli classify PATHNAME [--referrer URL] [--query QS] [--explain]
    python -m visitorintent.cli batch FILE [--format json|table]
    python -m visitorintent.cli rules

Environment overrides:
    VISITORINTENT_LOG_LEVEL   root log level (DEBUG shows which fusion rule fired)
    VISITORINTENT_LOG_JSON    1/true/yes for JSON log lines on stderr
    VISITORINTENT_FORMAT      default batch output format (json|table)
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from tabulate import tabulate

from .batch import read_batch
from .context import evaluate, fuse, read_signal_inputs
from .errors import VisitorIntentError
from .logging_config import configure as configure_logging
from .path_classifier import PATH_RULES
from .referrer_classifier import REFERRER_RULES
from .rules import describe
from .serializer import TABLE_HEADERS, to_dict, to_json, to_table_row
from .signal_fusion import FUSION_RULES

_TRUTHY = ("1", "true", "yes")


def cmd_classify(args: argparse.Namespace) -> None:
    inputs = read_signal_inputs(args.pathname, args.referrer, args.query)
    info = evaluate(inputs)
    rule = fuse(inputs).rule if args.explain else None
    print(to_json(info, rule=rule))


def cmd_batch(args: argparse.Namespace) -> None:
    if args.file == "-":
        inputs = read_batch(sys.stdin)
    else:
        path = Path(args.file)
        if not path.is_file():
            raise VisitorIntentError(f"Batch file not found: {path}")
        with path.open(encoding="utf-8") as f:
            inputs = read_batch(f)

    results = [evaluate(i) for i in inputs]
    if args.format == "table":
        print(tabulate([to_table_row(r) for r in results], headers=TABLE_HEADERS, tablefmt="simple"))
    else:
        print(json.dumps([to_dict(r) for r in results], ensure_ascii=False, indent=2))


def cmd_rules(args: argparse.Namespace) -> None:
    for title, rules in (("Path", PATH_RULES), ("Referrer", REFERRER_RULES), ("Fusion", FUSION_RULES)):
        print(f"{title} rules (first match wins)")
        print(tabulate(describe(rules), headers=("#", "Rule", "Result"), tablefmt="simple"))
        print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Visitor intent CLI",
        prog="python -m visitorintent.cli",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--log-json", action="store_true", help="Emit JSON log lines on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_classify = subparsers.add_parser(
        "classify",
        help="Classify a single visit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  %(prog)s /for-sellers
  %(prog)s / --query 'utm_campaign=spring-seller-promo'
  %(prog)s / --referrer https://example.com/business-broker-directory --explain""",
    )
    p_classify.add_argument("pathname", help="URL path, e.g. /valuation")
    p_classify.add_argument("--referrer", type=str, metavar="URL", help="Referring URL")
    p_classify.add_argument("--query", type=str, metavar="QS", help="Query string (intent=..., utm_campaign=...)")
    p_classify.add_argument("--explain", action="store_true", help="Include the fusion rule that decided")

    p_batch = subparsers.add_parser("batch", help="Classify JSON Lines records from FILE ('-' for stdin)")
    p_batch.add_argument("file", metavar="FILE")
    p_batch.add_argument("--format", type=str, choices=["json", "table"], default=None, help="Output format")

    subparsers.add_parser("rules", help="Print the ordered rule tables")

    args = parser.parse_args(argv)

    # Env var overrides
    args.log_level = "DEBUG" if args.verbose else "WARNING"
    env_level = os.environ.get("VISITORINTENT_LOG_LEVEL", "").strip().upper()
    if env_level and not args.verbose:
        args.log_level = env_level

    env_json = os.environ.get("VISITORINTENT_LOG_JSON", "").strip().lower()
    args.log_json = args.log_json or env_json in _TRUTHY

    if args.command == "batch" and args.format is None:
        env_format = os.environ.get("VISITORINTENT_FORMAT", "").strip().lower()
        args.format = env_format if env_format in ("json", "table") else "json"

    return args


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = _parse_args(argv)
    configure_logging(json_output=args.log_json, level=args.log_level)

    commands = {"classify": cmd_classify, "batch": cmd_batch, "rules": cmd_rules}
    try:
        commands[args.command](args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except VisitorIntentError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
