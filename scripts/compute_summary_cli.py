#!/usr/bin/env python3
"""
CLI entrypoint for computing a value summary from a JSON snapshot.

Usage examples:
    python -m scripts.compute_summary_cli snapshot.json
    python -m scripts.compute_summary_cli snapshot.json --proposed-spend 60000 --obfuscate

Snapshot shape (camelCase or snake_case keys):
    {"items": [...], "assumptions": {...}, "useCases": [...], "zapRuns": [...]}

Flags:
    --current-spend N     Current annual automation spend (default 0)
    --proposed-spend N    Proposed annual automation spend (default 0)
    --obfuscate           Round headline dollar figures for sharing
    --log-level LEVEL     Logging level (INFO, DEBUG, etc.)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import Field, ValidationError

from value_engine.config import get_default_assumptions
from value_engine.schemas.assumptions import Assumptions
from value_engine.schemas.common import CamelModel
from value_engine.schemas.projection import CalculationSummary
from value_engine.schemas.realization import UseCase, ZapRunCacheEntry
from value_engine.schemas.value_item import ValueItem
from value_engine.services.realization_service import compute_realization_summary
from value_engine.services.summary_service import calculate_summary
from value_engine.utils.formatting import obfuscate_value


class Snapshot(CamelModel):
    items: List[ValueItem] = Field(default_factory=list)
    assumptions: Optional[Assumptions] = None
    use_cases: List[UseCase] = Field(default_factory=list)
    zap_runs: List[ZapRunCacheEntry] = Field(default_factory=list)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute value summary and realization from a snapshot.")
    parser.add_argument("snapshot", type=str, help="Path to the JSON snapshot file.")
    parser.add_argument(
        "--current-spend",
        type=float,
        default=0.0,
        help="Current annual automation spend.",
    )
    parser.add_argument(
        "--proposed-spend",
        type=float,
        default=0.0,
        help="Proposed annual automation spend.",
    )
    parser.add_argument(
        "--obfuscate",
        action="store_true",
        help="Round headline dollar figures to magnitude-dependent steps.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (e.g. INFO, DEBUG).",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


def load_snapshot(path: str) -> Snapshot:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError("Snapshot must be a JSON object with an 'items' list.")
    return Snapshot.model_validate(raw)


def obfuscate_summary(summary: CalculationSummary) -> CalculationSummary:
    out = summary.model_copy(deep=True)
    out.total_annual_value = obfuscate_value(out.total_annual_value)
    for row in out.dimension_totals:
        row.total = obfuscate_value(row.total)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger = logging.getLogger(__name__)
    logger.info("summary.cli.start")

    try:
        snapshot = load_snapshot(args.snapshot)
        assumptions = snapshot.assumptions or get_default_assumptions()
        summary = calculate_summary(
            snapshot.items,
            assumptions,
            current_spend=args.current_spend,
            proposed_spend=args.proposed_spend,
        )
        if args.obfuscate:
            summary = obfuscate_summary(summary)
        realization = compute_realization_summary(snapshot.use_cases, snapshot.items, snapshot.zap_runs)

        print(
            json.dumps(
                {
                    "summary": summary.model_dump(mode="json", by_alias=True),
                    "realization": realization.model_dump(mode="json", by_alias=True),
                },
                indent=2,
            )
        )
        logger.info("summary.cli.done", extra={"items": len(snapshot.items)})
        return 0
    except KeyboardInterrupt:
        logger.warning("summary.cli.interrupted")
        return 130
    except (OSError, ValueError, ValidationError) as e:
        logger.error("summary.cli.bad_input", extra={"path": args.snapshot, "error": str(e)})
        return 1
    except Exception:
        logger.exception("summary.cli.error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
