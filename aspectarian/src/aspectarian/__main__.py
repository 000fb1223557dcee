"""Command line entry point: python -m aspectarian."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from starbond.config import Settings, get_settings
from starbond.schemas.chart import Position

from aspectarian.aspects import find_aspects
from aspectarian.compatibility import calculate_compatibility
from aspectarian.durations import estimate_duration
from aspectarian.matching import find_best_match
from aspectarian.patterns import detect_patterns
from aspectarian.positions import coerce_positions, positions_from_chart
from aspectarian.transits import find_collective_transits, find_personal_transits

logger = logging.getLogger("aspectarian")


def _load_positions(path: str) -> list[Position]:
    """Read a JSON list of positions or a chart payload with a positions list."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return positions_from_chart(data)
    if isinstance(data, list):
        return coerce_positions(data)
    raise ValueError(f"{path}: expected a list of positions or a chart object")


def _dump(payload: Any) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aspectarian", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    patterns = sub.add_parser("patterns", help="detect chart patterns")
    patterns.add_argument("chart")

    aspects = sub.add_parser("aspects", help="list aspects within one chart")
    aspects.add_argument("chart")

    compat = sub.add_parser("compat", help="score compatibility of two charts")
    compat.add_argument("chart")
    compat.add_argument("partner")

    match = sub.add_parser("match", help="find the best candidate match")
    match.add_argument("chart")

    transits = sub.add_parser("transits", help="list collective or personal transits")
    transits.add_argument("today")
    transits.add_argument("next_day")
    transits.add_argument("--natal", help="natal chart for personal transits")

    duration = sub.add_parser("duration", help="estimate remaining days for a relationship")
    duration.add_argument("--orb", type=float, required=True)
    duration.add_argument("--rate", type=float, required=True, help="signed degrees/day, negative = applying")
    window = duration.add_mutually_exclusive_group(required=True)
    window.add_argument("--window", type=float)
    window.add_argument("--collective", action="store_true")
    return parser


def run(args: argparse.Namespace, settings: Settings) -> Any:
    if args.command == "patterns":
        return [p.model_dump() for p in detect_patterns(_load_positions(args.chart))]
    if args.command == "aspects":
        return [a.model_dump() for a in find_aspects(_load_positions(args.chart))]
    if args.command == "compat":
        result = calculate_compatibility(
            _load_positions(args.chart),
            _load_positions(args.partner),
            neutral_score=settings.neutral_category_score,
        )
        return result.model_dump()
    if args.command == "match":
        best = find_best_match(
            _load_positions(args.chart),
            normalization=settings.match_normalization,
        )
        return best.model_dump() if best else None
    if args.command == "transits":
        today = _load_positions(args.today)
        next_day = _load_positions(args.next_day)
        if args.natal:
            tags = find_personal_transits(
                today,
                next_day,
                _load_positions(args.natal),
                limit=settings.personal_transit_limit,
                epsilon=settings.stationary_epsilon,
                cap=settings.duration_cap_days,
            )
            return [t.model_dump() for t in tags]
        daily = find_collective_transits(
            today,
            next_day,
            window=settings.collective_orb_window,
            epsilon=settings.stationary_epsilon,
            cap=settings.duration_cap_days,
        )
        return daily.model_dump()
    if args.command == "duration":
        window = settings.collective_orb_window if args.collective else args.window
        days = estimate_duration(
            args.orb,
            args.rate,
            window,
            epsilon=settings.stationary_epsilon,
            cap=settings.duration_cap_days,
        )
        return {"duration_days": days}
    raise ValueError(f"unknown command '{args.command}'")


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = _build_parser().parse_args(argv)

    try:
        payload = run(args, settings)
    except (OSError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1

    _dump(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
