"""Position intake: validation, indexing, and the upstream chart adapter."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from starbond.schemas.chart import Position

logger = logging.getLogger(__name__)

PositionInput = Position | Mapping[str, Any]


def coerce_positions(items: Iterable[PositionInput]) -> list[Position]:
    """Validate caller input into Position records.

    Raises ValueError (pydantic.ValidationError included) for non-finite
    longitudes, out-of-range houses, empty or duplicate names.
    """
    positions: list[Position] = []
    seen: set[str] = set()
    for item in items:
        position = item if isinstance(item, Position) else Position.model_validate(item)
        if position.name in seen:
            raise ValueError(f"duplicate position name '{position.name}' in one set")
        seen.add(position.name)
        positions.append(position)
    return positions


def longitude_map(items: Iterable[PositionInput] | Mapping[str, float]) -> dict[str, float]:
    """Index a position set by name -> normalized longitude."""
    if isinstance(items, Mapping):
        return {
            p.name: p.longitude
            for p in coerce_positions({"name": k, "longitude": v} for k, v in items.items())
        }
    return {p.name: p.longitude for p in coerce_positions(items)}


def _display_name(slug: str) -> str:
    return " ".join(part[:1].upper() + part[1:] for part in slug.strip().split("_") if part)


def positions_from_chart(chart: Mapping[str, Any]) -> list[Position]:
    """Adapt a computed chart payload into Position records.

    ``positions`` may be a list of ``{"body": "sun", "longitude": ...}``
    entries or a mapping keyed by body, as the daily ephemeris emits it.
    Body slugs are title-cased ("north_node" -> "North Node") so they line
    up with the names the scoring tables use; an explicit ``name`` wins and
    passes through unchanged.
    """
    raw = chart.get("positions")
    if isinstance(raw, Mapping):
        raw = [
            {"body": body, **entry} if isinstance(entry, Mapping) else entry
            for body, entry in raw.items()
        ]
    if not isinstance(raw, list):
        raise ValueError("chart payload has no 'positions' list")

    items: list[dict[str, Any]] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            logger.warning("Skipping non-mapping chart entry: %r", entry)
            continue
        item = dict(entry)
        body = item.pop("body", None)
        if not item.get("name") and body is not None:
            item["name"] = _display_name(str(body))
        items.append(item)
    return coerce_positions(items)
