"""Personal and collective transit listings from two daily snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from starbond.schemas.chart import AspectDefinition, Position
from starbond.schemas.transits import CollectiveTransit, DailyTransits, TransitTag

from aspectarian.aspects import angular_distance, orb_change_rate
from aspectarian.bodies import PLANET_WEIGHTS, TRANSIT_ASPECTS
from aspectarian.durations import (
    COLLECTIVE_ORB_WINDOW,
    DURATION_CAP_DAYS,
    STATIONARY_EPSILON,
    collective_duration,
    estimate_duration,
)
from aspectarian.positions import PositionInput, coerce_positions, longitude_map

logger = logging.getLogger(__name__)

PRIMARY_ORB = 3.0
PERSONAL_TRANSIT_LIMIT = 5

ASPECT_VIBES: dict[str, dict[str, str]] = {
    "conjunction": {
        "default": "Energies merge and amplify.",
        "Pluto-Saturn": "Pressure to restructure at the deepest level.",
        "Jupiter-Uranus": "Sudden expansion and unexpected breakthroughs.",
    },
    "opposition": {"default": "Tension between polarities seeking integration."},
    "square": {"default": "Friction drives growth through challenge."},
    "trine": {"default": "Harmonious flow and natural ease."},
    "sextile": {"default": "Opportunity awaits those who reach for it."},
}
QUIET_DAY = DailyTransits(
    dominant_transit="Moon in Flow",
    transit_key="moon_flow",
    description="A quiet day cosmically. Good for reflection.",
)


def _transit_key(planet: str, abbr: str, target: str) -> str:
    return f"{planet.lower()}_{abbr}_{'_'.join(target.lower().split())}"


def _vibe(aspect_name: str, planet_a: str, planet_b: str) -> str:
    vibes = ASPECT_VIBES.get(aspect_name, {})
    key = "-".join(sorted([planet_a, planet_b]))
    return vibes.get(key) or vibes.get("default") or "Cosmic energies in dialogue."


def _next_longitude(position: Position, next_longs: dict[str, float]) -> float | None:
    # A missing snapshot falls back to one day of the point's own speed
    next_lon = next_longs.get(position.name)
    if next_lon is None and position.speed_deg_day is not None:
        next_lon = (position.longitude + position.speed_deg_day) % 360.0
    return next_lon


def find_personal_transits(
    today: Iterable[PositionInput],
    next_day: Iterable[PositionInput],
    natal: Iterable[PositionInput],
    *,
    catalog: tuple[AspectDefinition, ...] = TRANSIT_ASPECTS,
    limit: int = PERSONAL_TRANSIT_LIMIT,
    epsilon: float = STATIONARY_EPSILON,
    cap: float = DURATION_CAP_DAYS,
) -> list[TransitTag]:
    """Aspects from today's sky to natal points, applying ones first.

    The orb change between the two snapshots gives each tag its rate, and
    the aspect's own orb is the window for the duration estimate.
    """
    next_longs = longitude_map(next_day)
    natal_points = coerce_positions(natal)
    tags: list[TransitTag] = []

    for transit in coerce_positions(today):
        next_lon = _next_longitude(transit, next_longs)
        if next_lon is None:
            continue
        for point in natal_points:
            dist = angular_distance(transit.longitude, point.longitude)
            for aspect in catalog:
                orb = abs(dist - aspect.angle)
                if orb > aspect.orb:
                    continue
                rate = orb_change_rate(transit.longitude, next_lon, point.longitude, aspect.angle)
                tags.append(
                    TransitTag(
                        transit_key=_transit_key(transit.name, aspect.abbr, point.name),
                        transiting_planet=transit.name,
                        aspect=aspect.name,
                        natal_point=point.name,
                        display_name=f"{transit.name} {aspect.name} {point.name}",
                        orb=round(orb, 2),
                        is_primary=orb <= PRIMARY_ORB,
                        is_applying=rate < 0,
                        duration_days=estimate_duration(orb, rate, aspect.orb, epsilon=epsilon, cap=cap),
                    )
                )

    tags.sort(key=lambda t: (not t.is_applying, t.orb))
    return tags[:limit]


def find_collective_transits(
    today: Iterable[PositionInput],
    next_day: Iterable[PositionInput],
    *,
    catalog: tuple[AspectDefinition, ...] = TRANSIT_ASPECTS,
    window: float = COLLECTIVE_ORB_WINDOW,
    epsilon: float = STATIONARY_EPSILON,
    cap: float = DURATION_CAP_DAYS,
) -> DailyTransits:
    """Tight aspects between transiting bodies, with the weightiest one leading.

    Slow outer planets outweigh fast inner ones; equal weights fall back to
    the tighter orb.
    """
    bodies = coerce_positions(today)
    next_longs = longitude_map(next_day)
    found: list[CollectiveTransit] = []

    for i, body_a in enumerate(bodies):
        next_a = _next_longitude(body_a, next_longs)
        if next_a is None:
            continue
        for body_b in bodies[i + 1:]:
            next_b = _next_longitude(body_b, next_longs)
            # Partners without motion data hold still
            if next_b is None:
                next_b = body_b.longitude
            dist = angular_distance(body_a.longitude, body_b.longitude)
            for aspect in catalog:
                orb = abs(dist - aspect.angle)
                if orb > window:
                    continue
                next_orb = abs(angular_distance(next_a, next_b) - aspect.angle)
                rate = next_orb - orb
                found.append(
                    CollectiveTransit(
                        transit_key=_transit_key(body_a.name, aspect.abbr, body_b.name),
                        display_name=f"{body_a.name} {aspect.name} {body_b.name}",
                        transiting_planet=body_a.name,
                        aspect=aspect.name,
                        target_planet=body_b.name,
                        orb=round(orb, 2),
                        is_applying=rate < 0,
                        orb_change_rate=round(rate, 4),
                        vibe=_vibe(aspect.name, body_a.name, body_b.name),
                        duration_days=collective_duration(orb, rate, window, epsilon=epsilon, cap=cap),
                    )
                )

    if not found:
        logger.debug("No collective transits within %.2f degrees", window)
        return QUIET_DAY.model_copy(deep=True)

    dominant = min(
        found,
        key=lambda t: (
            -PLANET_WEIGHTS.get(t.transiting_planet, 1) * PLANET_WEIGHTS.get(t.target_planet, 1),
            t.orb,
        ),
    )
    return DailyTransits(
        dominant_transit=dominant.display_name,
        transit_key=dominant.transit_key,
        description=dominant.vibe,
        transits=found,
    )
