"""Aspect detection and orb calculations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from starbond.schemas.chart import Aspect, AspectDefinition

from aspectarian.bodies import MAJOR_ASPECTS
from aspectarian.positions import PositionInput, coerce_positions

logger = logging.getLogger(__name__)


def angular_distance(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(lon1 - lon2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def classify_aspect(
    distance: float,
    catalog: tuple[AspectDefinition, ...] = MAJOR_ASPECTS,
) -> AspectDefinition | None:
    """Return the first catalog entry whose tolerance covers ``distance``.

    Catalog order is the tie-break when wide orbs overlap.
    """
    for definition in catalog:
        if abs(distance - definition.angle) <= definition.orb:
            return definition
    return None


def has_aspect(lon1: float, lon2: float, definition: AspectDefinition) -> bool:
    return abs(angular_distance(lon1, lon2) - definition.angle) <= definition.orb


def orb_to(lon1: float, lon2: float, angle: float) -> float:
    """Degrees away from exact for a given aspect angle."""
    return abs(angular_distance(lon1, lon2) - angle)


def orb_change_rate(
    lon_now: float,
    lon_next: float,
    target_lon: float,
    angle: float,
    days: float = 1.0,
) -> float:
    """Signed orb change in degrees/day between two snapshots of a moving point.

    Negative means the orb is shrinking (applying), positive separating.
    """
    if days <= 0:
        raise ValueError("days between snapshots must be positive")
    return (orb_to(lon_next, target_lon, angle) - orb_to(lon_now, target_lon, angle)) / days


def is_applying(lon_now: float, lon_next: float, target_lon: float, angle: float) -> bool:
    """Determine if an aspect is applying (getting tighter) or separating."""
    return orb_to(lon_next, target_lon, angle) < orb_to(lon_now, target_lon, angle)


def find_aspects(
    positions: Iterable[PositionInput],
    catalog: tuple[AspectDefinition, ...] = MAJOR_ASPECTS,
) -> list[Aspect]:
    """Find the aspect (if any) for every pair within one position set.

    Each pair is compared once and never against itself. Sorted tightest first.
    """
    points = coerce_positions(positions)
    aspects_found: list[Aspect] = []

    for i, first in enumerate(points):
        for second in points[i + 1:]:
            dist = angular_distance(first.longitude, second.longitude)
            definition = classify_aspect(dist, catalog)
            if definition is None:
                continue
            aspects_found.append(
                Aspect(
                    point_a=first.name,
                    point_b=second.name,
                    type=definition.name,
                    distance=dist,
                    orb=abs(dist - definition.angle),
                )
            )

    aspects_found.sort(key=lambda a: a.orb)
    return aspects_found


def find_cross_aspects(
    natal: Iterable[PositionInput],
    partner: Iterable[PositionInput],
    catalog: tuple[AspectDefinition, ...] = MAJOR_ASPECTS,
) -> list[Aspect]:
    """Find aspects from every point of one set to every point of another."""
    natal_points = coerce_positions(natal)
    partner_points = coerce_positions(partner)
    aspects_found: list[Aspect] = []

    for first in natal_points:
        for second in partner_points:
            dist = angular_distance(first.longitude, second.longitude)
            definition = classify_aspect(dist, catalog)
            if definition is None:
                continue
            aspects_found.append(
                Aspect(
                    point_a=first.name,
                    point_b=second.name,
                    type=definition.name,
                    distance=dist,
                    orb=abs(dist - definition.angle),
                )
            )

    aspects_found.sort(key=lambda a: a.orb)
    return aspects_found
