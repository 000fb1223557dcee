"""Synastry compatibility scoring between two position sets.

Each category compares a group of points from one chart against a group
from the other. Every evaluable pair adds the best per-pair weight to the
denominator; classified pairs add their tightness-scaled weight to the
numerator. Categories never normalize against each other.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict
from starbond.schemas.chart import AspectDefinition
from starbond.schemas.synastry import CompatibilityCategory, CompatibilityResult

from aspectarian.aspects import angular_distance, classify_aspect
from aspectarian.bodies import MAJOR_ASPECTS
from aspectarian.positions import PositionInput, longitude_map

logger = logging.getLogger(__name__)

# Harmonious contacts weigh more; squares are friction, oppositions attraction
SYNASTRY_WEIGHTS: dict[str, float] = {
    "Conjunction": 8.0,
    "Trine": 7.0,
    "Sextile": 5.0,
    "Opposition": 3.0,
    "Square": 2.0,
}
MAX_PAIR_WEIGHT = 8.0
# "Insufficient data" score for a category with no evaluable pairs
NEUTRAL_CATEGORY_SCORE = 50


class CategoryDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    description: str
    natal_points: tuple[str, ...]
    partner_points: tuple[str, ...]


def _category(label: str, description: str, points: tuple[str, ...]) -> CategoryDefinition:
    return CategoryDefinition(
        label=label, description=description, natal_points=points, partner_points=points
    )


CATEGORIES: tuple[CategoryDefinition, ...] = (
    _category(
        "Communication",
        "How you talk, think, and connect intellectually",
        ("Mercury", "Sun", "Moon"),
    ),
    _category(
        "Romance",
        "Attraction, love language, and emotional chemistry",
        ("Venus", "Mars", "Moon"),
    ),
    _category(
        "Long-term Stability",
        "Staying power, commitment, and shared growth",
        ("Saturn", "Jupiter", "Sun"),
    ),
    _category(
        "Passion & Drive",
        "Physical chemistry, ambition, and shared energy",
        ("Mars", "Venus", "Pluto"),
    ),
    _category(
        "Emotional Bond",
        "Intuition, empathy, and emotional safety",
        ("Moon", "Neptune", "Venus"),
    ),
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def aspect_weight(
    distance: float,
    catalog: tuple[AspectDefinition, ...] = MAJOR_ASPECTS,
    weights: Mapping[str, float] = SYNASTRY_WEIGHTS,
) -> tuple[str, float] | None:
    """Classify a distance and weight it by how tight the orb is.

    A 0-orb contact scores its full base weight; one at the edge of its
    tolerance scores half.
    """
    definition = classify_aspect(distance, catalog)
    if definition is None:
        return None
    orb = abs(distance - definition.angle)
    tightness = 1.0 - orb / definition.orb if definition.orb > 0 else 1.0
    base = weights.get(definition.name, 1.0)
    return definition.name, base * (0.5 + 0.5 * tightness)


def score_category(
    natal: Mapping[str, float],
    partner: Mapping[str, float],
    category: CategoryDefinition,
    *,
    catalog: tuple[AspectDefinition, ...] = MAJOR_ASPECTS,
    weights: Mapping[str, float] = SYNASTRY_WEIGHTS,
    neutral_score: int = NEUTRAL_CATEGORY_SCORE,
) -> CompatibilityCategory:
    """Score one category from name -> longitude maps of both charts."""
    contributing: list[str] = []
    total = 0.0
    max_possible = 0.0

    for natal_name in category.natal_points:
        natal_lon = natal.get(natal_name)
        if natal_lon is None:
            continue
        for partner_name in category.partner_points:
            partner_lon = partner.get(partner_name)
            if partner_lon is None:
                continue
            max_possible += MAX_PAIR_WEIGHT
            result = aspect_weight(angular_distance(natal_lon, partner_lon), catalog, weights)
            if result is None:
                continue
            aspect_name, weight = result
            total += weight
            contributing.append(f"{natal_name} {aspect_name} {partner_name}")

    if max_possible == 0:
        logger.debug("No evaluable pairs for %s, using neutral score", category.label)
        score = neutral_score
    else:
        score = min(100, round_half_up(100.0 * total / max_possible))

    return CompatibilityCategory(
        label=category.label,
        description=category.description,
        score=score,
        contributing_aspects=contributing,
    )


def calculate_compatibility(
    natal: Iterable[PositionInput] | Mapping[str, float],
    partner: Iterable[PositionInput] | Mapping[str, float],
    *,
    categories: tuple[CategoryDefinition, ...] = CATEGORIES,
    catalog: tuple[AspectDefinition, ...] = MAJOR_ASPECTS,
    weights: Mapping[str, float] = SYNASTRY_WEIGHTS,
    neutral_score: int = NEUTRAL_CATEGORY_SCORE,
) -> CompatibilityResult:
    """Score every category and average them into an overall score."""
    if not categories:
        raise ValueError("at least one compatibility category is required")

    natal_longs = longitude_map(natal)
    partner_longs = longitude_map(partner)

    scored = [
        score_category(
            natal_longs,
            partner_longs,
            category,
            catalog=catalog,
            weights=weights,
            neutral_score=neutral_score,
        )
        for category in categories
    ]
    overall = round_half_up(sum(c.score for c in scored) / len(scored))
    return CompatibilityResult(overall=overall, categories=scored)
