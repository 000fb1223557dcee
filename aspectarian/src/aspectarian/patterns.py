"""Multi-body chart pattern detection.

Every supported pattern kind yields exactly one ChartPattern per run, in a
fixed order, so callers can render locked badges next to unlocked ones.
The sect badge is the exception: it is only emitted when a "Sun" with a
house is present.

The configuration searches are brute force over ascending index tuples and
stop at the first match. Position sets hold a dozen-odd points, so even the
grand cross search stays small.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from itertools import combinations

from pydantic import BaseModel, ConfigDict
from starbond.schemas.chart import AspectDefinition, ChartPattern, Position

from aspectarian.aspects import has_aspect
from aspectarian.bodies import ELEMENTS, OPPOSITION, QUINCUNX, SEXTILE, SQUARE, TRINE, element_of
from aspectarian.positions import PositionInput, coerce_positions

logger = logging.getLogger(__name__)

STELLIUM_MIN = 3
RETROGRADE_MIN = 3
ELEMENT_DOMINANCE_MIN = 4
NIGHT_HOUSES = range(1, 7)


class PatternOrbs(BaseModel):
    """Aspect definitions used by the configuration searches."""

    model_config = ConfigDict(frozen=True)

    trine: AspectDefinition = TRINE
    opposition: AspectDefinition = OPPOSITION
    square: AspectDefinition = SQUARE
    sextile: AspectDefinition = SEXTILE
    quincunx: AspectDefinition = QUINCUNX


PATTERN_ORBS = PatternOrbs()


def _names(points: Iterable[Position]) -> list[str]:
    return [p.name for p in points]


def _detect_stellium(points: list[Position]) -> ChartPattern:
    by_sign: dict[str, list[str]] = {}
    by_house: dict[int, list[str]] = {}
    for p in points:
        if p.sign:
            by_sign.setdefault(p.sign, []).append(p.name)
        if p.house is not None:
            by_house.setdefault(p.house, []).append(p.name)

    sign_group = next(((k, v) for k, v in by_sign.items() if len(v) >= STELLIUM_MIN), None)
    house_group = next(((k, v) for k, v in by_house.items() if len(v) >= STELLIUM_MIN), None)

    involved: list[str] = []
    detail = None
    if sign_group:
        involved = sign_group[1]
        detail = f"{', '.join(involved)} in {sign_group[0]}"
    elif house_group:
        involved = house_group[1]
        detail = f"{', '.join(involved)} in House {house_group[0]}"

    return ChartPattern(
        id="stellium",
        name="Stellium Holder",
        description="3+ planets concentrated in one sign or house",
        unlocked=bool(involved),
        involved_points=involved,
        detail=detail,
    )


def _detect_grand_trine(points: list[Position], orbs: PatternOrbs) -> ChartPattern:
    found: list[Position] = []
    for a, b, c in combinations(points, 3):
        if (
            has_aspect(a.longitude, b.longitude, orbs.trine)
            and has_aspect(b.longitude, c.longitude, orbs.trine)
            and has_aspect(a.longitude, c.longitude, orbs.trine)
        ):
            found = [a, b, c]
            break

    involved = _names(found)
    return ChartPattern(
        id="grand-trine",
        name="Grand Trine Finder",
        description="Three planets in a perfect triangle of harmony",
        unlocked=bool(found),
        involved_points=involved,
        detail=", ".join(involved) if found else None,
    )


def _find_apex(
    points: list[Position],
    i: int,
    j: int,
    definition: AspectDefinition,
) -> Position | None:
    """First point other than i and j holding ``definition`` to both."""
    for k, apex in enumerate(points):
        if k in (i, j):
            continue
        if has_aspect(points[i].longitude, apex.longitude, definition) and has_aspect(
            points[j].longitude, apex.longitude, definition
        ):
            return apex
    return None


def _detect_t_square(points: list[Position], orbs: PatternOrbs) -> ChartPattern:
    found: list[Position] = []
    for i, j in combinations(range(len(points)), 2):
        if not has_aspect(points[i].longitude, points[j].longitude, orbs.opposition):
            continue
        apex = _find_apex(points, i, j, orbs.square)
        if apex is not None:
            found = [apex, points[i], points[j]]
            break

    return ChartPattern(
        id="t-square",
        name="T-Square Titan",
        description="A dynamic tension pattern driving action",
        unlocked=bool(found),
        involved_points=_names(found),
        detail=f"{found[0].name} apex, {found[1].name} ☍ {found[2].name}" if found else None,
    )


def _detect_grand_cross(points: list[Position], orbs: PatternOrbs) -> ChartPattern:
    found: list[Position] = []
    pairs = list(combinations(range(len(points)), 2))
    for i, j in pairs:
        if not has_aspect(points[i].longitude, points[j].longitude, orbs.opposition):
            continue
        for k, l in pairs:
            if {k, l} & {i, j}:
                continue
            if (
                has_aspect(points[k].longitude, points[l].longitude, orbs.opposition)
                and has_aspect(points[i].longitude, points[k].longitude, orbs.square)
                and has_aspect(points[j].longitude, points[l].longitude, orbs.square)
            ):
                found = [points[i], points[j], points[k], points[l]]
                break
        if found:
            break

    involved = _names(found)
    return ChartPattern(
        id="grand-cross",
        name="Grand Cross Bearer",
        description="Four planets locked in a cross of dynamic tension",
        unlocked=bool(found),
        involved_points=involved,
        detail=", ".join(involved) if found else None,
    )


def _detect_yod(points: list[Position], orbs: PatternOrbs) -> ChartPattern:
    found: list[Position] = []
    for i, j in combinations(range(len(points)), 2):
        if not has_aspect(points[i].longitude, points[j].longitude, orbs.sextile):
            continue
        apex = _find_apex(points, i, j, orbs.quincunx)
        if apex is not None:
            found = [apex, points[i], points[j]]
            break

    return ChartPattern(
        id="yod",
        name="Finger of Fate",
        description="A rare Yod pattern pointing to a fated mission",
        unlocked=bool(found),
        involved_points=_names(found),
        detail=f"{found[0].name} apex, {found[1].name} ⚹ {found[2].name}" if found else None,
    )


def _detect_sect(points: list[Position]) -> ChartPattern | None:
    # House-number convention rather than true horizon geometry
    sun = next((p for p in points if p.name == "Sun"), None)
    if sun is None or sun.house is None:
        return None
    if sun.house in NIGHT_HOUSES:
        return ChartPattern(
            id="sect",
            name="Night Owl",
            description="Born with the Sun below the horizon (night chart)",
            unlocked=True,
            involved_points=["Sun"],
        )
    return ChartPattern(
        id="sect",
        name="Day Walker",
        description="Born with the Sun above the horizon (day chart)",
        unlocked=True,
        involved_points=["Sun"],
    )


def _detect_retrogrades(points: list[Position]) -> ChartPattern:
    retros = [p.name for p in points if p.retrograde]
    unlocked = len(retros) >= RETROGRADE_MIN
    return ChartPattern(
        id="retrograde-rebel",
        name="Retrograde Rebel",
        description="3+ retrograde planets, a deeply introspective soul",
        unlocked=unlocked,
        involved_points=retros if unlocked else [],
        detail=", ".join(retros) if unlocked else None,
    )


def _detect_elemental(points: list[Position]) -> ChartPattern:
    members: dict[str, list[str]] = {element: [] for element in ELEMENTS}
    for p in points:
        element = element_of(p.sign)
        if element:
            members[element].append(p.name)

    # max() keeps the first of equal counts, i.e. canonical element order
    dominant = max(ELEMENTS, key=lambda e: len(members[e]))
    count = len(members[dominant])
    if count < ELEMENT_DOMINANCE_MIN:
        return ChartPattern(
            id="elemental",
            name="Elemental Dominance",
            description="4+ planets in signs of a single element",
            unlocked=False,
        )
    return ChartPattern(
        id="elemental",
        name=f"{dominant} Dominant",
        description=f"4+ planets in {dominant} signs, a powerful elemental emphasis",
        unlocked=True,
        involved_points=members[dominant],
        detail=f"{count} planets in {dominant}",
    )


def detect_patterns(
    positions: Iterable[PositionInput],
    orbs: PatternOrbs = PATTERN_ORBS,
) -> list[ChartPattern]:
    """Detect stelliums, configurations, sect, retrogrades and elemental balance."""
    points = coerce_positions(positions)

    patterns = [
        _detect_stellium(points),
        _detect_grand_trine(points, orbs),
        _detect_t_square(points, orbs),
    ]
    sect = _detect_sect(points)
    if sect is not None:
        patterns.append(sect)
    patterns.extend(
        [
            _detect_retrogrades(points),
            _detect_grand_cross(points, orbs),
            _detect_elemental(points),
            _detect_yod(points, orbs),
        ]
    )

    unlocked = [p.id for p in patterns if p.unlocked]
    logger.debug("Detected %d unlocked pattern(s) over %d points: %s", len(unlocked), len(points), unlocked)
    return patterns
