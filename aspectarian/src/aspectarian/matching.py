"""Best-fit matching of one chart against a fixed candidate pool."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from starbond.schemas.synastry import Candidate, CandidateMatch

from aspectarian.aspects import angular_distance
from aspectarian.catalog import CANDIDATES
from aspectarian.compatibility import SYNASTRY_WEIGHTS, aspect_weight, round_half_up
from aspectarian.positions import PositionInput, longitude_map

logger = logging.getLogger(__name__)

# (requester point, candidate point), checked in both directions
ATTRACTION_PAIRS: tuple[tuple[str, str], ...] = (
    ("Venus", "Venus"),
    ("Venus", "Mars"),
    ("Mars", "Venus"),
    ("Moon", "Venus"),
    ("Sun", "Venus"),
    ("Venus", "Moon"),
)

# Tuned ceiling for the summed pair weights; six pairs could reach 48 in
# theory but real charts rarely pass the high 20s.
MATCH_NORMALIZATION = 28.0
NO_CONTACT_DESCRIPTION = "Cosmic intrigue"


def _score_candidate(
    requester: Mapping[str, float],
    candidate: Candidate,
    pairs: tuple[tuple[str, str], ...],
    weights: Mapping[str, float],
) -> tuple[float, str]:
    total = 0.0
    top_weight = 0.0
    top_description = ""
    for own_name, their_name in pairs:
        own_lon = requester.get(own_name)
        their_lon = candidate.longitudes.get(their_name)
        if own_lon is None or their_lon is None:
            continue
        result = aspect_weight(angular_distance(own_lon, their_lon), weights=weights)
        if result is None:
            continue
        aspect_name, weight = result
        total += weight
        if weight > top_weight:
            top_weight = weight
            top_description = f"Your {own_name} {aspect_name} their {their_name}"
    return total, top_description


def _to_match(candidate: Candidate, total: float, description: str, normalization: float) -> CandidateMatch:
    return CandidateMatch(
        candidate_id=candidate.id,
        candidate_name=candidate.name,
        score=round_half_up(min(100.0, 100.0 * total / normalization)),
        top_aspect_description=description or NO_CONTACT_DESCRIPTION,
    )


def rank_candidates(
    positions: Iterable[PositionInput] | Mapping[str, float],
    candidates: Iterable[Candidate] = CANDIDATES,
    *,
    pairs: tuple[tuple[str, str], ...] = ATTRACTION_PAIRS,
    weights: Mapping[str, float] = SYNASTRY_WEIGHTS,
    normalization: float = MATCH_NORMALIZATION,
) -> list[CandidateMatch]:
    """Score every candidate, best first; ties keep catalog order."""
    if normalization <= 0:
        raise ValueError("normalization must be positive")
    requester = longitude_map(positions)

    scored: list[tuple[float, CandidateMatch]] = []
    for candidate in candidates:
        total, description = _score_candidate(requester, candidate, pairs, weights)
        scored.append((total, _to_match(candidate, total, description, normalization)))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [match for _, match in scored]


def find_best_match(
    positions: Iterable[PositionInput] | Mapping[str, float],
    candidates: Iterable[Candidate] = CANDIDATES,
    *,
    pairs: tuple[tuple[str, str], ...] = ATTRACTION_PAIRS,
    weights: Mapping[str, float] = SYNASTRY_WEIGHTS,
    normalization: float = MATCH_NORMALIZATION,
) -> CandidateMatch | None:
    """Return the candidate with the highest summed attraction weight.

    The first candidate seen wins ties. Returns None for an empty pool.
    """
    if normalization <= 0:
        raise ValueError("normalization must be positive")
    requester = longitude_map(positions)

    best: tuple[Candidate, float, str] | None = None
    for candidate in candidates:
        total, description = _score_candidate(requester, candidate, pairs, weights)
        if best is None or total > best[1]:
            best = (candidate, total, description)

    if best is None:
        return None

    candidate, total, description = best
    logger.debug("Best match %s with summed weight %.2f", candidate.id, total)
    return _to_match(candidate, total, description, normalization)
