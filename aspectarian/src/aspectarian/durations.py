"""Remaining-duration estimates for relationships that move over time.

Rates are signed degrees/day of orb change: negative while the orb shrinks
(applying), positive while it grows (separating). They come from the caller
or from a one-day linear approximation, never from orbital mechanics.
"""

from __future__ import annotations

import math

from aspectarian.bodies import APPROX_DAILY_MOTION, TRANSIT_WINDOW_ORBS

STATIONARY_EPSILON = 0.001
DURATION_CAP_DAYS = 365.0
COLLECTIVE_ORB_WINDOW = 1.0


def estimate_duration(
    current_orb: float,
    orb_change_rate: float,
    window: float,
    *,
    epsilon: float = STATIONARY_EPSILON,
    cap: float = DURATION_CAP_DAYS,
) -> float | None:
    """Days until the relationship leaves its tolerance window.

    Applying relationships first close to exact and then cross the whole
    window on the far side. Returns None when the rate is too close to zero
    for a usable estimate.
    """
    if not math.isfinite(current_orb) or current_orb < 0:
        raise ValueError("current_orb must be a finite, non-negative number of degrees")
    if not math.isfinite(orb_change_rate):
        raise ValueError("orb_change_rate must be finite")
    if window <= 0:
        raise ValueError("window must be positive")

    if abs(orb_change_rate) <= epsilon:
        return None

    if orb_change_rate < 0:
        days = (current_orb + window) / abs(orb_change_rate)
    else:
        days = (window - current_orb) / orb_change_rate
    return min(max(0.0, days), cap)


def collective_duration(
    current_orb: float,
    orb_change_rate: float,
    window: float = COLLECTIVE_ORB_WINDOW,
    *,
    epsilon: float = STATIONARY_EPSILON,
    cap: float = DURATION_CAP_DAYS,
) -> float | None:
    """Estimate for an aspect between two transiting bodies (narrow window)."""
    return estimate_duration(current_orb, orb_change_rate, window, epsilon=epsilon, cap=cap)


def personal_transit_duration(
    planet: str,
    aspect_name: str,
    *,
    cap: float = DURATION_CAP_DAYS,
) -> float | None:
    """Full entry-to-exit span of a transit over a natal point.

    Uses the planet's mean daily motion; None for bodies without one.
    """
    speed = APPROX_DAILY_MOTION.get(planet)
    if not speed:
        return None
    orb_limit = TRANSIT_WINDOW_ORBS.get(aspect_name.lower())
    if orb_limit is None:
        raise ValueError(f"unknown transit aspect '{aspect_name}'")
    return min(2 * orb_limit / speed, cap)
