"""Pydantic schemas for personal and collective transit listings."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TransitTag(BaseModel):
    """A transiting body aspecting a natal point."""

    transit_key: str
    transiting_planet: str
    aspect: str
    natal_point: str
    display_name: str
    orb: float
    is_primary: bool
    is_applying: bool
    duration_days: float | None = None


class CollectiveTransit(BaseModel):
    """An aspect between two transiting bodies, shared by everyone."""

    transit_key: str
    display_name: str
    transiting_planet: str
    aspect: str
    target_planet: str
    orb: float
    is_applying: bool
    orb_change_rate: float
    vibe: str = ""
    duration_days: float | None = None


class DailyTransits(BaseModel):
    """Collective transits for a day with the dominant one singled out."""

    dominant_transit: str
    transit_key: str
    description: str
    transits: list[CollectiveTransit] = Field(default_factory=list)
