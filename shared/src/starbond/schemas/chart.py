"""Pydantic schemas for chart positions, aspects, and patterns."""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class Position(BaseModel):
    """A named point on the ecliptic circle.

    ``sign``, ``house`` and ``retrograde`` are display attributes carried
    through untouched; only ``longitude`` takes part in the math.
    ``speed_deg_day`` stands in for a next-day snapshot when one is missing.
    Houses outside 1-12 are dropped to None rather than rejected, so the
    point just falls out of house groupings.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "body"))
    longitude: float
    sign: str | None = None
    house: int | None = None
    retrograde: bool = Field(
        default=False,
        validation_alias=AliasChoices("retrograde", "isRetrograde", "is_retrograde"),
    )
    speed_deg_day: float | None = None

    @field_validator("longitude")
    @classmethod
    def normalize_longitude(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("longitude must be a finite number")
        return value % 360.0

    @field_validator("sign", mode="before")
    @classmethod
    def normalize_sign(cls, value: Any) -> str | None:
        if value is None:
            return None
        sign = str(value).strip().capitalize()
        return sign or None

    @field_validator("house", mode="before")
    @classmethod
    def drop_unknown_house(cls, value: Any) -> int | None:
        if value is None:
            return None
        try:
            house = int(value)
        except (TypeError, ValueError, OverflowError):
            house = 0
        if not 1 <= house <= 12:
            logger.warning("Ignoring out-of-range house %r", value)
            return None
        return house


class AspectDefinition(BaseModel):
    """A named angular relationship with its tolerance."""

    model_config = ConfigDict(frozen=True)

    name: str
    angle: float = Field(ge=0.0, le=180.0)
    orb: float = Field(ge=0.0)
    abbr: str = ""


class Aspect(BaseModel):
    """A classified relationship between two points."""

    model_config = ConfigDict(frozen=True)

    point_a: str
    point_b: str
    type: str
    distance: float
    orb: float


class ChartPattern(BaseModel):
    """A multi-body pattern badge; locked records still carry their metadata."""

    id: str
    name: str
    description: str
    unlocked: bool
    involved_points: list[str] = Field(default_factory=list)
    detail: str | None = None
