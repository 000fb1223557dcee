"""Pydantic schemas for two-chart compatibility and candidate matching."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompatibilityCategory(BaseModel):
    """Score for one weighted category of cross-chart contacts."""

    label: str
    description: str = ""
    score: int = Field(ge=0, le=100)
    contributing_aspects: list[str] = Field(default_factory=list)


class CompatibilityResult(BaseModel):
    overall: int = Field(ge=0, le=100)
    categories: list[CompatibilityCategory]


class Candidate(BaseModel):
    """A pre-baked position set in the match pool."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    birth_date: str | None = None
    longitudes: dict[str, float]


class CandidateMatch(BaseModel):
    candidate_id: str
    candidate_name: str
    score: int = Field(ge=0, le=100)
    top_aspect_description: str
