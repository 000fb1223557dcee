"""Shared fixtures for core calculation tests."""

import pytest


@pytest.fixture
def make_points():
    """Build position dicts from (name, longitude) pairs plus optional extras."""

    def _make(*entries, **extras):
        points = []
        for entry in entries:
            name, longitude, *rest = entry
            point = {"name": name, "longitude": longitude}
            if rest:
                point.update(rest[0])
            point.update(extras)
            points.append(point)
        return points

    return _make


@pytest.fixture
def single_category():
    from aspectarian.compatibility import CategoryDefinition

    return CategoryDefinition(
        label="Core",
        description="Sun to Sun",
        natal_points=("Sun",),
        partner_points=("Sun",),
    )
