"""Integration test configuration."""

import pytest

from starbond.config import reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def sample_natal():
    """Sample natal positions as a list of records."""
    return [
        {"name": "Sun", "longitude": 250.0, "sign": "Sagittarius", "house": 9},
        {"name": "Moon", "longitude": 10.0, "sign": "Aries", "house": 1},
        {"name": "Mercury", "longitude": 262.0, "sign": "Sagittarius", "house": 9},
        {"name": "Venus", "longitude": 130.0, "sign": "Leo", "house": 5},
        {"name": "Mars", "longitude": 95.0, "sign": "Cancer", "house": 4},
        {"name": "Jupiter", "longitude": 246.0, "sign": "Sagittarius", "house": 9, "retrograde": True},
        {"name": "Saturn", "longitude": 20.0, "sign": "Aries", "house": 1},
    ]


@pytest.fixture
def sample_partner_chart():
    """Sample partner chart in the keyed ephemeris shape."""
    return {
        "date_context": "1992-07-21",
        "positions": {
            "sun": {"sign": "Leo", "degree": 10.0, "longitude": 130.0, "speed_deg_day": 0.95, "retrograde": False},
            "moon": {"sign": "Sagittarius", "degree": 10.0, "longitude": 250.0, "speed_deg_day": 12.8, "retrograde": False},
            "mercury": {"sign": "Leo", "degree": 20.0, "longitude": 140.0, "speed_deg_day": 1.4, "retrograde": False},
            "venus": {"sign": "Aries", "degree": 10.0, "longitude": 10.0, "speed_deg_day": 1.2, "retrograde": False},
            "mars": {"sign": "Capricorn", "degree": 5.0, "longitude": 275.0, "speed_deg_day": 0.7, "retrograde": False},
            "jupiter": {"sign": "Gemini", "degree": 10.0, "longitude": 70.0, "speed_deg_day": 0.2, "retrograde": False},
            "saturn": {"sign": "Libra", "degree": 20.0, "longitude": 200.0, "speed_deg_day": -0.03, "retrograde": True},
        },
        "aspects": [],
    }
