"""Aspect catalogs, sign and element tables, and motion approximations."""

from __future__ import annotations

from starbond.schemas.chart import AspectDefinition

# Zodiac signs in order
SIGNS = [
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]

# Canonical element order doubles as the dominance tie-break
ELEMENTS = ["Fire", "Earth", "Air", "Water"]

SIGN_ELEMENTS: dict[str, str] = {sign: ELEMENTS[i % 4] for i, sign in enumerate(SIGNS)}

CONJUNCTION = AspectDefinition(name="Conjunction", angle=0.0, orb=8.0, abbr="cnj")
SEXTILE = AspectDefinition(name="Sextile", angle=60.0, orb=6.0, abbr="sxt")
SQUARE = AspectDefinition(name="Square", angle=90.0, orb=7.0, abbr="sq")
TRINE = AspectDefinition(name="Trine", angle=120.0, orb=8.0, abbr="tri")
OPPOSITION = AspectDefinition(name="Opposition", angle=180.0, orb=8.0, abbr="opp")
QUINCUNX = AspectDefinition(name="Quincunx", angle=150.0, orb=3.0, abbr="qnx")

# Catalog order is classification priority: first match wins
MAJOR_ASPECTS: tuple[AspectDefinition, ...] = (
    CONJUNCTION,
    SEXTILE,
    SQUARE,
    TRINE,
    OPPOSITION,
)

# Transits use tighter, flatter orbs than natal work
TRANSIT_ASPECTS: tuple[AspectDefinition, ...] = (
    AspectDefinition(name="conjunction", angle=0.0, orb=6.0, abbr="cnj"),
    AspectDefinition(name="sextile", angle=60.0, orb=4.0, abbr="sxt"),
    AspectDefinition(name="square", angle=90.0, orb=6.0, abbr="sq"),
    AspectDefinition(name="trine", angle=120.0, orb=6.0, abbr="tri"),
    AspectDefinition(name="opposition", angle=180.0, orb=6.0, abbr="opp"),
)

# Window used by personal transit traversal estimates
TRANSIT_WINDOW_ORBS: dict[str, float] = {
    "conjunction": 8.0,
    "opposition": 8.0,
    "trine": 6.0,
    "square": 6.0,
    "sextile": 4.0,
}

# Mean daily motion in degrees; a linear approximation, not an ephemeris
APPROX_DAILY_MOTION: dict[str, float] = {
    "Sun": 1.0,
    "Moon": 13.0,
    "Mercury": 1.2,
    "Venus": 1.2,
    "Mars": 0.52,
    "Jupiter": 0.083,
    "Saturn": 0.033,
    "Uranus": 0.012,
    "Neptune": 0.006,
    "Pluto": 0.004,
    "Chiron": 0.05,
}

# Slow movers dominate the collective sky
PLANET_WEIGHTS: dict[str, int] = {
    "Saturn": 3,
    "Uranus": 3,
    "Neptune": 3,
    "Pluto": 3,
    "Jupiter": 2,
    "Mars": 2,
    "Sun": 1,
    "Moon": 1,
    "Mercury": 1,
    "Venus": 1,
}


def longitude_to_sign(longitude: float) -> tuple[str, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = longitude % 360.0
    sign_index = int(longitude / 30.0)
    degree = longitude - (sign_index * 30.0)
    return SIGNS[sign_index], degree


def element_of(sign: str | None) -> str | None:
    """Element for a sign name, or None outside the twelve-sign vocabulary."""
    if not sign:
        return None
    return SIGN_ELEMENTS.get(sign.strip().capitalize())


def get_aspect(name: str, catalog: tuple[AspectDefinition, ...] = MAJOR_ASPECTS) -> AspectDefinition:
    """Look up a catalog entry by name (case-insensitive)."""
    wanted = name.strip().lower()
    for definition in catalog:
        if definition.name.lower() == wanted:
            return definition
    raise ValueError(f"unknown aspect '{name}'")
