"""Pre-baked candidate pool for best-fit matching.

Longitudes are approximate positions from publicly known birth data.
"""

from __future__ import annotations

from starbond.schemas.synastry import Candidate

CANDIDATES: tuple[Candidate, ...] = (
    Candidate(
        id="beyonce",
        name="Beyoncé",
        birth_date="1981-09-04",
        longitudes={
            "Sun": 161, "Moon": 205, "Mercury": 174, "Venus": 190, "Mars": 150,
            "Jupiter": 207, "Saturn": 194, "Uranus": 236, "Neptune": 262, "Pluto": 212,
        },
    ),
    Candidate(
        id="harry-styles",
        name="Harry Styles",
        birth_date="1994-02-01",
        longitudes={
            "Sun": 312, "Moon": 194, "Mercury": 318, "Venus": 336, "Mars": 316,
            "Jupiter": 218, "Saturn": 333, "Uranus": 291, "Neptune": 291, "Pluto": 237,
        },
    ),
    Candidate(
        id="taylor-swift",
        name="Taylor Swift",
        birth_date="1989-12-13",
        longitudes={
            "Sun": 261, "Moon": 243, "Mercury": 252, "Venus": 272, "Mars": 216,
            "Jupiter": 108, "Saturn": 280, "Uranus": 278, "Neptune": 280, "Pluto": 226,
        },
    ),
    Candidate(
        id="timothee-chalamet",
        name="Timothée Chalamet",
        birth_date="1995-12-27",
        longitudes={
            "Sun": 275, "Moon": 150, "Mercury": 258, "Venus": 305, "Mars": 275,
            "Jupiter": 270, "Saturn": 356, "Uranus": 300, "Neptune": 294, "Pluto": 241,
        },
    ),
    Candidate(
        id="zendaya",
        name="Zendaya",
        birth_date="1996-09-01",
        longitudes={
            "Sun": 159, "Moon": 14, "Mercury": 175, "Venus": 140, "Mars": 103,
            "Jupiter": 278, "Saturn": 4, "Uranus": 300, "Neptune": 295, "Pluto": 241,
        },
    ),
    Candidate(
        id="ryan-gosling",
        name="Ryan Gosling",
        birth_date="1980-11-12",
        longitudes={
            "Sun": 230, "Moon": 310, "Mercury": 243, "Venus": 210, "Mars": 264,
            "Jupiter": 187, "Saturn": 187, "Uranus": 234, "Neptune": 261, "Pluto": 204,
        },
    ),
    Candidate(
        id="rihanna",
        name="Rihanna",
        birth_date="1988-02-20",
        longitudes={
            "Sun": 331, "Moon": 12, "Mercury": 319, "Venus": 356, "Mars": 269,
            "Jupiter": 29, "Saturn": 278, "Uranus": 268, "Neptune": 278, "Pluto": 223,
        },
    ),
    Candidate(
        id="keanu-reeves",
        name="Keanu Reeves",
        birth_date="1964-09-02",
        longitudes={
            "Sun": 160, "Moon": 298, "Mercury": 175, "Venus": 103, "Mars": 108,
            "Jupiter": 56, "Saturn": 336, "Uranus": 159, "Neptune": 225, "Pluto": 164,
        },
    ),
    Candidate(
        id="lady-gaga",
        name="Lady Gaga",
        birth_date="1986-03-28",
        longitudes={
            "Sun": 7, "Moon": 210, "Mercury": 356, "Venus": 22, "Mars": 280,
            "Jupiter": 341, "Saturn": 248, "Uranus": 251, "Neptune": 274, "Pluto": 217,
        },
    ),
    Candidate(
        id="leonardo-dicaprio",
        name="Leonardo DiCaprio",
        birth_date="1974-11-11",
        longitudes={
            "Sun": 228, "Moon": 194, "Mercury": 222, "Venus": 258, "Mars": 219,
            "Jupiter": 332, "Saturn": 118, "Uranus": 213, "Neptune": 248, "Pluto": 187,
        },
    ),
    Candidate(
        id="ariana-grande",
        name="Ariana Grande",
        birth_date="1993-06-26",
        longitudes={
            "Sun": 94, "Moon": 194, "Mercury": 109, "Venus": 70, "Mars": 159,
            "Jupiter": 186, "Saturn": 332, "Uranus": 289, "Neptune": 289, "Pluto": 233,
        },
    ),
    Candidate(
        id="chris-hemsworth",
        name="Chris Hemsworth",
        birth_date="1983-08-11",
        longitudes={
            "Sun": 138, "Moon": 160, "Mercury": 153, "Venus": 120, "Mars": 90,
            "Jupiter": 246, "Saturn": 208, "Uranus": 244, "Neptune": 266, "Pluto": 217,
        },
    ),
)
