"""Tests for chart pattern detection."""

import pytest

from aspectarian.patterns import PatternOrbs, detect_patterns

BASE_IDS = ["stellium", "grand-trine", "t-square", "retrograde-rebel", "grand-cross", "elemental", "yod"]


def _by_id(patterns):
    return {p.id: p for p in patterns}


def test_empty_input_all_locked():
    patterns = detect_patterns([])

    assert [p.id for p in patterns] == BASE_IDS
    assert not any(p.unlocked for p in patterns)
    for p in patterns:
        assert p.name
        assert p.description
        assert p.involved_points == []
        assert p.detail is None


def test_single_point_all_locked(make_points):
    patterns = detect_patterns(make_points(("Mars", 12.0, {"sign": "Aries"})))
    assert not any(p.unlocked for p in patterns)


def test_grand_trine(make_points):
    patterns = _by_id(detect_patterns(make_points(("Sun", 10.0), ("Moon", 130.0), ("Mars", 250.0))))

    trine = patterns["grand-trine"]
    assert trine.unlocked
    assert trine.involved_points == ["Sun", "Moon", "Mars"]
    assert trine.detail == "Sun, Moon, Mars"
    assert not patterns["t-square"].unlocked


def test_grand_trine_outside_orb(make_points):
    patterns = _by_id(detect_patterns(make_points(("Sun", 10.0), ("Moon", 130.0), ("Mars", 259.0))))
    assert not patterns["grand-trine"].unlocked


def test_t_square(make_points):
    patterns = _by_id(detect_patterns(make_points(("Sun", 0.0), ("Moon", 180.0), ("Mars", 90.0))))

    t_square = patterns["t-square"]
    assert t_square.unlocked
    assert t_square.involved_points == ["Mars", "Sun", "Moon"]
    assert t_square.detail == "Mars apex, Sun ☍ Moon"


def test_grand_cross(make_points):
    points = make_points(("Sun", 0.0), ("Moon", 90.0), ("Mars", 180.0), ("Saturn", 270.0))
    patterns = _by_id(detect_patterns(points))

    cross = patterns["grand-cross"]
    assert cross.unlocked
    assert sorted(cross.involved_points) == ["Mars", "Moon", "Saturn", "Sun"]
    assert patterns["t-square"].unlocked


def test_grand_cross_needs_four_points(make_points):
    patterns = _by_id(detect_patterns(make_points(("Sun", 0.0), ("Moon", 90.0), ("Mars", 180.0))))
    assert not patterns["grand-cross"].unlocked


def test_yod(make_points):
    points = make_points(("Sun", 0.0), ("Moon", 60.0), ("Pluto", 210.0))
    yod = _by_id(detect_patterns(points))["yod"]

    assert yod.unlocked
    assert yod.involved_points == ["Pluto", "Sun", "Moon"]
    assert yod.detail == "Pluto apex, Sun ⚹ Moon"


def test_yod_quincunx_orb_is_tight(make_points):
    points = make_points(("Sun", 0.0), ("Moon", 60.0), ("Pluto", 214.0))
    assert not _by_id(detect_patterns(points))["yod"].unlocked


def test_custom_orbs_are_injected(make_points):
    from starbond.schemas.chart import AspectDefinition

    loose = PatternOrbs(trine=AspectDefinition(name="Trine", angle=120.0, orb=10.0))
    points = make_points(("Sun", 10.0), ("Moon", 130.0), ("Mars", 259.0))

    assert _by_id(detect_patterns(points, loose))["grand-trine"].unlocked


class TestStellium:
    def test_sign_stellium(self, make_points):
        points = make_points(("Sun", 1.0), ("Moon", 5.0), ("Mercury", 12.0), ("Venus", 20.0), sign="Aries")
        stellium = _by_id(detect_patterns(points))["stellium"]

        assert stellium.unlocked
        assert stellium.detail == "Sun, Moon, Mercury, Venus in Aries"
        assert stellium.involved_points == ["Sun", "Moon", "Mercury", "Venus"]

    def test_two_points_do_not_unlock(self, make_points):
        points = make_points(("Sun", 1.0), ("Moon", 5.0), sign="Aries")
        assert not _by_id(detect_patterns(points))["stellium"].unlocked

    def test_out_of_range_house_only_leaves_house_grouping(self, make_points):
        points = make_points(
            ("Sun", 10.0, {"sign": "Aries", "house": 0}),
            ("Moon", 12.0, {"sign": "Aries", "house": 1}),
            ("Mars", 14.0, {"sign": "Aries", "house": 13}),
        )
        patterns = _by_id(detect_patterns(points))

        assert patterns["stellium"].unlocked
        assert patterns["stellium"].detail == "Sun, Moon, Mars in Aries"
        assert "sect" not in patterns

    def test_sign_case_is_normalized(self, make_points):
        points = make_points(
            ("Sun", 1.0, {"sign": "aries"}),
            ("Moon", 5.0, {"sign": "Aries"}),
            ("Mars", 8.0, {"sign": "ARIES"}),
        )
        stellium = _by_id(detect_patterns(points))["stellium"]

        assert stellium.unlocked
        assert stellium.detail == "Sun, Moon, Mars in Aries"

    def test_house_stellium(self, make_points):
        points = make_points(
            ("Sun", 1.0, {"sign": "Aries"}),
            ("Moon", 40.0, {"sign": "Taurus"}),
            ("Mars", 70.0, {"sign": "Gemini"}),
            house=5,
        )
        stellium = _by_id(detect_patterns(points))["stellium"]

        assert stellium.unlocked
        assert stellium.detail == "Sun, Moon, Mars in House 5"

    def test_sign_takes_precedence_over_house(self, make_points):
        points = make_points(
            ("Sun", 1.0, {"sign": "Leo", "house": 2}),
            ("Moon", 2.0, {"sign": "Leo", "house": 3}),
            ("Mars", 3.0, {"sign": "Leo", "house": 4}),
            ("Venus", 100.0, {"sign": "Cancer", "house": 9}),
            ("Jupiter", 110.0, {"sign": "Cancer", "house": 9}),
            ("Saturn", 120.0, {"sign": "Virgo", "house": 9}),
        )
        stellium = _by_id(detect_patterns(points))["stellium"]

        assert stellium.detail == "Sun, Moon, Mars in Leo"

    def test_points_without_sign_are_skipped(self, make_points):
        points = make_points(("Sun", 1.0, {"sign": "Aries"}), ("Moon", 5.0, {"sign": "Aries"}), ("Mars", 8.0))
        assert not _by_id(detect_patterns(points))["stellium"].unlocked


class TestSect:
    @pytest.mark.parametrize("house", [1, 3, 6])
    def test_night_chart(self, make_points, house):
        sect = _by_id(detect_patterns(make_points(("Sun", 10.0, {"house": house}))))["sect"]
        assert sect.name == "Night Owl"
        assert sect.unlocked

    @pytest.mark.parametrize("house", [7, 10, 12])
    def test_day_chart(self, make_points, house):
        sect = _by_id(detect_patterns(make_points(("Sun", 10.0, {"house": house}))))["sect"]
        assert sect.name == "Day Walker"

    def test_no_sun_no_sect(self, make_points):
        patterns = detect_patterns(make_points(("Moon", 10.0, {"house": 4})))
        assert "sect" not in [p.id for p in patterns]

    def test_sect_position_in_output(self, make_points):
        ids = [p.id for p in detect_patterns(make_points(("Sun", 10.0, {"house": 4})))]
        assert ids == BASE_IDS[:3] + ["sect"] + BASE_IDS[3:]


def test_retrograde_rebel(make_points):
    points = make_points(
        ("Mercury", 10.0, {"retrograde": True}),
        ("Mars", 40.0, {"isRetrograde": True}),
        ("Saturn", 200.0, {"retrograde": True}),
        ("Venus", 300.0),
    )
    rebel = _by_id(detect_patterns(points))["retrograde-rebel"]

    assert rebel.unlocked
    assert rebel.detail == "Mercury, Mars, Saturn"


def test_two_retrogrades_stay_locked(make_points):
    points = make_points(("Mercury", 10.0), ("Mars", 40.0), retrograde=True)
    assert not _by_id(detect_patterns(points))["retrograde-rebel"].unlocked


class TestElemental:
    def test_fire_dominant(self, make_points):
        points = make_points(
            ("Sun", 1.0, {"sign": "Aries"}),
            ("Moon", 125.0, {"sign": "Leo"}),
            ("Mars", 245.0, {"sign": "Sagittarius"}),
            ("Venus", 10.0, {"sign": "Aries"}),
            ("Saturn", 35.0, {"sign": "Taurus"}),
        )
        elemental = _by_id(detect_patterns(points))["elemental"]

        assert elemental.unlocked
        assert elemental.name == "Fire Dominant"
        assert elemental.detail == "4 planets in Fire"
        assert elemental.involved_points == ["Sun", "Moon", "Mars", "Venus"]

    def test_three_is_not_enough(self, make_points):
        points = make_points(("Sun", 1.0), ("Moon", 2.0), ("Mars", 3.0), sign="Cancer")
        elemental = _by_id(detect_patterns(points))["elemental"]

        assert not elemental.unlocked
        assert elemental.name == "Elemental Dominance"

    def test_tie_breaks_in_canonical_order(self, make_points):
        points = make_points(
            ("A", 1.0, {"sign": "Pisces"}),
            ("B", 2.0, {"sign": "Cancer"}),
            ("C", 3.0, {"sign": "Scorpio"}),
            ("D", 4.0, {"sign": "Pisces"}),
            ("E", 5.0, {"sign": "Gemini"}),
            ("F", 6.0, {"sign": "Libra"}),
            ("G", 7.0, {"sign": "Aquarius"}),
            ("H", 8.0, {"sign": "Gemini"}),
        )
        assert _by_id(detect_patterns(points))["elemental"].name == "Air Dominant"

    def test_unknown_signs_count_for_nothing(self, make_points):
        points = make_points(("A", 1.0), ("B", 2.0), ("C", 3.0), ("D", 4.0), sign="Ophiuchus")
        assert not _by_id(detect_patterns(points))["elemental"].unlocked


def test_duplicate_names_fail_fast(make_points):
    with pytest.raises(ValueError, match="duplicate"):
        detect_patterns(make_points(("Sun", 1.0), ("Sun", 2.0)))


def test_detection_is_idempotent(make_points):
    points = make_points(("Sun", 0.0, {"house": 2}), ("Moon", 90.0), ("Mars", 180.0), ("Saturn", 270.0))
    assert detect_patterns(points) == detect_patterns(points)
