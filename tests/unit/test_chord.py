"""
Tests for Chord

Covers:
1. Endpoint ordering at construction
2. Inner / outer regions, contains with flip
3. Exact width, side measure, diameters
4. Crossing detection
"""

from fractions import Fraction

import pytest
from pydantic import ValidationError

from laminations.core.domain import Chord, parse_unsafe_factory

binary = parse_unsafe_factory(2)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def points():
    """Binary points: 0, 1/7, 3/14, 2/7, 1/2, 11/14, 6/7"""
    return {
        "zero": binary("_"),
        "one_seventh": binary("_001"),
        "three_fourteenths": binary("0_011"),
        "two_sevenths": binary("_010"),
        "one_half": binary("1_"),
        "eleven_fourteenths": binary("1_100"),
        "six_sevenths": binary("_110"),
    }


@pytest.fixture
def chords(points):
    p = points
    return {
        "zero_two_sevenths": Chord.create(p["zero"], p["two_sevenths"]),
        "one_seventh_two_sevenths": Chord.create(p["one_seventh"], p["two_sevenths"]),
        "three_fourteenths_one_half": Chord.create(p["three_fourteenths"], p["one_half"]),
        "two_sevenths_six_sevenths": Chord.create(p["two_sevenths"], p["six_sevenths"]),
        "zero_one_half": Chord.create(p["zero"], p["one_half"]),
        "two_sevenths_eleven_fourteenths": Chord.create(
            p["two_sevenths"], p["eleven_fourteenths"]
        ),
    }


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Tests for endpoint ordering"""

    def test_create_orders_endpoints(self, points) -> None:
        chord = Chord.create(points["six_sevenths"], points["one_seventh"])
        assert chord.lower == points["one_seventh"]
        assert chord.upper == points["six_sevenths"]

    def test_constructor_orders_endpoints(self, points) -> None:
        chord = Chord(lower=points["one_half"], upper=points["zero"])
        assert chord.lower == points["zero"]

    def test_equal_regardless_of_argument_order(self, points) -> None:
        assert Chord.create(points["zero"], points["one_half"]) == Chord.create(
            points["one_half"], points["zero"]
        )

    def test_str(self, chords) -> None:
        assert str(chords["one_seventh_two_sevenths"]) == "_001, _010"

    def test_frozen(self, chords, points) -> None:
        with pytest.raises(ValidationError):
            chords["zero_one_half"].lower = points["one_seventh"]


# =============================================================================
# REGIONS
# =============================================================================


class TestRegions:
    """Tests for on_boundary / inner / outer / contains"""

    def test_on_boundary(self, chords, points) -> None:
        chord = chords["zero_two_sevenths"]
        assert chord.on_boundary(points["zero"])
        assert chord.on_boundary(points["two_sevenths"])
        assert not chord.on_boundary(points["one_seventh"])

    def test_inner_and_outer_are_strict(self, chords, points) -> None:
        chord = chords["zero_two_sevenths"]
        assert chord.in_inner_region(points["one_seventh"])
        assert not chord.in_inner_region(points["zero"])
        assert chord.in_inner_region_loose(points["zero"])
        assert chord.in_outer_region(points["one_half"])
        assert not chord.in_outer_region(points["two_sevenths"])
        assert chord.in_outer_region_loose(points["two_sevenths"])

    def test_contains_picks_minority_side(self, chords, points) -> None:
        assert chords["zero_one_half"].contains(points["two_sevenths"])
        assert not chords["two_sevenths_six_sevenths"].contains(points["one_half"])
        assert chords["two_sevenths_six_sevenths"].contains(points["zero"])

    def test_flip_selects_other_side(self, chords, points) -> None:
        chord = chords["two_sevenths_six_sevenths"]
        assert chord.contains(points["one_half"], flip=True)
        assert not chord.contains(points["zero"], flip=True)

    def test_endpoints_only_loosely_contained(self, chords, points) -> None:
        chord = chords["two_sevenths_six_sevenths"]
        assert not chord.contains(points["two_sevenths"])
        assert chord.contains_loose(points["two_sevenths"])
        assert chord.contains_loose(points["six_sevenths"], flip=True)


# =============================================================================
# MEASURES
# =============================================================================


class TestMeasures:
    """Tests for width / side_measure / is_diameter"""

    def test_width_is_exact(self, chords) -> None:
        assert chords["zero_one_half"].width() == Fraction(1, 2)
        assert chords["two_sevenths_six_sevenths"].width() == Fraction(4, 7)
        assert chords["zero_two_sevenths"].width() == Fraction(2, 7)

    def test_side_measure(self, chords) -> None:
        chord = chords["two_sevenths_six_sevenths"]
        assert chord.side_measure() == Fraction(3, 7)
        assert chord.side_measure(flip=True) == Fraction(4, 7)

    def test_is_diameter(self, chords) -> None:
        assert chords["zero_one_half"].is_diameter()
        assert chords["two_sevenths_eleven_fourteenths"].is_diameter()
        assert not chords["two_sevenths_six_sevenths"].is_diameter()


# =============================================================================
# RELATIONS & DYNAMICS
# =============================================================================


class TestIntersects:
    """Tests for intersects"""

    def test_shared_endpoint_does_not_cross(self, chords) -> None:
        assert not chords["zero_two_sevenths"].intersects(chords["one_seventh_two_sevenths"])
        assert not chords["zero_one_half"].intersects(chords["zero_two_sevenths"])

    def test_crossing_chords(self, chords) -> None:
        assert chords["zero_two_sevenths"].intersects(chords["three_fourteenths_one_half"])
        assert chords["one_seventh_two_sevenths"].intersects(chords["three_fourteenths_one_half"])
        assert chords["three_fourteenths_one_half"].intersects(chords["two_sevenths_six_sevenths"])

    def test_symmetric(self, chords) -> None:
        assert chords["three_fourteenths_one_half"].intersects(chords["zero_two_sevenths"])

    def test_identical_chords_do_not_cross(self, chords) -> None:
        chord = chords["zero_two_sevenths"]
        assert not chord.intersects(chord)


class TestMapForward:
    """Tests for Chord.map_forward"""

    def test_doubles_endpoints(self, chords, points) -> None:
        image = chords["one_seventh_two_sevenths"].map_forward()
        assert image.lower == points["two_sevenths"]
        assert image.upper == binary("_100")
