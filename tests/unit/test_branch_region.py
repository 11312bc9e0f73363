"""
Tests for BranchRegion and its combinators

Covers:
1. Atoms (point, chord) and or_ / and_ / not_ / none_of
2. simple() regions with owned endpoints
3. without() / complement() for nested branches
"""

import pytest

from laminations.branches import (
    BranchRegion,
    and_,
    chord,
    complement,
    none_of,
    not_,
    or_,
    point,
    unit,
)
from laminations.core.domain import Chord, parse_unsafe_factory

quintary = parse_unsafe_factory(5)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def p():
    """Quintary sample points"""
    return {
        "A": quintary("_003"),
        "B": quintary("_033"),
        "C": quintary("1_330"),
        "D": quintary("_200"),
        "F": quintary("_303"),
        "G": quintary("_330"),
        "H": quintary("4_303"),
    }


# =============================================================================
# COMBINATORS
# =============================================================================


class TestCombinators:
    """Tests for the boolean combinators"""

    def test_point_matches_value_in_any_base(self) -> None:
        ident = point(parse_unsafe_factory(2)("1_"))
        assert ident(parse_unsafe_factory(4)("2_"))
        assert not ident(quintary("_"))

    def test_or_and_not(self, p) -> None:
        a, b = point(p["A"]), point(p["B"])
        assert or_(a, b)(p["B"])
        assert not and_(a, b)(p["B"])
        assert not_(a)(p["B"])
        assert none_of(a, b)(p["C"])
        assert not none_of(a, b)(p["A"])

    def test_empty_combinators(self, p) -> None:
        assert not or_()(p["A"])
        assert and_()(p["A"])

    def test_chord_and_point_union(self, p) -> None:
        branch = unit(or_(chord(Chord.create(p["B"], p["C"])), point(p["C"])))
        assert not branch.contains(p["B"])
        assert branch.contains(p["C"])
        assert branch.contains(quintary("_034"))
        assert not branch.contains(p["D"])


# =============================================================================
# REGIONS
# =============================================================================


class TestBranchRegion:
    """Tests for simple / without / complement"""

    def test_simple_owns_listed_endpoint(self, p) -> None:
        child = BranchRegion.simple(Chord.create(p["G"], p["H"]), p["H"])
        assert child.contains(quintary("_331"))
        assert not child.contains(p["G"])
        assert child.contains(p["H"])
        assert not child.contains(p["A"])
        assert not child.contains(p["B"])

    def test_parent_without_child(self, p) -> None:
        child = BranchRegion.simple(Chord.create(p["G"], p["H"]), p["H"])
        parent = BranchRegion.simple(Chord.create(p["A"], p["F"]), p["A"]).without(child)
        assert not parent.contains(quintary("_331"))
        assert parent.contains(p["G"])
        assert not parent.contains(p["H"])
        assert parent.contains(p["A"])
        assert not parent.contains(p["B"])

    def test_simple_flipped(self, p) -> None:
        c = Chord.create(p["G"], p["H"])
        flipped = BranchRegion.simple_flipped(c)
        assert flipped.contains(p["A"])
        assert not flipped.contains(quintary("_331"))
        assert not flipped.contains(p["G"])

    def test_in_operator(self, p) -> None:
        region = BranchRegion.simple(Chord.create(p["G"], p["H"]), p["H"])
        assert p["H"] in region
        assert p["G"] not in region

    def test_contains_chord(self, p) -> None:
        region = BranchRegion.simple(Chord.create(p["A"], p["F"]), p["A"])
        assert region.contains_chord(Chord.create(p["G"], p["H"]))
        assert not region.contains_chord(Chord.create(p["B"], p["C"]))

    def test_complement_method_is_negation(self, p) -> None:
        region = BranchRegion.simple(Chord.create(p["G"], p["H"]), p["H"])
        negated = region.complement()
        assert negated.contains(p["G"])
        assert not negated.contains(p["H"])

    def test_complement_of_several(self, p) -> None:
        first = BranchRegion.simple(Chord.create(p["B"], p["C"]), p["C"])
        second = BranchRegion.simple(Chord.create(p["G"], p["H"]), p["H"])
        rest = complement(first, second)
        assert rest.contains(p["B"])
        assert rest.contains(p["G"])
        assert not rest.contains(p["C"])
        assert not rest.contains(p["H"])

    def test_complement_of_nothing_is_whole_circle(self, p) -> None:
        whole = complement()
        assert all(whole.contains(x) for x in p.values())

    def test_map(self, p) -> None:
        region = BranchRegion.simple(Chord.create(p["G"], p["H"]), p["H"])
        assert region.map(not_).contains(p["G"])
        assert region.unwrap()(p["H"])
