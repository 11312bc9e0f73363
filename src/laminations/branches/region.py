"""
BranchRegion — Boolean Algebra of Circle Regions

A region is a pure predicate over circle points. Regions are composed from
two atoms (a single point, the designated side of a chord) with or / and /
not / none-of combinators; nothing is ever mutated.

One region per inverse branch of the digit shift; adjacent branches share
boundary points, and simple() lets a region claim exactly the endpoints it
owns so that neighbours neither overlap nor leave gaps.
"""

from typing import Callable

from laminations.core.domain.chord import Chord
from laminations.core.domain.fraction import CircularFraction

Identifier = Callable[[CircularFraction], bool]
MappingFunc = Callable[[Identifier], Identifier]


# =============================================================================
# OPERATORS
# =============================================================================


def or_(*identifiers: Identifier) -> Identifier:
    def identifier(candidate: CircularFraction) -> bool:
        return any(ident(candidate) for ident in identifiers)

    return identifier


def and_(*identifiers: Identifier) -> Identifier:
    def identifier(candidate: CircularFraction) -> bool:
        return all(ident(candidate) for ident in identifiers)

    return identifier


def not_(inner: Identifier) -> Identifier:
    def identifier(candidate: CircularFraction) -> bool:
        return not inner(candidate)

    return identifier


def none_of(*identifiers: Identifier) -> Identifier:
    return not_(or_(*identifiers))


def point(p: CircularFraction) -> Identifier:
    """True only at p (value equality, any base)."""

    def identifier(candidate: CircularFraction) -> bool:
        return p.equals(candidate)

    return identifier


def chord(c: Chord, flip: bool = False) -> Identifier:
    """Strict membership in the designated side of c, see Chord.contains."""

    def identifier(candidate: CircularFraction) -> bool:
        return c.contains(candidate, flip)

    return identifier


# =============================================================================
# REGION
# =============================================================================


class BranchRegion:
    """Region of the circle wrapping an identifier predicate."""

    def __init__(self, identifier: Identifier):
        self._identifier = identifier

    @classmethod
    def simple(
        cls, c: Chord, *points: CircularFraction, flip: bool = False
    ) -> "BranchRegion":
        """
        Designated side of a chord plus the listed boundary points.

        Args:
            c: Bounding chord
            *points: Identified points owned by the region (usually one endpoint)
            flip: Use the other side of the chord

        Returns:
            Region chord(c, flip) OR point(p1) OR ...
        """
        return cls(or_(chord(c, flip), *map(point, points)))

    @classmethod
    def simple_flipped(cls, c: Chord, *points: CircularFraction) -> "BranchRegion":
        return cls.simple(c, *points, flip=True)

    def unwrap(self) -> Identifier:
        return self._identifier

    def contains(self, p: CircularFraction) -> bool:
        return self._identifier(p)

    def __contains__(self, p: CircularFraction) -> bool:
        return self.contains(p)

    def contains_chord(self, c: Chord) -> bool:
        """Both endpoints of c belong to the region."""
        return self.contains(c.lower) and self.contains(c.upper)

    def map(self, func: MappingFunc) -> "BranchRegion":
        return BranchRegion(func(self._identifier))

    def complement(self) -> "BranchRegion":
        return self.map(not_)

    def without(self, *regions: "BranchRegion") -> "BranchRegion":
        """Points of this region that lie in none of the given regions."""
        excluded = complement(*regions).unwrap()
        return self.map(lambda identifier: and_(identifier, excluded))


def complement(*regions: BranchRegion) -> BranchRegion:
    """
    Region containing none of the given regions.

    With one argument this is logical negation; with all explicitly specified
    branches it is the leftover background branch. With no argument it is the
    whole circle.
    """
    return BranchRegion(none_of(*(region.unwrap() for region in regions)))


def unit(identifier: Identifier) -> BranchRegion:
    return BranchRegion(identifier)
