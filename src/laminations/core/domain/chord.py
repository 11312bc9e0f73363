"""
Chord — Pair of Circle Points

Immutable Pydantic model of a chord of the unit circle. Endpoints are stored
in canonical (lower, upper) order, so the inner region is the open arc
(lower, upper) and the outer region is its complement without the endpoints.

Width-dependent containment:
    the designated side of a chord is its inner arc, unless that arc is the
    majority arc (width > 1/2); flip=True selects the other side.
"""

from fractions import Fraction
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from .fraction import CircularFraction


# Arc length separating "short" and "wide" chords
HALF_TURN: Final[Fraction] = Fraction(1, 2)


def _xor(a: bool, b: bool) -> bool:
    return a != b


class Chord(BaseModel):
    """
    Chord between two circle points.

    Built via Chord.create(a, b) or Chord(lower=a, upper=b); in both cases the
    endpoints are reordered by fraction comparison.
    """

    lower: CircularFraction = Field(..., description="Smaller endpoint")
    upper: CircularFraction = Field(..., description="Larger endpoint")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def order_endpoints(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lower, upper = data.get("lower"), data.get("upper")
        if isinstance(lower, CircularFraction) and isinstance(upper, CircularFraction):
            if lower.greater_than(upper):
                return {**data, "lower": upper, "upper": lower}
        return data

    @classmethod
    def create(cls, a: CircularFraction, b: CircularFraction) -> "Chord":
        return cls(lower=a, upper=b)

    @property
    def endpoints(self) -> tuple[CircularFraction, CircularFraction]:
        return self.lower, self.upper

    # -------------------------------------------------------------------------
    # Regions
    # -------------------------------------------------------------------------

    def on_boundary(self, point: CircularFraction) -> bool:
        return self.lower.equals(point) or self.upper.equals(point)

    def in_inner_region(self, point: CircularFraction) -> bool:
        """lower < point < upper (strict)."""
        return point.greater_than(self.lower) and point.less_than(self.upper)

    def in_inner_region_loose(self, point: CircularFraction) -> bool:
        return self.in_inner_region(point) or self.on_boundary(point)

    def in_outer_region(self, point: CircularFraction) -> bool:
        return not self.in_inner_region_loose(point)

    def in_outer_region_loose(self, point: CircularFraction) -> bool:
        return not self.in_inner_region(point)

    def contains(self, point: CircularFraction, flip: bool = False) -> bool:
        """
        Point lies strictly inside the designated side of the chord.

        Args:
            point: Candidate point
            flip: Select the majority arc instead of the minority one

        Returns:
            Outer-region membership if (width > 1/2) XOR flip, else inner-region
            membership. Endpoints are never contained.
        """
        if _xor(self.width() > HALF_TURN, flip):
            return self.in_outer_region(point)
        return self.in_inner_region(point)

    def contains_loose(self, point: CircularFraction, flip: bool = False) -> bool:
        """contains() with both endpoints counted as inside."""
        if _xor(self.width() > HALF_TURN, flip):
            return self.in_outer_region_loose(point)
        return self.in_inner_region_loose(point)

    # -------------------------------------------------------------------------
    # Measures
    # -------------------------------------------------------------------------

    def width(self) -> Fraction:
        """
        Exact length of the inner arc, upper - lower.

        Computed as (uN·lD - lN·uD) / (uD·lD) on the unreduced numerators and
        denominators of both endpoints.
        """
        upper_num, upper_denom = self.upper.numerator, self.upper.denominator
        lower_num, lower_denom = self.lower.numerator, self.lower.denominator

        return Fraction(
            upper_num * lower_denom - lower_num * upper_denom,
            upper_denom * lower_denom,
        )

    def side_measure(self, flip: bool = False) -> Fraction:
        """Exact length of the arc selected by contains(..., flip)."""
        width = self.width()
        if _xor(width > HALF_TURN, flip):
            return 1 - width
        return width

    def is_diameter(self) -> bool:
        """Both arcs have exactly the same length."""
        upper_num, upper_denom = self.upper.numerator, self.upper.denominator
        lower_num, lower_denom = self.lower.numerator, self.lower.denominator

        # upper >= lower, so the difference is non-negative
        return 2 * (upper_num * lower_denom - lower_num * upper_denom) == upper_denom * lower_denom

    # -------------------------------------------------------------------------
    # Relations and dynamics
    # -------------------------------------------------------------------------

    def intersects(self, other: "Chord") -> bool:
        """
        Endpoints of the two chords interleave around the circle.

        Chords sharing an endpoint, or identical chords, do not intersect.
        """

        def contains_first_but_not_second(
            first: CircularFraction, second: CircularFraction
        ) -> bool:
            return self.in_inner_region(first) and self.in_outer_region(second)

        return contains_first_but_not_second(
            other.lower, other.upper
        ) or contains_first_but_not_second(other.upper, other.lower)

    def map_forward(self) -> "Chord":
        return Chord.create(self.lower.map_forward(), self.upper.map_forward())

    def __str__(self) -> str:
        return f"{self.lower}, {self.upper}"
