"""
Polygon — Leaf of a Lamination

Immutable Pydantic model: an ordered (by circle order), duplicate-free set of
vertices. A two-vertex polygon is a single chord.
"""

from typing import Any, Iterable

from pydantic import BaseModel, Field, model_validator

from .chord import Chord
from .fraction import CircularFraction


class Polygon(BaseModel):
    """
    Finite union of chords given by its vertices.

    Vertices are sorted and deduplicated at construction; every transformation
    returns a new Polygon.
    """

    points: tuple[CircularFraction, ...] = Field(default=(), description="Sorted vertices")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def sort_points(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "points" not in data:
            return data

        unique: list[CircularFraction] = []
        for point in sorted(data["points"]):
            if not unique or not unique[-1].equals(point):
                unique.append(point)

        return {**data, "points": tuple(unique)}

    @classmethod
    def create(cls, points: Iterable[CircularFraction]) -> "Polygon":
        return cls(points=tuple(points))

    @classmethod
    def from_chord(cls, chord: Chord) -> "Polygon":
        return cls.create(chord.endpoints)

    def __len__(self) -> int:
        return len(self.points)

    def map_forward(self) -> "Polygon":
        """Image under the digit shift, re-sorted (vertices may merge)."""
        return Polygon.create(point.map_forward() for point in self.points)

    def to_chords(self) -> list[Chord]:
        """
        Edges of the polygon: consecutive vertices plus the closing edge.

        A two-vertex polygon has a single edge.
        """
        points = self.points
        result = [Chord.create(points[i], points[i + 1]) for i in range(len(points) - 1)]

        if len(points) > 2:
            result.append(Chord.create(points[0], points[-1]))

        return result

    def __str__(self) -> str:
        return ", ".join(str(point) for point in self.points)
