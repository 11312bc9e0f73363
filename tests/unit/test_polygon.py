"""
Tests for Polygon

Covers:
1. Sorting and deduplication of vertices
2. Edges (to_chords)
3. Forward image
"""

from laminations.core.domain import Chord, Polygon, parse_unsafe_factory

binary = parse_unsafe_factory(2)
quaternary = parse_unsafe_factory(4)


class TestConstruction:
    """Tests for vertex normalization"""

    def test_sorted(self) -> None:
        polygon = Polygon.create([binary("_100"), binary("_001"), binary("_010")])
        assert str(polygon) == "_001, _010, _100"

    def test_duplicates_removed(self) -> None:
        polygon = Polygon.create([binary("_001"), binary("1_001"), binary("_001")])
        assert len(polygon) == 2

    def test_cross_base_duplicates_removed(self) -> None:
        """1/2 written in base 2 and base 4 is one vertex"""
        polygon = Polygon.create([binary("1_"), quaternary("2_"), binary("_")])
        assert len(polygon) == 2

    def test_from_chord(self) -> None:
        chord = Chord.create(binary("1_"), binary("_"))
        assert str(Polygon.from_chord(chord)) == "_, 1_"

    def test_empty(self) -> None:
        assert len(Polygon.create([])) == 0
        assert str(Polygon.create([])) == ""


class TestToChords:
    """Tests for to_chords"""

    def test_triangle_has_three_edges(self) -> None:
        polygon = Polygon.create([binary("_001"), binary("_010"), binary("_100")])
        assert [str(c) for c in polygon.to_chords()] == [
            "_001, _010",
            "_010, _100",
            "_001, _100",
        ]

    def test_two_points_single_edge(self) -> None:
        polygon = Polygon.create([binary("_001"), binary("_010")])
        assert len(polygon.to_chords()) == 1


class TestMapForward:
    """Tests for Polygon.map_forward"""

    def test_periodic_triangle_is_invariant(self) -> None:
        triangle = Polygon.create([binary("_001"), binary("_010"), binary("_100")])
        assert str(triangle.map_forward()) == str(triangle)

    def test_vertices_may_merge(self) -> None:
        """0 and 1/2 both map to 0"""
        polygon = Polygon.create([binary("_"), binary("1_")])
        image = polygon.map_forward()
        assert len(image) == 1
        assert str(image) == "_"
