"""
Core domain models and mathematical primitives.

- math: digit sequence primitives
- domain: CircularFraction, Chord, Polygon

Nothing in core depends on the branch, pullback or contracts layers.
"""
