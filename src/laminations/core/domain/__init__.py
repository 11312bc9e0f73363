"""
Domain models and value objects.

Contains the immutable geometric objects of the circle: CircularFraction,
Chord, Polygon.
"""

from laminations.core.domain.chord import HALF_TURN, Chord
from laminations.core.domain.fraction import (
    PARSE_EXACT_SEPARATOR,
    WIDE_DIGIT_BASE,
    WIDE_DIGIT_DELIMITER,
    CircularFraction,
    FractionParseError,
    FractionParseResult,
    InvalidDigitError,
    compare,
    create,
    digit_at,
    equals,
    fraction_factory,
    greater_than,
    less_than,
    map_backward,
    map_forward,
    parse,
    parse_factory,
    parse_unsafe,
    parse_unsafe_factory,
    to_rational,
)
from laminations.core.domain.polygon import Polygon

__all__ = [
    # Fraction Constants
    "PARSE_EXACT_SEPARATOR",
    "WIDE_DIGIT_BASE",
    "WIDE_DIGIT_DELIMITER",
    # Fraction Exceptions
    "InvalidDigitError",
    "FractionParseError",
    # Fraction Types
    "CircularFraction",
    "FractionParseResult",
    # Fraction Functions
    "create",
    "fraction_factory",
    "compare",
    "equals",
    "less_than",
    "greater_than",
    "digit_at",
    "to_rational",
    "map_forward",
    "map_backward",
    "parse",
    "parse_factory",
    "parse_unsafe",
    "parse_unsafe_factory",
    # Chord
    "HALF_TURN",
    "Chord",
    # Polygon
    "Polygon",
]
