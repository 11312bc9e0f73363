"""
Core math modules

Exact primitives on digit sequences of eventually periodic expansions.
"""

from laminations.core.math.digit_sequences import (
    canonicalize_digits,
    find_circular_repeating_suffix,
    increment_digit_sequence,
    make_failure_table,
    reduce_circular_sequence,
    remove_trailing_zeroes,
    rotate_left,
    rotate_right,
    simplify,
    value_from_digits,
)

__all__ = [
    # Period reduction
    "make_failure_table",
    "reduce_circular_sequence",
    "find_circular_repeating_suffix",
    # Rotations
    "rotate_left",
    "rotate_right",
    # Arithmetic on digit blocks
    "increment_digit_sequence",
    "remove_trailing_zeroes",
    "value_from_digits",
    # Canonicalization
    "simplify",
    "canonicalize_digits",
]
