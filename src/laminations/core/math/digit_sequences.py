"""
Digit Sequences — Canonical Forms for Eventually Periodic Expansions

Primitives over finite digit sequences used to canonicalize base-b expansions
of the form 0.<exact><repeating><repeating>...:
- Minimal period reduction of the repeating block (KMP failure table)
- Detection of exact-part suffixes that already belong to the cycle
- Cyclic rotations, carry increment, trailing-zero stripping
- Integer value of a digit block

CRITICAL INVARIANTS:
1. All functions are pure: inputs are never mutated, tuples are returned
2. canonicalize_digits is idempotent on its own output
3. A repeating block of (base - 1,) never survives canonicalization
4. The empty repeating block means a terminating expansion
"""

from typing import Sequence


# =============================================================================
# PERIOD REDUCTION
# =============================================================================


def make_failure_table(sequence: Sequence[int]) -> tuple[int, ...]:
    """
    Prefix function of the KMP pattern-matching algorithm.

    table[i] is the length of the longest proper prefix of sequence[:i + 1]
    that is also a suffix of it.

    Args:
        sequence: Arbitrary digit sequence

    Returns:
        Tuple of the same length as sequence

    Examples:
        >>> make_failure_table([1, 2, 1, 1, 2, 1, 1, 2, 1])
        (0, 0, 1, 1, 2, 3, 4, 5, 6)
    """
    table = [0] * len(sequence)
    prefix_end = 0  # exclusive
    cursor = 1

    while cursor < len(sequence):
        if sequence[cursor] == sequence[prefix_end]:
            prefix_end += 1
            table[cursor] = prefix_end
            cursor += 1
        elif prefix_end == 0:
            table[cursor] = 0
            cursor += 1
        else:
            # Retry against the longest border of the current prefix
            prefix_end = table[prefix_end - 1]

    return tuple(table)


def reduce_circular_sequence(sequence: Sequence[int]) -> tuple[int, ...]:
    """
    Shortest block w such that sequence is w repeated a whole number of times.

    The candidate period is len - table[len - 1]; it is accepted only when it
    divides the length, otherwise the sequence is irreducible.

    Args:
        sequence: Repeating block of an expansion

    Returns:
        Minimal-period block (the input itself when irreducible)

    Examples:
        >>> reduce_circular_sequence([3, 3, 3])
        (3,)
        >>> reduce_circular_sequence([1, 2, 3, 1, 2, 3])
        (1, 2, 3)
        >>> reduce_circular_sequence([1, 2, 3, 1, 2])
        (1, 2, 3, 1, 2)
    """
    size = len(sequence)
    if size == 0:
        return ()

    table = make_failure_table(sequence)
    candidate_length = size - table[size - 1]

    if size % candidate_length == 0:
        return tuple(sequence[:candidate_length])

    return tuple(sequence)


def find_circular_repeating_suffix(
    sequence: Sequence[int], repeating: Sequence[int]
) -> int:
    """
    Smallest index i such that sequence[i:] followed by repeating forever is
    itself repeating forever (up to rotation).

    Digits are compared from the right, with repeating indexed cyclically from
    its own end. The first mismatch fixes the cut point.

    Args:
        sequence: Exact part of an expansion
        repeating: Already reduced repeating block

    Returns:
        Cut point in [0, len(sequence)]

    Examples:
        >>> find_circular_repeating_suffix([1], [0, 2, 1])
        0
        >>> find_circular_repeating_suffix([3, 1, 1, 0, 2, 1], [0, 2, 1])
        2
        >>> find_circular_repeating_suffix([3], [])
        1
    """
    if len(repeating) == 0:
        return len(sequence)

    for cursor in range(len(sequence)):
        sequence_idx = len(sequence) - cursor - 1
        repeating_idx = len(repeating) - (cursor % len(repeating)) - 1
        if sequence[sequence_idx] != repeating[repeating_idx]:
            return sequence_idx + 1

    return 0


# =============================================================================
# ROTATIONS
# =============================================================================


def rotate_right(sequence: Sequence[int], offset: int) -> tuple[int, ...]:
    """
    Cyclic right rotation: rotate_right([1, 2, 3], 1) == (3, 1, 2).

    Negative offsets rotate left; the empty sequence is returned unchanged.
    """
    size = len(sequence)
    if size == 0:
        return ()

    offset %= size
    return tuple(sequence[size - offset:]) + tuple(sequence[:size - offset])


def rotate_left(sequence: Sequence[int], offset: int) -> tuple[int, ...]:
    """Cyclic left rotation: rotate_left([1, 2, 3], 1) == (2, 3, 1)."""
    return rotate_right(sequence, -offset)


# =============================================================================
# ARITHMETIC ON DIGIT BLOCKS
# =============================================================================


def value_from_digits(base: int, digits: Sequence[int]) -> int:
    """
    Integer value of a big-endian digit block.

    Examples:
        >>> value_from_digits(2, [1, 0, 1])
        5
        >>> value_from_digits(10, [])
        0
    """
    total = 0
    for digit in digits:
        total = total * base + digit
    return total


def increment_digit_sequence(base: int, digits: Sequence[int]) -> tuple[int, ...]:
    """
    Add one unit in the last place, propagating the carry to the left.

    A carry out of the first digit is dropped: on the circle 1 == 0.

    Examples:
        >>> increment_digit_sequence(10, [3, 9])
        (4, 0)
        >>> increment_digit_sequence(2, [1, 1])
        (0, 0)
    """
    result = list(digits)
    idx = len(result) - 1

    while idx >= 0:
        result[idx] += 1
        if result[idx] < base:
            break
        result[idx] = 0
        idx -= 1

    return tuple(result)


def remove_trailing_zeroes(digits: Sequence[int]) -> tuple[int, ...]:
    """Strip zero digits from the right end: (1, 0, 2, 0, 0) -> (1, 0, 2)."""
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


# =============================================================================
# CANONICALIZATION
# =============================================================================


def simplify(
    exact_part: Sequence[int], repeating_part: Sequence[int]
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Minimal period plus maximal reduction of the exact part.

    1. Reduce the repeating block to its minimal period
    2. Cut the exact part where periodicity really starts
    3. Rotate the repeating block right by the number of digits cut

    Args:
        exact_part: Raw exact digits
        repeating_part: Raw repeating digits

    Returns:
        (exact, repeating) without the base-specific normalizations

    Examples:
        >>> simplify([1], [0, 2, 1])
        ((), (1, 0, 2))
        >>> simplify([3, 1, 1, 0, 2, 1, 0, 2, 1], [0, 2, 1, 0, 2, 1])
        ((3, 1), (1, 0, 2))
    """
    repeating = reduce_circular_sequence(repeating_part)
    suffix_start = find_circular_repeating_suffix(exact_part, repeating)
    exact = tuple(exact_part[:suffix_start])

    if len(repeating) == 0:
        return exact, repeating

    suffix_len = len(exact_part) - suffix_start
    return exact, rotate_right(repeating, suffix_len % len(repeating))


def canonicalize_digits(
    base: int, exact_part: Sequence[int], repeating_part: Sequence[int]
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Full canonical form of a base-b expansion.

    On top of simplify():
    - repeating (base - 1,) becomes a terminating expansion (exact + 1 ulp)
    - repeating (0,) becomes the empty cycle
    - terminating expansions lose their trailing zeros

    Args:
        base: Radix (>= 2), digits are assumed already range-checked
        exact_part: Raw exact digits
        repeating_part: Raw repeating digits

    Returns:
        Canonical (exact, repeating) pair

    Examples:
        >>> canonicalize_digits(10, [3], [9])
        ((4,), ())
        >>> canonicalize_digits(2, [], [1])
        ((), ())
        >>> canonicalize_digits(3, [1, 0, 0], [0, 0])
        ((1,), ())
    """
    exact, repeating = simplify(exact_part, repeating_part)

    if repeating == (base - 1,):
        repeating = ()
        exact = increment_digit_sequence(base, exact)

    if repeating == (0,):
        repeating = ()

    if len(repeating) == 0:
        exact = remove_trailing_zeroes(exact)

    return exact, repeating
