"""
CircularFraction — Canonical Point of the Circle [0, 1)

A point is a base-b expansion 0.<exact><repeating><repeating>..., stored in
canonical form so that structural identity within one base coincides with
equality of the represented rational number.

Examples (textual form <exact>_<repeating>):
- base 3, "1_"   -> 0.1 (ternary)        = 1/3
- base 2, "_101" -> 0.101101101...       = 5/7
- base 2, "1_101" -> 0.1101101101...     = 6/7

Immutable Pydantic model (frozen=True): every operation returns a new point.
Numerator, denominator and text form are computed once at construction.

CRITICAL INVARIANTS:
1. repeating_part has minimal period and exact_part is maximally reduced
2. repeating_part is never (base - 1,) or (0,)
3. Terminating expansions carry no trailing zeros
4. Equality and hashing follow the rational value, across bases
5. Ordering is exact; floats appear only in to_number()
"""

from dataclasses import dataclass
from functools import partial
from math import gcd
from typing import Any, Callable, Final, Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from laminations.core.math.digit_sequences import (
    canonicalize_digits,
    rotate_left,
    value_from_digits,
)


# =============================================================================
# TEXT FORMAT CONSTANTS
# =============================================================================

# Separator between exact and repeating digits: "<exact>_<repeating>"
PARSE_EXACT_SEPARATOR: Final[str] = "_"

# From this base on, digits no longer fit in one character
WIDE_DIGIT_BASE: Final[int] = 10

# Delimiter between digits for bases >= WIDE_DIGIT_BASE
WIDE_DIGIT_DELIMITER: Final[str] = ","


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitError(Exception):
    """
    A digit outside [0, base) was passed to the fraction constructor.

    Never recovered: the caller supplied an expansion that does not exist in
    the requested base.
    """

    def __init__(self, base: int, digit: Any, position: str):
        self.base = base
        self.digit = digit
        self.position = position
        super().__init__(
            f"Digit {digit!r} in {position} part is outside [0, {base}) for base {base}"
        )


class FractionParseError(ValueError):
    """
    Malformed textual fraction, raised by parse_unsafe().

    Carries every problem found in the text, not only the first one.
    """

    def __init__(self, text: str, errors: Sequence[str]):
        self.text = text
        self.errors = tuple(errors)
        super().__init__(f"Cannot parse fraction {text!r}: " + "; ".join(self.errors))


# =============================================================================
# HELPERS
# =============================================================================


def _joiner(base: int) -> str:
    return "" if base < WIDE_DIGIT_BASE else WIDE_DIGIT_DELIMITER


def _is_valid_base(base: Any) -> bool:
    return not isinstance(base, bool) and isinstance(base, int) and base >= 2


def _check_digits(base: int, digits: Sequence[Any], position: str) -> tuple[int, ...]:
    for digit in digits:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < base:
            raise InvalidDigitError(base, digit, position)
    return tuple(digits)


def _repeating_denominator(base: int, repeating_len: int) -> int:
    result = base**repeating_len - 1
    if result == 0:
        return 1
    return result


# =============================================================================
# CIRCULAR FRACTION MODEL
# =============================================================================


class CircularFraction(BaseModel):
    """
    Canonical eventually periodic base-b point of the circle.

    Construct through CircularFraction(base=..., exact_part=..., repeating_part=...),
    create() or parse(); raw digits are canonicalized before the model is built.
    The derived fields are always recomputed, values passed for them are ignored.
    """

    base: int = Field(..., ge=2, description="Radix of the expansion")
    exact_part: tuple[int, ...] = Field(default=(), description="Digits before the cycle")
    repeating_part: tuple[int, ...] = Field(default=(), description="Minimal repeating cycle")

    # Derived, set once in canonicalize()
    numerator: int = Field(default=0, repr=False, description="Unreduced numerator")
    denominator: int = Field(default=1, repr=False, description="Unreduced denominator")
    text: str = Field(default="_", repr=False, description="Canonical <exact>_<repeating> form")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """
        Range-check digits and rewrite them into canonical form.

        Raises:
            InvalidDigitError: If any digit is outside [0, base)
            ValueError: If base is not an integer >= 2 (reported by pydantic)
        """
        if not isinstance(data, dict):
            return data

        base = data.get("base")
        if not _is_valid_base(base):
            raise ValueError(f"base must be an integer >= 2, got {base!r}")

        exact = _check_digits(base, data.get("exact_part", ()), "exact")
        repeating = _check_digits(base, data.get("repeating_part", ()), "repeating")
        exact, repeating = canonicalize_digits(base, exact, repeating)

        repeating_denom = _repeating_denominator(base, len(repeating))
        joiner = _joiner(base)

        return {
            "base": base,
            "exact_part": exact,
            "repeating_part": repeating,
            "numerator": repeating_denom * value_from_digits(base, exact)
            + value_from_digits(base, repeating),
            "denominator": repeating_denom * base ** len(exact),
            "text": (
                joiner.join(map(str, exact))
                + PARSE_EXACT_SEPARATOR
                + joiner.join(map(str, repeating))
            ),
        }

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        base: int,
        exact_part: Sequence[int] = (),
        repeating_part: Sequence[int] = (),
    ) -> "CircularFraction":
        """Canonical fraction from raw digit blocks."""
        return cls(base=base, exact_part=tuple(exact_part), repeating_part=tuple(repeating_part))

    @classmethod
    def zero(cls, base: int) -> "CircularFraction":
        return cls.create(base)

    # -------------------------------------------------------------------------
    # Digits and values
    # -------------------------------------------------------------------------

    @property
    def exact_length(self) -> int:
        return len(self.exact_part)

    @property
    def repeating_length(self) -> int:
        return len(self.repeating_part)

    @property
    def length(self) -> int:
        return self.exact_length + self.repeating_length

    def digit_at(self, index: int) -> int:
        """
        Digit at position index after the radix point (0-based).

        Beyond the exact part digits cycle through repeating_part; a terminating
        expansion continues with zeros.

        Examples:
            base 3, "10_102": digit_at(2) == 1, digit_at(19) == 2
        """
        if index < self.exact_length:
            return self.exact_part[index]

        if self.repeating_length == 0:
            return 0

        return self.repeating_part[(index - self.exact_length) % self.repeating_length]

    def to_rational(self) -> tuple[int, int]:
        """
        Reduced (numerator, denominator) pair.

        Examples:
            base 4, "31_102" -> (93, 112)
            base 3, "_"      -> (0, 1)
        """
        divisor = gcd(self.numerator, self.denominator)
        return self.numerator // divisor, self.denominator // divisor

    def to_number(self) -> float:
        """Float approximation. Display only, never used for comparisons."""
        return self.numerator / self.denominator

    # -------------------------------------------------------------------------
    # Dynamics
    # -------------------------------------------------------------------------

    def map_forward(self) -> "CircularFraction":
        """
        One step of the digit shift x -> b·x mod 1.

        Drops the first exact digit; the cycle rotates left only when the exact
        part is already empty.
        """
        return CircularFraction.create(
            self.base,
            self.exact_part[1:],
            rotate_left(self.repeating_part, 0 if self.exact_length > 0 else 1),
        )

    def map_backward(self) -> tuple["CircularFraction", ...]:
        """
        All base preimages under map_forward(), ordered by prepended digit.

        Examples:
            base 3, "_01" -> ("0_01", "_10", "2_01")
        """
        return tuple(
            CircularFraction.create(self.base, (digit,) + self.exact_part, self.repeating_part)
            for digit in range(self.base)
        )

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equals(self, other: "CircularFraction") -> bool:
        if self.base != other.base:
            return self.numerator * other.denominator == other.numerator * self.denominator

        return self.exact_part == other.exact_part and self.repeating_part == other.repeating_part

    def less_than(self, other: "CircularFraction") -> bool:
        """
        Strict order of the represented values.

        Same base: first differing digit within 2·max(len) positions, which
        covers preperiod plus both periods. Different bases: cross-multiplied
        exact rationals.
        """
        if self.base != other.base:
            return self.numerator * other.denominator < other.numerator * self.denominator

        upper_bound = 2 * max(self.length, other.length)
        for index in range(upper_bound):
            this_digit = self.digit_at(index)
            other_digit = other.digit_at(index)
            if this_digit != other_digit:
                return this_digit < other_digit

        return False

    def greater_than(self, other: "CircularFraction") -> bool:
        return compare(self, other) == 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularFraction):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.to_rational())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CircularFraction):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CircularFraction):
            return NotImplemented
        return self.less_than(other) or self.equals(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CircularFraction):
            return NotImplemented
        return other.less_than(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CircularFraction):
            return NotImplemented
        return other.less_than(self) or self.equals(other)

    def __str__(self) -> str:
        return self.text


# =============================================================================
# FUNCTIONAL API
# =============================================================================


def create(
    base: int, exact_part: Sequence[int] = (), repeating_part: Sequence[int] = ()
) -> CircularFraction:
    """
    Canonical fraction from raw digits.

    Raises:
        InvalidDigitError: If any digit is outside [0, base)
    """
    return CircularFraction.create(base, exact_part, repeating_part)


def fraction_factory(base: int) -> Callable[..., CircularFraction]:
    """create() with the base fixed: binary = fraction_factory(2); binary([1], [0, 1])."""
    return partial(create, base)


def compare(a: CircularFraction, b: CircularFraction) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if a.equals(b):
        return 0

    if a.less_than(b):
        return -1

    return 1


def equals(a: CircularFraction, b: CircularFraction) -> bool:
    return a.equals(b)


def less_than(a: CircularFraction, b: CircularFraction) -> bool:
    return a.less_than(b)


def greater_than(a: CircularFraction, b: CircularFraction) -> bool:
    return a.greater_than(b)


def digit_at(fraction: CircularFraction, index: int) -> int:
    return fraction.digit_at(index)


def to_rational(fraction: CircularFraction) -> tuple[int, int]:
    return fraction.to_rational()


def map_forward(fraction: CircularFraction) -> CircularFraction:
    return fraction.map_forward()


def map_backward(fraction: CircularFraction) -> tuple[CircularFraction, ...]:
    return fraction.map_backward()


# =============================================================================
# PARSING
# =============================================================================


@dataclass(frozen=True)
class FractionParseResult:
    """Result of parse(): either a fraction or the full list of problems."""

    ok: bool
    fraction: Optional[CircularFraction]
    errors: tuple[str, ...]

    # Source text, for diagnostics
    text: str

    def unwrap(self) -> CircularFraction:
        """
        Returns:
            The parsed fraction

        Raises:
            FractionParseError: If parsing failed
        """
        if not self.ok or self.fraction is None:
            raise FractionParseError(self.text, self.errors)
        return self.fraction


def _parse_digits(base: int, text: str, position: str, errors: list[str]) -> list[int]:
    if text == "":
        return []

    delimiter = _joiner(base)
    tokens = list(text) if delimiter == "" else text.split(delimiter)

    digits = []
    for token in tokens:
        if token == "":
            errors.append(f"{position} part: digits cannot be empty")
            continue
        try:
            digit = int(token)
        except ValueError:
            errors.append(f"{position} part: {token!r} is not an integer")
            continue
        if not 0 <= digit < base:
            errors.append(f"{position} part: digit {digit} is outside [0, {base})")
            continue
        digits.append(digit)

    return digits


def parse(base: int, text: str) -> FractionParseResult:
    """
    Parse "<exact>_<repeating>" without raising on malformed input.

    Digits are written without separators for base < 10 and comma-separated
    from base 10 on. A missing "_" means a terminating expansion.

    Args:
        base: Radix (>= 2)
        text: Textual fraction, e.g. "1_010" (base 2) or "11_11,9,2" (base 12)

    Returns:
        FractionParseResult with every per-digit problem collected in errors.
        An invalid base is reported as the only error.

    Examples:
        >>> parse(3, "1_").unwrap().to_rational()
        (1, 3)
        >>> parse(3, "1x_3").errors
        ("exact part: 'x' is not an integer", 'repeating part: digit 3 is outside [0, 3)')
        >>> parse(1, "_").errors
        ('base must be an integer >= 2, got 1',)
    """
    if not _is_valid_base(base):
        return FractionParseResult(
            ok=False,
            fraction=None,
            errors=(f"base must be an integer >= 2, got {base!r}",),
            text=text,
        )

    parts = text.split(PARSE_EXACT_SEPARATOR)
    errors: list[str] = []

    if len(parts) > 2:
        errors.append(
            f"expected at most one {PARSE_EXACT_SEPARATOR!r} separator, found {len(parts) - 1}"
        )

    exact_text = parts[0]
    repeating_text = parts[1] if len(parts) > 1 else ""

    exact = _parse_digits(base, exact_text, "exact", errors)
    repeating = _parse_digits(base, repeating_text, "repeating", errors)

    if errors:
        return FractionParseResult(ok=False, fraction=None, errors=tuple(errors), text=text)

    return FractionParseResult(
        ok=True, fraction=create(base, exact, repeating), errors=(), text=text
    )


def parse_unsafe(base: int, text: str) -> CircularFraction:
    """
    Parse trusted input.

    Raises:
        FractionParseError: If the text is malformed
    """
    return parse(base, text).unwrap()


def parse_factory(base: int) -> Callable[[str], FractionParseResult]:
    return partial(parse, base)


def parse_unsafe_factory(base: int) -> Callable[[str], CircularFraction]:
    """parse_unsafe() with the base fixed: ternary = parse_unsafe_factory(3); ternary("_01")."""
    return partial(parse_unsafe, base)
