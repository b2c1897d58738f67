"""
DecimalBigInt — Arbitrary-Precision Unsigned Decimal Integer

Immutable Pydantic model of a non-negative integer of unbounded size,
stored as a little-endian tuple of decimal digits (index 0 is the
least-significant digit).

CRITICAL INVARIANTS:
1. Every stored digit is in [0, 9]; anything else → InvalidDigit
2. No non-essential most-significant zeros; zero is exactly (0,)
3. The digit tuple is never empty
4. Instances are frozen: add/multiply always return new instances

Every construction path (from_digits, the model constructor,
model_validate, model_validate_json, model_copy) runs the same
normalization, including the internal constructions done by add and
multiply. model_construct is the one exception: it skips validation by
definition and must only be fed digits that are already canonical.

Example:
    >>> a = DecimalBigInt.from_digits([1, 3, 0])     # 31
    >>> b = DecimalBigInt.from_digits([7, 8, 9, 1])  # 987
    >>> a.add(b).digits                              # 1018
    (8, 1, 0, 2)
    >>> a.digits
    (1, 3)
"""

from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.digit_arithmetic import (
    ZERO_DIGITS,
    InvalidDigit,
    add_digit_sequences,
    multiply_by_digit,
    shift_digits,
    strip_leading_zeros,
    validate_digits,
)


# =============================================================================
# DECIMAL BIGINT MODEL
# =============================================================================


class DecimalBigInt(BaseModel):
    """
    Non-negative integer of any size in base 10.

    Immutable model (frozen=True). Equality and hashing follow the
    canonical digit tuple, so equal values compare equal regardless of how
    they were built.

    No ordering, subtraction or division is provided.

    model_construct bypasses validation (pydantic contract) and can build
    instances that break the invariants; use from_digits instead.
    """

    digits: tuple[int, ...] = Field(
        ...,
        min_length=1,
        description="Canonical little-endian decimal digits (index 0 = least significant)",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits", mode="before")
    @classmethod
    def canonicalize_digits(cls, v: Any) -> tuple[int, ...]:
        """
        Validate every digit and strip most-significant zeros.

        Raises:
            InvalidDigit: if any element is outside [0, 9]
        """
        return strip_leading_zeros(validate_digits(v))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> "DecimalBigInt":
        """
        Build a DecimalBigInt from digits, least-significant first.

        Args:
            digits: Any iterable of ints in [0, 9]

        Returns:
            New canonical instance

        Raises:
            InvalidDigit: if any element is outside [0, 9]

        Examples:
            >>> DecimalBigInt.from_digits([7, 8, 9, 0, 0, 0]).digits
            (7, 8, 9)
            >>> DecimalBigInt.from_digits([0, 0, 0]).digits
            (0,)
        """
        return cls(digits=digits)

    def model_copy(
        self,
        *,
        update: Optional[Mapping[str, Any]] = None,
        deep: bool = False,
    ) -> "DecimalBigInt":
        """
        Copy, re-validating any overridden digits.

        BaseModel.model_copy assigns update values as is; the copy is
        rebuilt through from_digits so the invariants hold.

        Raises:
            InvalidDigit: if an overridden digit is outside [0, 9]

        Examples:
            >>> ONE.model_copy(update={"digits": [2, 0]}).digits
            (2,)
        """
        copied = super().model_copy(update=update, deep=deep)
        if not update:
            return copied
        return type(self).from_digits(copied.digits)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "DecimalBigInt") -> "DecimalBigInt":
        """
        Sum of self and other.

        Schoolbook addition with carry propagation. Neither operand is
        modified.

        Examples:
            >>> a = DecimalBigInt.from_digits([5, 2])  # 25
            >>> b = DecimalBigInt.from_digits([8, 9])  # 98
            >>> a.add(b).digits  # 123
            (3, 2, 1)
        """
        _require_decimal_bigint(other)
        return DecimalBigInt.from_digits(add_digit_sequences(self.digits, other.digits))

    def multiply(self, other: "DecimalBigInt") -> "DecimalBigInt":
        """
        Product of self and other.

        Long multiplication: for every digit of self, the partial product
        against all digits of other is shifted to its place value and
        accumulated with add, starting from zero.

        Examples:
            >>> a = DecimalBigInt.from_digits([2, 1])     # 12
            >>> b = DecimalBigInt.from_digits([5, 4, 3])  # 345
            >>> a.multiply(b).digits  # 4140
            (0, 4, 1, 4)
        """
        _require_decimal_bigint(other)

        result = DecimalBigInt.from_digits(ZERO_DIGITS)
        for place, digit in enumerate(self.digits):
            partial = shift_digits(multiply_by_digit(other.digits, digit), place)
            result = result.add(DecimalBigInt.from_digits(partial))

        return result

    def __add__(self, other: object) -> "DecimalBigInt":
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object) -> "DecimalBigInt":
        if not isinstance(other, DecimalBigInt):
            return NotImplemented
        return self.multiply(other)

    # -------------------------------------------------------------------------
    # Queries & display
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """True for the canonical zero (0,)."""
        return self.digits == ZERO_DIGITS

    def num_digits(self) -> int:
        """Number of significant decimal digits (1 for zero)."""
        return len(self.digits)

    def __str__(self) -> str:
        """Decimal notation, most-significant digit first."""
        return "".join(str(d) for d in reversed(self.digits))

    def __repr__(self) -> str:
        return f"DecimalBigInt('{self}')"


# =============================================================================
# MODULE-LEVEL OPERATIONS
# =============================================================================


def _require_decimal_bigint(value: object) -> None:
    if not isinstance(value, DecimalBigInt):
        raise TypeError(f"expected DecimalBigInt, got {type(value).__name__}")


def from_digits(digits: Iterable[int]) -> DecimalBigInt:
    """Alias of DecimalBigInt.from_digits."""
    return DecimalBigInt.from_digits(digits)


def add(a: DecimalBigInt, b: DecimalBigInt) -> DecimalBigInt:
    """a + b. Commutative, associative, ZERO is the identity."""
    _require_decimal_bigint(a)
    return a.add(b)


def multiply(a: DecimalBigInt, b: DecimalBigInt) -> DecimalBigInt:
    """a × b. Commutative; multiplying by ZERO yields ZERO."""
    _require_decimal_bigint(a)
    return a.multiply(b)


ZERO = DecimalBigInt.from_digits(ZERO_DIGITS)
ONE = DecimalBigInt.from_digits((1,))
