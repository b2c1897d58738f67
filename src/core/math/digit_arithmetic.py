"""
Digit Arithmetic — Schoolbook Kernels over Decimal Digit Sequences

Pure functions over little-endian sequences of decimal digits
(index 0 is the least-significant digit). They know nothing about the
DecimalBigInt model: they accept plain sequences of ints and return
plain tuples, and every result is handed back to the model constructor
for canonicalization.

CRITICAL INVARIANTS:
1. Every digit handled here is an int in [MIN_DIGIT, MAX_DIGIT]
2. A carry is never dropped: leftover carry is flushed digit by digit
3. No native fixed-width integer ever holds the full value, only
   single digits and bounded carries
4. All operations are deterministic and never mutate their inputs

ALGORITHMS:
    add:      s_i = carry + a_i + b_i;  out_i = s_i mod 10;  carry = s_i div 10
    partial:  p_j = d * b_j + carry;    out_j = p_j mod 10;  carry = p_j div 10
    shift:    prefix `places` zeros at the least-significant end (× 10^places)
"""

from typing import Final, Iterable, Optional, Sequence

# =============================================================================
# DIGIT DOMAIN
# =============================================================================

DECIMAL_BASE: Final[int] = 10

MIN_DIGIT: Final[int] = 0
MAX_DIGIT: Final[int] = 9

# Canonical representation of the value zero
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigit(Exception):
    """
    A value outside the decimal digit domain [0, 9] was supplied.

    Raised at the construction boundary only. Arithmetic over valid
    instances cannot produce it.

    Must not subclass ValueError: pydantic wraps ValueError raised inside
    validators into ValidationError, other exceptions reach the caller as is.

    Attributes:
        value: The offending element (or the whole input when it is not a
            sequence of digits at all)
        position: Index of the offending element, least-significant first,
            or None when the value is not part of a digit sequence (the
            input as a whole, or a lone multiplier digit)
    """

    def __init__(
        self,
        value: object,
        position: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.value = value
        self.position = position
        if message is None and position is None:
            message = f"expected a sequence of decimal digits, got {value!r}"
        elif message is None:
            message = (
                f"only digits {MIN_DIGIT} through {MAX_DIGIT} allowed, "
                f"got {value!r} at position {position}"
            )
        super().__init__(message)


# =============================================================================
# VALIDATION & NORMALIZATION
# =============================================================================


def is_valid_digit(value: object) -> bool:
    """
    Check that value is a plain int in [0, 9].

    bool is rejected even though it subclasses int.

    Examples:
        >>> is_valid_digit(7)
        True
        >>> is_valid_digit(10)
        False
        >>> is_valid_digit(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_DIGIT <= value <= MAX_DIGIT


def validate_digits(values: Iterable[object]) -> tuple[int, ...]:
    """
    Materialize and validate a digit sequence.

    Args:
        values: Any iterable of digits, least-significant first
            (list, tuple, generator...)

    Returns:
        The digits as a tuple, in the same order

    Raises:
        InvalidDigit: if any element is outside [0, 9] or not an int,
            or if values is a str/bytes object
        TypeError: if values is not iterable

    Examples:
        >>> validate_digits([4, 1, 3])
        (4, 1, 3)
        >>> validate_digits(iter([0, 0]))
        (0, 0)
    """
    # A str is iterable but its elements are characters, not digits
    if isinstance(values, (str, bytes, bytearray)):
        raise InvalidDigit(values)

    digits = tuple(values)
    for position, value in enumerate(digits):
        if not is_valid_digit(value):
            raise InvalidDigit(value, position)

    return digits


def strip_leading_zeros(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Remove non-essential most-significant zeros.

    With little-endian storage the most-significant zeros sit at the END
    of the sequence. An empty or all-zero input normalizes to (0,).

    Examples:
        >>> strip_leading_zeros((7, 8, 9, 0, 0, 0))
        (7, 8, 9)
        >>> strip_leading_zeros((0, 0, 0))
        (0,)
        >>> strip_leading_zeros(())
        (0,)
    """
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1

    if end == 0:
        return ZERO_DIGITS

    return tuple(digits[:end])


# =============================================================================
# ADDITION
# =============================================================================


def add_digit_sequences(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Position-wise addition with carry propagation.

    Missing positions of the shorter operand count as 0. The result is
    not canonicalized (callers pass it through the constructor).

    Args:
        a: Little-endian digits of the first operand
        b: Little-endian digits of the second operand

    Returns:
        Little-endian digits of a + b

    Examples:
        >>> add_digit_sequences((5, 2), (8, 9))  # 25 + 98
        (3, 2, 1)
        >>> add_digit_sequences((9, 9, 9), (1,))  # 999 + 1
        (0, 0, 0, 1)
    """
    result: list[int] = []
    carry = 0

    len_a = len(a)
    len_b = len(b)
    for i in range(max(len_a, len_b)):
        total = carry
        total += a[i] if i < len_a else 0
        total += b[i] if i < len_b else 0

        result.append(total % DECIMAL_BASE)
        carry = total // DECIMAL_BASE

    while carry > 0:
        result.append(carry % DECIMAL_BASE)
        carry //= DECIMAL_BASE

    return tuple(result)


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply_by_digit(digits: Sequence[int], digit: int) -> tuple[int, ...]:
    """
    Partial product of a single digit against a multi-digit operand.

    Args:
        digits: Little-endian digits of the multi-digit operand
        digit: Single multiplier digit in [0, 9]

    Returns:
        Little-endian digits of digit × digits (not canonicalized)

    Raises:
        InvalidDigit: if digit is outside [0, 9]

    Examples:
        >>> multiply_by_digit((5, 4, 3), 2)  # 2 × 345
        (0, 9, 6)
        >>> multiply_by_digit((9, 9), 9)  # 9 × 99
        (1, 9, 8)
    """
    if not is_valid_digit(digit):
        raise InvalidDigit(
            digit,
            message=f"multiplier must be a single digit {MIN_DIGIT} through {MAX_DIGIT}, got {digit!r}",
        )

    result: list[int] = []
    carry = 0

    for d in digits:
        product = digit * d + carry
        result.append(product % DECIMAL_BASE)
        carry = product // DECIMAL_BASE

    # Exhaust whatever carry remains
    while carry != 0:
        result.append(carry % DECIMAL_BASE)
        carry //= DECIMAL_BASE

    return tuple(result)


def shift_digits(digits: Sequence[int], places: int) -> tuple[int, ...]:
    """
    Multiply by 10^places by prefixing zeros at the least-significant end.

    Examples:
        >>> shift_digits((0, 9, 6), 1)  # 690 → 6900
        (0, 0, 9, 6)
        >>> shift_digits((3,), 0)
        (3,)
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    return (0,) * places + tuple(digits)
