"""
Number Theory — Primality, Triangular Numbers, Divisors, Palindromes

Small integer helpers operating in the unsigned 64-bit domain
[0, U64_MAX]. Python ints never overflow, so the 64-bit ceiling is
enforced explicitly: arguments outside it are rejected and results that
would exceed it raise NativeOverflowError.

For values beyond 64 bits use DecimalBigInt.
"""

from typing import Final

# =============================================================================
# 64-BIT DOMAIN
# =============================================================================

U64_MAX: Final[int] = 2**64 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NativeOverflowError(ArithmeticError):
    """Result does not fit into an unsigned 64-bit integer."""

    pass


def validate_u64(n: int, name: str = "n") -> int:
    """
    Check that n is an int in [0, U64_MAX].

    Raises:
        TypeError: if n is not an int (bool is rejected)
        ValueError: if n is outside [0, U64_MAX]
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0 or n > U64_MAX:
        raise ValueError(f"{name} must be in [0, {U64_MAX}], got {n}")
    return n


# =============================================================================
# PRIMALITY
# =============================================================================


def is_prime(n: int) -> bool:
    """
    Deterministic primality test by trial division.

    Tests odd divisors k while k*k <= n.

    Examples:
        >>> is_prime(1)
        False
        >>> is_prime(2)
        True
        >>> is_prime(4)
        False
        >>> is_prime(104729)
        True
    """
    validate_u64(n)

    if n == 2:
        return True
    if n < 2 or n % 2 == 0:
        return False

    k = 3
    while k * k <= n:
        if n % k == 0:
            return False
        k += 2

    return True


# =============================================================================
# TRIANGULAR NUMBERS
# =============================================================================


def triangular_number(n: int) -> int:
    """
    The n-th triangular number t_n = n(n+1)/2.

    The intermediate product n(n+1) must fit into 64 bits, the same as the
    final value.

    Raises:
        NativeOverflowError: if n + 1 or n(n+1) exceeds U64_MAX

    Examples:
        >>> triangular_number(5)
        15
        >>> triangular_number(0)
        0
    """
    validate_u64(n)

    n_plus_1 = n + 1
    if n_plus_1 > U64_MAX:
        raise NativeOverflowError(f"triangular_number({n}): n + 1 overflows u64")

    product = n_plus_1 * n
    if product > U64_MAX:
        raise NativeOverflowError(f"triangular_number({n}): n(n+1) overflows u64")

    return product // 2


# =============================================================================
# DIVISORS
# =============================================================================


def factors_of(n: int) -> list[int]:
    """
    All divisors of n, ascending.

    By convention 0 is the only factor of 0.

    Examples:
        >>> factors_of(12)
        [1, 2, 3, 4, 6, 12]
        >>> factors_of(0)
        [0]
    """
    validate_u64(n)

    if n < 2:
        return [n]

    factors: set[int] = set()
    k = 1
    while k * k <= n:
        q, r = divmod(n, k)
        if r == 0:
            factors.add(k)
            factors.add(q)
        k += 1

    return sorted(factors)


# =============================================================================
# PALINDROMES
# =============================================================================


def is_palindrome(s: str) -> bool:
    """
    Check whether s reads the same in both directions.

    Case-insensitive. Non-alphanumeric characters are ignored, so the
    empty string and punctuation-only strings are palindromes.

    Examples:
        >>> is_palindrome("Taco Cat")
        True
        >>> is_palindrome("1234321")
        True
        >>> is_palindrome("kyoto")
        False
    """
    chars = [c for c in s.lower() if c.isalnum()]

    left, right = 0, len(chars) - 1
    while left < right:
        if chars[left] != chars[right]:
            return False
        left += 1
        right -= 1

    return True
