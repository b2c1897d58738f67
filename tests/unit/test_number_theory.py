"""
Tests for Number Theory — 64-bit integer helpers

Checked:
1. is_prime on small primes/composites and edge values
2. triangular_number values and u64 overflow detection
3. factors_of for 0, 1, squares and non-squares
4. is_palindrome case/punctuation handling
5. u64 domain validation
"""

import pytest

from src.core.math.number_theory import (
    U64_MAX,
    NativeOverflowError,
    factors_of,
    is_palindrome,
    is_prime,
    triangular_number,
    validate_u64,
)


# =============================================================================
# TESTS: Domain
# =============================================================================


class TestValidateU64:
    """Tests for validate_u64."""

    def test_bounds_accepted(self):
        """0 and U64_MAX are in range."""
        assert validate_u64(0) == 0
        assert validate_u64(U64_MAX) == U64_MAX

    def test_out_of_range(self):
        """-1 and U64_MAX + 1 are rejected."""
        with pytest.raises(ValueError):
            validate_u64(-1)
        with pytest.raises(ValueError):
            validate_u64(U64_MAX + 1)

    def test_non_int(self):
        """float and bool are rejected."""
        with pytest.raises(TypeError):
            validate_u64(2.0)
        with pytest.raises(TypeError):
            validate_u64(True)


# =============================================================================
# TESTS: Primality
# =============================================================================


class TestIsPrime:
    """Tests for is_prime."""

    def test_below_2_are_not_prime(self):
        """0 and 1 are not prime."""
        assert not is_prime(0)
        assert not is_prime(1)

    def test_primes_below_20(self):
        """All primes below 20."""
        for p in (2, 3, 5, 7, 11, 13, 17, 19):
            assert is_prime(p), p

    def test_composites_below_20(self):
        """All composites below 20."""
        for c in (4, 6, 8, 9, 10, 12, 14, 15, 16, 18):
            assert not is_prime(c), c

    def test_larger_values(self):
        """A known prime, a square of a prime, and a semiprime."""
        assert is_prime(104729)
        assert not is_prime(104729 * 104729)
        assert not is_prime(1009 * 1013)

    def test_agrees_with_sieve(self):
        """Matches a sieve of Eratosthenes up to 1000."""
        limit = 1000
        sieve = [True] * (limit + 1)
        sieve[0] = sieve[1] = False
        for i in range(2, int(limit**0.5) + 1):
            if sieve[i]:
                for j in range(i * i, limit + 1, i):
                    sieve[j] = False

        for n in range(limit + 1):
            assert is_prime(n) == sieve[n], n


# =============================================================================
# TESTS: Triangular numbers
# =============================================================================


class TestTriangularNumber:
    """Tests for triangular_number."""

    def test_small(self):
        """t_0..t_5."""
        assert [triangular_number(n) for n in range(6)] == [0, 1, 3, 6, 10, 15]

    def test_largest_without_overflow(self):
        """n = 2^32 - 1: n(n+1) = 2^64 - 2^32 still fits."""
        n = 2**32 - 1
        assert triangular_number(n) == n * (n + 1) // 2

    def test_product_overflow(self):
        """n = 2^32: n(n+1) exceeds u64."""
        with pytest.raises(NativeOverflowError, match="overflows u64"):
            triangular_number(2**32)

    def test_u64_max_overflows(self):
        """n + 1 itself overflows for U64_MAX."""
        with pytest.raises(NativeOverflowError):
            triangular_number(U64_MAX)

    def test_overflow_is_arithmetic_error(self):
        """NativeOverflowError is an ArithmeticError."""
        assert issubclass(NativeOverflowError, ArithmeticError)


# =============================================================================
# TESTS: Divisors
# =============================================================================


class TestFactorsOf:
    """Tests for factors_of."""

    def test_zero_and_one(self):
        """0 → [0], 1 → [1]."""
        assert factors_of(0) == [0]
        assert factors_of(1) == [1]

    def test_twelve(self):
        """All six divisors of 12, ascending."""
        assert factors_of(12) == [1, 2, 3, 4, 6, 12]

    def test_non_square(self):
        """28 is perfect: 1+2+4+7+14 = 28."""
        assert factors_of(28) == [1, 2, 4, 7, 14, 28]

    def test_square(self):
        """The square root appears once."""
        assert factors_of(64) == [1, 2, 4, 8, 16, 32, 64]

    def test_prime(self):
        """A prime has exactly two divisors."""
        assert factors_of(97) == [1, 97]


# =============================================================================
# TESTS: Palindromes
# =============================================================================


class TestIsPalindrome:
    """Tests for is_palindrome."""

    def test_one_casing(self):
        assert is_palindrome("tacocat")

    def test_case_insensitive(self):
        assert is_palindrome("TacoCat")

    def test_with_spaces(self):
        assert is_palindrome("taco cat")

    def test_numbers(self):
        assert is_palindrome("1234321")

    def test_not_palindrome(self):
        assert not is_palindrome("kyoto")

    def test_punctuation_ignored(self):
        """Classic sentence palindrome."""
        assert is_palindrome("A man, a plan, a canal: Panama!")

    def test_empty_and_punctuation_only(self):
        """Nothing to compare counts as a palindrome."""
        assert is_palindrome("")
        assert is_palindrome("?!")
