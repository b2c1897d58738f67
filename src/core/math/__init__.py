"""
Core math modules for digitwise

Digit-level arithmetic kernels and 64-bit number theory helpers.
Nothing here depends on the domain models.
"""

# Digit Arithmetic (schoolbook kernels)
from src.core.math.digit_arithmetic import (
    # Constants
    DECIMAL_BASE,
    MAX_DIGIT,
    MIN_DIGIT,
    ZERO_DIGITS,
    # Exceptions
    InvalidDigit,
    # Validation & normalization
    is_valid_digit,
    strip_leading_zeros,
    validate_digits,
    # Kernels
    add_digit_sequences,
    multiply_by_digit,
    shift_digits,
)

# Number Theory (64-bit domain)
from src.core.math.number_theory import (
    U64_MAX,
    NativeOverflowError,
    factors_of,
    is_palindrome,
    is_prime,
    triangular_number,
    validate_u64,
)

__all__ = [
    # Digit Arithmetic: Constants
    "DECIMAL_BASE",
    "MAX_DIGIT",
    "MIN_DIGIT",
    "ZERO_DIGITS",
    # Digit Arithmetic: Exceptions
    "InvalidDigit",
    # Digit Arithmetic: Validation & normalization
    "is_valid_digit",
    "strip_leading_zeros",
    "validate_digits",
    # Digit Arithmetic: Kernels
    "add_digit_sequences",
    "multiply_by_digit",
    "shift_digits",
    # Number Theory: Constants
    "U64_MAX",
    # Number Theory: Exceptions
    "NativeOverflowError",
    # Number Theory: Functions
    "factors_of",
    "is_palindrome",
    "is_prime",
    "triangular_number",
    "validate_u64",
]
