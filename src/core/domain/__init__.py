"""
Domain models and value objects.

Contains the DecimalBigInt value type, its pure arithmetic operations and
the caller-side conversions to and from Python ints, decimal strings
and contract-checked JSON payloads.
"""

from src.core.domain.conversions import (
    digits_to_int,
    from_decimal_string,
    from_int,
    from_json,
    from_payload,
    int_to_digits,
    to_decimal_string,
    to_int,
    to_json,
    to_payload,
)
from src.core.domain.decimal_bigint import (
    ONE,
    ZERO,
    DecimalBigInt,
    InvalidDigit,
    add,
    from_digits,
    multiply,
)

__all__ = [
    # DecimalBigInt model
    "DecimalBigInt",
    "InvalidDigit",
    "ZERO",
    "ONE",
    "from_digits",
    "add",
    "multiply",
    # Conversions
    "int_to_digits",
    "digits_to_int",
    "from_int",
    "to_int",
    "from_decimal_string",
    "to_decimal_string",
    # JSON payloads
    "to_payload",
    "from_payload",
    "to_json",
    "from_json",
]
