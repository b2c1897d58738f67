"""
Conversions — Decimal Strings & Python ints ↔ DecimalBigInt

Caller-side translation between human-readable values and the
little-endian digit sequences DecimalBigInt is built from. The model
itself only ever sees digit sequences.

Accepted decimal string format:
    [whitespace] digit+ ('_' digit+)* [whitespace]
Leading zeros are allowed and dropped by canonicalization. Signs are
rejected (DecimalBigInt is unsigned).

JSON payloads follow the decimal_bigint contract ({"digits": [...]},
least-significant digit first) and are checked against it in both
directions.
"""

import json
import re
from typing import Any, Final, Sequence

from src.core.contracts.validators import validate_decimal_bigint
from src.core.domain.decimal_bigint import DecimalBigInt
from src.core.math.digit_arithmetic import DECIMAL_BASE, ZERO_DIGITS, validate_digits

# Only ASCII 0-9: str.isdigit() would also accept '²' and other Unicode digits
_DECIMAL_STRING_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+(?:_[0-9]+)*")


# =============================================================================
# PYTHON INT
# =============================================================================


def int_to_digits(n: int) -> tuple[int, ...]:
    """
    Little-endian decimal digits of a non-negative int.

    Raises:
        TypeError: if n is not an int (bool is rejected)
        ValueError: if n is negative

    Examples:
        >>> int_to_digits(314)
        (4, 1, 3)
        >>> int_to_digits(0)
        (0,)
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"DecimalBigInt is unsigned, got {n}")

    if n == 0:
        return ZERO_DIGITS

    digits = []
    while n > 0:
        n, digit = divmod(n, DECIMAL_BASE)
        digits.append(digit)

    return tuple(digits)


def digits_to_int(digits: Sequence[int]) -> int:
    """
    Value of a little-endian digit sequence.

    Raises:
        InvalidDigit: if any element is outside [0, 9]

    Examples:
        >>> digits_to_int((4, 1, 3))
        314
        >>> digits_to_int(())
        0
    """
    value = 0
    for digit in reversed(validate_digits(digits)):
        value = value * DECIMAL_BASE + digit
    return value


def from_int(n: int) -> DecimalBigInt:
    """DecimalBigInt holding the non-negative int n."""
    return DecimalBigInt.from_digits(int_to_digits(n))


def to_int(value: DecimalBigInt) -> int:
    """Python int holding the value of a DecimalBigInt."""
    return digits_to_int(value.digits)


# =============================================================================
# DECIMAL STRINGS
# =============================================================================


def from_decimal_string(text: str) -> DecimalBigInt:
    """
    Parse decimal notation (most-significant digit first).

    Raises:
        TypeError: if text is not a str
        ValueError: if text is empty or contains anything but digits and
            single '_' separators between them

    Examples:
        >>> from_decimal_string("1018").digits
        (8, 1, 0, 1)
        >>> from_decimal_string(" 1_000_000 ").digits
        (0, 0, 0, 0, 0, 0, 1)
        >>> from_decimal_string("007").digits
        (7,)
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    stripped = text.strip()
    if not _DECIMAL_STRING_RE.fullmatch(stripped):
        raise ValueError(f"invalid unsigned decimal literal: {text!r}")

    significant = stripped.replace("_", "")
    return DecimalBigInt.from_digits(int(c) for c in reversed(significant))


def to_decimal_string(value: DecimalBigInt) -> str:
    """
    Decimal notation of a DecimalBigInt, most-significant digit first.

    Examples:
        >>> to_decimal_string(DecimalBigInt.from_digits([0, 4, 1, 4]))
        '4140'
    """
    return str(value)


# =============================================================================
# JSON PAYLOADS
# =============================================================================


def to_payload(value: DecimalBigInt) -> dict[str, Any]:
    """
    JSON-ready payload of a DecimalBigInt, checked against its contract.

    Examples:
        >>> to_payload(DecimalBigInt.from_digits([4, 1, 3]))
        {'digits': [4, 1, 3]}
    """
    payload = value.model_dump(mode="json")
    validate_decimal_bigint(payload)
    return payload


def from_payload(payload: Any) -> DecimalBigInt:
    """
    Build a DecimalBigInt from a decoded JSON payload.

    The contract is checked first; the model then canonicalizes the
    digits (most-significant zeros are dropped).

    Raises:
        ContractViolation: if payload does not match the decimal_bigint schema
        InvalidDigit: if a digit passes the schema but not the model
            (e.g. 3.0, which JSON Schema counts as an integer)
    """
    validate_decimal_bigint(payload)
    return DecimalBigInt.from_digits(payload["digits"])


def to_json(value: DecimalBigInt) -> str:
    """Serialize a DecimalBigInt to a JSON document."""
    return json.dumps(to_payload(value))


def from_json(text: str) -> DecimalBigInt:
    """
    Parse a JSON document into a DecimalBigInt.

    Raises:
        json.JSONDecodeError: if text is not JSON
        ContractViolation: if the document does not match the schema

    Examples:
        >>> from_json('{"digits": [0, 0, 1, 0]}').digits
        (0, 0, 1)
    """
    return from_payload(json.loads(text))
