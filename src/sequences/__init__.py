"""Sequences — integer sequence generators.

- FibonacciIterator: Fibonacci terms bounded by the unsigned 64-bit range
- decimal_fibonacci: unbounded Fibonacci terms as DecimalBigInt
"""

from .fibonacci import (
    FibonacciIterator,
    decimal_fibonacci,
)

__all__ = [
    "FibonacciIterator",
    "decimal_fibonacci",
]
