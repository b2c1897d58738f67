"""Fibonacci — bounded native terms and unbounded DecimalBigInt terms.

FibonacciIterator yields F(0), F(1), ... as Python ints and stops
after the last term that fits into `limit` (default: the unsigned 64-bit
range, where the last term is F(93) = 12200160415121876738).

decimal_fibonacci() has no ceiling: each term is the DecimalBigInt sum of
the two before it.
"""

from typing import Iterator, Optional

from src.core.domain.decimal_bigint import ONE, ZERO, DecimalBigInt
from src.core.math.number_theory import U64_MAX


class FibonacciIterator:
    """Iterator over Fibonacci terms not exceeding `limit`.

    State:
    - current: the next term to return, None once exhausted
    - following: the term after current, None once it would exceed limit

    Example:
        >>> list(FibonacciIterator(limit=21))
        [0, 1, 1, 2, 3, 5, 8, 13, 21]
    """

    def __init__(self, limit: int = U64_MAX):
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"limit must be an int, got {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        self._limit = limit
        self._current: Optional[int] = 0
        self._following: Optional[int] = 1 if limit >= 1 else None

    @property
    def limit(self) -> int:
        """Largest term the iterator may yield."""
        return self._limit

    def __iter__(self) -> "FibonacciIterator":
        return self

    def __next__(self) -> int:
        if self._current is None:
            raise StopIteration

        result = self._current

        next_term: Optional[int] = None
        if self._following is not None:
            candidate = self._current + self._following
            if candidate <= self._limit:
                next_term = candidate

        self._current = self._following
        self._following = next_term

        return result


def decimal_fibonacci() -> Iterator[DecimalBigInt]:
    """Unbounded Fibonacci stream: F(0), F(1), F(2), ... as DecimalBigInt.

    Example:
        >>> from itertools import islice
        >>> [str(t) for t in islice(decimal_fibonacci(), 8)]
        ['0', '1', '1', '2', '3', '5', '8', '13']
    """
    current: DecimalBigInt = ZERO
    following: DecimalBigInt = ONE

    while True:
        yield current
        current, following = following, current.add(following)
