"""Grid Loader — whitespace-delimited grids of unsigned 64-bit integers.

File format:
- one row per line, tokens separated by any whitespace
- every token is an unsigned decimal integer in [0, U64_MAX], an optional
  leading '+' is accepted
- lines end at "\n" only (a "\r\n" ending is accepted, a lone "\r" is
  ordinary whitespace inside the line)
- blank lines produce empty rows; rows may differ in length

A missing or unreadable file propagates as OSError. A bad token raises
GridParseError with its line and column (both 1-based).

Grids also travel as JSON payloads ({"rows": [[...], ...]}) checked
against the number_grid contract.
"""

import logging
import re
from pathlib import Path
from typing import Any, Final, Optional, Sequence, Union

from src.core.config import get_settings
from src.core.contracts.validators import validate_number_grid
from src.core.math.number_theory import U64_MAX

logger = logging.getLogger(__name__)

_UNSIGNED_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")


class GridParseError(ValueError):
    """A grid token is not an unsigned 64-bit decimal integer."""

    def __init__(self, line_number: int, column: int, token: str, reason: str):
        self.line_number = line_number
        self.column = column
        self.token = token
        self.reason = reason
        super().__init__(
            f"line {line_number}, column {column}: {reason}: {token!r}"
        )


def parse_grid_token(token: str, line_number: int = 1, column: int = 1) -> int:
    """
    Parse one grid token.

    Raises:
        GridParseError: if token is not an unsigned decimal integer, or
            exceeds U64_MAX

    Examples:
        >>> parse_grid_token("08")
        8
        >>> parse_grid_token("+42")
        42
    """
    if not _UNSIGNED_TOKEN_RE.fullmatch(token):
        raise GridParseError(line_number, column, token, "invalid digit found in string")

    value = int(token)
    if value > U64_MAX:
        raise GridParseError(line_number, column, token, "number too large to fit in u64")

    return value


def load_number_grid(
    filepath: Union[str, Path],
    encoding: Optional[str] = None,
) -> list[list[int]]:
    """
    Load a grid of unsigned integers from a text file.

    Args:
        filepath: Path to the grid file
        encoding: Text encoding; defaults to Settings.grid_encoding

    Returns:
        One list of ints per line of the file

    Raises:
        OSError: if the file cannot be opened or read
        GridParseError: on the first malformed or out-of-range token
    """
    path = Path(filepath)
    encoding = encoding or get_settings().grid_encoding

    grid: list[list[int]] = []
    with open(path, "r", encoding=encoding, newline="\n") as f:
        for line_number, line in enumerate(f, start=1):
            row = [
                parse_grid_token(token, line_number, column)
                for column, token in enumerate(line.split(), start=1)
            ]
            grid.append(row)

    logger.debug(
        "Loaded number grid",
        extra={"path": str(path), "rows": len(grid)},
    )
    return grid


def grid_to_payload(grid: Sequence[Sequence[int]]) -> dict[str, Any]:
    """
    JSON-ready payload of a grid, checked against the number_grid contract.

    Raises:
        ContractViolation: if a cell is not an int in [0, U64_MAX]
    """
    payload = {"rows": [list(row) for row in grid]}
    validate_number_grid(payload)
    return payload


def grid_from_payload(payload: Any) -> list[list[int]]:
    """
    Grid rows from a decoded JSON payload.

    Cells written as integral floats (3.0) satisfy JSON Schema's
    "integer" and are returned as ints.

    Raises:
        ContractViolation: if payload does not match the number_grid schema
    """
    validate_number_grid(payload)
    grid = [[int(cell) for cell in row] for row in payload["rows"]]

    logger.debug("Decoded number grid payload", extra={"rows": len(grid)})
    return grid
