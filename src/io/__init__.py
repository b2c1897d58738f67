"""I/O — loaders for whitespace-delimited number files.

- load_number_grid: text file → list of rows of unsigned 64-bit ints
- grid_to_payload / grid_from_payload: rows ↔ number_grid JSON payload
"""

from .grid_loader import (
    GridParseError,
    grid_from_payload,
    grid_to_payload,
    load_number_grid,
    parse_grid_token,
)

__all__ = [
    "GridParseError",
    "load_number_grid",
    "parse_grid_token",
    "grid_to_payload",
    "grid_from_payload",
]
