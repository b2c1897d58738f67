"""
Tests for Grid Loader — whitespace-delimited number grids

Checked:
1. Square and ragged grids, arbitrary whitespace, blank lines
   (rows end at \\n only; \\r is whitespace)
2. Token-level errors carry line/column/token
3. u64 ceiling enforced
4. Missing files propagate as OSError
5. Encoding override and DEBUG logging
"""

import logging

import pytest

from src.core.math.number_theory import U64_MAX
from src.io import GridParseError, load_number_grid, parse_grid_token


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def write_grid(tmp_path):
    """Write text to a grid file and return its path."""

    def _write(text: str, name: str = "grid.txt", encoding: str = "utf-8"):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write


# =============================================================================
# TESTS: Tokens
# =============================================================================


class TestParseGridToken:
    """Tests for parse_grid_token."""

    def test_plain_and_padded(self):
        """Leading zeros and a leading '+' are accepted."""
        assert parse_grid_token("42") == 42
        assert parse_grid_token("08") == 8
        assert parse_grid_token("+7") == 7

    def test_u64_bounds(self):
        """U64_MAX parses, one more does not."""
        assert parse_grid_token(str(U64_MAX)) == U64_MAX
        with pytest.raises(GridParseError, match="too large"):
            parse_grid_token(str(U64_MAX + 1))

    @pytest.mark.parametrize("token", ["-1", "1.5", "abc", "0x10", "+", "1_000"])
    def test_invalid_tokens(self, token):
        """Signs, decimals, letters and separators are rejected."""
        with pytest.raises(GridParseError, match="invalid digit"):
            parse_grid_token(token)

    def test_error_is_value_error(self):
        """GridParseError is a ValueError with location details."""
        with pytest.raises(ValueError) as exc_info:
            parse_grid_token("x", line_number=3, column=2)

        err = exc_info.value
        assert isinstance(err, GridParseError)
        assert err.line_number == 3
        assert err.column == 2
        assert err.token == "x"
        assert "line 3, column 2" in str(err)


# =============================================================================
# TESTS: Files
# =============================================================================


class TestLoadNumberGrid:
    """Tests for load_number_grid."""

    def test_square_grid(self, write_grid):
        """A 3×3 grid with zero-padded numbers."""
        path = write_grid("08 02 22\n49 49 99\n81 49 31\n")
        assert load_number_grid(path) == [[8, 2, 22], [49, 49, 99], [81, 49, 31]]

    def test_accepts_str_path(self, write_grid):
        """str paths work like Path objects."""
        path = write_grid("1 2\n")
        assert load_number_grid(str(path)) == [[1, 2]]

    def test_mixed_whitespace(self, write_grid):
        """Tabs and repeated spaces separate tokens."""
        path = write_grid("1\t2   3\n  4 5\t\t6  \n")
        assert load_number_grid(path) == [[1, 2, 3], [4, 5, 6]]

    def test_ragged_and_blank_lines(self, write_grid):
        """Blank lines become empty rows; rows may differ in length."""
        path = write_grid("1\n\n2 3\n")
        assert load_number_grid(path) == [[1], [], [2, 3]]

    def test_no_trailing_newline(self, write_grid):
        """The last line is read without a newline."""
        path = write_grid("5 6")
        assert load_number_grid(path) == [[5, 6]]

    def test_lone_carriage_return_is_whitespace(self, tmp_path):
        """Only \\n ends a row; a bare \\r separates tokens within it."""
        path = tmp_path / "grid.txt"
        path.write_bytes(b"1 2\r3 4\n")
        assert load_number_grid(path) == [[1, 2, 3, 4]]

    def test_crlf_line_endings(self, tmp_path):
        """Windows line endings still give one row per line."""
        path = tmp_path / "grid.txt"
        path.write_bytes(b"1 2\r\n3 4\r\n")
        assert load_number_grid(path) == [[1, 2], [3, 4]]

    def test_error_line_numbers_ignore_carriage_returns(self, tmp_path):
        """A bare \\r does not advance the reported line number."""
        path = tmp_path / "grid.txt"
        path.write_bytes(b"1\r2\n3 x\n")
        with pytest.raises(GridParseError) as exc_info:
            load_number_grid(path)

        assert exc_info.value.line_number == 2
        assert exc_info.value.column == 2

    def test_empty_file(self, write_grid):
        """No lines, no rows."""
        path = write_grid("")
        assert load_number_grid(path) == []

    def test_bad_token_location(self, write_grid):
        """The first bad token is reported with 1-based line and column."""
        path = write_grid("1 2 3\n4 five 6\n")
        with pytest.raises(GridParseError) as exc_info:
            load_number_grid(path)

        assert exc_info.value.line_number == 2
        assert exc_info.value.column == 2
        assert exc_info.value.token == "five"

    def test_overflow_token(self, write_grid):
        """Values above U64_MAX are rejected."""
        path = write_grid(f"{U64_MAX + 1}\n")
        with pytest.raises(GridParseError, match="too large"):
            load_number_grid(path)

    def test_missing_file(self, tmp_path):
        """FileNotFoundError propagates."""
        with pytest.raises(FileNotFoundError):
            load_number_grid(tmp_path / "missing.txt")

    def test_encoding_override(self, write_grid):
        """utf-16 files load with an explicit encoding."""
        path = write_grid("10 20\n", encoding="utf-16")
        assert load_number_grid(path, encoding="utf-16") == [[10, 20]]

    def test_logs_debug(self, write_grid, caplog):
        """A successful load is logged at DEBUG with path and row count."""
        path = write_grid("1 2\n3 4\n")
        with caplog.at_level(logging.DEBUG, logger="src.io.grid_loader"):
            load_number_grid(path)

        records = [r for r in caplog.records if r.name == "src.io.grid_loader"]
        assert len(records) == 1
        assert records[0].rows == 2
        assert records[0].path == str(path)
