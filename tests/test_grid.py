"""Unit tests for grid types and validation."""

import pytest
import numpy as np
from seedoku.core.grid import Grid, FullGrid, PuzzleGrid
from seedoku.core.errors import ShapeMismatchError
from seedoku.core.validator import is_full_grid, is_masking_of, is_fair, square_reveal_counts, square_spread

SOLUTION = [
    [8, 4, 9, 6, 5, 3, 1, 2, 7],
    [6, 1, 7, 8, 4, 2, 3, 5, 9],
    [3, 2, 5, 9, 1, 7, 6, 8, 4],
    [5, 3, 2, 1, 7, 8, 9, 4, 6],
    [4, 7, 6, 5, 2, 9, 8, 1, 3],
    [9, 8, 1, 3, 6, 4, 5, 7, 2],
    [7, 6, 3, 2, 8, 5, 4, 9, 1],
    [1, 5, 4, 7, 9, 6, 2, 3, 8],
    [2, 9, 8, 4, 3, 1, 7, 6, 5],
]


@pytest.fixture
def full():
    return FullGrid(SOLUTION, seed=42)


class TestGrid:
    """Tests for the Grid base class."""
    
    def test_empty_grid(self):
        """A zero grid is valid but not complete."""
        grid = Grid(np.zeros((9, 9), dtype=int))
        assert grid.count_empty() == 81
        assert grid.count_filled() == 0
        assert grid.is_valid()
        assert not grid.is_solved()
    
    def test_wrong_shape(self):
        """Non 9x9 input raises ShapeMismatchError."""
        with pytest.raises(ShapeMismatchError):
            Grid(np.zeros((8, 9), dtype=int))
        with pytest.raises(ShapeMismatchError):
            Grid([[0] * 9] * 10)
        with pytest.raises(ShapeMismatchError):
            Grid([0] * 81)
    
    def test_ragged_input(self):
        """Ragged nested lists are a shape mismatch."""
        rows = [[0] * 9 for _ in range(9)]
        rows[3] = [0] * 8
        with pytest.raises(ShapeMismatchError):
            Grid(rows)
    
    def test_shape_mismatch_is_value_error(self):
        """ShapeMismatchError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Grid(np.zeros((3, 3), dtype=int))
    
    def test_value_out_of_range(self):
        """Cells must be 0-9."""
        values = np.zeros((9, 9), dtype=int)
        values[0, 0] = 10
        with pytest.raises(ValueError):
            Grid(values)
    
    def test_huge_value_rejected(self):
        """Values too large for the cell type are out of range, not an overflow."""
        values = [[0] * 9 for _ in range(9)]
        values[0][0] = 2 ** 40
        with pytest.raises(ValueError, match="0-9"):
            Grid(values)
    
    def test_float_values_rejected(self):
        """Floats are never truncated into digits."""
        values = [[0] * 9 for _ in range(9)]
        values[0][0] = 1.7
        with pytest.raises(ValueError, match="integers"):
            Grid(values)
    
    def test_nan_is_not_a_shape_mismatch(self):
        """A NaN cell in a 9x9 matrix is a value error."""
        values = np.zeros((9, 9))
        values[0, 0] = np.nan
        with pytest.raises(ValueError) as exc_info:
            Grid(values)
        assert not isinstance(exc_info.value, ShapeMismatchError)
    
    def test_integer_dtypes_accepted(self):
        """Any integer dtype is stored as int32."""
        grid = Grid(np.zeros((9, 9), dtype=np.int64))
        assert grid.values.dtype == np.int32
    
    def test_values_are_read_only(self, full):
        """The exposed array cannot be written."""
        with pytest.raises(ValueError):
            full.values[0, 0] = 1
    
    def test_input_is_copied(self):
        """Changing the source array does not change the grid."""
        source = np.zeros((9, 9), dtype=int)
        grid = Grid(source)
        source[0, 0] = 5
        assert grid.get(0, 0) == 0
    
    def test_get_and_index(self, full):
        """Cells can be read with get() and indexing."""
        assert full.get(0, 0) == 8
        assert full[8, 8] == 5
    
    def test_squares(self, full):
        """Squares are indexed row-major."""
        assert Grid.square_index(0, 0) == 0
        assert Grid.square_index(4, 7) == 5
        assert Grid.square_index(8, 8) == 8
        assert Grid.square_origin(5) == (3, 6)
        assert Grid.square_cell(5, 7) == (5, 7)
        assert full.get_square(0).tolist() == [8, 4, 9, 6, 1, 7, 3, 2, 5]
    
    def test_square_origin_out_of_range(self):
        """Square indices outside 0-8 are rejected."""
        with pytest.raises(ValueError):
            Grid.square_origin(9)
    
    def test_string_round_trip(self, full):
        """to_string and from_string agree."""
        s = full.to_string()
        assert len(s) == 81
        assert s.startswith("849653127")
        assert FullGrid.from_string(s, seed=42) == full
    
    def test_parse_string_dots(self):
        """Dots are empty cells."""
        values = Grid.parse_string("." * 80 + "9")
        assert values[8, 8] == 9
        assert values[0, 0] == 0
    
    @pytest.mark.parametrize("char", ["\u0661", "\u00b2", "x"])
    def test_parse_string_non_ascii_digits(self, char):
        """Only ASCII digits and dots are cells."""
        with pytest.raises(ValueError, match="Invalid cell character"):
            Grid.parse_string(char + "0" * 80)
    
    def test_parse_string_bad_length(self):
        """Strings that are not 81 characters are a shape mismatch."""
        with pytest.raises(ShapeMismatchError):
            Grid.parse_string("123")
    
    def test_pretty_print(self, full):
        """__str__ draws square borders."""
        lines = str(full).splitlines()
        assert len(lines) == 13
        assert lines[1] == "| 8 4 9 | 6 5 3 | 1 2 7 |"
    
    def test_equality_and_hash(self, full):
        """Grids compare and hash by value."""
        other = FullGrid(SOLUTION, seed=7)
        assert other == full
        assert hash(other) == hash(full)
        assert full != Grid(SOLUTION)


class TestFullGrid:
    """Tests for FullGrid."""
    
    def test_valid_solution(self, full):
        """A valid solution builds and keeps its seed."""
        assert full.seed == 42
        assert full.is_solved()
        assert full.to_dict() == {"seed": 42, "values": SOLUTION}
    
    def test_rejects_invalid_solution(self):
        """Duplicate digits are rejected."""
        values = [row[:] for row in SOLUTION]
        values[0][0], values[0][1] = values[0][1], values[0][0]
        with pytest.raises(ValueError):
            FullGrid(values, seed=0)
    
    def test_rejects_incomplete(self):
        """Empty cells are rejected."""
        values = [row[:] for row in SOLUTION]
        values[4][4] = 0
        with pytest.raises(ValueError):
            FullGrid(values, seed=0)
    
    def test_wrong_shape(self):
        """Shape is checked before validity."""
        with pytest.raises(ShapeMismatchError):
            FullGrid(SOLUTION[:8], seed=0)


class TestPuzzleGrid:
    """Tests for PuzzleGrid."""
    
    def test_masking_enforced(self, full):
        """A revealed value must match the solution."""
        values = np.zeros((9, 9), dtype=int)
        values[0, 0] = 1
        with pytest.raises(ValueError):
            PuzzleGrid(values, full)
    
    def test_masking_accepted(self, full):
        """Hidden cells and matching values are accepted."""
        values = np.zeros((9, 9), dtype=int)
        values[0, 0] = 8
        values[8, 8] = 5
        puzzle = PuzzleGrid(values, full)
        assert puzzle.revealed_count == 2
        assert puzzle.solution is full
        assert puzzle.square_counts() == [1, 0, 0, 0, 0, 0, 0, 0, 1]


class TestValidator:
    """Tests for validation utilities."""
    
    def test_is_full_grid(self, full):
        """Full solutions pass, partial grids fail."""
        assert is_full_grid(full)
        assert not is_full_grid(Grid(np.zeros((9, 9), dtype=int)))
    
    def test_is_full_grid_rejects_bad_square(self):
        """Rows and columns alone are not enough."""
        # Latin square whose squares repeat digits
        values = [[(r + c) % 9 + 1 for c in range(9)] for r in range(9)]
        assert not is_full_grid(Grid(values))
    
    def test_is_masking_of(self, full):
        """Masking compares only revealed cells."""
        values = full.values.copy()
        values[0, :] = 0
        assert is_masking_of(Grid(values), full)
        values[1, 1] = 9
        assert not is_masking_of(Grid(values), full)
    
    def test_fairness(self, full):
        """Per-square counts and spread."""
        values = np.zeros((9, 9), dtype=int)
        values[0, 0] = 8
        grid = Grid(values)
        assert square_reveal_counts(grid) == [1, 0, 0, 0, 0, 0, 0, 0, 0]
        assert square_spread(grid) == 1
        assert is_fair(grid)
        
        values[0, 1] = 4
        assert not is_fair(Grid(values))
        assert is_fair(full)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
