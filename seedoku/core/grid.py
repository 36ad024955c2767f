"""Read-only 9x9 grid representations: full solutions and revealed puzzles."""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple, Union, TYPE_CHECKING
import numpy as np

from .errors import ShapeMismatchError

if TYPE_CHECKING:
    from ..generator.complexity import Complexity

BOX_SIZE = 3
GRID_SIZE = BOX_SIZE * BOX_SIZE
EMPTY_CELL = 0

GridValues = Union[np.ndarray, List[List[int]]]


class Grid:
    """
    A 9x9 Sudoku grid whose values cannot be changed after construction.

    Cells hold 0 (empty) or a digit 1-9. Squares are the nine 3x3 blocks,
    indexed 0-8 in row-major order.
    """

    size = GRID_SIZE
    box_size = BOX_SIZE

    def __init__(self, values: GridValues):
        """
        Initialize a grid.

        Args:
            values: 9x9 array or nested list of ints in 0-9. The values are
                    copied, so later changes to the argument have no effect.
        """
        try:
            raw = np.asarray(values)
        except ValueError as e:
            raise ShapeMismatchError(f"Grid values must be a {self.size}x{self.size} matrix") from e

        if raw.shape != (self.size, self.size):
            raise ShapeMismatchError(
                f"Grid shape must be ({self.size}, {self.size}), got {raw.shape}"
            )
        if not np.issubdtype(raw.dtype, np.integer):
            raise ValueError(f"Values must be integers, got dtype {raw.dtype}")
        if raw.min() < EMPTY_CELL or raw.max() > self.size:
            raise ValueError(f"Values must be 0-{self.size}")

        grid = raw.astype(np.int32)
        grid.flags.writeable = False
        self._grid = grid

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        return self._grid.view()

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self._grid[row, col])

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        row, col = pos
        return self.get(row, col)

    def get_row(self, row: int) -> np.ndarray:
        return self._grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self._grid[:, col]

    @classmethod
    def square_origin(cls, square: int) -> Tuple[int, int]:
        """Top-left (row, col) of a square."""
        if square < 0 or square >= cls.size:
            raise ValueError(f"Square index must be 0-{cls.size - 1}, got {square}")
        return (square // cls.box_size) * cls.box_size, (square % cls.box_size) * cls.box_size

    @classmethod
    def square_index(cls, row: int, col: int) -> int:
        """Get the square index (0-8) for a cell."""
        return (row // cls.box_size) * cls.box_size + (col // cls.box_size)

    @classmethod
    def square_cell(cls, square: int, position: int) -> Tuple[int, int]:
        """
        Map a position inside a square to grid coordinates.

        Positions run 0-8 in row-major order within the square.
        """
        row0, col0 = cls.square_origin(square)
        return row0 + position // cls.box_size, col0 + position % cls.box_size

    def get_square(self, square: int) -> np.ndarray:
        """Get the nine values of a square, flattened row-major."""
        row0, col0 = self.square_origin(square)
        return self._grid[row0:row0 + self.box_size, col0:col0 + self.box_size].flatten()

    def count_empty(self) -> int:
        return int(np.sum(self._grid == EMPTY_CELL))

    def count_filled(self) -> int:
        return int(np.sum(self._grid != EMPTY_CELL))

    def square_counts(self) -> List[int]:
        """Number of filled cells in each square, by square index."""
        return [int(np.count_nonzero(self.get_square(i))) for i in range(self.size)]

    def is_complete(self) -> bool:
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no digit repeats within a row, column or square.
        Empty cells are ignored, so a partially filled grid can be valid.
        """
        units = (
            [self.get_row(i) for i in range(self.size)]
            + [self.get_col(i) for i in range(self.size)]
            + [self.get_square(i) for i in range(self.size)]
        )
        for unit in units:
            non_zero = unit[unit != EMPTY_CELL]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the grid is completely and correctly filled."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[List[int]]:
        """Values as a nested list of plain ints."""
        return self._grid.tolist()

    def to_string(self) -> str:
        """Compact 81-character form, row by row, 0 for empty cells."""
        return "".join(str(v) for v in self._grid.flatten().tolist())

    @staticmethod
    def parse_string(s: str) -> np.ndarray:
        """
        Parse the compact 81-character form into an array.

        '0' and '.' denote empty cells.
        """
        if len(s) != GRID_SIZE * GRID_SIZE:
            raise ShapeMismatchError(f"String length must be {GRID_SIZE * GRID_SIZE}, got {len(s)}")

        cells = []
        for c in s:
            if c == '.':
                cells.append(EMPTY_CELL)
            elif c in "0123456789":
                cells.append(int(c))
            else:
                raise ValueError(f"Invalid cell character {c!r}")
        return np.array(cells, dtype=np.int32).reshape(GRID_SIZE, GRID_SIZE)

    def __str__(self) -> str:
        """Pretty-print the grid."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self._grid[i, j]
                row_str += ' .' if val == EMPTY_CELL else f' {val}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return type(self) is type(other) and np.array_equal(self._grid, other._grid)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_string()))


class FullGrid(Grid):
    """
    A completely filled, valid Sudoku solution together with its seed.

    The seed is reused as the default seed when revealing a puzzle.
    """

    def __init__(self, values: GridValues, seed: int):
        super().__init__(values)
        if not self.is_solved():
            raise ValueError("FullGrid values must form a complete, valid solution")
        self.seed = seed

    @classmethod
    def from_string(cls, s: str, seed: int) -> FullGrid:
        return cls(cls.parse_string(s), seed)

    def reveal(self, complexity: Union[Complexity, str], seed: Optional[int] = None) -> PuzzleGrid:
        """
        Derive a puzzle by hiding cells of this grid.

        Args:
            complexity: Difficulty tier, or its name.
            seed: Seed for the reveal draws. Defaults to the grid's own seed.

        Returns:
            A PuzzleGrid masking this grid.
        """
        from ..generator.revealer import reveal
        return reveal(self, complexity, seed)

    def to_dict(self) -> Dict[str, Any]:
        return {"seed": self.seed, "values": self.to_list()}

    def __repr__(self) -> str:
        return f"FullGrid(seed={self.seed})"


class PuzzleGrid(Grid):
    """
    A full grid with some cells hidden.

    Every cell is either empty or equal to the matching cell of ``solution``.
    """

    def __init__(
        self,
        values: GridValues,
        solution: FullGrid,
        complexity: Optional[Complexity] = None,
        seed: Optional[int] = None
    ):
        super().__init__(values)
        shown = self._grid != EMPTY_CELL
        if not np.array_equal(self._grid[shown], solution.values[shown]):
            raise ValueError("Puzzle values must match the solution wherever they are revealed")
        self.solution = solution
        self.complexity = complexity
        self.seed = seed

    @property
    def revealed_count(self) -> int:
        return self.count_filled()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "complexity": self.complexity.value if self.complexity is not None else None,
            "revealed": self.revealed_count,
            "values": self.to_list(),
        }

    def __repr__(self) -> str:
        complexity = self.complexity.value if self.complexity is not None else None
        return f"PuzzleGrid(seed={self.seed}, complexity={complexity}, revealed={self.revealed_count})"
