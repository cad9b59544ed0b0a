"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is always 8x8.
BOARD_SIZE = 8


@dataclass(frozen=True)
class Cell:
    """(row, col), both 0-based. Row 0 is the top of the board."""

    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def is_dark(self) -> bool:
        """Only the dark squares are ever used for play."""
        return (self.row + self.col) % 2 == 1

    def offset(self, d_row: int, d_col: int) -> Cell:
        return Cell(self.row + d_row, self.col + d_col)

    def midpoint(self, other: Cell) -> Cell:
        """The cell halfway between two cells. Only meaningful for two cells that are a jump apart."""
        return Cell((self.row + other.row) // 2, (self.col + other.col) // 2)

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


def all_cells() -> list[Cell]:
    """Every cell on the board, row by row, top to bottom."""
    return [Cell(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]


def dark_cells() -> list[Cell]:
    return [cell for cell in all_cells() if cell.is_dark()]
