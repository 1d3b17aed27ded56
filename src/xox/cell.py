"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Classic xox is played on a 3x3 grid
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True)
class Cell:
    x: int
    y: int

    @classmethod
    def from_index(cls, index: int) -> Cell:
        """Cells are numbered row by row: 0-2 is the top row, 6-8 the bottom row."""
        return cls(index % BOARD_SIZE, index // BOARD_SIZE)

    def to_index(self) -> int:
        return self.y * BOARD_SIZE + self.x

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_SIZE) and (0 <= self.y < BOARD_SIZE)


def all_cells() -> list[Cell]:
    return [Cell.from_index(index) for index in range(CELL_COUNT)]


# Every way to get three in a line: rows, columns and both diagonals
LINES: list[tuple[Cell, Cell, Cell]] = (
    [tuple(Cell(x, y) for x in range(BOARD_SIZE)) for y in range(BOARD_SIZE)]
    + [tuple(Cell(x, y) for y in range(BOARD_SIZE)) for x in range(BOARD_SIZE)]
    + [
        tuple(Cell(i, i) for i in range(BOARD_SIZE)),
        tuple(Cell(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
    ]
)
