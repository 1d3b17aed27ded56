"""The Game board implements all rules that depend on the claimed cells only."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import IllegalMoveError, RepositoryError
from src.xox.cell import BOARD_SIZE, CELL_COUNT, LINES, Cell, all_cells


@dataclass
class Board:
    # Owner (player name) of every cell. Free cells are simply missing.
    claims: dict[Cell, str] = field(default_factory=dict)

    @classmethod
    def from_cells(cls, cells: list[Optional[str]]) -> Self:
        """Construct a board from the flat, row-by-row list of owners used by the transport model."""
        if len(cells) != CELL_COUNT:
            raise RepositoryError(
                f"Stored board is corrupt. A board needs exactly {CELL_COUNT} cells, got {len(cells)}."
            )
        return cls(
            {
                Cell.from_index(index): owner
                for index, owner in enumerate(cells)
                if owner is not None
            }
        )

    def to_cells(self) -> list[Optional[str]]:
        return [self.owner(cell) for cell in all_cells()]

    def rows(self) -> list[list[Optional[str]]]:
        """Same as to_cells(), but grouped into rows: rows()[y][x]"""
        cells = self.to_cells()
        return [
            cells[start : start + BOARD_SIZE]
            for start in range(0, CELL_COUNT, BOARD_SIZE)
        ]

    def owner(self, cell: Cell) -> Optional[str]:
        return self.claims.get(cell)

    def is_free(self, x: int, y: int) -> bool:
        return Cell(x, y) not in self.claims

    @property
    def is_empty(self) -> bool:
        return len(self.claims) == 0

    @property
    def is_full(self) -> bool:
        return len(self.claims) == CELL_COUNT

    @property
    def is_three_in_a_line(self) -> bool:
        return self.winner is not None

    @property
    def winner(self) -> Optional[str]:
        """Name of the player owning a full row, column or diagonal (if any)."""
        for line in LINES:
            owners = {self.owner(cell) for cell in line}
            if len(owners) == 1 and None not in owners:
                return owners.pop()
        return None

    def free_cells(self) -> list[Cell]:
        """Free cells, ordered by index"""
        return [cell for cell in all_cells() if cell not in self.claims]

    def claim(self, cell: Cell, player: str) -> None:
        """Update the board. Rules about turns are the Game's responsibility, the board only guards its cells."""
        if not cell.is_within_bounds():
            raise IllegalMoveError(f"Cell {cell} is not on the board.")
        if cell in self.claims:
            raise IllegalMoveError(
                f"Cell {cell} is already claimed by {self.claims[cell]}."
            )
        self.claims[cell] = player
