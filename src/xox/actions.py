"""Possible moves of a player: claiming one of the free cells on the board."""

from dataclasses import dataclass
from typing import Self

from src.xox.cell import Cell


@dataclass(frozen=True)
class ClaimFieldAction:
    x: int
    y: int
    player: str

    @classmethod
    def for_cell(cls, cell: Cell, player: str) -> Self:
        return cls(cell.x, cell.y, player)

    @property
    def cell(self) -> Cell:
        return Cell(self.x, self.y)

    @property
    def index(self) -> int:
        """Index used to refer to this action when posting it."""
        return self.cell.to_index()
