"""Scores and completion state of a game, derived from its board."""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import PlayerNotFoundError
from src.xox.board import Board
from src.xox.player import Player

WIN_SCORE = 1


@dataclass(frozen=True)
class Ranking:
    game_over: bool
    scores: dict[str, int]

    @classmethod
    def from_board(cls, board: Board, players: list[Player]) -> Self:
        """The player with three in a line scores a point, everyone else (also in a draw) stays at zero."""
        winner = board.winner
        return cls(
            game_over=winner is not None or board.is_full,
            scores={
                player.name: WIN_SCORE if player.name == winner else 0
                for player in players
            },
        )

    def score_for_player(self, name: str) -> int:
        if name not in self.scores:
            raise PlayerNotFoundError(f"No player named {name!r} in this ranking.")
        return self.scores[name]
