"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of xox -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    InvalidRequestError,
    NotYourTurnError,
    PlayerNotFoundError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Status
from src.xox.actions import ClaimFieldAction
from src.xox.board import Board
from src.xox.cell import CELL_COUNT, Cell
from src.xox.player import Player
from src.xox.ranking import Ranking

PLAYER_COUNT = 2


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: list[Player]
    current_player: str
    status: Status

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise RepositoryError(
                f"Stored game has invalid status code: {model.status!r}. \nPick one from {','.join(Status)}"
            )

        players = [Player.from_model(player) for player in model.players]
        game = cls(
            board=Board.from_cells(model.cells),
            players=players,
            current_player=model.current_player,
            status=Status(model.status),
        )
        if model.current_player not in (player.name for player in players):
            raise RepositoryError(
                f"Stored game is waiting for {model.current_player!r}, who is not one of its players."
            )
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            players=[player.to_model() for player in self.players],
            current_player=self.current_player,
            status=self.status.value,
            cells=self.board.to_cells(),
        )

    @classmethod
    def new_game(cls, players: list[Player], starting_player: str) -> Self:
        """Start a game on an empty board, with the indicated player making the first claim."""

        if len(players) != PLAYER_COUNT:
            raise InvalidRequestError(
                f"Cannot create new game. Need exactly {PLAYER_COUNT} players, got {len(players)}."
            )

        names = [player.name for player in players]
        if any(not name.strip() for name in names):
            raise InvalidRequestError("Cannot create new game. Player names must not be blank.")
        if len(set(names)) != len(names):
            raise InvalidRequestError(
                f"Cannot create new game. Player names must be unique: {', '.join(names)}."
            )
        if starting_player not in names:
            raise InvalidRequestError(
                f"Cannot create new game. Starting player {starting_player!r} is not one of {', '.join(names)}."
            )

        return cls(
            board=Board(),
            players=list(players),
            current_player=starting_player,
            status=Status.IN_PROGRESS,
        )

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def ranking(self) -> Ranking:
        return Ranking.from_board(self.board, self.players)

    def claimable_cells(self, player: str) -> list[Cell]:
        """
        The one place that decides what a player may claim.
        ----
        Nothing once the game is over, nothing while waiting for the opponent, every free cell otherwise.
        """
        self._assert_registered(player)
        if self.is_over or player != self.current_player:
            return []
        return self.board.free_cells()

    def actions(self, player: str) -> list[ClaimFieldAction]:
        """Service will request the set of available actions, ordered by cell index."""
        return [
            ClaimFieldAction.for_cell(cell, player)
            for cell in self.claimable_cells(player)
        ]

    def claim(self, player: str, index: int) -> ClaimFieldAction:
        """
        Attempt to claim the cell with the given index
        -----

        1. make sure the game is still running and it is your turn
        2. make sure the cell exists and is still free
        3. update the board
        4. update game status (if needed) and pass the turn on
        """
        if not self.claimable_cells(player):
            self._raise_not_claimable(player)

        if not 0 <= index < CELL_COUNT:
            raise IllegalMoveError(
                f"Action index {index} out of range. Pick one from 0-{CELL_COUNT - 1}."
            )

        cell = Cell.from_index(index)
        if cell not in self.claimable_cells(player):
            raise IllegalMoveError(
                f"Cell {index} is already claimed by {self.board.owner(cell)}."
            )

        self.board.claim(cell, player)
        self._update_game_status()
        if not self.is_over:
            self.current_player = self._opponent(player).name
        return ClaimFieldAction.for_cell(cell, player)

    # -- PRIVATE HELPERS ---
    def _assert_registered(self, player: str) -> None:
        if player not in (p.name for p in self.players):
            raise PlayerNotFoundError(f"No player named {player!r} in this game.")

    def _opponent(self, player: str) -> Player:
        return next(p for p in self.players if p.name != player)

    def _raise_not_claimable(self, player: str) -> None:
        """Explain why claimable_cells() came back empty."""
        if self.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.status}")
        if player != self.current_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {self.current_player} to make a move first."
            )
        # The game would have ended with a full board, so this is unreachable in practice
        raise GameStateError("No free cells left on the board.")

    def _update_game_status(self) -> None:
        """Performs checks to see if game has ended and changes status accordingly."""
        if self.board.is_three_in_a_line:
            self._change_status(Status.WON)
        elif self.board.is_full:
            self._change_status(Status.DRAW)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
