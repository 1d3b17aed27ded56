"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from src.api.models import (
    ActionResponse,
    ActionsRequest,
    BoardResponse,
    ClaimFieldRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameId,
    GetGameRequest,
    PlayerSchema,
    RankingResponse,
)
from src.core.exceptions import GameNotFoundError, RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.xox.game import Game
from src.xox.player import Player

logger = logging.getLogger(__name__)

SAMPLE_GAME_ID: GameId = 42
SAMPLE_GAME_REQUEST = CreateGameRequest(
    players=[
        PlayerSchema(name="Max", preferred_colour="#CAFFEE"),
        PlayerSchema(name="Moritz", preferred_colour="#1CE7EA"),
    ],
    starting_player="Max",
)


class XoxService:
    """Orchestration of layers for xox games.

    Every operation on a game holds that game's lock, so a move is applied completely before anyone reads the game again.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository
        self._locks: dict[GameId, Lock] = {}
        self._locks_guard = Lock()

    # -- API routes logic ---
    def list_games(self) -> list[GameId]:
        """Show all recorded games."""
        return self.repo.list_game_ids()

    def create_game(self, request: CreateGameRequest) -> GameId:
        """Create a new game on an empty board and return its ID."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = self._new_game(request)

        # Store the GameModel in the repository
        _, game_id = self.repo.create_game(new_game.to_model())
        logger.info(
            "Created game %d for %s",
            game_id,
            " vs. ".join(player.name for player in request.players),
        )
        return game_id

    def add_sample_game(self) -> GameId:
        """Register the well-known sample game (Max vs. Moritz) under its fixed ID, unless it already exists."""
        if self.repo.get_game(SAMPLE_GAME_ID) is None:
            game = self._new_game(SAMPLE_GAME_REQUEST)
            self.repo.create_game(game.to_model(), SAMPLE_GAME_ID)
            logger.info("Registered sample game %d", SAMPLE_GAME_ID)
        return SAMPLE_GAME_ID

    def get_ranking(self, request: GetGameRequest) -> RankingResponse:
        """Scores of both players and whether the game has ended."""
        with self._game_lock(request.game_id):
            game = Game.from_model(self._fetch_game(request.game_id))
        ranking = game.ranking
        return RankingResponse(game_over=ranking.game_over, scores=ranking.scores)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self._game_lock(request.game_id):
            if self.repo.delete_game(request.game_id) is None:
                raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")
        with self._locks_guard:
            self._locks.pop(request.game_id, None)
        logger.info("Deleted game %d", request.game_id)

    def get_board(self, request: GetGameRequest) -> BoardResponse:
        with self._game_lock(request.game_id):
            game = Game.from_model(self._fetch_game(request.game_id))
        board = game.board
        return BoardResponse(
            cells=board.rows(),
            is_empty=board.is_empty,
            is_full=board.is_full,
            is_three_in_a_line=board.is_three_in_a_line,
        )

    def get_players(self, request: GetGameRequest) -> list[PlayerSchema]:
        """Both players, in the order they were given at creation."""
        with self._game_lock(request.game_id):
            game = Game.from_model(self._fetch_game(request.game_id))
        return [
            PlayerSchema(name=player.name, preferred_colour=player.preferred_colour)
            for player in game.players
        ]

    def get_actions(self, request: ActionsRequest) -> list[ActionResponse]:
        """Cells the player may claim right now (empty when it is not their turn)."""
        with self._game_lock(request.game_id):
            game = Game.from_model(self._fetch_game(request.game_id))
        return [
            ActionResponse(
                x=action.x, y=action.y, index=action.index, player=action.player
            )
            for action in game.actions(request.player_name)
        ]

    def claim_field(self, request: ClaimFieldRequest) -> None:
        """Make a claim attempt. The stored game is only updated if the claim is accepted."""
        with self._game_lock(request.game_id):
            # Retrieve persisted GameModel from repository
            game = Game.from_model(self._fetch_game(request.game_id))

            # Attempt the claim
            action = game.claim(request.player_name, request.action_index)

            # store in repository
            if self.repo.update_game(request.game_id, game.to_model()) is None:
                raise RepositoryError(
                    f"Game with game_id={request.game_id} vanished while claiming a cell."
                )

        logger.info(
            "Game %d: %s claimed cell %d (%d, %d), status: %s",
            request.game_id,
            action.player,
            action.index,
            action.x,
            action.y,
            game.status,
        )

    # -- Internal helpers --
    def _new_game(self, request: CreateGameRequest) -> Game:
        return Game.new_game(
            players=[
                Player(player.name, player.preferred_colour)
                for player in request.players
            ],
            starting_player=request.starting_player,
        )

    @contextmanager
    def _game_lock(self, game_id: GameId) -> Iterator[None]:
        """Only registered games get a lock, unknown IDs are rejected before one is created."""
        with self._locks_guard:
            lock = self._locks.get(game_id)
            if lock is None:
                self._fetch_game(game_id)
                lock = self._locks[game_id] = Lock()
        with lock:
            yield

    def _fetch_game(self, game_id: GameId) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model
