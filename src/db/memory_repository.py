"""Implementation of (Game)Repository keeping everything in a dictionary. Default when no database is configured."""

from copy import deepcopy
from threading import Lock
from typing import Optional

from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameId


class InMemoryGameRepository:
    """Games live as long as the process. Models are copied on the way in and out, so callers never share state."""

    def __init__(self) -> None:
        self._games: dict[GameId, GameModel] = {}
        # IDs are never handed out twice, not even after a game was deleted
        self._next_id: GameId = 1
        self._lock = Lock()

    def list_game_ids(self) -> list[GameId]:
        with self._lock:
            return sorted(self._games)

    def get_game(self, game_id: GameId) -> GameModel | None:
        with self._lock:
            game = self._games.get(game_id)
            return deepcopy(game) if game is not None else None

    def create_game(
        self, game: GameModel, game_id: Optional[GameId] = None
    ) -> tuple[GameModel, GameId]:
        with self._lock:
            if game_id is None:
                game_id = self._next_id
            elif game_id in self._games:
                raise RepositoryError(f"Game with {game_id=} already exists.")
            self._next_id = max(self._next_id, game_id + 1)
            self._games[game_id] = deepcopy(game)
            return deepcopy(game), game_id

    def update_game(self, game_id: GameId, game: GameModel) -> GameModel | None:
        with self._lock:
            if game_id not in self._games:
                return None
            self._games[game_id] = deepcopy(game)
            return deepcopy(game)

    def delete_game(self, game_id: GameId) -> GameModel | None:
        with self._lock:
            return self._games.pop(game_id, None)
