"""Protocol repository (implemented in memory and with SQLAlchemy)"""

from typing import Optional, Protocol

from src.core.models import GameModel

GameId = int


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def list_game_ids(self) -> list[GameId]:
        """IDs of all stored games, ascending."""
        ...

    def get_game(self, game_id: GameId) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(
        self, game: GameModel, game_id: Optional[GameId] = None
    ) -> tuple[GameModel, GameId]:
        """Store new game and return the stored data + newly created game ID (or the requested one)."""
        ...

    def update_game(self, game_id: GameId, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        ...

    def delete_game(self, game_id: GameId) -> GameModel | None:
        """Remove a game's record."""
        ...
