"""Implementation of (Game)Repository using SQLAlchemy"""

from threading import RLock
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameModel, PlayerModel
from src.db.repository import GameId
from src.db.schema import DBGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy

    A Session is not thread-safe, so every call holds the repository lock while it uses the session.
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session
        self._lock = RLock()

    def list_game_ids(self) -> list[GameId]:
        """IDs of all stored games, ascending."""
        query = select(DBGame.id).order_by(DBGame.id)
        with self._lock:
            return list(self.db.scalars(query))

    def get_game(self, game_id: GameId) -> GameModel | None:
        """Get game by ID, if record exists."""
        with self._lock:
            game_db = self._fetch_game(game_id)
            if game_db:
                return self._to_model(game_db)
            return None

    def create_game(
        self, game: GameModel, game_id: Optional[GameId] = None
    ) -> tuple[GameModel, GameId]:
        """Store new game and return the stored data + newly created game ID."""
        with self._lock:
            if game_id is not None and self._fetch_game(game_id) is not None:
                raise RepositoryError(f"Game with {game_id=} already exists.")

            game_db = DBGame(
                id=game_id,
                players=self._players_to_json(game.players),
                cells=list(game.cells),
                current_player=game.current_player,
                status=game.status,
            )
            self.db.add(game_db)
            self._commit()
            self.db.refresh(game_db)
            return self._to_model(game_db), game_db.id

    def update_game(self, game_id: GameId, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        with self._lock:
            game_db = self._fetch_game(game_id)
            if not game_db:
                return None
            game_db.players = self._players_to_json(game.players)
            game_db.cells = list(game.cells)
            game_db.current_player = game.current_player
            game_db.status = game.status
            self._commit()
            self.db.refresh(game_db)
            return self._to_model(game_db)

    def delete_game(self, game_id: GameId) -> GameModel | None:
        """Remove a game's record."""
        with self._lock:
            game_db = self._fetch_game(game_id)
            if not game_db:
                return None
            game_model = self._to_model(game_db)
            self.db.delete(game_db)
            self._commit()
            return game_model

    def _fetch_game(self, game_id: GameId) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Could not store game: {e}") from e

    def _players_to_json(self, players: list[PlayerModel]) -> list[dict[str, str]]:
        return [
            {"name": player.name, "preferred_colour": player.preferred_colour}
            for player in players
        ]

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            players=[PlayerModel(**player) for player in game_db.players],
            current_player=game_db.current_player,
            status=game_db.status,
            cells=list(game_db.cells),
        )
