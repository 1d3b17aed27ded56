"""Wiring done in src/main.py"""

from src.core.config import Settings
from src.db.memory_repository import InMemoryGameRepository
from src.db.sql_repository import SQLGameRepository
from src.main import build_repository, build_service
from src.services.xox_service import SAMPLE_GAME_ID


def test_memory_repository_by_default() -> None:
    assert isinstance(build_repository(Settings()), InMemoryGameRepository)


def test_sql_repository_when_configured() -> None:
    settings = Settings(database_url="sqlite:///:memory:")
    assert isinstance(build_repository(settings), SQLGameRepository)


def test_service_with_sample_game() -> None:
    service = build_service(Settings(database_url="sqlite:///:memory:"))
    assert service.list_games() == [SAMPLE_GAME_ID]


def test_service_without_sample_game() -> None:
    service = build_service(Settings(sample_game=False))
    assert service.list_games() == []
