"""Entry point: wire settings, repository, service and app together.

Run with `python -m src.main` or `uvicorn src.main:app`.
"""

import logging

import uvicorn

from src.api.app import create_app
from src.core.config import Settings
from src.db.database import build_session
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.xox_service import XoxService

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> GameRepository:
    if settings.database_url is None:
        logger.info("No database configured, keeping games in memory")
        return InMemoryGameRepository()
    logger.info("Storing games in %s", settings.database_url)
    return SQLGameRepository(build_session(settings.database_url))


def build_service(settings: Settings) -> XoxService:
    service = XoxService(build_repository(settings))
    if settings.sample_game:
        service.add_sample_game()
    return service


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings.from_env()
configure_logging(settings)
app = create_app(build_service(settings), settings)


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
