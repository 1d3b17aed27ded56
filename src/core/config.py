"""Runtime settings, read from environment variables."""

import os
from dataclasses import dataclass
from typing import Optional, Self

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    base_path: str = "/xox"
    # No URL: keep games in memory only
    database_url: Optional[str] = None
    sample_game: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            base_path=os.getenv("XOX_BASE_PATH", cls.base_path).rstrip("/"),
            database_url=os.getenv("XOX_DATABASE_URL") or None,
            sample_game=os.getenv("XOX_SAMPLE_GAME", "true").lower() in TRUTHY,
            log_level=os.getenv("XOX_LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("XOX_HOST", cls.host),
            port=int(os.getenv("XOX_PORT", str(cls.port))),
        )
