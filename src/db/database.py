"""Generate database session"""

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine and ensure all tables are created"""
    if not database_url.startswith("sqlite"):
        engine = create_engine(database_url, echo=echo)
    elif ":memory:" in database_url:
        # every connection to an in-memory database would otherwise see its own, empty database
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(
            database_url, echo=echo, connect_args={"check_same_thread": False}
        )

    Base.metadata.create_all(bind=engine)
    return engine


def build_session(database_url: str) -> Session:
    """The session shared by the repository for the lifetime of the app."""
    session_factory = sessionmaker(autoflush=False, bind=build_engine(database_url))
    return session_factory()
