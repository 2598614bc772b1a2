"""SQL connection and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from ems_api.core.config import get_settings

_settings = get_settings()

engine = create_engine(
    _settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=_settings.DEBUG,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ping(db: Session) -> list[dict]:
    """
    Run a trivial liveness query and return its rows verbatim.
    Raises SQLAlchemyError when the database is unreachable.
    """
    result = db.execute(text("SELECT 1 AS ok"))
    return [dict(row) for row in result.mappings()]
