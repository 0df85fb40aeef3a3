from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings
from app.core.errors import InfrastructureError

engine = create_engine(
    settings.APP_DATABASE_DSN,
    connect_args=({"check_same_thread": False} if "sqlite" in settings.APP_DATABASE_DSN else {}),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Run one use case as a single unit: commit on success, roll back on error.

    Operational storage failures (lost connection, lock timeout) are re-raised
    as ``InfrastructureError`` so callers can retry.
    """
    try:
        yield db
        db.commit()
    except OperationalError as e:
        db.rollback()
        raise InfrastructureError("Storage is temporarily unavailable") from e
    except Exception:
        db.rollback()
        raise


def init_db() -> None:
    """Initialize database tables."""
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
