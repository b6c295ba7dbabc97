from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.logger import Logger

logger = Logger.get_logger(__name__)


def _engine_kwargs(url) -> dict:
    kwargs: dict = {"pool_pre_ping": True}
    if url.drivername.startswith("sqlite"):
        kwargs.pop("pool_pre_ping")
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every session sees an empty db
            kwargs["poolclass"] = StaticPool
    if url.drivername.startswith("mysql"):
        kwargs["pool_recycle"] = 1800
    return kwargs


database_url = make_url(settings.DATABASE_URI)
engine = create_engine(database_url, echo=False, future=True, **_engine_kwargs(database_url))

if database_url.drivername.startswith("sqlite"):

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record) -> None:  # pragma: no cover - driver hook
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.close()


SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


class Base(DeclarativeBase):
    pass


@contextmanager
def transaction_scope(db: Session) -> Iterator[Session]:
    """
    Unit of work: commit everything done inside the block, or nothing.
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.warning("Rolling back unit of work", exc_info=True)
        db.rollback()
        raise
