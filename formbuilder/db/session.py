import logging
from typing import Any, Dict, Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine and session factory for one running application.

    Built once by the application factory and disposed on shutdown; request
    handlers only ever see sessions handed out by `get_db`.
    """

    def __init__(self, url: str, echo: bool = False, engine: Optional[Engine] = None):
        self.url = url
        self.engine = engine or _build_engine(url, echo)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def health(self) -> Dict[str, Any]:
        stats: Dict[str, Any] = {}
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Database health check failed: {str(e)}")
            stats["status"] = "down"
            stats["error"] = f"db unreachable: {str(e)}"
            return stats

        stats["status"] = "up"
        stats["message"] = "Database is healthy"
        pool = self.engine.pool
        stats["pool"] = pool.status()
        for name in ("size", "checkedin", "checkedout", "overflow"):
            probe = getattr(pool, name, None)
            if callable(probe):
                stats[name] = probe()
        return stats

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Disconnected from database")


def _build_engine(url: str, echo: bool) -> Engine:
    kwargs: Dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            # Keep a single in-memory connection alive across sessions
            kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    if url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# Dependency
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
