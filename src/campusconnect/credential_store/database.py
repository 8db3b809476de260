"""SQLite engine and sessions for the Credential Store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from campusconnect.credential_store.models import Base

if TYPE_CHECKING:
    from sqlalchemy import Engine

IN_MEMORY = ":memory:"


def _use_wal(dbapi_connection: object, _connection_record: object) -> None:
    # Lets profile reads proceed while a signup holds the write lock
    cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class Database:
    """Lazily built engine and session factory for the students database.

    A file path gives a WAL-mode database shared by every request thread.
    ":memory:" gives a private database on a single shared connection, so all
    sessions see the same tables.
    """

    def __init__(self, db_path: str = "campusconnect.db") -> None:
        self.db_path = db_path
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def in_memory(self) -> bool:
        return self.db_path == IN_MEMORY

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        # Request handlers run in a threadpool, so connections cross threads
        connect_args = {"check_same_thread": False}
        if self.in_memory:
            return create_engine(
                "sqlite://", poolclass=StaticPool, connect_args=connect_args
            )

        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(f"sqlite:///{self.db_path}", connect_args=connect_args)
        event.listen(engine, "connect", _use_wal)
        return engine

    def create_tables(self) -> None:
        """Create the students table if it is missing."""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Open a session; callers close it when the operation ends."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._session_factory()

    def ping(self) -> bool:
        """Run a trivial query to check the database is reachable."""
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1

    def close(self) -> None:
        """Dispose of the engine. A later call reopens it."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
