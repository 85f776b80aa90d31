"""
Key/value local storage backed by a SQLite file through SQLModel
"""
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine
from complaint_reporter.config import get_settings
from complaint_reporter.exceptions import StorageError
from complaint_reporter.models.storage_slot import StorageSlot
from complaint_reporter.logging_config import logger


class LocalStorage:
    """Device-local storage holding whole text values under string keys"""

    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        """
        Initialize local storage

        Args:
            database_url: SQLAlchemy URL, defaults to settings.DATABASE_URL
            echo: Echo SQL statements, defaults to settings.DATABASE_ECHO
        """
        settings = get_settings()
        self.database_url = database_url or settings.DATABASE_URL
        self.echo = settings.DATABASE_ECHO if echo is None else echo
        self.engine = None
        self._initialized = False

    def initialize(self):
        """Create the engine and the storage table if needed"""
        if self._initialized:
            return

        try:
            engine_kwargs = {"echo": self.echo}
            if self.database_url.startswith("sqlite"):
                engine_kwargs["connect_args"] = {"check_same_thread": False}
                if self.database_url in ("sqlite://", "sqlite:///:memory:"):
                    # Keep a single connection so the in-memory database survives
                    engine_kwargs["poolclass"] = StaticPool

            self.engine = create_engine(self.database_url, **engine_kwargs)
            SQLModel.metadata.create_all(self.engine, tables=[StorageSlot.__table__])

            self._initialized = True
            logger.info(f"Local storage initialized at {self.database_url}")

        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize local storage: {str(e)}")
            raise StorageError(f"Cannot open local storage: {e}") from e

    def close(self):
        """Dispose the engine"""
        if self.engine:
            self.engine.dispose()
            self._initialized = False
            logger.info("Local storage closed")

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Get a storage session that commits on success and rolls back on error"""
        if not self._initialized:
            self.initialize()

        with Session(self.engine, expire_on_commit=False) as session:
            try:
                yield session
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Local storage operation failed: {str(e)}")
                raise StorageError(str(e)) from e
            except Exception:
                session.rollback()
                raise

    def get_item(self, key: str) -> Optional[str]:
        """Return the text stored under key, or None when the slot is empty"""
        with self.get_session() as session:
            slot = session.get(StorageSlot, key)
            return slot.value if slot is not None else None

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the slot under key with value"""
        with self.get_session() as session:
            slot = session.get(StorageSlot, key)
            if slot is None:
                slot = StorageSlot(key=key, value=value)
            else:
                slot.value = value
                slot.updated_at = datetime.now(timezone.utc)
            session.add(slot)
        logger.debug(f"Stored {len(value)} characters under key '{key}'")

    def remove_item(self, key: str) -> None:
        with self.get_session() as session:
            slot = session.get(StorageSlot, key)
            if slot is not None:
                session.delete(slot)

    def clear(self) -> None:
        with self.get_session() as session:
            session.execute(delete(StorageSlot))
        logger.info("Local storage cleared")
