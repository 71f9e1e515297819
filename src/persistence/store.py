"""Key-value stores holding JSON blobs.

``get_json``/``set_json`` never raise: unreadable values fall back to the
caller's default and failed writes are logged and dropped.
"""
import json
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Generator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.persistence.models import StorageEntry

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised by a store backend when it cannot read or write a key."""

    pass


class KeyValueStore(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the raw value for ``key`` or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Replace the raw value for ``key``."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""
        pass

    def get_json(self, key: str, default: Any) -> Any:
        """Read and decode a JSON value, returning ``default`` on any failure."""
        try:
            raw = self.get_item(key)
            return json.loads(raw) if raw else default
        except (StorageError, ValueError) as e:
            logger.error('Error reading from storage key "%s": %s', key, e)
            return default

    def set_json(self, key: str, value: Any) -> bool:
        """Encode and write a JSON value.

        Returns:
            True if the value was written, False if the write was dropped
        """
        try:
            self.set_item(key, json.dumps(value))
            return True
        except (StorageError, TypeError, ValueError) as e:
            logger.error('Error saving to storage key "%s": %s', key, e)
            return False

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class InMemoryStore(KeyValueStore):
    """Process-local store, used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class SqlStore(KeyValueStore):
    """Store backed by the ``storage_entries`` table."""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Initialize SQL store.

        Args:
            session_factory: Session factory; defaults to the application's SessionLocal
        """
        if session_factory is None:
            from src.persistence.database import SessionLocal

            session_factory = SessionLocal
        self._session_factory = session_factory

    @contextmanager
    def _session_scope(self) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(str(e)) from e
        finally:
            session.close()

    def get_item(self, key: str) -> Optional[str]:
        with self._session_scope() as session:
            entry = session.get(StorageEntry, key)
            return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        with self._session_scope() as session:
            entry = session.get(StorageEntry, key)
            if entry is None:
                session.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value

    def remove_item(self, key: str) -> None:
        with self._session_scope() as session:
            entry = session.get(StorageEntry, key)
            if entry is not None:
                session.delete(entry)
