"""Persistence adapters: synchronous key/value storage of named JSON records.

Every public method absorbs backend failures. A read that fails (backend error or undecodable
JSON) reports the record as absent so callers fall back to their defaults; a failed write or
remove is logged and dropped. Nothing raised by a backend reaches the caller.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from commodities.core.config import Settings
from commodities.core.database import build_engine, build_session_factory
from commodities.models import Base, StoredRecord

logger = logging.getLogger(__name__)


class PersistenceAdapter(ABC):
    """Durable mirror of named records. No transactions across keys; each write stands alone."""

    @abstractmethod
    def _get(self, key: str) -> str | None: ...

    @abstractmethod
    def _set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def _delete(self, key: str) -> None: ...

    def read(self, key: str) -> str | None:
        """Return the raw stored value, or None when absent or unreadable."""
        try:
            return self._get(key)
        except Exception as e:
            logger.warning("Storage read failed for key=%s; treating as absent: %s", key, e)
            return None

    def write(self, key: str, value: str) -> None:
        try:
            self._set(key, value)
        except Exception as e:
            logger.warning("Storage write failed for key=%s: %s", key, e)

    def remove(self, key: str) -> None:
        try:
            self._delete(key)
        except Exception as e:
            logger.warning("Storage remove failed for key=%s: %s", key, e)

    def read_json(self, key: str) -> Any | None:
        """Return the decoded JSON value, or None when absent, unreadable or not valid JSON."""
        raw = self.read(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Stored value for key=%s is not valid JSON; treating as absent: %s", key, e)
            return None

    def write_json(self, key: str, value: Any) -> None:
        self.write(key, json.dumps(value))


class MemoryStorage(PersistenceAdapter):
    """Dict-backed storage for tests and throwaway runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def _get(self, key: str) -> str | None:
        return self._data.get(key)

    def _set(self, key: str, value: str) -> None:
        self._data[key] = value

    def _delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class SqlStorage(PersistenceAdapter):
    """
    SQLAlchemy-backed storage: one row per key in `stored_records`.

    Each operation opens its own short session and commits before returning.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = build_session_factory(engine)
        self._schema_ready = False

    def _ensure_schema(self) -> None:
        if not self._schema_ready:
            Base.metadata.create_all(self._engine)
            self._schema_ready = True

    def _get(self, key: str) -> str | None:
        self._ensure_schema()
        db = self._session_factory()
        try:
            row = db.get(StoredRecord, key)
            return row.value if row is not None else None
        finally:
            db.close()

    def _set(self, key: str, value: str) -> None:
        self._ensure_schema()
        db = self._session_factory()
        try:
            row = db.get(StoredRecord, key)
            if row is None:
                db.add(StoredRecord(key=key, value=value))
            else:
                row.value = value
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()

    def _delete(self, key: str) -> None:
        self._ensure_schema()
        db = self._session_factory()
        try:
            db.query(StoredRecord).filter(StoredRecord.key == key).delete(
                synchronize_session=False
            )
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()


def build_storage(settings: Settings) -> PersistenceAdapter:
    """Pick the storage backend named by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "memory":
        return MemoryStorage()
    return SqlStorage(build_engine(settings))
