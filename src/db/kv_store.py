"""Implementations of the KeyValueStore protocol."""

import logging
from copy import deepcopy
from threading import Lock

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import StoreError, VersionConflictError
from src.db.repository import Record, VersionedRecord
from src.db.schema import DBRecord, utc_now

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    """Dictionary backed store. State lives as long as the process."""

    def __init__(self) -> None:
        self._records: dict[str, VersionedRecord] = {}
        self._lock = Lock()

    def get(self, key: str) -> VersionedRecord | None:
        with self._lock:
            record = self._records.get(key)
        if record is None:
            return None
        return VersionedRecord(deepcopy(record.value), record.version)

    def create(self, key: str, value: Record) -> int:
        with self._lock:
            if key in self._records:
                raise VersionConflictError(f"Key {key!r} already exists.")
            self._records[key] = VersionedRecord(deepcopy(value), 1)
            return 1

    def compare_and_set(self, key: str, value: Record, expected_version: int) -> int:
        with self._lock:
            current = self._records.get(key)
            if current is None or current.version != expected_version:
                raise VersionConflictError(
                    f"Key {key!r} changed since version {expected_version}."
                )
            new_version = expected_version + 1
            self._records[key] = VersionedRecord(deepcopy(value), new_version)
            return new_version

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


class SQLKeyValueStore:
    """Data stored in a single SQL table / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get(self, key: str) -> VersionedRecord | None:
        try:
            query = (
                select(DBRecord)
                .where(DBRecord.key == key)
                .execution_options(populate_existing=True)
            )
            record_db = self.db.scalar(query)
        except SQLAlchemyError as e:
            raise self._store_error("read", key, e) from e
        if record_db is None:
            return None
        return VersionedRecord(deepcopy(record_db.value), record_db.version)

    def create(self, key: str, value: Record) -> int:
        try:
            self.db.execute(insert(DBRecord).values(key=key, value=value, version=1))
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise VersionConflictError(f"Key {key!r} already exists.") from e
        except SQLAlchemyError as e:
            raise self._store_error("create", key, e) from e
        return 1

    def compare_and_set(self, key: str, value: Record, expected_version: int) -> int:
        new_version = expected_version + 1
        query = (
            update(DBRecord)
            .where(DBRecord.key == key, DBRecord.version == expected_version)
            .values(value=value, version=new_version, updated_at=utc_now())
        )
        try:
            result = self.db.execute(query)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._store_error("update", key, e) from e

        if result.rowcount != 1:
            raise VersionConflictError(
                f"Key {key!r} changed since version {expected_version}."
            )
        return new_version

    def _store_error(self, action: str, key: str, error: SQLAlchemyError) -> StoreError:
        """Roll back the failed transaction and wrap the driver error."""
        logger.error("Failed to %s record %r: %s", action, key, error)
        self.db.rollback()
        return StoreError(f"Failed to {action} record {key!r}.")
