# Overview: Key-value persistence adapters used by the data store.

"""
Storage adapters.

The data store persists each entity collection as a single JSON blob under a
fixed key. Adapters only move strings; they know nothing about entities.

Write semantics follow the rest of the service layer: set_item/remove_item
commit immediately unless called with commit=False, in which case the write
is staged until commit() (or discarded by rollback()).

Failures are not caught here. A SQLAlchemy error, or a RuntimeError when
used outside an application context, propagates to the caller.
"""
from __future__ import annotations

from ..extensions import db
from ..models import StorageEntry


class KeyValueStorage:
    """Interface shared by the storage adapters."""

    def get_item(self, key: str) -> str | None:
        raise NotImplementedError

    def set_item(self, key: str, value: str, *, commit: bool = True) -> None:
        raise NotImplementedError

    def remove_item(self, key: str, *, commit: bool = True) -> None:
        raise NotImplementedError

    def commit(self) -> None:
        raise NotImplementedError

    def rollback(self) -> None:
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError


class SqlKeyValueStorage(KeyValueStorage):
    """Storage backed by the storage_entries table through Flask-SQLAlchemy."""

    def get_item(self, key: str) -> str | None:
        entry = db.session.get(StorageEntry, key)
        if entry is None:
            return None
        return entry.value

    def set_item(self, key: str, value: str, *, commit: bool = True) -> None:
        entry = db.session.get(StorageEntry, key)
        if entry is None:
            entry = StorageEntry(key=key, value=value)
            db.session.add(entry)
        else:
            entry.value = value
        if commit:
            db.session.commit()
        else:
            db.session.flush()

    def remove_item(self, key: str, *, commit: bool = True) -> None:
        entry = db.session.get(StorageEntry, key)
        if entry is not None:
            db.session.delete(entry)
        if commit:
            db.session.commit()
        else:
            db.session.flush()

    def commit(self) -> None:
        db.session.commit()

    def rollback(self) -> None:
        db.session.rollback()

    def keys(self) -> list[str]:
        rows = db.session.query(StorageEntry.key).order_by(StorageEntry.key.asc()).all()
        return [row.key for row in rows]

    def entries(self) -> list[dict]:
        rows = db.session.query(StorageEntry).order_by(StorageEntry.key.asc()).all()
        return [row.to_dict() for row in rows]


_REMOVED = object()


class MemoryStorage(KeyValueStorage):
    """Process-local storage. Used when no database is wanted, and in tests."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self._pending: dict[str, object] = {}

    def get_item(self, key: str) -> str | None:
        if key in self._pending:
            value = self._pending[key]
            return None if value is _REMOVED else value
        return self._data.get(key)

    def set_item(self, key: str, value: str, *, commit: bool = True) -> None:
        self._pending[key] = value
        if commit:
            self.commit()

    def remove_item(self, key: str, *, commit: bool = True) -> None:
        self._pending[key] = _REMOVED
        if commit:
            self.commit()

    def commit(self) -> None:
        for key, value in self._pending.items():
            if value is _REMOVED:
                self._data.pop(key, None)
            else:
                self._data[key] = value
        self._pending.clear()

    def rollback(self) -> None:
        self._pending.clear()

    def keys(self) -> list[str]:
        return sorted(self._data)
