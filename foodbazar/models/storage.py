from __future__ import annotations

from ..extensions import db
from foodbazar.time_utils import to_utc_z


class StorageEntry(db.Model):
    """
    One persisted collection blob.

    The table is a plain key-value store: each key holds the JSON array of a
    whole entity collection. There is no schema version column; the blob
    format is the entity to_dict() layout.
    """
    __tablename__ = "storage_entries"

    key = db.Column(db.String(128), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now(), onupdate=db.func.now())

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "size": len(self.value),
            "updated_at": to_utc_z(self.updated_at),
        }
