"""
JsonRepository - CRUD over one collection of ``database.json``.

- Ids are integers: max existing id + 1, starting at 1
- Updates replace every user field (no partial patch) and keep
  ``id`` / ``createdAt``
- Deletes are immediate; there is no soft-delete
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from finance_tracker.core.logging import get_logger
from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.models.base import Record, timestamp

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


def next_id(rows: List[Dict[str, Any]]) -> int:
    return max((row["id"] for row in rows), default=0) + 1


class JsonRepository(Generic[RecordT]):
    """Repository for one JSON collection."""

    collection: str
    model: Type[RecordT]

    def __init__(self, db: JsonDatabase):
        self.db = db

    def payload_fields(self, payload: BaseModel) -> Dict[str, Any]:
        """Stored fields for a create/update payload."""
        return payload.model_dump(by_alias=True, mode="json")

    def list_all(self) -> List[RecordT]:
        return [self.model.model_validate(row) for row in self.db.read_collection(self.collection)]

    def get(self, record_id: int) -> Optional[RecordT]:
        for row in self.db.read_collection(self.collection):
            if row.get("id") == record_id:
                return self.model.model_validate(row)
        return None

    def create(self, payload: BaseModel) -> RecordT:
        rows = self.db.read_collection(self.collection)
        now = timestamp()
        record = self.model.model_validate({
            **self.payload_fields(payload),
            "id": next_id(rows),
            "createdAt": now,
            "updatedAt": now,
        })
        rows.append(record.to_document())
        self.db.write_collection(self.collection, rows)
        logger.debug("Created %s %s", self.collection, record.id)
        return record

    def update(self, record_id: int, payload: BaseModel) -> Optional[RecordT]:
        rows = self.db.read_collection(self.collection)
        for index, row in enumerate(rows):
            if row.get("id") != record_id:
                continue
            record = self.model.model_validate({
                **row,
                **self.payload_fields(payload),
                "id": record_id,
                "createdAt": row.get("createdAt") or timestamp(),
                "updatedAt": timestamp(),
            })
            rows[index] = record.to_document()
            self.db.write_collection(self.collection, rows)
            return record
        return None

    def save(self, record: RecordT) -> RecordT:
        """Write back a record that was changed in Python."""
        rows = self.db.read_collection(self.collection)
        for index, row in enumerate(rows):
            if row.get("id") == record.id:
                record.updated_at = timestamp()
                rows[index] = record.to_document()
                self.db.write_collection(self.collection, rows)
                return record
        raise KeyError(f"{self.collection} {record.id} does not exist")

    def delete(self, record_id: int) -> bool:
        rows = self.db.read_collection(self.collection)
        remaining = [row for row in rows if row.get("id") != record_id]
        if len(remaining) == len(rows):
            return False
        self.db.write_collection(self.collection, remaining)
        logger.debug("Deleted %s %s", self.collection, record_id)
        return True
