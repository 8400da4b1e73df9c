import json
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, sessionmaker

from ..config import STORAGE_KEY
from ..db import SessionLocal
from ..models import Entry, StoredValue

logger = logging.getLogger(__name__)


def dumps_entries(entries: List[Entry]) -> str:
    """Compact JSON array, the stored text shape."""
    return json.dumps([e.to_dict() for e in entries], ensure_ascii=False, separators=(",", ":"))


def loads_entries(text: str) -> List[Entry]:
    """
    Parse stored text back into entries.

    Raises:
        ValueError: if the text is not a JSON array of entry records.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"Stored entries must be a JSON array, got {type(data).__name__}")
    return [Entry.from_dict(item) for item in data]


class EntryRepository:
    """Keeps the whole entry collection as one JSON text value under a storage key."""

    def __init__(self, session_factory: sessionmaker = SessionLocal, key: str = STORAGE_KEY):
        self.session_factory = session_factory
        self.key = key

    def _row(self, db: Session):
        return db.query(StoredValue).filter(StoredValue.key == self.key).first()

    def load(self) -> Optional[List[Entry]]:
        """
        Load the stored collection.

        Returns None when nothing has been stored yet. Unreadable data is
        logged and read as an empty collection.
        """
        db = self.session_factory()
        try:
            row = self._row(db)
            if row is None or row.value is None:
                return None
            text = row.value
        finally:
            db.close()

        try:
            entries = loads_entries(text)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            logger.warning("Failed to parse stored entries under %r: %s", self.key, e)
            return []
        logger.debug("Loaded %d entries from %r", len(entries), self.key)
        return entries

    def save(self, entries: List[Entry]) -> None:
        db = self.session_factory()
        try:
            row = self._row(db)
            text = dumps_entries(entries)
            if row is None:
                db.add(StoredValue(key=self.key, value=text))
            else:
                row.value = text
            db.commit()
            logger.debug("Saved %d entries to %r", len(entries), self.key)
        finally:
            db.close()
