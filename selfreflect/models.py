from dataclasses import dataclass
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from .db import Base

# Field order of the stored/exported JSON records
ENTRY_FIELDS = ("date", "mood", "moodLabel", "past", "future", "reflection", "id")
TEXT_FIELDS = ("moodLabel", "past", "future", "reflection")

MOOD_MIN = 1
MOOD_MAX = 10


class StoredValue(Base):
    __tablename__ = "stored_values"
    id = Column(Integer, primary_key=True)
    key = Column(String, unique=True, index=True)
    value = Column(Text)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


@dataclass(frozen=True)
class Entry:
    """One saved reflection. Immutable once created."""
    id: int
    date: str
    mood: int
    mood_label: str = ""
    past: str = ""
    future: str = ""
    reflection: str = ""

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "mood": self.mood,
            "moodLabel": self.mood_label,
            "past": self.past,
            "future": self.future,
            "reflection": self.reflection,
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """
        Build an Entry from a stored record.

        Stored records are trusted: the mood range is not re-checked, but the
        shape is. Missing text fields read as empty strings.

        Raises:
            ValueError: if the record is not an object or has wrongly typed fields.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Entry record must be an object, got {type(data).__name__}")

        entry_id = data.get("id")
        mood = data.get("mood")
        date = data.get("date")
        if not isinstance(entry_id, int) or isinstance(entry_id, bool):
            raise ValueError(f"Entry id must be an integer, got {entry_id!r}")
        if not isinstance(mood, int) or isinstance(mood, bool):
            raise ValueError(f"Entry mood must be an integer, got {mood!r}")
        if not isinstance(date, str):
            raise ValueError(f"Entry date must be a string, got {date!r}")

        texts = {}
        for field in TEXT_FIELDS:
            value = data.get(field, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"Entry {field} must be a string, got {value!r}")
            texts[field] = value

        return cls(
            id=entry_id,
            date=date,
            mood=mood,
            mood_label=texts["moodLabel"],
            past=texts["past"],
            future=texts["future"],
            reflection=texts["reflection"],
        )


@dataclass(frozen=True)
class WordStat:
    text: str
    value: int

    def to_dict(self) -> dict:
        return {"text": self.text, "value": self.value}
