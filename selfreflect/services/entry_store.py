"""
Entry store: the ordered, in-memory collection of journal entries.

The store is the single writer of the collection. Persistence is attached as an
``on_change`` listener that receives the full collection after every mutation.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from datetime import date as date_cls
from typing import Callable, Iterable, Iterator, List, Optional

from ..models import Entry, MOOD_MIN, MOOD_MAX

logger = logging.getLogger(__name__)

EMPTY_ENTRY_MESSAGE = "Please enter at least a mood or a reflection."
DEFAULT_MOOD = 5
DRAFT_TEXT_FIELDS = ("mood_label", "past", "future", "reflection")


class ValidationFailure(ValueError):
    """A draft was rejected at save time; the collection is unchanged."""


def _today() -> str:
    return date_cls.today().isoformat()


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class Draft:
    """Unsaved form state for a new entry."""
    date: str = field(default_factory=_today)
    mood: int = DEFAULT_MOOD
    mood_label: str = ""
    past: str = ""
    future: str = ""
    reflection: str = ""

    def cleared(self) -> "Draft":
        # Date and mood carry over to the next entry
        return replace(self, mood_label="", past="", future="", reflection="")


def validate_draft(draft: Draft) -> None:
    """Reject drafts that would break entry invariants. Mood is never clamped."""
    mood = draft.mood
    if isinstance(mood, bool) or not isinstance(mood, int) or not MOOD_MIN <= mood <= MOOD_MAX:
        raise ValidationFailure(f"Mood must be a whole number from {MOOD_MIN} to {MOOD_MAX}, got {mood!r}.")
    for name in ("date",) + DRAFT_TEXT_FIELDS:
        value = getattr(draft, name)
        if not isinstance(value, str):
            raise ValidationFailure(f"Entry {name} must be text, got {value!r}.")
    if not draft.mood_label and not draft.reflection:
        raise ValidationFailure(EMPTY_ENTRY_MESSAGE)


class EntryStore:
    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        on_change: Optional[Callable[[List[Entry]], None]] = None,
        clock: Callable[[], int] = _now_ms,
    ):
        self._entries: List[Entry] = list(entries or [])
        self._on_change = on_change
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def all(self) -> List[Entry]:
        """Entries in insertion order, oldest first."""
        return list(self._entries)

    def append(self, draft: Draft) -> List[Entry]:
        try:
            validate_draft(draft)
        except ValidationFailure as e:
            logger.info("Rejected journal entry: %s", e)
            raise

        entry = Entry(
            id=self._next_id(),
            date=draft.date,
            mood=draft.mood,
            mood_label=draft.mood_label,
            past=draft.past,
            future=draft.future,
            reflection=draft.reflection,
        )
        self._entries.append(entry)
        self._notify()
        return self.all()

    def clear_all(self) -> List[Entry]:
        self._entries = []
        self._notify()
        return []

    def _next_id(self) -> int:
        candidate = self._clock()
        # Two saves within the same millisecond, or a clock that went backwards
        if self._entries:
            newest = max(e.id for e in self._entries)
            if candidate <= newest:
                candidate = newest + 1
        return candidate

    def _notify(self):
        if self._on_change is None:
            return
        try:
            self._on_change(self.all())
        except Exception:
            # The in-memory change stands even if the listener fails
            logger.exception("Entry store change listener failed")
