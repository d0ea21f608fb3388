"""An append-only journal of timestamped operator and system events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator


@dataclass(frozen=True)
class JournalEntry:
    timestamp: datetime
    category: str
    message: str

    def iso_timestamp(self) -> str:
        """The timestamp in ISO 8601 form, to whole seconds."""
        return self.timestamp.replace(microsecond=0).isoformat()


class EventJournal:
    """Ordered collection of journal entries."""

    def __init__(self) -> None:
        self._entries: list[JournalEntry] = []

    def append(self, category: str, message: str) -> JournalEntry:
        entry = JournalEntry(datetime.now(), category, message)
        self._entries.append(entry)
        return entry

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> tuple[JournalEntry, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[JournalEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)