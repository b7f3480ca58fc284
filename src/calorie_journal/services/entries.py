"""Journal entry service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from calorie_journal.domain.entries import Entry, EntryDraft
from calorie_journal.domain.errors import StoreDecodeError

logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for the full entry list."""

    def load(self) -> list[Entry]:
        """Return every stored entry, newest first."""

    def replace_all(self, entries: list[Entry]) -> None:
        """Persist the given list as the whole document."""


def _new_entry_id() -> str:
    return str(uuid4())


@dataclass
class EntryService:
    """Service for adding, listing and deleting journal entries."""

    repository: EntryRepository
    id_factory: Callable[[], str] = field(default=_new_entry_id)

    def list_entries(self) -> list[Entry]:
        """Return stored entries, or an empty list when the store is corrupt."""
        try:
            return self.repository.load()
        except StoreDecodeError:
            logger.warning("Entry store is unreadable; treating it as empty")
            return []

    def add_entries(
        self, drafts: list[EntryDraft], logged_at: datetime
    ) -> list[Entry]:
        """Create one entry per non-empty draft and prepend them to the store."""
        created = [
            _build_entry(self.id_factory(), draft, logged_at)
            for draft in drafts
            if not draft.is_empty()
        ]
        if not created:
            return []
        self.repository.replace_all(created + self.list_entries())
        logger.info("Logged %s entries for %s", len(created), logged_at.date())
        return created

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry by id and return whether it existed."""
        entries = self.list_entries()
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            return False
        self.repository.replace_all(remaining)
        logger.info("Deleted entry %s", entry_id)
        return True


def _build_entry(entry_id: str, draft: EntryDraft, logged_at: datetime) -> Entry:
    return Entry(
        id=entry_id,
        date=logged_at,
        name=draft.name.strip(),
        meal=draft.meal,
        calories=draft.calories,
        protein=draft.protein,
        carbs=draft.carbs,
        fat=draft.fat,
        fiber=draft.fiber,
        sugar=draft.sugar,
        sodium=draft.sodium,
        notes=draft.notes or None,
    )
