"""Entry repository storing the whole list under one key."""

from dataclasses import dataclass

from calorie_journal.adapters.file_key_value_store import KeyValueStore
from calorie_journal.adapters.json_codec import decode_entries, encode_entries
from calorie_journal.domain.entries import Entry
from calorie_journal.services.entries import EntryRepository


@dataclass
class KeyValueEntryRepository(EntryRepository):
    """Key-value implementation of the entry repository."""

    store: KeyValueStore
    key: str = "calorie_journal_entries_v1"

    def load(self) -> list[Entry]:
        """Return all stored entries."""
        return decode_entries(self.key, self.store.get_item(self.key))

    def replace_all(self, entries: list[Entry]) -> None:
        """Replace the stored list."""
        self.store.set_item(self.key, encode_entries(entries))
