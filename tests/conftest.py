"""Shared test fixtures."""

from dataclasses import dataclass, field
from itertools import count

import pytest

from calorie_journal.adapters.file_key_value_store import KeyValueStore
from calorie_journal.adapters.key_value_entry_repository import (
    KeyValueEntryRepository,
)
from calorie_journal.adapters.key_value_goal_repository import KeyValueGoalRepository
from calorie_journal.config import Settings
from calorie_journal.containers import AppContainer
from calorie_journal.domain.entries import Entry
from calorie_journal.domain.errors import StoreDecodeError
from calorie_journal.domain.goals import GoalSet
from calorie_journal.services.entries import EntryRepository, EntryService
from calorie_journal.services.goals import GoalRepository, GoalService
from calorie_journal.services.summary import SummaryService


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    items: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append(key)


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: list[Entry] = field(default_factory=list)
    saves: int = 0
    corrupt: bool = False

    def load(self) -> list[Entry]:
        if self.corrupt:
            raise StoreDecodeError("entries", "corrupt")
        return list(self.entries)

    def replace_all(self, entries: list[Entry]) -> None:
        self.entries = list(entries)
        self.saves += 1
        self.corrupt = False


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal repository for tests."""

    goals: GoalSet | None = None
    corrupt: bool = False

    def load(self) -> GoalSet | None:
        if self.corrupt:
            raise StoreDecodeError("goals", "corrupt")
        return self.goals

    def save(self, goals: GoalSet) -> None:
        self.goals = goals
        self.corrupt = False


def sequential_ids(prefix: str = "entry"):
    """Return an id factory producing predictable ids."""
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="file", data_path="unused.json", timezone="UTC")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(settings: Settings, store: InMemoryKeyValueStore) -> AppContainer:
    entry_service = EntryService(
        KeyValueEntryRepository(store, key=settings.entries_key),
        id_factory=sequential_ids(),
    )
    goal_service = GoalService(KeyValueGoalRepository(store, key=settings.goals_key))
    summary_service = SummaryService(
        entry_service=entry_service,
        goal_service=goal_service,
        timezone_name=settings.timezone,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        entry_service=entry_service,
        goal_service=goal_service,
        summary_service=summary_service,
        close_resources=close_resources,
    )
