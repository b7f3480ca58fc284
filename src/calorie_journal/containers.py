"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from calorie_journal.adapters.file_key_value_store import (
    FileKeyValueStore,
    KeyValueStore,
)
from calorie_journal.adapters.key_value_entry_repository import (
    KeyValueEntryRepository,
)
from calorie_journal.adapters.key_value_goal_repository import KeyValueGoalRepository
from calorie_journal.adapters.supabase_key_value_store import SupabaseKeyValueStore
from calorie_journal.config import Settings
from calorie_journal.services.entries import EntryService
from calorie_journal.services.goals import GoalService
from calorie_journal.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService
    goal_service: GoalService
    summary_service: SummaryService
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store selected by the settings."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "Supabase storage needs supabase_url and supabase_service_key"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return FileKeyValueStore(Path(settings.data_path))


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    entry_service = EntryService(
        KeyValueEntryRepository(store, key=resolved_settings.entries_key)
    )
    goal_service = GoalService(
        KeyValueGoalRepository(store, key=resolved_settings.goals_key)
    )
    summary_service = SummaryService(
        entry_service=entry_service,
        goal_service=goal_service,
        timezone_name=resolved_settings.timezone,
    )

    async def close_resources() -> None:
        # Both stores open their handles per call; nothing outlives a request.
        return None

    return AppContainer(
        settings=resolved_settings,
        entry_service=entry_service,
        goal_service=goal_service,
        summary_service=summary_service,
        close_resources=close_resources,
    )
