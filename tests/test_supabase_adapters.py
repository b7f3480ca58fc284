"""Tests for the Supabase key-value store."""

from dataclasses import dataclass, field

from calorie_journal.adapters.key_value_goal_repository import KeyValueGoalRepository
from calorie_journal.adapters.supabase_key_value_store import SupabaseKeyValueStore
from calorie_journal.domain.goals import GoalSet


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_store_reads_value_by_key() -> None:
    client = FakeSupabaseClient()
    table = client.table("kv_store")
    table.queue("select", [{"value": "[]"}])

    store = SupabaseKeyValueStore(client)

    assert store.get_item("calorie_journal_entries_v1") == "[]"
    assert table.last_filters == [("key", "calorie_journal_entries_v1")]


def test_supabase_store_missing_key_returns_none() -> None:
    client = FakeSupabaseClient()

    store = SupabaseKeyValueStore(client, table="journal_kv")

    assert store.get_item("anything") is None
    assert "journal_kv" in client.tables


def test_supabase_store_upserts_value() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client)

    store.set_item("k", "v")

    payload = client.table("kv_store").last_payload
    assert isinstance(payload, dict)
    assert payload["key"] == "k"
    assert payload["value"] == "v"
    assert "updated_at" in payload


def test_goal_repository_over_supabase() -> None:
    client = FakeSupabaseClient()
    table = client.table("kv_store")
    table.queue(
        "select",
        [
            {
                "value": (
                    '{"calories": 1500, "protein": 90, "carbs": 180, '
                    '"fat": 45, "fiber": 28}'
                )
            }
        ],
    )

    repository = KeyValueGoalRepository(SupabaseKeyValueStore(client))

    assert repository.load() == GoalSet(
        calories=1500, protein=90, carbs=180, fat=45, fiber=28
    )
