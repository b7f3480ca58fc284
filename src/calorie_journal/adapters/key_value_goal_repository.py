"""Goal repository storing the goal set under one key."""

from dataclasses import dataclass

from calorie_journal.adapters.file_key_value_store import KeyValueStore
from calorie_journal.adapters.json_codec import decode_goals, encode_goals
from calorie_journal.domain.goals import GoalSet
from calorie_journal.services.goals import GoalRepository


@dataclass
class KeyValueGoalRepository(GoalRepository):
    """Key-value implementation of the goal repository."""

    store: KeyValueStore
    key: str = "calorie_journal_goals_v1"

    def load(self) -> GoalSet | None:
        """Return the stored goal set."""
        return decode_goals(self.key, self.store.get_item(self.key))

    def save(self, goals: GoalSet) -> None:
        """Replace the stored goal set."""
        self.store.set_item(self.key, encode_goals(goals))
