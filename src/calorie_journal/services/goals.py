"""Daily goal service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_journal.domain.errors import StoreDecodeError
from calorie_journal.domain.goals import DEFAULT_GOALS, GoalSet

logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for the goal set."""

    def load(self) -> GoalSet | None:
        """Return the stored goals, if any."""

    def save(self, goals: GoalSet) -> None:
        """Persist the goal set, replacing any previous one."""


@dataclass
class GoalService:
    """Service for reading and editing daily goals."""

    repository: GoalRepository

    def get_goals(self) -> GoalSet:
        """Return stored goals or the defaults."""
        try:
            stored = self.repository.load()
        except StoreDecodeError:
            logger.warning("Goal store is unreadable; using default goals")
            return DEFAULT_GOALS
        return stored or DEFAULT_GOALS

    def save_goals(self, goals: GoalSet) -> GoalSet:
        """Persist a goal set."""
        self.repository.save(goals)
        return goals

    def reset_goals(self) -> GoalSet:
        """Persist and return the default goals."""
        return self.save_goals(DEFAULT_GOALS)
