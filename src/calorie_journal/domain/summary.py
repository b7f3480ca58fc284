"""Domain models for day summaries."""

from dataclasses import dataclass
from datetime import date

from calorie_journal.domain.entries import Meal
from calorie_journal.domain.goals import GoalSet


@dataclass(frozen=True)
class Totals:
    """Summed nutrition for a collection of entries."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class DaySummary:
    """Aggregated totals for one calendar day."""

    day: date
    totals: Totals
    by_meal: dict[Meal, Totals]
    goals: GoalSet
