"""Domain models for daily nutrition goals."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GoalSet:
    """Target daily values."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float


DEFAULT_GOALS = GoalSet(calories=1760, protein=120, carbs=230, fat=50, fiber=25)
