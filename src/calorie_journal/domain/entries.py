"""Domain models for journal entries."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Annotated

from pydantic import BeforeValidator


class Meal(StrEnum):
    """Meal a journal entry is logged under."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    SNACK = "Snack"
    DINNER = "Dinner"


DEFAULT_MEAL = Meal.SNACK


@dataclass(frozen=True)
class Entry:
    """One logged food item or meal contribution."""

    id: str
    date: datetime
    name: str
    meal: Meal = DEFAULT_MEAL
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    notes: str | None = None


@dataclass(frozen=True)
class EntryDraft:
    """One row of an add-entry submission, before it gets an id and date."""

    name: str
    meal: Meal = DEFAULT_MEAL
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    notes: str | None = None

    def is_empty(self) -> bool:
        """Return True when the row carries no name and no quantities."""
        quantities = (
            self.calories,
            self.protein,
            self.carbs,
            self.fat,
            self.fiber,
            self.sugar,
            self.sodium,
        )
        return not self.name.strip() and not any(quantities)


def parse_meal(value: object) -> Meal:
    """Return the matching meal, falling back to Snack."""
    if isinstance(value, Meal):
        return value
    if isinstance(value, str):
        try:
            return Meal(value)
        except ValueError:
            return DEFAULT_MEAL
    return DEFAULT_MEAL


def to_quantity(value: object) -> float:
    """Coerce a nutrition quantity, mapping anything invalid or negative to 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


Quantity = Annotated[float, BeforeValidator(to_quantity)]
