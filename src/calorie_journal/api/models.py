"""Request models for the journal API."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from calorie_journal.domain.entries import (
    DEFAULT_MEAL,
    EntryDraft,
    Meal,
    Quantity,
    parse_meal,
)
from calorie_journal.domain.goals import GoalSet


class EntryRowIn(BaseModel):
    """One meal row of an add-entry submission."""

    meal: Annotated[Meal, BeforeValidator(parse_meal)] = DEFAULT_MEAL
    name: str = ""
    calories: Quantity = 0.0
    protein: Quantity = 0.0
    carbs: Quantity = 0.0
    fat: Quantity = 0.0
    fiber: Quantity = 0.0
    sugar: Quantity = 0.0
    sodium: Quantity = 0.0
    notes: str | None = None

    def to_draft(self) -> EntryDraft:
        """Return the domain draft for this row."""
        return EntryDraft(
            name=self.name,
            meal=self.meal,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            fiber=self.fiber,
            sugar=self.sugar,
            sodium=self.sodium,
            notes=self.notes,
        )


class EntryBatchIn(BaseModel):
    """Add-entry submission: a date and one row per meal."""

    date: datetime | None = None
    rows: list[EntryRowIn] = Field(min_length=1)

    @model_validator(mode="after")
    def _require_names(self) -> "EntryBatchIn":
        for index, row in enumerate(self.rows):
            if not row.to_draft().is_empty() and not row.name.strip():
                raise ValueError(f"rows[{index}].name is required")
        return self


class GoalsIn(BaseModel):
    """Full replacement goal set."""

    calories: Quantity
    protein: Quantity
    carbs: Quantity
    fat: Quantity
    fiber: Quantity

    def to_goals(self) -> GoalSet:
        """Return the domain goal set."""
        return GoalSet(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            fiber=self.fiber,
        )
