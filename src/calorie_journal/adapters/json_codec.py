"""Validated JSON encoding for stored entries and goals."""

import json
import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from calorie_journal.domain.entries import (
    DEFAULT_MEAL,
    Entry,
    Meal,
    Quantity,
    parse_meal,
)
from calorie_journal.domain.errors import StoreDecodeError
from calorie_journal.domain.goals import DEFAULT_GOALS, GoalSet

logger = logging.getLogger(__name__)


def _optional_text(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""


class EntryRecord(BaseModel):
    """Stored shape of a journal entry."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    date: datetime
    name: Annotated[str, BeforeValidator(_text)] = ""
    meal: Annotated[Meal, BeforeValidator(parse_meal)] = DEFAULT_MEAL
    calories: Quantity = 0.0
    protein: Quantity = 0.0
    carbs: Quantity = 0.0
    fat: Quantity = 0.0
    fiber: Quantity = 0.0
    sugar: Quantity = 0.0
    sodium: Quantity = 0.0
    notes: Annotated[str | None, BeforeValidator(_optional_text)] = None

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryRecord":
        """Build a record from a domain entry."""
        return cls(
            id=entry.id,
            date=entry.date,
            name=entry.name,
            meal=entry.meal,
            calories=entry.calories,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            fiber=entry.fiber,
            sugar=entry.sugar,
            sodium=entry.sodium,
            notes=entry.notes,
        )

    def to_entry(self) -> Entry:
        """Return the domain entry."""
        return Entry(
            id=self.id,
            date=self.date,
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


class GoalRecord(BaseModel):
    """Stored shape of a goal set; missing fields fall back to defaults."""

    model_config = ConfigDict(extra="ignore")

    calories: Quantity = DEFAULT_GOALS.calories
    protein: Quantity = DEFAULT_GOALS.protein
    carbs: Quantity = DEFAULT_GOALS.carbs
    fat: Quantity = DEFAULT_GOALS.fat
    fiber: Quantity = DEFAULT_GOALS.fiber

    def to_goals(self) -> GoalSet:
        """Return the domain goal set."""
        return GoalSet(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            fiber=self.fiber,
        )


def decode_entries(key: str, raw: str | None) -> list[Entry]:
    """Decode a stored entry list.

    Returns an empty list when nothing is stored. Raises StoreDecodeError when
    the document is not a JSON array; malformed items inside the array are
    skipped.
    """
    if raw is None:
        return []
    payload = _load_json(key, raw)
    if not isinstance(payload, list):
        raise StoreDecodeError(key, "expected a JSON array")
    entries: list[Entry] = []
    for index, item in enumerate(payload):
        try:
            record = EntryRecord.model_validate(item)
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed entry %s in %s: %s",
                index,
                key,
                exc.error_count(),
            )
            continue
        entries.append(record.to_entry())
    return entries


def encode_entries(entries: Iterable[Entry]) -> str:
    """Encode entries as a JSON array."""
    return json.dumps(
        [EntryRecord.from_entry(entry).model_dump(mode="json") for entry in entries]
    )


def decode_goals(key: str, raw: str | None) -> GoalSet | None:
    """Decode a stored goal set, or return None when nothing is stored."""
    if raw is None:
        return None
    payload = _load_json(key, raw)
    if not isinstance(payload, dict):
        raise StoreDecodeError(key, "expected a JSON object")
    return GoalRecord.model_validate(payload).to_goals()


def encode_goals(goals: GoalSet) -> str:
    """Encode a goal set as a JSON object."""
    return json.dumps(
        {
            "calories": goals.calories,
            "protein": goals.protein,
            "carbs": goals.carbs,
            "fat": goals.fat,
            "fiber": goals.fiber,
        }
    )


def _load_json(key: str, raw: str) -> object:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise StoreDecodeError(key, getattr(exc, "msg", str(exc))) from exc
