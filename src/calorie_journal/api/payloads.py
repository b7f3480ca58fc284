"""JSON payload builders for API responses."""

from calorie_journal.domain.entries import Entry
from calorie_journal.domain.goals import GoalSet
from calorie_journal.domain.summary import DaySummary, Totals
from calorie_journal.services.aggregation import goal_progress


def entry_payload(entry: Entry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "name": entry.name,
        "meal": entry.meal.value,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "fiber": entry.fiber,
        "sugar": entry.sugar,
        "sodium": entry.sodium,
        "notes": entry.notes,
    }


def totals_payload(totals: Totals) -> dict[str, float]:
    return {
        "calories": totals.calories,
        "protein": totals.protein,
        "carbs": totals.carbs,
        "fat": totals.fat,
        "fiber": totals.fiber,
    }


def goals_payload(goals: GoalSet) -> dict[str, float]:
    return {
        "calories": goals.calories,
        "protein": goals.protein,
        "carbs": goals.carbs,
        "fat": goals.fat,
        "fiber": goals.fiber,
    }


def summary_payload(summary: DaySummary, entries: list[Entry]) -> dict[str, object]:
    """Serialize a day summary with goal progress and the day's entries."""
    return {
        "day": summary.day.isoformat(),
        "label": f"{summary.day:%A, %b} {summary.day.day}",
        "totals": totals_payload(summary.totals),
        "by_meal": {
            meal.value: totals_payload(totals)
            for meal, totals in summary.by_meal.items()
        },
        "goals": goals_payload(summary.goals),
        "progress": goal_progress(summary.totals, summary.goals),
        "entries": [entry_payload(entry) for entry in entries],
    }
