"""Day-scoped aggregation of journal entries."""

from collections.abc import Iterable
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from calorie_journal.domain.entries import Entry, Meal, parse_meal
from calorie_journal.domain.goals import GoalSet
from calorie_journal.domain.summary import DaySummary, Totals

GOAL_FIELDS = ("calories", "protein", "carbs", "fat", "fiber")


def summarize_day(
    entries: Iterable[Entry],
    reference_date: date | datetime,
    goals: GoalSet,
    tz: tzinfo = UTC,
) -> DaySummary:
    """Return totals and per-meal totals for the entries logged on a day.

    Entries are matched against the half-open day of ``reference_date`` in
    ``tz`` (an aware reference datetime is converted to ``tz`` first); naive
    entry timestamps are read as wall-clock time in ``tz``.
    Unknown meals are counted as snacks.
    """
    start, end = day_bounds(reference_date, tz)
    grouped: dict[Meal, list[Entry]] = {meal: [] for meal in Meal}
    for entry in entries:
        if not _within(entry.date, start, end, tz):
            continue
        grouped[parse_meal(entry.meal)].append(entry)

    by_meal = {meal: sum_totals(items) for meal, items in grouped.items()}
    return DaySummary(
        day=start.date(),
        totals=sum_totals(by_meal.values()),
        by_meal=by_meal,
        goals=goals,
    )


def sum_totals(items: Iterable[Entry] | Iterable[Totals]) -> Totals:
    """Sum the aggregated nutrition fields of entries or of partial totals."""
    total = Totals()
    for item in items:
        total = Totals(
            calories=total.calories + item.calories,
            protein=total.protein + item.protein,
            carbs=total.carbs + item.carbs,
            fat=total.fat + item.fat,
            fiber=total.fiber + item.fiber,
        )
    return total


def progress_ratio(value: float, goal: float) -> float:
    """Return value / goal clamped to [0, 1], or 0 when the goal is not positive."""
    if goal <= 0:
        return 0.0
    return min(max(value / goal, 0.0), 1.0)


def goal_progress(totals: Totals, goals: GoalSet) -> dict[str, float]:
    """Return the progress ratio for each goal field."""
    return {
        name: progress_ratio(getattr(totals, name), getattr(goals, name))
        for name in GOAL_FIELDS
    }


def day_bounds(
    reference_date: date | datetime, tz: tzinfo = UTC
) -> tuple[datetime, datetime]:
    """Return the start of the day and the start of the next day in ``tz``."""
    start = datetime.combine(_as_day(reference_date, tz), time.min, tzinfo=tz)
    return start, start + timedelta(days=1)


def entries_for_day(
    entries: Iterable[Entry], reference_date: date | datetime, tz: tzinfo = UTC
) -> list[Entry]:
    """Return the entries logged on the given day, keeping their order."""
    start, end = day_bounds(reference_date, tz)
    return [entry for entry in entries if _within(entry.date, start, end, tz)]


def _as_day(value: date | datetime, tz: tzinfo) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def _within(moment: datetime, start: datetime, end: datetime, tz: tzinfo) -> bool:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz)
    return start <= moment < end
