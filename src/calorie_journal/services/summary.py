"""Day summary service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from calorie_journal.domain.entries import Entry
from calorie_journal.domain.summary import DaySummary
from calorie_journal.services.aggregation import entries_for_day, summarize_day
from calorie_journal.services.entries import EntryService
from calorie_journal.services.goals import GoalService


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SummaryService:
    """Service that loads the journal and summarizes a day in a timezone."""

    entry_service: EntryService
    goal_service: GoalService
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = field(default=_utc_now)

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return self.clock().astimezone(ZoneInfo(self.timezone_name)).date()

    def get_day(self, reference_date: date | None = None) -> DaySummary:
        """Return the summary for a day, defaulting to today."""
        summary, _ = self.get_day_with_entries(reference_date)
        return summary

    def get_day_with_entries(
        self, reference_date: date | None = None
    ) -> tuple[DaySummary, list[Entry]]:
        """Return the summary for a day and the entries logged on it."""
        tz = ZoneInfo(self.timezone_name)
        day = reference_date or self.today()
        entries = self.entry_service.list_entries()
        summary = summarize_day(entries, day, self.goal_service.get_goals(), tz)
        return summary, entries_for_day(entries, day, tz)
