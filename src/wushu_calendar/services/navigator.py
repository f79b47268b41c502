from __future__ import annotations

import calendar
from datetime import date
from typing import List

from ..domain import parse_date_key
from ..domain.datekeys import as_day


class CalendarNavigator:
    """Displayed month and selected day of a calendar session.

    The two pieces of state are independent: shifting the month never moves
    the selection, and a selection may fall outside the displayed month.
    """

    def __init__(self, today: date) -> None:
        today = as_day(today)
        self._current_month = today.replace(day=1)
        self._selected_date = today

    @property
    def current_month(self) -> date:
        return self._current_month

    @property
    def selected_date(self) -> date:
        return self._selected_date

    def shift_month(self, direction: int) -> date:
        years, month_index = divmod(self._current_month.month - 1 + direction, 12)
        self._current_month = date(self._current_month.year + years, month_index + 1, 1)
        return self._current_month

    def select_date(self, key: str) -> date:
        self._selected_date = parse_date_key(key)
        return self._selected_date

    def select_day(self, day: date) -> date:
        self._selected_date = as_day(day)
        return self._selected_date

    def days_in_month(self) -> int:
        return calendar.monthrange(self._current_month.year, self._current_month.month)[1]

    def visible_days(self) -> List[date]:
        return [self._current_month.replace(day=day) for day in range(1, self.days_in_month() + 1)]

    def leading_blanks(self, first_weekday: int = 6) -> int:
        """Empty grid slots before day 1 when weeks start on ``first_weekday``."""

        return (self._current_month.weekday() - first_weekday) % 7
