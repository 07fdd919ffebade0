"""Tests for date resolution."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from zastepstwa.dates import resolve_date
from zastepstwa.exceptions import (
    InvalidDateError,
    InvalidParameterError,
    NoLessonsWeekendError,
    NoSubstitutionsWeekendError,
)
from zastepstwa.schemas import ExplicitIntent, RelativeIntent

MONDAY = datetime(2024, 3, 11, 8, 30, tzinfo=timezone.utc)


def _day(offset: int) -> datetime:
    """Monday 11 March 2024 plus ``offset`` days."""
    return MONDAY + timedelta(days=offset)


class TestExplicitDates:
    """Tests for day/month requests."""

    @pytest.mark.parametrize(("day", "month"), [(32, 1), (1, 13), (255, 255), (40, 5)])
    def test_out_of_range_is_invalid(self, day: int, month: int) -> None:
        """Day above 31 or month above 12 is rejected."""
        with pytest.raises(InvalidDateError):
            resolve_date(ExplicitIntent(day=day, month=month), now=MONDAY)

    def test_pads_day_and_month_and_uses_current_year(self) -> None:
        """Produces DD.MM.YYYY with the year taken from now."""
        assert resolve_date(ExplicitIntent(day=5, month=3), now=MONDAY) == "05.03.2024"

    def test_two_digit_values_unchanged(self) -> None:
        """Two-digit day and month are kept as is."""
        assert resolve_date(ExplicitIntent(day=15, month=11), now=MONDAY) == "15.11.2024"

    def test_no_calendar_validation(self) -> None:
        """31 February is accepted; upstream decides whether it exists."""
        assert resolve_date(ExplicitIntent(day=31, month=2), now=MONDAY) == "31.02.2024"

    def test_year_follows_clock(self) -> None:
        """Year changes with the injected clock."""
        later = datetime(2026, 1, 7, tzinfo=timezone.utc)
        assert resolve_date(ExplicitIntent(day=7, month=1), now=later) == "07.01.2026"


class TestTomorrow:
    """Tests for the ``tomorrow`` token."""

    def test_friday_means_saturday(self) -> None:
        """Friday has no substitutions for tomorrow."""
        with pytest.raises(NoSubstitutionsWeekendError) as exc_info:
            resolve_date(RelativeIntent(token="tomorrow"), now=_day(4))
        assert exc_info.value.weekday == "saturday"

    def test_saturday_means_sunday(self) -> None:
        """Saturday has no substitutions for tomorrow."""
        with pytest.raises(NoSubstitutionsWeekendError) as exc_info:
            resolve_date(RelativeIntent(token="tomorrow"), now=_day(5))
        assert exc_info.value.weekday == "sunday"

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (-1, "11.03.2024"),  # Sunday
            (0, "12.03.2024"),
            (1, "13.03.2024"),
            (2, "14.03.2024"),
            (3, "15.03.2024"),
        ],
    )
    def test_other_days_resolve_to_next_day(self, offset: int, expected: str) -> None:
        """Sunday through Thursday resolve to the following day."""
        assert resolve_date(RelativeIntent(token="tomorrow"), now=_day(offset)) == expected

    def test_crosses_month_boundary(self) -> None:
        """Tomorrow from the last day of a month is the first of the next."""
        thursday = datetime(2024, 2, 29, 10, 0, tzinfo=timezone.utc)
        assert resolve_date(RelativeIntent(token="tomorrow"), now=thursday) == "01.03.2024"


class TestToday:
    """Tests for the ``today`` token."""

    @pytest.mark.parametrize(("offset", "weekday"), [(5, "saturday"), (6, "sunday")])
    def test_weekend_has_no_lessons(self, offset: int, weekday: str) -> None:
        """Saturday and Sunday are refused."""
        with pytest.raises(NoLessonsWeekendError) as exc_info:
            resolve_date(RelativeIntent(token="today"), now=_day(offset))
        assert exc_info.value.weekday == weekday

    @pytest.mark.parametrize("offset", [0, 1, 2, 3, 4])
    def test_weekdays_resolve_to_today(self, offset: int) -> None:
        """Monday through Friday resolve to the same day."""
        expected = _day(offset).strftime("%d.%m.%Y")
        assert resolve_date(RelativeIntent(token="today"), now=_day(offset)) == expected

    def test_uses_clock_timezone(self) -> None:
        """The date is taken in the clock's own timezone."""
        warsaw = timezone(timedelta(hours=2))
        late_evening_utc = datetime(2024, 3, 11, 23, 30, tzinfo=timezone.utc)
        assert resolve_date(RelativeIntent(token="today"), now=late_evening_utc.astimezone(warsaw)) == "12.03.2024"


class TestInvalidToken:
    """Tests for unsupported relative tokens."""

    @pytest.mark.parametrize("token", ["yesterday", "", "Today", "jutro"])
    def test_unknown_token(self, token: str) -> None:
        """Anything other than today/tomorrow is rejected."""
        with pytest.raises(InvalidParameterError):
            resolve_date(RelativeIntent(token=token), now=MONDAY)
