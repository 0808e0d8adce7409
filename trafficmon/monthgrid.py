"""Month calendar grids used to lay out daily traffic totals."""

from __future__ import annotations

from dataclasses import dataclass

CALENDAR_WIDTH = 7
CALENDAR_HEIGHT = 6

# Number of grid cells that can receive a day number.
_FILLED_CELLS = 37


@dataclass
class DayTraffic:
    """One cell of a month grid; ``day`` is 0 for cells outside the month."""

    day: int = 0
    up_traffic: int = 0
    down_traffic: int = 0
    mixed: bool = False

    @property
    def traffic(self) -> int:
        """Upload and download traffic together."""
        return self.up_traffic + self.down_traffic


def is_leap_year(year: int) -> bool:
    """Gregorian leap year test."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def weekday(year: int, month: int, day: int) -> int:
    """Day of the week for a date: 0 is Sunday, 6 is Saturday."""
    if month <= 2:
        month += 12
        year -= 1
    return (
        day
        + 2 * month
        + 3 * (month + 1) // 5
        + year
        + year // 4
        - year // 100
        + year // 400
        + 1
    ) % 7


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def month_grid(year: int, month: int, sunday_first: bool = True) -> list[list[DayTraffic]]:
    """Six rows of seven cells holding the day numbers of a month.

    With ``sunday_first`` the first column is Sunday, otherwise Monday.
    """
    grid = [[DayTraffic() for _ in range(CALENDAR_WIDTH)] for _ in range(CALENDAR_HEIGHT)]
    days = days_in_month(year, month)
    first = weekday(year, month, 1)
    if not sunday_first:
        first = (first - 1) % 7
    cells = (cell for row in grid for cell in row)
    for position, cell in zip(range(_FILLED_CELLS), cells):
        day = position - first + 1
        if 1 <= day <= days:
            cell.day = day
    return grid


def is_weekend(index: int, sunday_first: bool = True) -> bool:
    """Whether grid column ``index`` (0..6) is a Saturday or Sunday."""
    if sunday_first:
        return index in (0, 6)
    return index in (5, 6)


def weekday_index(column: int, sunday_first: bool = True) -> int:
    """Day of the week (0 Sunday .. 6 Saturday) shown in grid column ``column``."""
    if sunday_first:
        return column
    column += 1
    return 0 if column > 6 else column


def month_total_traffic(grid: list[list[DayTraffic]]) -> tuple[int, int]:
    """Total upload and download traffic over all cells of a grid."""
    up = sum(cell.up_traffic for row in grid for cell in row)
    down = sum(cell.down_traffic for row in grid for cell in row)
    return up, down


def step_month(
    year: int, month: int, delta: int, year_min: int, year_max: int
) -> tuple[int, int]:
    """Move ``delta`` months forward or back, stopping at the year range ends."""
    step = 1 if delta > 0 else -1
    for _ in range(abs(delta)):
        if step < 0:
            if year == year_min and month == 1:
                break
            month -= 1
            if month <= 0:
                month = 12
                year -= 1
        else:
            if year == year_max and month == 12:
                break
            month += 1
            if month > 12:
                month = 1
                year += 1
    return year, month