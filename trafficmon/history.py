"""Daily traffic history kept in a plain text file, newest day first."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Iterable

from trafficmon.monthgrid import DayTraffic

MAX_RECORDS = 10000
_MIN_LINE_LENGTH = 12


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: junk after it is ignored, none gives 0."""
    text = text.lstrip(" \t\n\r\f\v")
    end = 1 if text and text[0] in "+-" else 0
    digits_start = end
    while end < len(text) and text[end].isdigit():
        end += 1
    if end == digits_start:
        return 0
    return int(text[:end])


@dataclass
class HistoryTraffic:
    """Traffic of one day in kilobytes.

    ``mixed`` means only a combined figure is known, kept in ``down_kbytes``.
    """

    year: int
    month: int
    day: int
    up_kbytes: int = 0
    down_kbytes: int = 0
    mixed: bool = False

    @property
    def kbytes(self) -> int:
        """Upload and download together."""
        return self.up_kbytes + self.down_kbytes

    @property
    def date_key(self) -> tuple[int, int, int]:
        """The date as a sortable tuple."""
        return self.year, self.month, self.day


def _parse_line(line: str) -> HistoryTraffic | None:
    if len(line) < _MIN_LINE_LENGTH:
        return None
    year = _atoi(line[0:4])
    if not 1900 <= year <= 3000:
        return None
    month = _atoi(line[5:7])
    if not 1 <= month <= 12:
        return None
    day = _atoi(line[8:10])
    if not 1 <= day <= 31:
        return None
    slash = line.find("/", 11)
    if slash < 0:
        record = HistoryTraffic(year, month, day, 0, _atoi(line[11:]), True)
    else:
        record = HistoryTraffic(
            year, month, day, _atoi(line[11:slash]), _atoi(line[slash + 1:]), False
        )
    return record if record.kbytes > 0 else None


def _format_line(record: HistoryTraffic) -> str:
    date = f"{record.year:04d}/{record.month:02d}/{record.day:02d}"
    if record.mixed:
        return f"{date} {record.down_kbytes}"
    return f"{date} {record.up_kbytes}/{record.down_kbytes}"


class HistoryTrafficFile:
    """The list of daily traffic records stored in one history file."""

    def __init__(
        self, file_path: str | Path, today: Callable[[], _dt.date] | None = None
    ) -> None:
        self.file_path = Path(file_path)
        self.traffics: list[HistoryTraffic] = []
        self.today_up_traffic = 0
        self.today_down_traffic = 0
        self.size = 0
        self._today = today or _dt.date.today

    def save(self) -> None:
        """Write the record count line followed by one line per day."""
        with open(self.file_path, "w", encoding="utf-8") as file:
            file.write(f'lines: "{len(self.traffics)}"\n')
            for record in self.traffics:
                file.write(_format_line(record) + "\n")

    def load(self) -> None:
        """Read records from the file, then sort, merge and add today's entry."""
        if self.file_path.is_file():
            with open(self.file_path, encoding="utf-8", errors="replace") as file:
                for line in file:
                    if len(self.traffics) >= MAX_RECORDS:
                        break
                    record = _parse_line(line.rstrip("\n"))
                    if record is not None:
                        self.traffics.append(record)
        self._normalize()

    def load_size(self) -> None:
        """Read only the record count from the first line of the file."""
        if not self.file_path.is_file():
            return
        with open(self.file_path, encoding="utf-8", errors="replace") as file:
            first = file.readline().rstrip("\n")
        index = first.find("lines:")
        if index < 0:
            return
        start = first.find('"', index + 6)
        if start < 0:
            return
        end = first.find('"', start + 1)
        self.size = _atoi(first[start + 1:] if end < 0 else first[start + 1:end])

    def merge(self, other: HistoryTrafficFile, ignore_same_data: bool = False) -> None:
        """Add the records of ``other``.

        Days already present are skipped when ``ignore_same_data`` is set,
        otherwise their traffic is added up.
        """
        known = {record.date_key for record in self.traffics}
        for record in other.traffics:
            if ignore_same_data and record.date_key in known:
                continue
            self.traffics.append(replace(record))
            known.add(record.date_key)
        self._normalize()

    def _normalize(self) -> None:
        today = self._today()
        today_record = HistoryTraffic(today.year, today.month, today.day)
        if not self.traffics:
            self.traffics.insert(0, today_record)
        if len(self.traffics) >= 2:
            self.traffics.sort(key=lambda record: record.date_key, reverse=True)
            merged: list[HistoryTraffic] = []
            just_merged = False
            for record in self.traffics:
                if merged and not just_merged and merged[-1].date_key == record.date_key:
                    merged[-1].up_kbytes += record.up_kbytes
                    merged[-1].down_kbytes += record.down_kbytes
                    just_merged = True
                else:
                    merged.append(record)
                    just_merged = False
            self.traffics = merged
        first = self.traffics[0]
        if first.date_key == today_record.date_key:
            self.today_up_traffic = first.up_kbytes * 1024
            self.today_down_traffic = first.down_kbytes * 1024
            first.mixed = False
        else:
            self.traffics.insert(0, today_record)
        self.size = len(self.traffics)


def fill_month_traffic(
    grid: list[list[DayTraffic]],
    traffics: Iterable[HistoryTraffic],
    year: int,
    month: int,
) -> None:
    """Copy the traffic of each day of ``year``/``month`` into the grid cells."""
    by_date: dict[tuple[int, int, int], HistoryTraffic] = {}
    for record in traffics:
        by_date.setdefault(record.date_key, record)
    for row in grid:
        for cell in row:
            if cell.day <= 0:
                continue
            record = by_date.get((year, month, cell.day))
            if record is not None:
                cell.up_traffic = record.up_kbytes
                cell.down_traffic = record.down_kbytes
                cell.mixed = record.mixed