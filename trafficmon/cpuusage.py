"""CPU utilisation measured from system time counters or a percentage sampler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import psutil


@dataclass(frozen=True)
class CpuTimes:
    """Cumulative CPU times; ``kernel`` includes the ``idle`` time."""

    idle: float = 0
    kernel: float = 0
    user: float = 0


def usage_between(previous: CpuTimes, current: CpuTimes) -> int:
    """Busy percentage of the time elapsed between two readings."""
    idle = current.idle - previous.idle
    kernel = current.kernel - previous.kernel
    user = current.user - previous.user
    total = kernel + user
    if total == 0:
        return 0
    busy = (total - idle) * 100
    if isinstance(busy, int) and isinstance(total, int):
        return abs(busy) // abs(total)
    return int(abs(busy / total))


def _read_system_times() -> CpuTimes:
    times = psutil.cpu_times()
    fields = times._asdict()
    idle = fields.get("idle", 0.0) + fields.get("iowait", 0.0)
    user = fields.get("user", 0.0) + fields.get("nice", 0.0)
    total = sum(fields.values())
    return CpuTimes(idle=idle, kernel=total - user, user=user)


def _read_percent() -> float:
    return psutil.cpu_percent(interval=None)


class CpuUsageMeter:
    """Reports CPU usage either from time counters or from a percentage sampler."""

    def __init__(
        self,
        use_system_times: bool = True,
        times_source: Callable[[], CpuTimes] | None = None,
        percent_source: Callable[[], float] | None = None,
    ) -> None:
        self._use_system_times = use_system_times
        self._times_source = times_source or _read_system_times
        self._percent_source = percent_source or _read_percent
        self._previous = CpuTimes()
        self._first_sample = True

    @property
    def use_system_times(self) -> bool:
        """Whether usage comes from time counters rather than the sampler."""
        return self._use_system_times

    @use_system_times.setter
    def use_system_times(self, value: bool) -> None:
        if self._use_system_times != value:
            self._use_system_times = value
            self._first_sample = True

    def usage(self) -> int:
        """Current CPU usage in percent, 0..100."""
        if self._use_system_times:
            return self._usage_from_times()
        return self._usage_from_sampler()

    def _usage_from_times(self) -> int:
        current = self._times_source()
        result = usage_between(self._previous, current)
        self._previous = current
        return result

    def _usage_from_sampler(self) -> int:
        value = self._percent_source()
        if self._first_sample:
            self._first_sample = False
            return 0
        return min(int(value), 100)