from __future__ import annotations

from typing import List, Optional

from .models import IDLE, ScheduledSlice


class TimelineBuilder:
    """
    Accumulates contiguous slices as the virtual clock advances.

    A slice for the same occupant as the previous one extends it instead of
    starting a new slice, so back-to-back runs of one process form a single
    span and only real occupant changes show up as separate slices.
    """

    def __init__(self) -> None:
        self._slices: List[ScheduledSlice] = []

    @property
    def end_time(self) -> int:
        return self._slices[-1].end_time if self._slices else 0

    def append(self, pid: Optional[int], start_time: int, end_time: int) -> None:
        if start_time >= end_time:
            raise ValueError(f"Empty or inverted slice [{start_time}, {end_time})")
        if start_time != self.end_time:
            raise ValueError(f"Slice starting at {start_time} is not contiguous with {self.end_time}")

        if self._slices and self._slices[-1].pid == pid:
            self._slices[-1].end_time = end_time
            return

        self._slices.append(ScheduledSlice(pid=pid, start_time=start_time, end_time=end_time))

    def idle(self, start_time: int, end_time: int) -> None:
        self.append(IDLE, start_time, end_time)

    @property
    def slices(self) -> List[ScheduledSlice]:
        return list(self._slices)
