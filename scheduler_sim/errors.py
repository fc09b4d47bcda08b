"""
Input errors raised before a simulation starts.

All of them are ``ValueError`` subclasses, so callers that only care about
"bad input" can keep catching ``ValueError``.
"""

from __future__ import annotations

from typing import Iterable, Set

from .models import Process


class SchedulerError(ValueError):
    pass


class InvalidQuantum(SchedulerError):
    def __init__(self, quantum) -> None:
        super().__init__(f"Round Robin requires a positive integer quantum, got {quantum!r}")
        self.quantum = quantum


class InvalidProcess(SchedulerError):
    def __init__(self, process: Process, reason: str) -> None:
        super().__init__(f"Invalid process P{process.pid}: {reason}")
        self.process = process


class DuplicateId(SchedulerError):
    def __init__(self, pid: int) -> None:
        super().__init__(f"Duplicate process id: {pid}")
        self.pid = pid


def validate_quantum(quantum) -> None:
    if not isinstance(quantum, int) or isinstance(quantum, bool) or quantum <= 0:
        raise InvalidQuantum(quantum)


def validate_processes(processes: Iterable[Process]) -> None:
    """
    Check the whole batch; the first offending process is reported.
    """
    seen: Set[int] = set()
    for p in processes:
        if p.arrival_time < 0:
            raise InvalidProcess(p, f"arrival time must be >= 0 (got {p.arrival_time})")
        if p.burst_time <= 0:
            raise InvalidProcess(p, f"burst time must be > 0 (got {p.burst_time})")
        if p.pid in seen:
            raise DuplicateId(p.pid)
        seen.add(p.pid)
