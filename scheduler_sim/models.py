from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

# Occupant of a timeline slice when the CPU has nothing to run.
IDLE = None


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of the timeline: a process or an idle gap.
    """

    pid: Optional[int]
    start_time: int
    end_time: int

    @property
    def is_idle(self) -> bool:
        return self.pid is IDLE

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time

    @property
    def label(self) -> str:
        return "idle" if self.is_idle else f"P{self.pid}"


@dataclass
class ProcessMetrics:
    pid: int
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int
    waiting_time: int
    turnaround_time: int
    response_time: int
    priority: int = 0


@dataclass
class ProcessRecord:
    """
    Simulation state of one process for the duration of a single run.

    Built fresh for every scheduler invocation so two runs never share state.
    """

    process: Process
    remaining: int
    start_time: Optional[int] = None
    completion_time: Optional[int] = None

    @classmethod
    def fresh(cls, process: Process) -> "ProcessRecord":
        return cls(process=process, remaining=process.burst_time)

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def finished(self) -> bool:
        return self.completion_time is not None

    def dispatch(self, clock: int) -> None:
        if self.start_time is None:
            self.start_time = clock

    def run(self, amount: int) -> None:
        if amount <= 0 or amount > self.remaining:
            raise ValueError(f"P{self.pid} cannot run {amount} units with {self.remaining} remaining")
        self.remaining -= amount

    def finish(self, clock: int) -> None:
        self.completion_time = clock

    def to_result(self) -> ProcessMetrics:
        if self.start_time is None or self.completion_time is None:
            raise ValueError(f"P{self.pid} has not finished")

        p = self.process
        turnaround_time = self.completion_time - p.arrival_time
        return ProcessMetrics(
            pid=p.pid,
            arrival_time=p.arrival_time,
            burst_time=p.burst_time,
            start_time=self.start_time,
            completion_time=self.completion_time,
            waiting_time=turnaround_time - p.burst_time,
            turnaround_time=turnaround_time,
            response_time=self.start_time - p.arrival_time,
            priority=p.priority,
        )


@dataclass
class SystemMetrics:
    makespan: int
    avg_waiting: float
    avg_turnaround: float
    avg_response: float
    cpu_busy_time: int
    cpu_utilization_pct: float
    throughput: float
    context_switches: int


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
