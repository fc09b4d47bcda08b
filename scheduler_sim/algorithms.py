from __future__ import annotations

import heapq
import logging
from collections import deque
from typing import Deque, Iterable, List, Optional, Sequence, Tuple

from .errors import validate_processes, validate_quantum
from .metrics import compute_system_metrics
from .models import Process, ProcessMetrics, ProcessRecord, ScheduleResult, ScheduledSlice
from .timeline import TimelineBuilder

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2

# Built-in demo workload: (pid, arrival, burst, priority).
SAMPLE_PROCESSES = [
    Process(1, arrival_time=0, burst_time=5, priority=2),
    Process(2, arrival_time=1, burst_time=3, priority=1),
    Process(3, arrival_time=2, burst_time=8, priority=4),
    Process(4, arrival_time=3, burst_time=6, priority=3),
]

Timeline = List[ScheduledSlice]


def _fresh_records(processes: Sequence[Process]) -> List[ProcessRecord]:
    # Arrival order, ties by ascending pid.
    ordered = sorted(processes, key=lambda p: (p.arrival_time, p.pid))
    return [ProcessRecord.fresh(p) for p in ordered]


def run_round_robin(processes: Iterable[Process], quantum: int) -> Tuple[Timeline, List[ProcessMetrics]]:
    """
    Round Robin with a fixed time quantum.

    Processes that arrive while a slice is running are queued before the
    process whose slice just ended goes back to the tail of the queue.
    """
    validate_quantum(quantum)
    processes = list(processes)
    validate_processes(processes)

    records = _fresh_records(processes)
    builder = TimelineBuilder()
    ready: Deque[ProcessRecord] = deque()

    time = 0
    next_idx = 0
    finished = 0

    def admit_arrivals(current_time: int) -> None:
        nonlocal next_idx
        while next_idx < len(records) and records[next_idx].process.arrival_time <= current_time:
            ready.append(records[next_idx])
            next_idx += 1

    while finished < len(records):
        if not ready:
            # CPU is idle: jump straight to the next arrival.
            next_arrival = records[next_idx].process.arrival_time
            if time < next_arrival:
                logger.debug("RR: idle from t=%d to t=%d", time, next_arrival)
                builder.idle(time, next_arrival)
                time = next_arrival
            admit_arrivals(time)
            continue

        rec = ready.popleft()
        rec.dispatch(time)

        run_time = min(quantum, rec.remaining)
        builder.append(rec.pid, time, time + run_time)
        rec.run(run_time)
        time += run_time

        admit_arrivals(time)

        if rec.remaining > 0:
            ready.append(rec)
        else:
            rec.finish(time)
            finished += 1
            logger.debug("RR: P%d completed at t=%d", rec.pid, time)

    return builder.slices, [rec.to_result() for rec in records]


def run_preemptive_priority(processes: Iterable[Process]) -> Tuple[Timeline, List[ProcessMetrics]]:
    """
    Preemptive priority scheduling; a lower number means a higher priority.

    The best ready process is ranked by (priority, arrival, pid). Only a
    strictly better priority preempts the running process. Instead of
    re-deciding every time unit, the running process keeps the CPU until it
    completes or the next process arrives, which are the only instants at
    which the choice can change.
    """
    processes = list(processes)
    validate_processes(processes)

    records = _fresh_records(processes)
    builder = TimelineBuilder()
    ready: List[Tuple[int, int, int, ProcessRecord]] = []

    time = 0
    next_idx = 0
    finished = 0
    previous: Optional[ProcessRecord] = None

    def admit_arrivals(current_time: int) -> None:
        nonlocal next_idx
        while next_idx < len(records) and records[next_idx].process.arrival_time <= current_time:
            rec = records[next_idx]
            p = rec.process
            heapq.heappush(ready, (p.priority, p.arrival_time, p.pid, rec))
            next_idx += 1

    while finished < len(records):
        admit_arrivals(time)

        if not ready:
            next_arrival = records[next_idx].process.arrival_time
            logger.debug("PPS: idle from t=%d to t=%d", time, next_arrival)
            builder.idle(time, next_arrival)
            time = next_arrival
            continue

        _, _, _, rec = heapq.heappop(ready)
        if previous is not None and previous is not rec and not previous.finished:
            logger.debug("PPS: P%d preempts P%d at t=%d", rec.pid, previous.pid, time)
        rec.dispatch(time)

        # Run until completion or the next arrival, whichever comes first.
        run_time = rec.remaining
        if next_idx < len(records):
            run_time = min(run_time, records[next_idx].process.arrival_time - time)

        builder.append(rec.pid, time, time + run_time)
        rec.run(run_time)
        time += run_time
        previous = rec

        if rec.remaining > 0:
            p = rec.process
            heapq.heappush(ready, (p.priority, p.arrival_time, p.pid, rec))
        else:
            rec.finish(time)
            finished += 1
            logger.debug("PPS: P%d completed at t=%d", rec.pid, time)

    return builder.slices, [rec.to_result() for rec in records]


def schedule_rr(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.
    """
    timeline, metrics = run_round_robin(processes, quantum)
    result = ScheduleResult(algorithm="Round Robin", quantum=quantum, processes=metrics, timeline=timeline)
    compute_system_metrics(result)
    return result


def schedule_pps(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Preemptive Priority scheduling. The quantum is not used.
    """
    timeline, metrics = run_preemptive_priority(processes)
    result = ScheduleResult(algorithm="Preemptive Priority", quantum=None, processes=metrics, timeline=timeline)
    compute_system_metrics(result)
    return result


ALGORITHMS = {
    "rr": schedule_rr,
    "pps": schedule_pps,
}


def run_algorithm(name: str, processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Each run builds its own process
    records, so the same input list can be passed to several algorithms.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    logger.info("Running %s on %d processes", name, len(processes))
    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)
