from __future__ import annotations

from typing import List, Sequence

from .models import ProcessMetrics, ScheduleResult, ScheduledSlice, SystemMetrics


def compute_metrics(results: Sequence[ProcessMetrics], timeline: Sequence[ScheduledSlice]) -> SystemMetrics:
    """
    Aggregate statistics for a finished run.

    Pure function of its inputs. An empty run yields all-zero metrics; a
    zero makespan yields zero utilization and throughput instead of failing.
    """
    for p in results:
        if p.completion_time is None:
            raise ValueError(f"P{p.pid} has no completion time")

    makespan = timeline[-1].end_time if timeline else 0
    cpu_busy_time = sum(s.duration for s in timeline if not s.is_idle)
    context_switches = sum(1 for prev, cur in zip(timeline, timeline[1:]) if prev.pid != cur.pid)

    summary = summarize_process_metrics(results)

    return SystemMetrics(
        makespan=makespan,
        avg_waiting=summary["avg_waiting"],
        avg_turnaround=summary["avg_turnaround"],
        avg_response=summary["avg_response"],
        cpu_busy_time=cpu_busy_time,
        cpu_utilization_pct=100.0 * cpu_busy_time / makespan if makespan > 0 else 0.0,
        throughput=len(results) / makespan if makespan > 0 else 0.0,
        context_switches=context_switches,
    )


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute and attach system metrics to a populated result.
    """
    system = compute_metrics(result.processes, result.timeline)
    result.system = system
    return system


def summarize_process_metrics(processes: List[ProcessMetrics]) -> dict:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
        "avg_response": sum(p.response_time for p in processes) / n,
    }
