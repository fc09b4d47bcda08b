import pytest

from scheduler_sim.algorithms import run_preemptive_priority, run_round_robin
from scheduler_sim.metrics import compute_metrics, summarize_process_metrics
from scheduler_sim.models import Process, ScheduledSlice


def _procs():
    return [
        Process(1, arrival_time=0, burst_time=5, priority=2),
        Process(2, arrival_time=1, burst_time=3, priority=1),
        Process(3, arrival_time=2, burst_time=8, priority=4),
        Process(4, arrival_time=3, burst_time=6, priority=3),
    ]


def test_pps_metrics():
    timeline, results = run_preemptive_priority(_procs())
    m = compute_metrics(results, timeline)

    assert m.makespan == 22
    assert m.avg_waiting == pytest.approx(5.0)
    assert m.avg_turnaround == pytest.approx(10.5)
    assert m.cpu_utilization_pct == pytest.approx(100.0)
    assert m.throughput == pytest.approx(4 / 22)
    assert m.context_switches == 4


def test_rr_metrics():
    timeline, results = run_round_robin(_procs(), quantum=2)
    m = compute_metrics(results, timeline)

    assert m.makespan == 22
    assert m.avg_waiting == pytest.approx(9.75)
    assert m.avg_turnaround == pytest.approx(15.25)
    assert m.context_switches == 11


def test_idle_counts_against_utilization():
    timeline, results = run_round_robin([Process(1, arrival_time=5, burst_time=3)], quantum=2)
    m = compute_metrics(results, timeline)

    assert m.makespan == 8
    assert m.cpu_busy_time == 3
    assert m.cpu_utilization_pct == pytest.approx(37.5)
    assert m.throughput == pytest.approx(1 / 8)
    # idle -> P1
    assert m.context_switches == 1


def test_empty_run_is_all_zero():
    m = compute_metrics([], [])
    assert m.makespan == 0
    assert m.avg_waiting == 0.0
    assert m.avg_turnaround == 0.0
    assert m.cpu_utilization_pct == 0.0
    assert m.throughput == 0.0
    assert m.context_switches == 0


def test_compute_metrics_is_pure():
    timeline, results = run_round_robin(_procs(), quantum=3)
    snapshot = (list(timeline), list(results))
    assert compute_metrics(results, timeline) == compute_metrics(results, timeline)
    assert (timeline, results) == snapshot


def test_context_switches_count_idle_transitions():
    timeline = [ScheduledSlice(1, 0, 2), ScheduledSlice(None, 2, 4), ScheduledSlice(2, 4, 5)]
    assert compute_metrics([], timeline).context_switches == 2


def test_summary_averages():
    _, results = run_preemptive_priority(_procs())
    summary = summarize_process_metrics(results)
    assert summary["avg_waiting"] == pytest.approx(5.0)
    assert summary["avg_response"] == pytest.approx(0.25 * (0 + 0 + 12 + 5))
    assert summarize_process_metrics([]) == {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}
