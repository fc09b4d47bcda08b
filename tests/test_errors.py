import pytest

from scheduler_sim.algorithms import run_preemptive_priority, run_round_robin
from scheduler_sim.errors import DuplicateId, InvalidProcess, InvalidQuantum, SchedulerError, validate_processes
from scheduler_sim.models import Process


def test_valid_batch_passes():
    validate_processes([Process(1, 0, 1), Process(2, 5, 3, priority=-2)])
    validate_processes([])


@pytest.mark.parametrize(
    "bad",
    [
        Process(2, arrival_time=-1, burst_time=3),
        Process(2, arrival_time=0, burst_time=0),
        Process(2, arrival_time=0, burst_time=-4),
    ],
)
def test_invalid_process_rejects_whole_batch(bad):
    batch = [Process(1, 0, 2), bad]
    with pytest.raises(InvalidProcess) as excinfo:
        run_preemptive_priority(batch)
    assert excinfo.value.process == bad

    with pytest.raises(InvalidProcess):
        run_round_robin(batch, quantum=2)


def test_duplicate_id():
    with pytest.raises(DuplicateId) as excinfo:
        validate_processes([Process(3, 0, 1), Process(3, 2, 1)])
    assert excinfo.value.pid == 3


def test_errors_are_value_errors():
    for exc_type in (InvalidQuantum, InvalidProcess, DuplicateId):
        assert issubclass(exc_type, SchedulerError)
        assert issubclass(exc_type, ValueError)


def test_quantum_checked_before_processes():
    with pytest.raises(InvalidQuantum):
        run_round_robin([Process(1, 0, 0)], quantum=0)
