import io
from pathlib import Path

import pytest

from scheduler_sim.workload_io import load_workload, parse_process_text
from scheduler_sim.models import Process


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":1,"arrival_time":0,"burst_time":3,"priority":1},'
                 '{"pid":"2","arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[1].pid == 2
    assert procs[1].priority == 0
    assert procs[1].arrival_time == 1


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\n1,0,3,1\n2,1,2,\n")
    procs = load_workload(p)
    assert procs[0] == Process(1, arrival_time=0, burst_time=3, priority=1)
    assert procs[1].priority == 0


def test_load_txt(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("4\n1 0 5 2\n2 1 3 1\n3 2 8 4\n4 3 6 3\n")
    procs = load_workload(p)
    assert [q.pid for q in procs] == [1, 2, 3, 4]
    assert procs[2] == Process(3, arrival_time=2, burst_time=8, priority=4)


def test_load_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n7 5 3 0\n"))
    assert load_workload("-") == [Process(7, arrival_time=5, burst_time=3, priority=0)]


def test_text_zero_count_is_empty():
    assert parse_process_text("0\n") == []


@pytest.mark.parametrize(
    "text",
    [
        "",
        "two\n1 0 1 0\n",
        "-1\n",
        "2\n1 0 5 2\n",
        "1\n1 0 x 2\n",
    ],
)
def test_text_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        parse_process_text(text)


def test_rejects_bad_entries(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"P1","arrival_time":0,"burst_time":3}]')
    with pytest.raises(ValueError):
        load_workload(p)

    p = tmp_path / "w.json"
    p.write_text('{"pid":1}')
    with pytest.raises(ValueError):
        load_workload(p)

    with pytest.raises(ValueError):
        load_workload(tmp_path / "w.yaml")


@pytest.mark.parametrize("burst", ["2.9", "true", '"abc"'])
def test_json_rejects_non_whole_numbers(tmp_path: Path, burst):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":1,"arrival_time":0,"burst_time":%s}]' % burst)
    with pytest.raises(ValueError):
        load_workload(p)


def test_json_accepts_whole_floats(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":1,"arrival_time":0.0,"burst_time":3.0,"priority":-1}]')
    assert load_workload(p) == [Process(1, arrival_time=0, burst_time=3, priority=-1)]
