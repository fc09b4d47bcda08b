from __future__ import annotations

import csv
import json
import sys
from pathlib import Path
from typing import Iterable, List

from .models import Process


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON, CSV or plain-text file into a list of
    Process objects. A path of ``-`` reads the plain-text format from stdin.
    """
    if str(path) == "-":
        return parse_process_text(sys.stdin.read())

    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)
    if suffix == ".txt":
        return parse_process_text(path.read_text(encoding="utf-8"))

    raise ValueError(f"Unsupported workload format: {suffix} (use .json, .csv or .txt)")


def parse_process_text(text: str) -> List[Process]:
    """
    Parse the count-then-records format::

        4
        1 0 5 2
        2 1 3 1
        ...

    The first token is the number of processes, followed by that many
    ``pid arrival burst priority`` records. Whitespace layout is free.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError(
            "Expected input: first line = n (number of processes) "
            "followed by lines: pid arrival burst priority"
        )

    try:
        count = int(tokens[0])
    except ValueError as exc:
        raise ValueError(f"Invalid process count: {tokens[0]!r}") from exc
    if count < 0:
        raise ValueError(f"Invalid process count: {count}")

    fields = tokens[1:]
    if len(fields) < count * 4:
        raise ValueError(f"Expected {count} process records, got {len(fields) // 4}")

    processes: List[Process] = []
    for i in range(count):
        record = fields[i * 4 : i * 4 + 4]
        try:
            pid, arrival_time, burst_time, priority = (int(v) for v in record)
        except ValueError as exc:
            raise ValueError(f"Invalid process record: {' '.join(record)!r}") from exc
        processes.append(Process(pid, arrival_time=arrival_time, burst_time=burst_time, priority=priority))

    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, Iterable) or isinstance(raw, (str, dict)):
        raise ValueError("JSON workload must be a list of process objects")

    processes: List[Process] = []
    for entry in raw:
        processes.append(_process_from_mapping(entry))

    return processes


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _process_from_mapping(mapping) -> Process:
    try:
        pid = _whole_number(mapping["pid"])
        arrival_time = _whole_number(mapping["arrival_time"])
        burst_time = _whole_number(mapping["burst_time"])
        priority_val = mapping.get("priority")
        priority = _whole_number(priority_val) if priority_val not in (None, "") else 0
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise ValueError(f"Invalid process entry: {mapping!r}") from exc

    return Process(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )


def _whole_number(value) -> int:
    # Floats must be whole; booleans are not numbers here.
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"Expected a whole number, got {value!r}")
    return int(value)
