from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart, one ``label : [start -> end]`` entry per slice.
    """
    if not slices:
        return "(no execution)"

    entries = [f"{sl.label} : [{sl.start_time} -> {sl.end_time}]" for sl in slices]
    return "Gantt Chart (pid : [start -> end])\n" + "  ".join(entries)


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[int, str] = {}

    def pid_color(pid: int) -> str:
        if pid not in pid_to_color:
            idx = len(pid_to_color) % len(colors)
            pid_to_color[pid] = colors[idx]
        return pid_to_color[pid]

    timeline = Text()
    labels = Text()
    time_marks = str(slices[0].start_time)

    for sl in slices:
        # Blocks shorter than their label get widened so the label stays readable.
        width = max(sl.duration, len(sl.label))

        if sl.is_idle:
            timeline.append("." * width, style="dim")
            labels.append(sl.label.ljust(width), style="dim")
        else:
            timeline.append(" " * width, style=f"on {pid_color(sl.pid)}")
            labels.append(sl.label.ljust(width), style="bold")

        # Right-align the end mark under the block, at least one space after the previous mark.
        end = str(sl.end_time)
        time_marks = time_marks.ljust(max(len(labels) - len(end), len(time_marks) + 1)) + end

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
