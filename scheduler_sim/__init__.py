"""
Scheduler simulation package.

Simulates Round Robin and Preemptive Priority scheduling on a single CPU
with a discrete virtual clock, and reports the resulting timeline and
performance metrics.
"""

from .algorithms import run_preemptive_priority, run_round_robin
from .metrics import compute_metrics

__all__ = ["cli", "compute_metrics", "run_preemptive_priority", "run_round_robin"]
