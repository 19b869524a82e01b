from .runs import (
    event_rate,
    expected_mean_run_length,
    max_run_length,
    mean_run_length,
    run_length_std,
    run_length_summary,
    run_lengths,
)

__all__ = [
    "run_lengths",
    "event_rate",
    "mean_run_length",
    "run_length_std",
    "max_run_length",
    "expected_mean_run_length",
    "run_length_summary",
]
