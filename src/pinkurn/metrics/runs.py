import logging
import math
from typing import Any, Dict

import numpy as np

from pinkurn.types import ObsSequence

LOGGER = logging.getLogger(__name__)


def run_lengths(x: ObsSequence) -> np.ndarray:
    """
    Number of non-events (0) preceding each event (1).

        [0, 0, 1, 1, 0, 1, 0]  ->  [2, 0, 1]

    The trailing run has no closing event and is dropped.
    """
    arr = np.asarray(x, dtype=int)
    events = np.flatnonzero(arr == 1)
    if events.size == 0:
        return np.zeros(0, dtype=int)
    # Gap between consecutive event positions, minus the event itself.
    starts = np.concatenate(([-1], events[:-1]))
    return events - starts - 1


def event_rate(x: ObsSequence) -> float:
    arr = np.asarray(x, dtype=int)
    if arr.size == 0:
        return math.nan
    return float(np.mean(arr == 1))


def mean_run_length(x: ObsSequence) -> float:
    runs = run_lengths(x)
    if runs.size == 0:
        LOGGER.warning("No events in stream of length %d; mean run length is NaN.", len(x))
        return math.nan
    return float(np.mean(runs))


def run_length_std(x: ObsSequence) -> float:
    runs = run_lengths(x)
    if runs.size < 2:
        LOGGER.warning("Fewer than two runs in stream; run length std is NaN.")
        return math.nan
    return float(np.std(runs, ddof=1))


def max_run_length(x: ObsSequence) -> int:
    runs = run_lengths(x)
    if runs.size == 0:
        return 0
    return int(np.max(runs))


def expected_mean_run_length(p: float) -> float:
    """Mean non-events before an event for i.i.d. draws: (1 - p) / p."""
    if not (0.0 <= p <= 1.0):
        raise ValueError(f"p must be in [0, 1], got {p}")
    if p == 0.0:
        return math.inf
    return (1.0 - p) / p


def run_length_summary(x: ObsSequence) -> Dict[str, Any]:
    runs = run_lengths(x)
    return {
        "n_events": int(runs.size),
        "event_rate": event_rate(x),
        "mean_run_length": mean_run_length(x),
        "run_length_std": run_length_std(x),
        "max_run_length": max_run_length(x),
    }
