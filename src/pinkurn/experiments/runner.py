import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import pandas as pd

from pinkurn.experiments.registry import PROCESS_REGISTRY
from pinkurn.metrics import expected_mean_run_length, run_length_summary
from pinkurn.processes.protocols import Process
from pinkurn.urn import DEFAULT_SCALAR, MIN_SCALAR

LOGGER = logging.getLogger(__name__)

GROUP_COLS = ["process", "probability"]
SUMMARY_METRICS = ["event_rate", "mean_run_length", "run_length_std", "max_run_length"]


@dataclass(frozen=True)
class ComparisonConfig:
    """Settings for comparing run-length behaviour across processes."""
    probabilities: Sequence[float] = (0.1, 0.25, 0.5)
    scalar: int = DEFAULT_SCALAR
    length: int = 100_000
    seeds: Sequence[int] = (0, 1, 2)
    processes: Sequence[str] = ("iid_bernoulli", "pink_urn")

    def __post_init__(self):
        for p in self.probabilities:
            if not (0.0 < p <= 1.0):
                raise ValueError(f"Invalid probability: {p}")
        if self.scalar < MIN_SCALAR:
            raise ValueError(f"scalar must be >= {MIN_SCALAR}")
        if self.length < 1:
            raise ValueError("length must be >= 1")
        if not self.seeds:
            raise ValueError("at least one seed is required")
        unknown = [name for name in self.processes if name not in PROCESS_REGISTRY]
        if unknown:
            raise ValueError(f"Unknown processes: {unknown}. Known: {sorted(PROCESS_REGISTRY)}")


def make_process(name: str, probability: float, scalar: int = DEFAULT_SCALAR) -> Process:
    cls = PROCESS_REGISTRY[name]
    if name == "pink_urn":
        return cls(p_one=probability, scalar=scalar)
    return cls(p_one=probability)


def run_comparison(config: ComparisonConfig) -> pd.DataFrame:
    """One row of run-length statistics per (process, probability, seed)."""
    rows: List[Dict[str, Any]] = []
    t0 = time.perf_counter()

    for name in config.processes:
        for p in config.probabilities:
            process = make_process(name, p, config.scalar)
            expected = expected_mean_run_length(p)
            for seed in config.seeds:
                sample = process.sample(length=config.length, seed=seed)
                row: Dict[str, Any] = {
                    "process": name,
                    "probability": p,
                    "seed": seed,
                    "expected_mean_run_length": expected,
                }
                row.update(run_length_summary(sample.x))
                rows.append(row)
            LOGGER.info("Sampled %s at p=%g over %d seeds", process.name, p, len(config.seeds))

    LOGGER.info("Comparison finished in %.2fs (%d rows)", time.perf_counter() - t0, len(rows))
    return pd.DataFrame(rows)


def summarise(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and std of each run-length metric per (process, probability)."""
    missing = set(GROUP_COLS + SUMMARY_METRICS) - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")

    aggs = {}
    for metric in SUMMARY_METRICS:
        aggs[f"{metric}_mean"] = (metric, "mean")
        aggs[f"{metric}_std"] = (metric, "std")

    return (
        df.groupby(GROUP_COLS)
          .agg(
              expected_mean_run_length=("expected_mean_run_length", "first"),
              n_seeds=("seed", "nunique"),
              **aggs,
          )
          .reset_index()
    )
