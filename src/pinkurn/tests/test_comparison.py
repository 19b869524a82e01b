import logging

import pytest

from pinkurn.experiments import ComparisonConfig, make_process, run_comparison, summarise
from pinkurn.processes import IIDBernoulli, UrnProcess
from pinkurn.utils.logging import configure_logging


def test_run_comparison_produces_one_row_per_run() -> None:
    config = ComparisonConfig(probabilities=(0.25, 0.5), length=20_000, seeds=(0, 1))
    df = run_comparison(config)

    assert len(df) == 2 * 2 * 2
    assert set(df["process"]) == {"iid_bernoulli", "pink_urn"}
    assert {"seed", "mean_run_length", "max_run_length", "expected_mean_run_length"} <= set(df.columns)

    urn_rows = df[(df["process"] == "pink_urn") & (df["probability"] == 0.25)]
    assert (urn_rows["max_run_length"] <= 9).all()


def test_summarise_groups_by_process_and_probability() -> None:
    config = ComparisonConfig(probabilities=(0.25,), length=50_000, seeds=(0, 1, 2))
    summary = summarise(run_comparison(config))

    assert len(summary) == 2
    assert (summary["n_seeds"] == 3).all()
    for _, row in summary.iterrows():
        assert row["expected_mean_run_length"] == pytest.approx(3.0)
        assert row["mean_run_length_mean"] == pytest.approx(3.0, rel=0.1)

    urn = summary[summary["process"] == "pink_urn"].iloc[0]
    iid = summary[summary["process"] == "iid_bernoulli"].iloc[0]
    assert urn["max_run_length_mean"] < iid["max_run_length_mean"]
    assert urn["run_length_std_mean"] < iid["run_length_std_mean"]


def test_summarise_requires_metric_columns() -> None:
    import pandas as pd

    with pytest.raises(ValueError, match="Missing required columns"):
        summarise(pd.DataFrame({"process": ["pink_urn"], "probability": [0.5]}))


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"probabilities": (0.0,)}, "Invalid probability"),
        ({"probabilities": (1.5,)}, "Invalid probability"),
        ({"scalar": 1}, "scalar must be >= 2"),
        ({"length": 0}, "length must be >= 1"),
        ({"seeds": ()}, "at least one seed"),
        ({"processes": ("golden_mean",)}, "Unknown processes"),
    ],
)
def test_invalid_config_is_rejected(kwargs, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ComparisonConfig(**kwargs)


def test_make_process_passes_scalar_only_to_urn() -> None:
    urn = make_process("pink_urn", 0.5, scalar=4)
    iid = make_process("iid_bernoulli", 0.5, scalar=4)
    assert isinstance(urn, UrnProcess) and urn.scalar == 4
    assert isinstance(iid, IIDBernoulli)


def test_configure_logging_sets_package_level_and_installs_handler() -> None:
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_root_level = root.level
    package = logging.getLogger("pinkurn")
    saved_package_level = package.level
    try:
        root.handlers = []
        logger = configure_logging(logging.DEBUG)
        assert logger is package
        assert package.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == "[%(levelname)s] %(name)s: %(message)s"
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_root_level)
        package.setLevel(saved_package_level)


def test_configure_logging_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    package = logging.getLogger("pinkurn")
    saved_package_level = package.level
    existing = logging.NullHandler()
    try:
        root.handlers = [existing]
        configure_logging("WARNING")
        assert root.handlers == [existing]
        assert package.level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        package.setLevel(saved_package_level)
