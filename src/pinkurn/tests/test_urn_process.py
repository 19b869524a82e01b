import pytest

from pinkurn.metrics import event_rate, max_run_length, mean_run_length
from pinkurn.processes import IIDBernoulli, UrnProcess


def test_urn_runs_are_bounded_by_initial_white() -> None:
    urn_proc = UrnProcess(p_one=0.25, scalar=3)
    iid_proc = IIDBernoulli(p_one=0.25)

    x_urn = urn_proc.sample(length=200_000, seed=0).x
    x_iid = iid_proc.sample(length=200_000, seed=0).x

    assert urn_proc.urn_template.initial_white == 9
    assert max_run_length(x_urn) <= 9
    # Independent draws at p=0.25 run past 9 non-events about once every 18 events.
    assert max_run_length(x_iid) > 9


@pytest.mark.parametrize("p_one", [0.1, 0.25, 0.5])
def test_urn_mean_run_length_matches_independent_draws(p_one: float) -> None:
    x = UrnProcess(p_one=p_one).sample(length=200_000, seed=3).x
    expected = (1.0 - p_one) / p_one
    assert mean_run_length(x) == pytest.approx(expected, rel=0.05)
    assert event_rate(x) == pytest.approx(p_one, rel=0.05)


def test_latent_tracks_white_balls_remaining() -> None:
    process = UrnProcess(p_one=0.5, scalar=3)
    sample = process.sample(length=2_000, seed=5)
    initial_white = process.urn_template.initial_white

    for t in range(len(sample.x) - 1):
        if sample.x[t] == 1:
            assert sample.latent[t + 1] == initial_white
        else:
            assert sample.latent[t + 1] == sample.latent[t] - 1


def test_certain_event_always_fires() -> None:
    sample = UrnProcess(p_one=1.0).sample(length=100, seed=0)
    assert sample.x == [1] * 100


def test_process_name_includes_scalar() -> None:
    assert UrnProcess(p_one=0.5).name == "pink_urn_s3"
    assert UrnProcess(p_one=0.5, scalar=5).name == "pink_urn_s5"
