import pytest

from rand_source import (
    EmptyWeightChoice,
    NumpyRandomSource,
    PyRandomSource,
    make_random_source,
)

SOURCES = [PyRandomSource, NumpyRandomSource]


@pytest.mark.parametrize("cls", SOURCES)
def test_probabilities_are_in_unit_interval(cls):
    rng = cls(7)
    values = [rng.next_probability() for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert all(isinstance(v, float) for v in values)


@pytest.mark.parametrize("cls", SOURCES)
def test_choose_returns_a_candidate_of_its_own_type(cls):
    rng = cls(7)
    candidates = ["x", "y", 3]
    picks = [rng.choose(candidates) for _ in range(200)]
    assert set(picks) == {"x", "y", 3}
    assert any(p == 3 and isinstance(p, int) for p in picks)


@pytest.mark.parametrize("cls", SOURCES)
def test_choose_from_empty_is_a_contract_error(cls):
    with pytest.raises(EmptyWeightChoice):
        cls().choose([])


@pytest.mark.parametrize("cls", SOURCES)
def test_same_seed_same_draws(cls):
    a, b = cls(11), cls(11)
    assert [a.next_probability() for _ in range(10)] == [b.next_probability() for _ in range(10)]


def test_factory():
    assert isinstance(make_random_source(), PyRandomSource)
    assert isinstance(make_random_source("numpy", 1), NumpyRandomSource)
    with pytest.raises(ValueError):
        make_random_source("mersenne")
