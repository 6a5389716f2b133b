import pytest

from rand_source import RandomSource


class ScriptedSource(RandomSource):
    """Replays fixed draws; picks rotate through the candidates."""

    def __init__(self, draws=(), picks=()):
        self.draws = list(draws)
        self.picks = list(picks)
        self.nb_draws = 0
        self.nb_picks = 0

    def next_probability(self):
        value = self.draws[self.nb_draws % len(self.draws)] if self.draws else 0.5
        self.nb_draws += 1
        return value

    def choose(self, candidates):
        index = self.picks[self.nb_picks % len(self.picks)] if self.picks else 0
        self.nb_picks += 1
        return candidates[index]


@pytest.fixture
def scripted():
    return ScriptedSource
