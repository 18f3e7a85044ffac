"""Shared fixtures: deterministic random sources and small word lists."""

import random

import pytest

from wordgames.dictionary import Dictionary


class ScriptedRandom:
    """Replays a fixed list of floats, then fails loudly if asked for more."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        if self.calls >= len(self.values):
            raise AssertionError(f"ScriptedRandom exhausted after {self.calls} draws")
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def hashtag_words():
    return Dictionary(["LOYAL", "BECHE", "SOIES", "GACHE"])


@pytest.fixture
def jackpot_words():
    # every column holds five different letters
    return Dictionary(["BOXER", "FIGHT", "JUMPY", "CLANK", "DWELL"])
