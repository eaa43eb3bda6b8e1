import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from core.domain.models import SeedInputs  # noqa: E402


class StartRandom:
    """RandomSource stub: always the lowest index / first element."""

    def randrange(self, start, stop):
        return start

    def choice(self, seq):
        return seq[0]


class EndRandom:
    """RandomSource stub: always the highest index / last element."""

    def randrange(self, start, stop):
        return stop - 1

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def start_rng():
    return StartRandom()


@pytest.fixture
def end_rng():
    return EndRandom()


@pytest.fixture
def demo_seeds():
    """Seeds with 2-char prefixes and a 3-digit registration number (base length 11)."""
    return SeedInputs(first_name="kh", last_name="aw", reg_number="020", movie="th", food="ch")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ignore SEEDPASS_* variables from the developer's shell."""
    for key in list(os.environ):
        if key.upper().startswith("SEEDPASS_"):
            monkeypatch.delenv(key, raising=False)
