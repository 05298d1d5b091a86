import random

import pytest

from simulation.clock import VirtualClock
from store import sample_store


class FixedRandom(random.Random):
    """random.Random whose draws are always `value`."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def clock():
    return VirtualClock()


@pytest.fixture
def store():
    return sample_store()


@pytest.fixture
def fixed_random():
    return FixedRandom
