import pytest
from fastapi.testclient import TestClient

from tally import state
from tally.main import app
from tally.moods import MoodLedger
from tally.polls import PollLedger


class FakeClock:
    def __init__(self, start: int = 1000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def tick(self, seconds: int = 1) -> int:
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def polls():
    return PollLedger()


@pytest.fixture
def moods(clock):
    return MoodLedger(clock=clock)


@pytest.fixture
def client():
    state.reset()
    with TestClient(app) as c:
        yield c
    state.reset()
