import random

import pytest

from game import PongGame


class RecordingBroadcaster:
    def __init__(self):
        self.messages = []

    def deliver(self, messages):
        self.messages.extend(messages)

    def events(self, name=None):
        return [m for m in self.messages if name is None or m.event == name]

    def clear(self):
        self.messages.clear()


class FakeClock:
    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game(broadcaster, clock):
    return PongGame(broadcaster, rng=random.Random(1234), clock=clock)


@pytest.fixture
def running_game(game, broadcaster):
    """A game with both players connected and readied."""
    game.connect('sid-1')
    game.connect('sid-2')
    game.ready('sid-1')
    game.ready('sid-2')
    broadcaster.clear()
    return game
