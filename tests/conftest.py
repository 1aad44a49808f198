import os

# pygame adapters run headless in tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from snake_arcade.state import initial_state


@pytest.fixture
def state20():
    return initial_state(20)


class FakeTimer:
    def __init__(self):
        self.armed = False
        self.starts = 0
        self.stops = 0

    def start(self):
        self.armed = True
        self.starts += 1

    def stop(self):
        self.armed = False
        self.stops += 1


@pytest.fixture
def timer():
    return FakeTimer()
