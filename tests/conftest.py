import os

# Kivy parses sys.argv and opens log files on import unless told otherwise
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

import random

import pytest

from fingerspelling.models.state import GameSettings
from fingerspelling.models.words import WordSource
from fingerspelling.services.assets import LetterImages
from fingerspelling.services.feedback import FeedbackService
from fingerspelling.services.game import GameController
from fingerspelling.services.playback import PlaybackService


class FakeEvent:
    def __init__(self, clock, callback, timeout, repeat):
        self.callback = callback
        self.timeout = timeout
        self.repeat = repeat
        self.due = clock.now + timeout
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeClock:
    """Stands in for kivy.clock.Clock; time only moves on advance()."""

    def __init__(self):
        self.now = 0.0
        self.events = []

    def schedule_once(self, callback, timeout=0):
        return self._add(callback, timeout, False)

    def schedule_interval(self, callback, timeout):
        return self._add(callback, timeout, True)

    def _add(self, callback, timeout, repeat):
        ev = FakeEvent(self, callback, timeout, repeat)
        self.events.append(ev)
        return ev

    @property
    def pending(self):
        return [e for e in self.events if not e.cancelled]

    def advance(self, seconds):
        end = self.now + seconds
        while True:
            due = [e for e in self.pending if e.due <= end + 1e-9]
            if not due:
                break
            ev = min(due, key=lambda e: e.due)
            self.now = ev.due
            result = ev.callback(ev.timeout)
            if ev.repeat and not ev.cancelled and result is not False:
                ev.due += ev.timeout
            else:
                ev.cancelled = True
        self.now = end
        self.events = self.pending


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def words():
    return WordSource(rng=random.Random(1234))


@pytest.fixture
def images(tmp_path):
    return LetterImages(tmp_path)


@pytest.fixture
def playback(words, clock, images):
    return PlaybackService(words, clock=clock, images=images)


@pytest.fixture
def feedback():
    return FeedbackService()


@pytest.fixture
def controller(playback, feedback, clock):
    return GameController(playback, feedback, GameSettings(), clock=clock)
