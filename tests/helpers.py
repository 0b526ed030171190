"""
Test doubles for the clock and the event queue
"""

from src.pong.clock import BaseClock


class FakeClock(BaseClock):
    """
    Clock that only moves when the code under test waits or sleeps
    """

    def __init__(self, now: float = 0):
        self.now = now
        self.waits = 0
        self.sleeps = []

    def ticks(self) -> int:
        return int(self.now) % 2**32

    def wait(self, milliseconds: int):
        self.waits += 1
        self.now += milliseconds

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.now += seconds * 1000


class ScriptedEvents:
    """
    Event source returning one batch of events per poll, then nothing
    """

    def __init__(self, *batches):
        self.batches = list(batches)
        self.polls = 0

    def __call__(self):
        self.polls += 1
        if self.batches:
            return self.batches.pop(0)
        return []
