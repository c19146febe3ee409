from collections import deque

import pytest

from termsnake.game import new_session


class ScriptedDisplay:
    """
    In-memory display: hands out queued keys and records every frame.

    `typeahead` holds keys already sitting in the input buffer; they are
    returned first and flush_input() throws them away. `keys` are pressed
    later and survive a flush.
    """

    def __init__(self, keys=(), typeahead=()):
        self.keys = deque(keys)
        self.typeahead = deque(typeahead)
        self.polls = []
        self.events = []
        self.frames = []

    def poll_key(self, timeout_ms):
        self.polls.append(timeout_ms)
        if self.typeahead:
            key = self.typeahead.popleft()
        elif self.keys:
            key = self.keys.popleft()
        else:
            key = None
        self.events.append(("poll", timeout_ms, key))
        return key

    def flush_input(self):
        self.events.append(("flush",))
        self.typeahead.clear()

    def render(self, grid, score_text, overlay=None):
        self.frames.append((list(grid.rows()), score_text, list(overlay) if overlay else None))

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return None


@pytest.fixture
def session():
    s = new_session(32, 16)
    s.reset()
    return s


@pytest.fixture
def scripted():
    return ScriptedDisplay
