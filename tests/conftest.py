import matplotlib

matplotlib.use("Agg")

import pytest


class FakeWindow:
    """Stands in for a curses window; rejects writes outside the screen."""

    def __init__(self, height=40, width=130, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.writes = []
        self.no_delay = None
        self.refreshes = 0

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text):
        assert 0 <= y < self.height and 0 <= x < self.width
        limit = self.width - 1 if y == self.height - 1 else self.width
        assert x + len(text) <= limit
        self.writes.append((y, x, text))

    def nodelay(self, flag):
        self.no_delay = flag

    def erase(self):
        self.writes.clear()

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def text(self):
        return "\n".join(t for _, _, t in self.writes)


class FakeDisplay:
    """Records calls from the prediction loop."""

    def __init__(self, stop_after=None, on_show=None):
        self.stop_after = stop_after
        self.on_show = on_show
        self.began = False
        self.closed = False
        self.shown = []

    def begin(self):
        self.began = True

    def show(self, step, metrics, next_value):
        self.shown.append((step, metrics, next_value))
        if self.on_show is not None:
            self.on_show(step)

    def stop_requested(self):
        return self.stop_after is not None and len(self.shown) >= self.stop_after

    def close(self):
        self.closed = True


@pytest.fixture
def make_window():
    return FakeWindow


@pytest.fixture
def make_display():
    return FakeDisplay


@pytest.fixture
def seq_file(tmp_path):
    return str(tmp_path / "lgo_sequence.txt")
