import pytest

from neveridle.injection import InputInjector


class FakeInjector(InputInjector):
    """Records every call; raises when told to"""

    def __init__(self, fail_move=False, fail_key=False):
        self.fail_move = fail_move
        self.fail_key = fail_key
        self.calls = []

    def move_cursor_by(self, dx, dy):
        self.calls.append(("move", dx, dy))
        if self.fail_move:
            raise RuntimeError("move rejected")

    def press_key(self, key_code):
        self.calls.append(("key", key_code))
        if self.fail_key:
            raise OSError("key rejected")


class RecordingSleep:
    """Stands in for time.sleep; stops the loop after a number of naps"""

    def __init__(self, stop_after=None):
        self.delays = []
        self.stop_after = stop_after

    def __call__(self, seconds):
        self.delays.append(seconds)
        if self.stop_after is not None and len(self.delays) >= self.stop_after:
            raise KeyboardInterrupt


@pytest.fixture
def injector():
    return FakeInjector()


@pytest.fixture
def fake_injector_cls():
    return FakeInjector


@pytest.fixture
def recording_sleep():
    return RecordingSleep
