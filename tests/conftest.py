import io

import numpy as np
import pytest
from blessed import Terminal


class FakeCapture:
    """Stands in for cv2.VideoCapture, serving BGR frames from a list."""

    def __init__(self, frames, opened=True, fps=25.0, fail_at=None):
        self.frames = list(frames)
        self.opened = opened
        self.fps = fps
        self.fail_at = fail_at
        self.released = False
        self._index = 0

    def isOpened(self):
        return self.opened

    def read(self):
        if self.fail_at is not None and self._index == self.fail_at:
            import cv2

            raise cv2.error("corrupt packet")
        if self._index >= len(self.frames):
            return False, None
        frame = self.frames[self._index]
        self._index += 1
        return True, frame

    def get(self, prop):
        return self.fps

    def release(self):
        self.released = True


@pytest.fixture
def fake_capture(monkeypatch):
    """Install a FakeCapture factory over cv2.VideoCapture; returns the list of captures made."""
    import cv2

    made = []

    def install(frames, **kwargs):
        def factory(path, *args):
            capture = FakeCapture(frames, **kwargs)
            made.append(capture)
            return capture

        monkeypatch.setattr(cv2, "VideoCapture", factory)
        return made

    return install


@pytest.fixture
def video_file(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00" * 16)
    return path


@pytest.fixture
def term():
    return Terminal(kind="xterm-256color", stream=io.StringIO(), force_styling=True)


def _solid(width, height, rgb):
    frame = np.empty((height, width, 3), dtype=np.uint8)
    frame[:, :] = rgb
    return frame


@pytest.fixture
def solid():
    """Build a (height, width, 3) uint8 frame filled with one colour."""
    return _solid
