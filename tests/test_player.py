import io

import pytest
from blessed import Terminal

from vidascii import player
from vidascii.player import play


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(player.time, "sleep", calls.append)
    return calls


def test_frames_drawn_in_place_with_cursor_hidden(term, sleeps):
    play(["ab\ncd\n", "ef\ngh\n"], 40, terminal=term)
    home = term.move_xy(0, 0)
    assert term.stream.getvalue() == (
        term.hide_cursor + home + "ab\ncd\n" + home + "ef\ngh\n" + term.normal_cursor
    )


def test_sleeps_after_every_frame(term, sleeps):
    play(["x\n"] * 3, 33, terminal=term)
    assert sleeps == [0.033] * 3


def test_never_clears_screen(term, sleeps):
    play(["x\n", "y\n"], 0, terminal=term)
    assert term.clear not in term.stream.getvalue()


def test_empty_sequence_still_restores_cursor(term, sleeps):
    play([], 10, terminal=term)
    assert term.stream.getvalue() == term.hide_cursor + term.normal_cursor
    assert sleeps == []


class BrokenStream(io.StringIO):
    """Accepts cursor control but fails once frame text is written."""

    def write(self, text):
        if "frame" in text:
            raise OSError("terminal went away")
        return super().write(text)


def test_cursor_restored_when_write_fails(sleeps):
    term = Terminal(kind="xterm-256color", stream=BrokenStream(), force_styling=True)
    with pytest.raises(OSError, match="terminal went away"):
        play(["frame one\n", "frame two\n"], 10, terminal=term)
    assert term.stream.getvalue().endswith(term.normal_cursor)
    assert sleeps == []
