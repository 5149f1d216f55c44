import time
from typing import Iterable

from blessed import Terminal


def play(frame_texts: Iterable[str], delay_ms: int, terminal: Terminal | None = None) -> None:
    """Draw each frame over the last one from the top-left corner, holding it for delay_ms.

    Nothing is cleared between frames; every frame must have the same shape so
    it fully covers its predecessor. The cursor is hidden for the duration and
    restored even if writing fails.
    """
    term = terminal if terminal is not None else Terminal()
    stream = term.stream
    with term.hidden_cursor():
        for text in frame_texts:
            stream.write(term.move_xy(0, 0) + text)
            stream.flush()
            time.sleep(delay_ms / 1000)
