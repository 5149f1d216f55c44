import os
import sys

ASPECT_RATIO = 4  # glyph columns per glyph row


def get_terminal_size() -> tuple[int, int] | None:
    """Return (columns, rows) of the terminal, or None if stdout is not a tty."""
    if not sys.stdout.isatty():
        return None
    try:
        size = os.get_terminal_size()
    except OSError:
        return None
    return (size.columns, size.lines)


def compute_size(terminal_width: int, terminal_height: int) -> tuple[int, int]:
    """Largest grid with a fixed 4:1 column-to-row ratio that fits the terminal.

    Width decides first; if the rows that implies don't fit, height decides.
    """
    size_y = terminal_width // ASPECT_RATIO
    if size_y > terminal_height:
        size_y = terminal_height
    return (size_y * ASPECT_RATIO, size_y)


def autosize(size_x: int, size_y: int) -> tuple[int, int]:
    """Grid size fitted to the current terminal, or the given size if it can't be detected."""
    detected = get_terminal_size()
    if detected is None:
        return (size_x, size_y)
    return compute_size(*detected)
