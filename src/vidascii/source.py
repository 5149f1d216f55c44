import contextlib
import logging
from pathlib import Path

import cv2
import numpy as np
from PIL import Image, ImageSequence

from vidascii.errors import SourceError

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".gif", ".png", ".jpg", ".jpeg", ".bmp", ".webp"}


@contextlib.contextmanager
def _open_capture(path: Path):
    """Yield an opened cv2.VideoCapture, releasing it on exit."""
    capture = cv2.VideoCapture(str(path))
    try:
        if not capture.isOpened():
            raise SourceError(f"Failed to open video file: {path}")
        yield capture
    finally:
        capture.release()


def _read_video(path: Path) -> list[np.ndarray]:
    frames = []
    with _open_capture(path) as capture:
        try:
            while True:
                ok, frame = capture.read()
                if not ok:
                    break
                frames.append(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
        except cv2.error as e:
            raise SourceError(f"Failed to decode {path}: {e}") from e
    return frames


def _read_image(path: Path) -> list[np.ndarray]:
    try:
        with Image.open(path) as image:
            return [np.asarray(frame.convert("RGB")) for frame in ImageSequence.Iterator(image)]
    except (OSError, ValueError) as e:
        raise SourceError(f"Failed to decode {path}: {e}") from e


def read_frames(path: str | Path) -> list[np.ndarray]:
    """Decode every frame of a video (or still/animated image) file.

    Frames are returned in stream order as (height, width, 3) uint8 RGB arrays.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceError(f"File not found: {path}")

    if path.suffix.lower() in IMAGE_SUFFIXES:
        frames = _read_image(path)
    else:
        frames = _read_video(path)

    if not frames:
        raise SourceError(f"No frames could be decoded from {path}")
    height, width = frames[0].shape[:2]
    logger.info("Decoded %d frames at %dx%d from %s", len(frames), width, height, path)
    return frames


def probe_fps(path: str | Path) -> float | None:
    """Frame rate reported by the container, or None if it has none."""
    path = Path(path)
    if path.suffix.lower() in IMAGE_SUFFIXES:
        try:
            with Image.open(path) as image:
                duration = image.info.get("duration")
        except OSError as e:
            raise SourceError(f"Failed to open {path}: {e}") from e
        return 1000.0 / duration if duration else None

    with _open_capture(path) as capture:
        fps = capture.get(cv2.CAP_PROP_FPS)
    return fps if fps and fps > 0 else None
