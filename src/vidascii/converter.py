import logging
import math
import time
from typing import Sequence

import numpy as np
from tqdm import tqdm

from vidascii.palette import Palette
from vidascii.scaler import resize_frame
from vidascii.selector import select_frames

logger = logging.getLogger(__name__)


def frame_delay(fps: float) -> int:
    """Milliseconds to hold each frame for the given frame rate."""
    if not math.isfinite(fps) or fps <= 0:
        raise ValueError(f"Frame rate must be a positive number, got {fps}")
    return round(1000 / fps)


def frame_to_text(frame: np.ndarray, palette: Palette) -> str:
    """Render a scaled RGB frame as newline-terminated rows of glyphs."""
    return "".join(line + "\n" for line in palette.find_nearest_grid(frame))


def render_frames(
    frames: Sequence[np.ndarray],
    size_x: int,
    size_y: int,
    palette: Palette,
    stride: int = 0,
    progress: bool = False,
) -> list[str]:
    """Select, resize and quantize every frame, returning one text block per frame."""
    selected = select_frames(frames, stride)
    if stride:
        logger.info("Kept %d of %d frames (skip every %d)", len(selected), len(frames), stride)

    start = time.perf_counter()
    texts = []
    for frame in tqdm(selected, desc="Converting frames", unit="frame", disable=not progress):
        texts.append(frame_to_text(resize_frame(frame, size_x, size_y), palette))
    logger.info("Converted %d frames in %dms", len(texts), (time.perf_counter() - start) * 1000)
    return texts
