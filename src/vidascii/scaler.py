import cv2
import numpy as np

from vidascii.errors import ScaleError


def resize_frame(frame: np.ndarray, size_x: int, size_y: int) -> np.ndarray:
    """Linearly resample an RGB frame to exactly size_x columns by size_y rows."""
    if size_x <= 0 or size_y <= 0:
        raise ScaleError(f"Target size must be positive, got {size_x}x{size_y}")
    if frame.ndim != 3 or frame.shape[2] != 3 or frame.shape[0] == 0 or frame.shape[1] == 0:
        raise ScaleError(f"Cannot resize frame of shape {frame.shape}")

    try:
        return cv2.resize(
            np.ascontiguousarray(frame, dtype=np.uint8), (size_x, size_y), interpolation=cv2.INTER_LINEAR
        )
    except cv2.error as e:
        raise ScaleError(f"Failed to resize frame to {size_x}x{size_y}: {e}") from e
