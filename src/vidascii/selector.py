from typing import Sequence, TypeVar

T = TypeVar("T")


def select_frames(frames: Sequence[T], stride: int) -> list[T]:
    """Thin a frame sequence by dropping every stride-th frame.

    A stride of 0 keeps everything. Otherwise frames at indices 0, stride,
    2 * stride, ... are removed and the rest kept in order, so a stride of 2
    halves the frame count and a stride of 3 removes a third of it.
    """
    if stride < 0:
        raise ValueError(f"Stride must be non-negative, got {stride}")
    if stride == 0:
        return list(frames)
    return [frame for i, frame in enumerate(frames) if i % stride != 0]
