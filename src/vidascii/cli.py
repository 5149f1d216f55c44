import argparse
import logging
import math
import sys

from vidascii.converter import frame_delay, render_frames
from vidascii.errors import VidasciiError
from vidascii.palette import Palette
from vidascii.palettes import DEFAULT_PALETTE, PALETTES
from vidascii.player import play
from vidascii.source import probe_fps, read_frames
from vidascii.terminal import autosize

DEFAULT_FPS = 30.0
DEFAULT_SIZE_X = 120
DEFAULT_SIZE_Y = 40

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a video as text art in the terminal")
    parser.add_argument("video", help="Path to input video (or animated image)")
    parser.add_argument(
        "-f",
        "--fps",
        type=float,
        default=DEFAULT_FPS,
        help=f"Playback frame rate (default: {DEFAULT_FPS}). 0 uses the file's own rate.",
    )
    parser.add_argument(
        "-a", "--autosize", action="store_true", default=False, help="Fit the grid to the terminal at 4:1"
    )
    parser.add_argument("--size-x", type=_positive_int, default=DEFAULT_SIZE_X, help="Grid columns (default: 120)")
    parser.add_argument("--size-y", type=_positive_int, default=DEFAULT_SIZE_Y, help="Grid rows (default: 40)")
    palette_group = parser.add_mutually_exclusive_group()
    palette_group.add_argument(
        "-p",
        "--palette",
        default=DEFAULT_PALETTE,
        choices=sorted(PALETTES),
        help=f"Glyph palette to use (default: {DEFAULT_PALETTE})",
    )
    palette_group.add_argument("--palette-file", default=None, help="Load a palette from a file instead")
    parser.add_argument(
        "-k", "--skip", type=_non_negative_int, default=0, help="Drop every Nth frame before converting (default: 0)"
    )
    parser.add_argument("-l", "--loop", type=_positive_int, default=1, help="Times to play the clip (default: 1)")
    parser.add_argument("-y", "--yes", action="store_true", help="Start playback without waiting for Enter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress details")
    return parser


def run(args: argparse.Namespace) -> None:
    if not math.isfinite(args.fps) or args.fps < 0:
        raise VidasciiError(f"Frame rate must be a non-negative number, got {args.fps}")
    palette = Palette.load(args.palette_file) if args.palette_file else PALETTES[args.palette]

    size_x, size_y = args.size_x, args.size_y
    if args.autosize:
        size_x, size_y = autosize(size_x, size_y)
    logger.info("Rendering at %dx%d%s", size_x, size_y, " (autosized)" if args.autosize else "")

    fps = args.fps or probe_fps(args.video) or DEFAULT_FPS
    delay = frame_delay(fps)

    frames = read_frames(args.video)
    texts = render_frames(frames, size_x, size_y, palette, stride=args.skip, progress=True)
    del frames

    if not args.yes:
        input("Press enter to start animation ")
    for _ in range(args.loop):
        play(texts, delay)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(format="%(levelname)s: %(message)s", level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        run(args)
    except (VidasciiError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
