class VidasciiError(Exception):
    """Base class for errors reported to the user by the command line."""


class SourceError(VidasciiError):
    """The input file is missing, unreadable, or holds no decodable frames."""


class ScaleError(VidasciiError):
    """A frame cannot be resized to the requested grid."""


class PaletteError(VidasciiError, ValueError):
    """A palette is empty or malformed."""
