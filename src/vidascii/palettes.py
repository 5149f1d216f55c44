from vidascii.palette import Palette

# Block elements, darkest glyph first: full block, dark/medium/light shade, space
BLOCKS = Palette.from_mapping(
    {
        "█": (0, 0, 0),
        "▓": (51, 51, 51),
        "▒": (153, 153, 153),
        "░": (204, 204, 204),
        " ": (255, 255, 255),
    }
)

SOLID = Palette.from_mapping({"█": (0, 0, 0), " ": (255, 255, 255)})

LETTER = Palette.from_mapping({"O": (0, 0, 0), " ": (255, 255, 255)})

_ASCII_RAMP = "@%#*+=-:. "

# Even grey ramp across the classic ASCII density characters
ASCII = Palette.from_mapping(
    {char: (round(i * 255 / (len(_ASCII_RAMP) - 1)),) * 3 for i, char in enumerate(_ASCII_RAMP)}
)

PALETTES = {
    "blocks": BLOCKS,
    "solid": SOLID,
    "letter": LETTER,
    "ascii": ASCII,
}
DEFAULT_PALETTE = "blocks"
