from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, NamedTuple

import numpy as np

from vidascii.errors import PaletteError


class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def of(cls, r: int, g: int, b: int) -> "Color":
        for value in (r, g, b):
            if not 0 <= value <= 255:
                raise PaletteError(f"Channel value out of range: {value}")
        return cls(int(r), int(g), int(b))


class Shade(NamedTuple):
    glyph: str
    color: Color


@dataclass(frozen=True)
class Palette:
    shades: tuple[Shade, ...]

    def __post_init__(self):
        if not self.shades:
            raise PaletteError("Palette must contain at least one shade")
        seen = set()
        for shade in self.shades:
            if len(shade.glyph) != 1:
                raise PaletteError(f"Glyph must be a single character: {shade.glyph!r}")
            if shade.glyph in seen:
                raise PaletteError(f"Duplicate glyph: {shade.glyph!r}")
            seen.add(shade.glyph)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, tuple[int, int, int]]) -> "Palette":
        return cls(tuple(Shade(glyph, Color.of(*color)) for glyph, color in mapping.items()))

    @property
    def glyphs(self) -> str:
        return "".join(shade.glyph for shade in self.shades)

    @property
    def colors(self) -> np.ndarray:
        """Reference colours as an (n, 3) int32 array, in palette order."""
        return np.array([shade.color for shade in self.shades], dtype=np.int32)

    @staticmethod
    def distance(color: tuple[int, int, int], shade: Shade) -> int:
        # Channels saturate at zero: only the amount the pixel exceeds the reference counts.
        return sum(max(int(c) - s, 0) ** 2 for c, s in zip(color, shade.color))

    def find_nearest(self, color: tuple[int, int, int]) -> str:
        best_glyph = self.shades[0].glyph
        best_dist = None
        for shade in self.shades:
            dist = self.distance(color, shade)
            if best_dist is None or dist < best_dist:
                best_dist = dist
                best_glyph = shade.glyph
        return best_glyph

    def find_nearest_grid(self, pixels: np.ndarray) -> list[str]:
        """Quantize an (rows, cols, 3) RGB array, returning one string per row.

        Equivalent to calling find_nearest on every pixel; argmin keeps the
        earliest shade when distances tie.
        """
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected an (rows, cols, 3) array, got shape {pixels.shape}")
        diff = pixels.astype(np.int32)[:, :, None, :] - self.colors[None, None, :, :]
        dist = (np.maximum(diff, 0) ** 2).sum(axis=3)
        indices = dist.argmin(axis=2)
        lookup = np.array(list(self.glyphs))
        return ["".join(row) for row in lookup[indices]]

    def save(self, path: str | Path) -> None:
        path = Path(path)
        with path.open("w", encoding="utf-8") as f:
            for shade in self.shades:
                r, g, b = shade.color
                f.write(f"{r} {g} {b}\t{shade.glyph}\n")

    @classmethod
    def load(cls, path: str | Path) -> "Palette":
        path = Path(path)
        shades = []
        try:
            with path.open("r", encoding="utf-8") as f:
                lines = f.readlines()
        except UnicodeDecodeError as e:
            raise PaletteError(f"{path}: not a UTF-8 text file: {e}") from e
        for lineno, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            rgb, sep, glyph = line.partition("\t")
            parts = rgb.split()
            if not sep or len(parts) != 3:
                raise PaletteError(f"{path}:{lineno}: expected 'R G B<TAB>glyph'")
            try:
                color = Color.of(*(int(p) for p in parts))
            except ValueError as e:
                raise PaletteError(f"{path}:{lineno}: {e}") from e
            shades.append(Shade(glyph, color))
        return cls(tuple(shades))
