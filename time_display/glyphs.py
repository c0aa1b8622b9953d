"""
GlyphSet - immutable symbol to tile mapping

Tiles come either from the built-in seven-segment table, rasterised once
per process, or from a directory of PNG assets (0.png .. 9.png, null.png,
min.png, sec.png).
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from PIL import Image, ImageDraw

from .config import GLYPH_FILES, GlyphStyle
from .errors import GlyphBuildError, GlyphLookupError

# Segments lit per digit: a=top, b=top right, c=bottom right, d=bottom,
# e=bottom left, f=top left, g=middle
SEGMENT_MAP = {
    '0': 'abcdef',
    '1': 'bc',
    '2': 'abdeg',
    '3': 'abcdg',
    '4': 'bcfg',
    '5': 'acdfg',
    '6': 'acdefg',
    '7': 'abc',
    '8': 'abcdefg',
    '9': 'abcdfg',
}

SYMBOLS = tuple(GLYPH_FILES)


class GlyphSet:
    """Read-only collection of RGBA glyph tiles"""

    def __init__(self, tiles: Mapping[str, Image.Image]):
        missing = [symbol for symbol in SYMBOLS if symbol not in tiles]
        if missing:
            raise GlyphBuildError(f"glyph set is missing tiles for {missing!r}")

        for symbol, tile in tiles.items():
            width, height = tile.size
            if width == 0 or height == 0:
                raise GlyphBuildError(f"glyph '{symbol}' has empty size {width}x{height}")

        self._tiles = MappingProxyType(dict(tiles))

    @classmethod
    def builtin(cls, style: Optional[GlyphStyle] = None) -> 'GlyphSet':
        """Seven-segment glyph set, built once per style"""
        return _builtin_glyphs(style or GlyphStyle())

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> 'GlyphSet':
        """
        Decode the 13 glyph PNGs in ``directory``.

        Raises:
            GlyphBuildError: a file is missing or cannot be decoded
        """
        directory = Path(directory)
        tiles = {}

        for symbol, filename in GLYPH_FILES.items():
            path = directory / filename
            try:
                with Image.open(path) as img:
                    tiles[symbol] = img.convert('RGBA')
            except (OSError, ValueError) as e:
                raise GlyphBuildError(f"parsing {filename}") from e

        logging.info(f"Loaded {len(tiles)} glyph tiles from {directory}")
        return cls(tiles)

    @classmethod
    def load(cls, directory: Optional[Union[str, Path]] = None) -> 'GlyphSet':
        """Glyphs from ``directory`` when given, otherwise the built-in set"""
        if directory is None:
            return cls.builtin()
        return cls.from_directory(directory)

    def lookup(self, char: str) -> Image.Image:
        """Tile for one character of a rendered time"""
        if char in (' ', ':', '.') or (len(char) == 1 and '0' <= char <= '9'):
            return self._tiles[char]
        raise GlyphLookupError(char)

    @property
    def tiles(self) -> Mapping[str, Image.Image]:
        return self._tiles

    def size_of(self, char: str) -> Tuple[int, int]:
        return self.lookup(char).size


def _segment_boxes(style: GlyphStyle) -> Dict[str, Tuple[int, int, int, int]]:
    """Rectangle for each segment inside a digit cell"""
    t = style.stroke
    left = style.padding
    right = style.cell_width - style.padding - 1
    top = style.padding
    bottom = style.cell_height - style.padding - 1
    middle = style.cell_height // 2
    g_top = middle - t // 2

    return {
        'a': (left, top, right, top + t - 1),
        'b': (right - t + 1, top, right, middle),
        'c': (right - t + 1, middle, right, bottom),
        'd': (left, bottom - t + 1, right, bottom),
        'e': (left, middle, left + t - 1, bottom),
        'f': (left, top, left + t - 1, middle),
        'g': (left, g_top, right, g_top + t - 1),
    }


def _draw_dot(draw: ImageDraw.ImageDraw, center_x: int, center_y: int,
              size: int, fill: Tuple[int, int, int, int]) -> None:
    radius = max(1, size // 2)
    draw.ellipse([
        center_x - radius, center_y - radius,
        center_x + radius, center_y + radius
    ], fill=fill)


def _render_digit(digit: str, style: GlyphStyle) -> Image.Image:
    img = Image.new('RGBA', (style.cell_width, style.cell_height), style.background)
    draw = ImageDraw.Draw(img)
    boxes = _segment_boxes(style)

    for segment in SEGMENT_MAP[digit]:
        draw.rectangle(boxes[segment], fill=style.foreground)

    return img


def _render_colon(style: GlyphStyle) -> Image.Image:
    img = Image.new('RGBA', (style.colon_width, style.cell_height), style.background)
    draw = ImageDraw.Draw(img)

    center_x = style.colon_width // 2
    upper_y = style.cell_height // 2 - style.cell_height // 6
    lower_y = style.cell_height // 2 + style.cell_height // 6

    _draw_dot(draw, center_x, upper_y, style.stroke, style.foreground)
    _draw_dot(draw, center_x, lower_y, style.stroke, style.foreground)
    return img


def _render_decimal_point(style: GlyphStyle) -> Image.Image:
    img = Image.new('RGBA', (style.dot_width, style.cell_height), style.background)
    draw = ImageDraw.Draw(img)

    bottom = style.cell_height - style.padding - 1
    _draw_dot(draw, style.dot_width // 2, bottom - style.stroke // 2,
              style.stroke, style.foreground)
    return img


@lru_cache(maxsize=None)
def _builtin_glyphs(style: GlyphStyle) -> GlyphSet:
    issues = style.validate()
    if issues:
        raise GlyphBuildError(f"invalid glyph style: {'; '.join(issues)}")

    tiles = {digit: _render_digit(digit, style) for digit in SEGMENT_MAP}
    tiles[' '] = Image.new('RGBA', (style.cell_width, style.cell_height), style.background)
    tiles[':'] = _render_colon(style)
    tiles['.'] = _render_decimal_point(style)

    logging.debug(f"Built {len(tiles)} seven-segment glyph tiles "
                  f"({style.cell_width}x{style.cell_height})")
    return GlyphSet(tiles)
