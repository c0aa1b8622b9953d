"""
TimeRenderer - composes glyph tiles into a single image

Each character maps to one tile; tiles are laid out left to right with
no spacing and must all share the height of the first tile.
"""

from typing import List

from PIL import Image

from .errors import RenderError
from .glyphs import GlyphSet
from .timecode import StopwatchTime


class TimeRenderer:
    """Renders text made of digits, blanks, colons and dots"""

    def __init__(self, glyphs: GlyphSet):
        self.glyphs = glyphs

    def _resolve(self, text: str) -> List[Image.Image]:
        return [self.glyphs.lookup(char) for char in text]

    def render(self, text: str) -> Image.Image:
        """
        Render ``text`` into a new RGBA image.

        Raises:
            GlyphLookupError: a character has no tile
            RenderError: empty text or tiles of different heights
        """
        tiles = self._resolve(text)
        if not tiles:
            raise RenderError("no chars to print")

        width, height = tiles[0].size
        for char, tile in zip(text[1:], tiles[1:]):
            tile_width, tile_height = tile.size
            if tile_height != height:
                raise RenderError(
                    f"image height mismatch: '{char}' is {tile_height}px, expected {height}px")
            width += tile_width

        img = Image.new('RGBA', (width, height), (0, 0, 0, 0))

        offset = 0
        for tile in tiles:
            img.paste(tile, (offset, 0))
            offset += tile.size[0]

        return img

    def render_time(self, time: StopwatchTime) -> Image.Image:
        return self.render(time.render())


def render_text(glyphs: GlyphSet, text: str) -> Image.Image:
    """Render ``text`` with ``glyphs``"""
    return TimeRenderer(glyphs).render(text)
