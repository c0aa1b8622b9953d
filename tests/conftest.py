import numpy as np
import pytest
from hypothesis import HealthCheck, settings
from PIL import Image

from time_display.config import GLYPH_FILES
from time_display.glyphs import GlyphSet
from time_display.renderer import TimeRenderer

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


def make_tiles(height: int = 10, widths=None):
    """Solid tiles with a distinct colour per symbol"""
    widths = widths or {}
    tiles = {}
    for index, symbol in enumerate(GLYPH_FILES):
        width = widths.get(symbol, 4 + index)
        tiles[symbol] = Image.new('RGBA', (width, height), (index * 17, 255 - index * 17, 80, 255))
    return tiles


def pixels(img: Image.Image) -> np.ndarray:
    return np.asarray(img.convert('RGBA'))


@pytest.fixture
def glyphs() -> GlyphSet:
    return GlyphSet(make_tiles())


@pytest.fixture
def renderer(glyphs) -> TimeRenderer:
    return TimeRenderer(glyphs)


@pytest.fixture
def glyph_dir(tmp_path):
    directory = tmp_path / "glyphs"
    directory.mkdir()
    for symbol, tile in make_tiles(height=12).items():
        tile.save(directory / GLYPH_FILES[symbol])
    return directory
