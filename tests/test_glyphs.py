import pytest
from PIL import Image

from conftest import make_tiles
from time_display.config import GLYPH_FILES, GlyphStyle
from time_display.errors import GlyphBuildError, GlyphLookupError
from time_display.glyphs import SEGMENT_MAP, GlyphSet


class TestBuiltinGlyphs:
    """Seven-segment glyph set built in memory."""

    def test_has_all_symbols(self):
        glyphs = GlyphSet.builtin()
        assert set(glyphs.tiles) == set(GLYPH_FILES)

    def test_built_once(self):
        assert GlyphSet.builtin() is GlyphSet.builtin()

    def test_tiles_share_height(self):
        style = GlyphStyle()
        glyphs = GlyphSet.builtin()

        assert {tile.size[1] for tile in glyphs.tiles.values()} == {style.cell_height}
        assert glyphs.size_of('8') == (style.cell_width, style.cell_height)
        assert glyphs.size_of(':') == (style.colon_width, style.cell_height)
        assert glyphs.size_of('.') == (style.dot_width, style.cell_height)

    def test_tiles_are_rgba(self):
        assert all(tile.mode == 'RGBA' for tile in GlyphSet.builtin().tiles.values())

    def test_blank_is_transparent(self):
        blank = GlyphSet.builtin().lookup(' ')
        assert blank.getextrema()[3] == (0, 0)

    def test_digits_are_distinct(self):
        glyphs = GlyphSet.builtin()
        rendered = {glyphs.lookup(d).tobytes() for d in SEGMENT_MAP}
        assert len(rendered) == 10

    def test_eight_lights_middle_segment(self):
        style = GlyphStyle()
        center = (style.cell_width // 2, style.cell_height // 2)

        assert GlyphSet.builtin().lookup('8').getpixel(center) == style.foreground
        assert GlyphSet.builtin().lookup('0').getpixel(center) == style.background

    def test_invalid_style_rejected(self):
        with pytest.raises(GlyphBuildError, match="invalid glyph style"):
            GlyphSet.builtin(GlyphStyle(cell_height=10, stroke=6))


class TestLookup:
    """Symbol to tile resolution."""

    @pytest.mark.parametrize("char", list("0123456789 :."))
    def test_supported(self, glyphs, char):
        assert glyphs.lookup(char) is glyphs.tiles[char]

    @pytest.mark.parametrize("char", ["a", "-", "٣", "10", ""])
    def test_unsupported_names_character(self, glyphs, char):
        with pytest.raises(GlyphLookupError) as excinfo:
            glyphs.lookup(char)
        assert excinfo.value.char == char
        assert f"'{char}'" in str(excinfo.value)

    def test_tiles_are_read_only(self, glyphs):
        with pytest.raises(TypeError):
            glyphs.tiles['0'] = Image.new('RGBA', (1, 1))


class TestGlyphSetConstruction:
    """Validation when a glyph set is assembled."""

    def test_missing_symbol(self):
        tiles = make_tiles()
        del tiles['.']
        with pytest.raises(GlyphBuildError, match="missing"):
            GlyphSet(tiles)

    def test_zero_width_tile(self):
        tiles = make_tiles(widths={'3': 0})
        with pytest.raises(GlyphBuildError, match="empty size"):
            GlyphSet(tiles)


class TestFromDirectory:
    """Loading PNG glyph assets from disk."""

    def test_loads_all_files(self, glyph_dir):
        glyphs = GlyphSet.from_directory(glyph_dir)

        assert set(glyphs.tiles) == set(GLYPH_FILES)
        assert glyphs.size_of('0')[1] == 12

    def test_converts_to_rgba(self, glyph_dir):
        Image.new('L', (5, 12), 128).save(glyph_dir / "sec.png")
        assert GlyphSet.from_directory(glyph_dir).lookup('.').mode == 'RGBA'

    def test_missing_file_is_fatal(self, glyph_dir):
        (glyph_dir / "min.png").unlink()
        with pytest.raises(GlyphBuildError, match="parsing min.png") as excinfo:
            GlyphSet.from_directory(glyph_dir)
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_corrupt_file_is_fatal(self, glyph_dir):
        (glyph_dir / "7.png").write_bytes(b"not a png")
        with pytest.raises(GlyphBuildError, match="parsing 7.png"):
            GlyphSet.from_directory(glyph_dir)

    def test_load_prefers_directory(self, glyph_dir):
        assert GlyphSet.load(glyph_dir).size_of('0')[1] == 12
        assert GlyphSet.load() is GlyphSet.builtin()
