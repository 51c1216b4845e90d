"""Shared pytest fixtures."""

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._c_m_a_p import CmapSubtable

# Glyph name -> (code point or None, advance width)
PROPORTIONAL_GLYPHS = {
    ".notdef": (None, 500),
    "A": (0x0041, 500),
    "agrave": (0x00E0, 500),
    "aring": (0x00E5, 500),
    "acutecomb": (0x0301, 0),
    "a-hira": (0x3041, 1000),
    "aa-hira": (0x3042, 1000),
    "i-hira": (0x3043, 1000),
    "ideo-20000": (0x20000, 1000),
    "unmapped": (None, 1000),
}


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def build_font(path, glyphs, family_name="TestFont"):
    """Build a minimal TrueType font from {name: (code point, advance)}."""
    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(list(glyphs))
    builder.setupCharacterMap(
        {code_point: name for name, (code_point, _) in glyphs.items() if code_point}
    )
    builder.setupGlyf({name: _empty_glyph() for name in glyphs})
    builder.setupHorizontalMetrics(
        {name: (advance, 0) for name, (_, advance) in glyphs.items()}
    )
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": family_name, "styleName": "Regular"})
    builder.setupOS2()
    builder.setupPost()
    builder.save(path)
    return path


@pytest.fixture
def temp_font_dir(tmp_path):
    """Create a temporary directory for font testing."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    return directory


@pytest.fixture
def proportional_font(temp_font_dir):
    """Font with narrow (500) and wide (1000) characters."""
    return build_font(temp_font_dir / "TestFont.ttf", PROPORTIONAL_GLYPHS)


@pytest.fixture
def monospace_font(temp_font_dir):
    """Font where every character has the same advance width."""
    glyphs = {
        ".notdef": (None, 600),
        "A": (0x0041, 600),
        "agrave": (0x00E0, 600),
        "aring": (0x00E5, 600),
    }
    return build_font(temp_font_dir / "MonoFont.ttf", glyphs, family_name="MonoFont")


def _cmap_subtable(subtable_format, platform_id, encoding_id, mapping):
    subtable = CmapSubtable.newSubtable(subtable_format)
    subtable.platformID = platform_id
    subtable.platEncID = encoding_id
    subtable.language = 0
    subtable.cmap = mapping
    return subtable


@pytest.fixture
def unmapped_null_font(proportional_font, temp_font_dir):
    """
    Font whose Macintosh subtable maps U+0000 to a glyph that the later
    Windows subtable leaves unmapped (glyph 0), as DejaVu fonts do.
    """
    font = TTFont(proportional_font)
    windows = dict(font.getBestCmap())
    windows[0x0000] = ".notdef"
    font["cmap"].tables = [
        _cmap_subtable(6, 1, 0, {0x0000: "A", 0x0001: "agrave"}),
        _cmap_subtable(4, 3, 1, {cp: name for cp, name in windows.items() if cp <= 0xFFFF}),
        _cmap_subtable(12, 3, 10, windows),
    ]
    path = temp_font_dir / "UnmappedNull.ttf"
    font.save(path)
    return path


@pytest.fixture(autouse=True)
def reset_log_level():
    """Undo log level changes made by CLI options."""
    from cellwidths_gen.utils.logging import logger

    level = logger.level
    yield
    logger.setLevel(level)
