"""
Font decoding validation.

Cross-checks the decoded tables against fontTools.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from cellwidths_gen.config.tables import FAMILY_NAME_ID, SUPPORTED_CMAP_FORMATS
from cellwidths_gen.core.font import FontData, load_font
from cellwidths_gen.utils.logging import logger


def check_metrics(font: FontData, reference: TTFont) -> bool:
    """Compare glyph count and advance widths by glyph ID."""
    success = True

    num_glyphs = reference["maxp"].numGlyphs
    if font.maxp.num_glyphs != num_glyphs:
        logger.error(
            f"Glyph count mismatch: expected {num_glyphs}, got {font.maxp.num_glyphs}"
        )
        success = False
    else:
        logger.info(f"Glyph count: {num_glyphs}")

    number_of_h_metrics = reference["hhea"].numberOfHMetrics
    if font.hhea.number_of_h_metrics != number_of_h_metrics:
        logger.error(
            f"numberOfHMetrics mismatch: expected {number_of_h_metrics}, "
            f"got {font.hhea.number_of_h_metrics}"
        )
        success = False

    hmtx = reference["hmtx"]
    mismatches = 0
    for glyph_id, glyph_name in enumerate(reference.getGlyphOrder()):
        expected, _ = hmtx[glyph_name]
        if font.hmtx.advance_width(glyph_id) != expected:
            mismatches += 1
    if mismatches:
        logger.error(f"Advance width mismatch for {mismatches} glyphs")
        success = False
    else:
        logger.info("Advance widths match")

    return success


def _compare_maps(label: str, expected: dict[int, int], actual: dict[int, int]) -> bool:
    """Log differences between two code point -> glyph ID maps."""
    missing = expected.keys() - actual.keys()
    extra = actual.keys() - expected.keys()
    different = [
        cp for cp in expected.keys() & actual.keys() if expected[cp] != actual[cp]
    ]

    success = True
    if missing:
        logger.error(
            f"cmap {label}: {len(missing)} characters missing, first U+{min(missing):04X}"
        )
        success = False
    if extra:
        logger.error(
            f"cmap {label}: {len(extra)} unexpected characters, first U+{min(extra):04X}"
        )
        success = False
    if different:
        logger.error(
            f"cmap {label}: {len(different)} characters map to other glyphs, "
            f"first U+{min(different):04X}"
        )
        success = False
    return success


def check_cmap(font: FontData, reference: TTFont) -> bool:
    """
    Compare each supported subtable with fontTools' decoding of it.

    Subtables are paired by record order. Merged maps are not compared:
    fontTools drops glyph 0 entries per subtable, so a later subtable
    unmapping a character would be hidden by an earlier one.
    """
    reference_tables = reference["cmap"].tables
    records = font.cmap.encoding_records
    if len(reference_tables) != len(records):
        logger.error(
            f"cmap record count mismatch: expected {len(reference_tables)}, "
            f"got {len(records)}"
        )
        return False

    success = True
    compared = 0
    for record, subtable in zip(records, reference_tables):
        label = f"({record.platform_id}, {record.encoding_id})"
        if (record.platform_id, record.encoding_id) != (
            subtable.platformID,
            subtable.platEncID,
        ):
            logger.error(
                f"cmap record {label} does not match "
                f"({subtable.platformID}, {subtable.platEncID})"
            )
            success = False
            continue
        if subtable.format not in SUPPORTED_CMAP_FORMATS:
            continue
        if record.subtable is None or record.subtable.format != subtable.format:
            logger.error(f"cmap {label}: format {subtable.format} was not decoded")
            success = False
            continue

        expected = {
            code_point: reference.getGlyphID(glyph_name)
            for code_point, glyph_name in subtable.cmap.items()
        }
        # fontTools drops unmapped (glyph 0) entries
        actual = {
            cp: gid for cp, gid in record.subtable.glyph_index_map.items() if gid != 0
        }
        if not _compare_maps(label, expected, actual):
            success = False
        compared += 1

    if success:
        logger.info(f"Character map matches ({compared} subtables)")
    return success


def check_family_name(font: FontData, reference: TTFont) -> bool:
    """Compare the family name with fontTools' decoding of the same records."""
    expected = None
    for record in reference["name"].names:
        if record.nameID != FAMILY_NAME_ID or not record.isUnicode():
            continue
        if record.platformID == 3 and record.platEncID != 1:
            continue
        text = record.toUnicode()
        if text:
            expected = text
            break

    if font.family_name != expected:
        logger.error(f"Family name mismatch: expected {expected!r}, got {font.family_name!r}")
        return False
    logger.info(f"Family name: {expected}")
    return True


def validate_font(font_path: Path) -> bool:
    """
    Decode a font and compare the result with fontTools.

    Args:
        font_path: Font file to check

    Returns:
        True if all checks pass
    """
    font = load_font(font_path)
    reference = TTFont(font_path, lazy=True)
    try:
        results = [
            check_metrics(font, reference),
            check_cmap(font, reference),
            check_family_name(font, reference),
        ]
    finally:
        reference.close()

    if all(results):
        logger.info("All checks passed")
        return True
    logger.error("Validation failed")
    return False
