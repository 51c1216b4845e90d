"""Tests for the fontTools cross-check."""

from dataclasses import replace

import pytest
from fontTools.ttLib import TTFont

from cellwidths_gen.core.cmap import CmapSubtable, CmapTable
from cellwidths_gen.core.font import load_font
from cellwidths_gen.core.metrics import HmtxTable
from cellwidths_gen.core.naming import NameTable
from cellwidths_gen.operations.validate import (
    check_cmap,
    check_family_name,
    check_metrics,
    validate_font,
)


@pytest.fixture
def decoded(proportional_font):
    """Decoded font and its fontTools reference."""
    reference = TTFont(proportional_font)
    yield load_font(proportional_font), reference
    reference.close()


def test_validate_font(proportional_font):
    """Test the decoded tables agree with fontTools."""
    assert validate_font(proportional_font)


def test_validate_font_with_later_unmapped_character(unmapped_null_font):
    """Test a later subtable mapping a character to glyph 0 is not a mismatch."""
    font = load_font(unmapped_null_font)
    first, second = font.cmap.encoding_records[:2]
    assert first.subtable.glyph_index_map[0x0000] != 0
    assert second.subtable.glyph_index_map[0x0000] == 0

    assert validate_font(unmapped_null_font)


def test_checks_pass_on_decoded_font(decoded):
    """Test every check accepts an unmodified font."""
    font, reference = decoded
    assert check_metrics(font, reference)
    assert check_cmap(font, reference)
    assert check_family_name(font, reference)


def test_check_metrics_detects_wrong_widths(decoded):
    """Test a changed advance width fails the metrics check."""
    font, reference = decoded
    widths = list(font.hmtx.advance_widths)
    widths[1] += 1
    broken = replace(font, hmtx=HmtxTable(widths, font.hmtx.left_side_bearings))

    assert not check_metrics(broken, reference)


def test_check_cmap_detects_wrong_glyphs(decoded, caplog):
    """Test a subtable mapping characters to other glyphs fails the cmap check."""
    font, reference = decoded
    records = []
    for record in font.cmap.encoding_records:
        if record.subtable is not None:
            shifted = {
                cp: gid + 1 for cp, gid in record.subtable.glyph_index_map.items()
            }
            record = replace(
                record, subtable=CmapSubtable(record.subtable.format, shifted)
            )
        records.append(record)
    broken = replace(font, cmap=CmapTable(font.cmap.version, records))

    assert not check_cmap(broken, reference)
    assert "characters map to other glyphs" in caplog.text


def test_check_cmap_detects_missing_records(decoded):
    """Test a missing encoding record fails the cmap check."""
    font, reference = decoded
    records = font.cmap.encoding_records[:-1]
    broken = replace(font, cmap=CmapTable(font.cmap.version, records))

    assert not check_cmap(broken, reference)


def test_check_family_name_detects_missing_name(decoded):
    """Test an empty name table fails the family name check."""
    font, reference = decoded
    broken = replace(font, name=NameTable(0, 0, 0, []))

    assert not check_family_name(broken, reference)
