"""
Horizontal metrics: 'maxp', 'hhea' and 'hmtx' tables.
"""

from dataclasses import dataclass

from cellwidths_gen.core.errors import SfntFormatError
from cellwidths_gen.core.reader import ByteReader
from cellwidths_gen.utils.logging import logger

# maxp version 0.5 (CFF fonts) stops after numGlyphs
MAXP_VERSION_0_5 = 0x00005000


@dataclass(frozen=True)
class MaxpTable:
    version: int
    num_glyphs: int
    max_points: int = 0
    max_contours: int = 0
    max_composite_points: int = 0
    max_composite_contours: int = 0
    max_zones: int = 0
    max_twilight_points: int = 0
    max_storage: int = 0
    max_function_defs: int = 0
    max_instruction_defs: int = 0
    max_stack_elements: int = 0
    max_size_of_instructions: int = 0
    max_component_elements: int = 0
    max_component_depth: int = 0


@dataclass(frozen=True)
class HheaTable:
    version: int
    ascent: int
    descent: int
    line_gap: int
    advance_width_max: int
    min_left_side_bearing: int
    min_right_side_bearing: int
    x_max_extent: int
    caret_slope_rise: int
    caret_slope_run: int
    caret_offset: int
    metric_data_format: int
    number_of_h_metrics: int


@dataclass(frozen=True)
class HmtxTable:
    """Per-glyph advance widths and left side bearings, indexed by glyph ID."""

    advance_widths: list[int]
    left_side_bearings: list[int]

    def advance_width(self, glyph_id: int) -> int:
        """
        Advance width of a glyph.

        Glyph IDs past the end of the table clamp to the last entry, which
        keeps malformed fonts (cmap pointing past numGlyphs) usable.
        """
        if not self.advance_widths:
            return 0
        return self.advance_widths[min(glyph_id, len(self.advance_widths) - 1)]


def read_maxp(reader: ByteReader) -> MaxpTable:
    """Read the 'maxp' table at the reader's position."""
    version = reader.read_uint32()
    num_glyphs = reader.read_uint16()
    if version == MAXP_VERSION_0_5:
        return MaxpTable(version=version, num_glyphs=num_glyphs)

    fields = reader.read_uint16_array(13)
    return MaxpTable(version, num_glyphs, *fields)


def read_hhea(reader: ByteReader) -> HheaTable:
    """Read the 'hhea' table at the reader's position."""
    version = reader.read_uint32()
    ascent = reader.read_int16()
    descent = reader.read_int16()
    line_gap = reader.read_int16()
    advance_width_max = reader.read_uint16()
    min_left_side_bearing = reader.read_int16()
    min_right_side_bearing = reader.read_int16()
    x_max_extent = reader.read_int16()
    caret_slope_rise = reader.read_int16()
    caret_slope_run = reader.read_int16()
    caret_offset = reader.read_int16()
    reader.skip(8)  # 4 reserved int16
    metric_data_format = reader.read_int16()
    number_of_h_metrics = reader.read_uint16()

    return HheaTable(
        version=version,
        ascent=ascent,
        descent=descent,
        line_gap=line_gap,
        advance_width_max=advance_width_max,
        min_left_side_bearing=min_left_side_bearing,
        min_right_side_bearing=min_right_side_bearing,
        x_max_extent=x_max_extent,
        caret_slope_rise=caret_slope_rise,
        caret_slope_run=caret_slope_run,
        caret_offset=caret_offset,
        metric_data_format=metric_data_format,
        number_of_h_metrics=number_of_h_metrics,
    )


def read_hmtx(
    reader: ByteReader, num_glyphs: int, number_of_h_metrics: int
) -> HmtxTable:
    """
    Read the 'hmtx' table at the reader's position.

    The table holds ``number_of_h_metrics`` (advanceWidth, lsb) pairs followed
    by a bare lsb array for the remaining glyphs. Those trailing glyphs share
    the advance width of the last full record.

    Args:
        reader: Reader positioned at the start of 'hmtx'
        num_glyphs: Glyph count from 'maxp'
        number_of_h_metrics: Full record count from 'hhea'

    Raises:
        SfntFormatError: if the counts are inconsistent or the table is truncated
    """
    if number_of_h_metrics > num_glyphs:
        raise SfntFormatError(
            f"numberOfHMetrics ({number_of_h_metrics}) exceeds numGlyphs ({num_glyphs})"
        )
    if number_of_h_metrics == 0 and num_glyphs > 0:
        raise SfntFormatError("numberOfHMetrics is 0 but the font has glyphs")

    advance_widths = []
    left_side_bearings = []
    for _ in range(number_of_h_metrics):
        advance_widths.append(reader.read_uint16())
        left_side_bearings.append(reader.read_int16())

    trailing = num_glyphs - number_of_h_metrics
    if trailing:
        left_side_bearings.extend(reader.read_int16_array(trailing))
        advance_widths.extend([advance_widths[-1]] * trailing)

    logger.debug(
        f"hmtx: {number_of_h_metrics} full metrics, {trailing} trailing glyphs"
    )
    return HmtxTable(advance_widths, left_side_bearings)
