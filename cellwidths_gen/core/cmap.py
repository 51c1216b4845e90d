"""
Character to glyph mapping: the 'cmap' table.

Decodes subtable formats 4 (segment mapping to delta values), 6 (trimmed
table mapping) and 12 (segmented coverage). Other formats are reported and
skipped; fonts usually carry redundant encodings and one usable subtable
is enough.

Reference: https://learn.microsoft.com/en-us/typography/opentype/spec/cmap
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from cellwidths_gen.core.errors import SfntFormatError
from cellwidths_gen.core.reader import ByteReader
from cellwidths_gen.utils.logging import logger


@dataclass(frozen=True)
class CmapSubtable:
    """A decoded subtable reduced to code point -> glyph ID."""

    format: int
    glyph_index_map: dict[int, int]


@dataclass(frozen=True)
class EncodingRecord:
    platform_id: int
    encoding_id: int
    offset: int  # relative to the start of 'cmap'
    subtable: CmapSubtable | None = None


@dataclass(frozen=True)
class CmapTable:
    version: int
    encoding_records: list[EncodingRecord] = field(default_factory=list)

    def subtables(self) -> list[CmapSubtable]:
        """Decoded subtables in record order."""
        return [r.subtable for r in self.encoding_records if r.subtable is not None]


def _parse_format_4(reader: ByteReader) -> dict[int, int]:
    reader.read_uint16()  # length
    reader.read_uint16()  # language
    seg_count_x2 = reader.read_uint16()
    if seg_count_x2 % 2:
        raise SfntFormatError(f"cmap format 4: odd segCountX2 ({seg_count_x2})")
    seg_count = seg_count_x2 // 2
    reader.skip(6)  # searchRange, entrySelector, rangeShift

    end_codes = reader.read_uint16_array(seg_count)
    reader.skip(2)  # reservedPad
    start_codes = reader.read_uint16_array(seg_count)
    id_deltas = reader.read_int16_array(seg_count)
    # idRangeOffset values are relative to their own position
    id_range_offsets_start = reader.offset
    id_range_offsets = reader.read_uint16_array(seg_count)

    glyph_index_map = {}
    # The last segment is the 0xFFFF sentinel
    for i in range(seg_count - 1):
        start = start_codes[i]
        end = end_codes[i]
        delta = id_deltas[i]
        range_offset = id_range_offsets[i]

        if range_offset == 0:
            for char_code in range(start, end + 1):
                glyph_index_map[char_code] = (char_code + delta) & 0xFFFF
            continue

        base = id_range_offsets_start + 2 * i + range_offset
        for char_code in range(start, end + 1):
            glyph_id = reader.uint16_at(base + 2 * (char_code - start))
            if glyph_id != 0:
                glyph_id = (glyph_id + delta) & 0xFFFF
            glyph_index_map[char_code] = glyph_id

    return glyph_index_map


def _parse_format_6(reader: ByteReader) -> dict[int, int]:
    reader.read_uint16()  # length
    reader.read_uint16()  # language
    first_code = reader.read_uint16()
    entry_count = reader.read_uint16()
    glyph_ids = reader.read_uint16_array(entry_count)
    return {first_code + i: glyph_id for i, glyph_id in enumerate(glyph_ids)}


def _parse_format_12(reader: ByteReader) -> dict[int, int]:
    reader.read_uint16()  # reserved
    reader.read_uint32()  # length
    reader.read_uint32()  # language
    num_groups = reader.read_uint32()
    if num_groups * 12 > reader.remaining:
        raise SfntFormatError(
            f"cmap format 12: {num_groups} groups exceed remaining {reader.remaining} bytes"
        )

    glyph_index_map = {}
    for _ in range(num_groups):
        start_char_code, end_char_code, start_glyph_id = reader.read_uint32_array(3)
        for char_code in range(start_char_code, end_char_code + 1):
            glyph_index_map[char_code] = start_glyph_id + (char_code - start_char_code)
    return glyph_index_map


SUBTABLE_PARSERS: dict[int, Callable[[ByteReader], dict[int, int]]] = {
    4: _parse_format_4,
    6: _parse_format_6,
    12: _parse_format_12,
}


def read_subtable(reader: ByteReader) -> CmapSubtable | None:
    """
    Decode the subtable at the reader's position.

    Returns:
        Decoded subtable, or None when the format is not supported
    """
    subtable_format = reader.read_uint16()
    parser = SUBTABLE_PARSERS.get(subtable_format)
    if parser is None:
        logger.warning(f"Unsupported cmap subtable format: {subtable_format}. Skipping.")
        return None
    return CmapSubtable(subtable_format, parser(reader))


def read_cmap(reader: ByteReader) -> CmapTable:
    """
    Read the 'cmap' table at the reader's position.

    Records sharing a subtable offset are decoded once.

    Args:
        reader: Reader positioned at the start of 'cmap'

    Returns:
        Table with every encoding record and its decoded subtable (if any)
    """
    table_offset = reader.offset
    version = reader.read_uint16()
    num_tables = reader.read_uint16()

    headers = []
    for _ in range(num_tables):
        platform_id = reader.read_uint16()
        encoding_id = reader.read_uint16()
        offset = reader.read_uint32()
        headers.append((platform_id, encoding_id, offset))

    decoded: dict[int, CmapSubtable | None] = {}
    records = []
    for platform_id, encoding_id, offset in headers:
        if offset not in decoded:
            subtable = read_subtable(reader.fork(table_offset + offset))
            decoded[offset] = subtable
            if subtable is not None:
                logger.debug(
                    f"cmap ({platform_id}, {encoding_id}): format {subtable.format}, "
                    f"{len(subtable.glyph_index_map)} characters"
                )
        records.append(
            EncodingRecord(platform_id, encoding_id, offset, decoded[offset])
        )

    return CmapTable(version, records)


def merge_cmap(cmap: CmapTable) -> dict[int, int]:
    """
    Combine all decoded subtables into one code point -> glyph ID map.

    Subtables are applied in record order; a later subtable overwrites
    earlier entries for the same code point.
    """
    merged: dict[int, int] = {}
    for subtable in cmap.subtables():
        merged.update(subtable.glyph_index_map)
    return merged
