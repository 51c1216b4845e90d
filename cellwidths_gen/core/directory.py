"""
SFNT table directory.
"""

from dataclasses import dataclass, field

from cellwidths_gen.core.errors import MissingTableError
from cellwidths_gen.core.reader import ByteReader
from cellwidths_gen.utils.logging import logger


@dataclass(frozen=True)
class TableRecord:
    """Location of one table inside the font file."""

    tag: str
    checksum: int
    offset: int
    length: int


@dataclass(frozen=True)
class FontDirectory:
    """Offset table followed by the table records."""

    scaler_type: str
    num_tables: int
    search_range: int
    entry_selector: int
    range_shift: int
    tables: list[TableRecord] = field(default_factory=list)

    def find(self, tag: str) -> TableRecord:
        """
        Look up a table record by tag.

        Tags are not guaranteed unique; the first record wins.

        Raises:
            MissingTableError: if no record has this tag
        """
        for record in self.tables:
            if record.tag == tag:
                return record
        raise MissingTableError(tag)

    def __contains__(self, tag: str) -> bool:
        return any(record.tag == tag for record in self.tables)


def read_directory(reader: ByteReader) -> FontDirectory:
    """
    Read the offset table and table records at the reader's position.

    Offsets are not validated here; table readers fail on their own
    when an offset points outside the buffer.

    Args:
        reader: Reader positioned at the start of the font

    Returns:
        Parsed font directory
    """
    scaler_type = reader.read_tag()
    num_tables = reader.read_uint16()
    search_range = reader.read_uint16()
    entry_selector = reader.read_uint16()
    range_shift = reader.read_uint16()

    tables = []
    for _ in range(num_tables):
        tag = reader.read_tag()
        checksum = reader.read_uint32()
        offset = reader.read_uint32()
        length = reader.read_uint32()
        tables.append(TableRecord(tag, checksum, offset, length))

    logger.debug(f"Directory: {scaler_type!r} with {num_tables} tables")
    return FontDirectory(
        scaler_type=scaler_type,
        num_tables=num_tables,
        search_range=search_range,
        entry_selector=entry_selector,
        range_shift=range_shift,
        tables=tables,
    )
