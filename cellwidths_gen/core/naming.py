"""
Font naming: the 'name' table.
"""

from dataclasses import dataclass, field, replace

from cellwidths_gen.config.tables import (
    ENCODING_WINDOWS_UNICODE_BMP,
    FAMILY_NAME_ID,
    PLATFORM_UNICODE,
    PLATFORM_WINDOWS,
)
from cellwidths_gen.core.reader import ByteReader
from cellwidths_gen.utils.logging import logger


@dataclass(frozen=True)
class NameRecord:
    platform_id: int
    encoding_id: int
    language_id: int
    name_id: int
    length: int
    offset: int  # relative to the string storage
    string: str = ""

    @property
    def is_unicode(self) -> bool:
        """Whether the record's bytes are UTF-16BE text."""
        return self.platform_id == PLATFORM_UNICODE or (
            self.platform_id == PLATFORM_WINDOWS
            and self.encoding_id == ENCODING_WINDOWS_UNICODE_BMP
        )


@dataclass(frozen=True)
class NameTable:
    format: int
    count: int
    string_offset: int
    records: list[NameRecord] = field(default_factory=list)

    def find_family_name(self) -> str | None:
        """First non-empty nameID 1 string, or None."""
        for record in self.records:
            if record.name_id == FAMILY_NAME_ID and record.string:
                return record.string
        return None


def read_name(reader: ByteReader) -> NameTable:
    """
    Read the 'name' table at the reader's position.

    Only Unicode (platform 0) and Windows Unicode BMP (platform 3,
    encoding 1) strings are decoded; other records keep an empty string.
    """
    table_offset = reader.offset
    name_format = reader.read_uint16()
    count = reader.read_uint16()
    string_offset = reader.read_uint16()

    headers = [reader.read_uint16_array(6) for _ in range(count)]

    records = []
    for platform_id, encoding_id, language_id, name_id, length, offset in headers:
        record = NameRecord(
            platform_id, encoding_id, language_id, name_id, length, offset
        )
        if record.is_unicode:
            raw = reader.fork(table_offset + string_offset + offset).read_bytes(length)
            string = raw.decode("utf-16-be", errors="replace")
            record = replace(record, string=string)
        records.append(record)

    logger.debug(f"name: {count} records")
    return NameTable(name_format, count, string_offset, records)
