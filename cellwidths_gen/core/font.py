"""
Font loading: decodes the tables needed for cell width generation.
"""

from dataclasses import dataclass
from pathlib import Path

from cellwidths_gen.config.tables import REQUIRED_TABLES
from cellwidths_gen.core.cmap import CmapTable, read_cmap
from cellwidths_gen.core.directory import FontDirectory, read_directory
from cellwidths_gen.core.errors import MissingTableError
from cellwidths_gen.core.metrics import (
    HheaTable,
    HmtxTable,
    MaxpTable,
    read_hhea,
    read_hmtx,
    read_maxp,
)
from cellwidths_gen.core.naming import NameTable, read_name
from cellwidths_gen.core.reader import ByteReader
from cellwidths_gen.utils.logging import logger


@dataclass(frozen=True)
class FontData:
    """Decoded tables of one font."""

    directory: FontDirectory
    maxp: MaxpTable
    hhea: HheaTable
    hmtx: HmtxTable
    cmap: CmapTable
    name: NameTable

    @property
    def family_name(self) -> str | None:
        return self.name.find_family_name()


def read_font(data: bytes) -> FontData:
    """
    Decode a complete SFNT file image.

    Every required table is located before any of them is decoded, so a
    missing table fails fast.

    Args:
        data: Contents of a .ttf/.otf file

    Returns:
        Decoded font tables

    Raises:
        MissingTableError: if a required table is absent
        SfntFormatError: if the data is truncated or inconsistent
    """
    reader = ByteReader(data)
    directory = read_directory(reader)

    missing = [tag for tag in REQUIRED_TABLES if tag not in directory]
    if missing:
        raise MissingTableError(missing[0])

    offsets = {tag: directory.find(tag).offset for tag in REQUIRED_TABLES}
    for tag, offset in offsets.items():
        logger.debug(f"Table {tag!r} at offset {offset}")

    maxp = read_maxp(reader.fork(offsets["maxp"]))
    hhea = read_hhea(reader.fork(offsets["hhea"]))
    hmtx = read_hmtx(
        reader.fork(offsets["hmtx"]), maxp.num_glyphs, hhea.number_of_h_metrics
    )
    cmap = read_cmap(reader.fork(offsets["cmap"]))
    name = read_name(reader.fork(offsets["name"]))

    return FontData(directory, maxp, hhea, hmtx, cmap, name)


def load_font(path: Path) -> FontData:
    """Read and decode a font file."""
    return read_font(path.read_bytes())
