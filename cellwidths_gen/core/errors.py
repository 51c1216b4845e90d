"""
Exception types raised while decoding fonts and classifying widths.
"""


class CellWidthsError(Exception):
    """Base class for all cellwidths-gen errors."""


class SfntFormatError(CellWidthsError, ValueError):
    """Font data is truncated or structurally inconsistent."""


class MissingTableError(CellWidthsError, KeyError):
    """A required table is absent from the font directory."""

    def __init__(self, tag: str):
        super().__init__(tag)
        self.tag = tag

    def __str__(self) -> str:
        return f"Table with tag {self.tag!r} not found"


class FontNameNotFoundError(CellWidthsError):
    """No usable family name record in the 'name' table."""


class InsufficientWidthsError(CellWidthsError):
    """Fewer than two advance widths remain after filtering."""

    def __init__(self, count: int):
        super().__init__(
            f"Expected at least 2 advance widths, found {count}"
        )
        self.count = count
