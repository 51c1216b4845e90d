"""
Cell width classification.

Groups a font's characters by advance width, keeps the two most common
widths and compresses each group into inclusive code point ranges. The
narrower width becomes cell width 1, the wider one cell width 2.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import NamedTuple

from cellwidths_gen.config.widths import ASCII_MAX_CODE, MAX_CODE_POINT, NARROW, WIDE
from cellwidths_gen.core.errors import InsufficientWidthsError
from cellwidths_gen.core.metrics import HmtxTable
from cellwidths_gen.utils.logging import logger


class CellWidthRange(NamedTuple):
    start: int
    end: int  # inclusive
    width: int


@dataclass(frozen=True)
class Classification:
    """Result of classifying a font's characters into two cell widths."""

    narrow_advance: int
    wide_advance: int
    ranges: list[CellWidthRange]
    character_count: int


def build_histogram(
    char_to_glyph: Mapping[int, int], hmtx: HmtxTable
) -> dict[int, set[int]]:
    """
    Group code points by the advance width of their glyph.

    ASCII characters and zero-width glyphs are left out: terminals render
    ASCII at a fixed width already, and zero advance (combining marks)
    has no cell width to override.

    Args:
        char_to_glyph: Unified code point -> glyph ID map
        hmtx: Horizontal metrics of the font

    Returns:
        Advance width -> code points, in first-seen order of widths
    """
    histogram: dict[int, set[int]] = {}
    for code_point, glyph_id in char_to_glyph.items():
        if code_point < ASCII_MAX_CODE:
            continue
        if code_point > MAX_CODE_POINT:
            logger.debug(f"Skipping code point {code_point:#x} beyond Unicode range")
            continue
        advance_width = hmtx.advance_width(glyph_id)
        if advance_width == 0:
            continue
        histogram.setdefault(advance_width, set()).add(code_point)
    return histogram


def select_widths(histogram: Mapping[int, set[int]]) -> tuple[int, int]:
    """
    Pick the two advance widths shared by the most characters.

    Returns:
        (narrower, wider) advance widths

    Raises:
        InsufficientWidthsError: if fewer than two widths are present
    """
    if len(histogram) < 2:
        raise InsufficientWidthsError(len(histogram))
    if len(histogram) > 2:
        logger.warning(
            f"Found more than 2 advance widths ({len(histogram)}), "
            "using only the two most common."
        )

    # sorted() is stable: equal counts keep first-seen order
    by_count = sorted(histogram, key=lambda width: len(histogram[width]), reverse=True)
    narrow, wide = sorted(by_count[:2])
    return narrow, wide


def compress_ranges(code_points: Iterable[int]) -> list[tuple[int, int]]:
    """
    Collapse code points into sorted, inclusive, non-adjacent ranges.

    >>> compress_ranges([0x3050, 0x3041, 0x3043, 0x3042])
    [(12353, 12355), (12368, 12368)]
    """
    ranges: list[tuple[int, int]] = []
    for code_point in sorted(code_points):
        if ranges and code_point == ranges[-1][1] + 1:
            ranges[-1] = (ranges[-1][0], code_point)
        else:
            ranges.append((code_point, code_point))
    return ranges


def classify(histogram: Mapping[int, set[int]]) -> Classification:
    """
    Turn a width histogram into cell width ranges.

    Ranges are grouped by width (narrow first), each group sorted by
    code point.
    """
    narrow, wide = select_widths(histogram)

    ranges = []
    for advance, cell_width in ((narrow, NARROW), (wide, WIDE)):
        ranges.extend(
            CellWidthRange(start, end, cell_width)
            for start, end in compress_ranges(histogram[advance])
        )

    character_count = len(histogram[narrow]) + len(histogram[wide])
    return Classification(narrow, wide, ranges, character_count)


def classify_font(char_to_glyph: Mapping[int, int], hmtx: HmtxTable) -> Classification:
    """Build the histogram for a font and classify it."""
    return classify(build_histogram(char_to_glyph, hmtx))
