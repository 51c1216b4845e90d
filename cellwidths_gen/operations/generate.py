"""
Vim script generation.

Reads a font, classifies its characters into narrow and wide cells and
writes a script calling setcellwidths().
"""

import secrets
from dataclasses import dataclass
from pathlib import Path

from cellwidths_gen.core.cmap import merge_cmap
from cellwidths_gen.core.errors import FontNameNotFoundError
from cellwidths_gen.core.font import load_font
from cellwidths_gen.core.widths import Classification, classify_font
from cellwidths_gen.operations.template import render_vim_script
from cellwidths_gen.utils.logging import logger


@dataclass(frozen=True)
class GenerationResult:
    font_name: str
    classification: Classification
    output_path: Path


def generate(
    font_path: Path, output_path: Path, nonce: str | None = None
) -> GenerationResult:
    """
    Generate a cell widths Vim script for a font.

    Args:
        font_path: Font file to read
        output_path: Script to write
        nonce: Suffix for script-local names (random when None)

    Returns:
        Font name, classification and the written path

    Raises:
        CellWidthsError: if the font cannot be decoded or classified
    """
    logger.info(f"Reading font file: {font_path}")
    font = load_font(font_path)

    font_name = font.family_name
    if not font_name:
        raise FontNameNotFoundError("Font name not found in the 'name' table.")
    logger.info(f"Font name: {font_name}")

    char_to_glyph = merge_cmap(font.cmap)
    logger.info(f"Found {len(char_to_glyph)} characters.")

    classification = classify_font(char_to_glyph, font.hmtx)
    logger.info(
        f"Added {classification.character_count} characters with widths: "
        f"{classification.narrow_advance}, {classification.wide_advance}"
    )

    script = render_vim_script(
        font_name, classification.ranges, nonce or secrets.token_hex(6)
    )
    logger.info(f"Writing Vim script to {output_path}")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(script, encoding="utf-8")

    return GenerationResult(font_name, classification, output_path)
