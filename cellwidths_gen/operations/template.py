"""
Vim script template for generated cell widths.
"""

import json
from collections.abc import Iterable

from cellwidths_gen.core.widths import CellWidthRange

VIM_TEMPLATE = """\
" Cell widths for {font_comment}
" Generated by cellwidths-gen. Source this file to apply.

if !exists('*setcellwidths')
  finish
endif

let g:cellwidths_font = '{font_literal}'
let s:cellwidths_{nonce} = {ranges}

call setcellwidths(s:cellwidths_{nonce})
"""


def vim_string(text: str) -> str:
    """Escape text for a single-quoted Vim string literal."""
    return text.replace("'", "''")


def render_vim_script(
    font_name: str, ranges: Iterable[CellWidthRange], nonce: str
) -> str:
    """
    Render the Vim script applying ``ranges`` with setcellwidths().

    Args:
        font_name: Family name of the font the widths were taken from
        ranges: (start, end, width) triples
        nonce: Unique suffix for script-local names

    Returns:
        Vim script source
    """
    # A list of integer lists is valid JSON and a valid Vim list literal
    ranges_literal = json.dumps([list(r) for r in ranges])
    single_line = " ".join(font_name.splitlines())
    return VIM_TEMPLATE.format(
        font_comment=single_line,
        font_literal=vim_string(single_line),
        nonce=nonce,
        ranges=ranges_literal,
    )
