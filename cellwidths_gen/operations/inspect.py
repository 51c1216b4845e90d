"""
Human-readable summary of the decoded font tables.
"""

from cellwidths_gen.core.font import FontData


def describe_font(font: FontData) -> list[str]:
    """
    Describe the directory, metrics, cmap and name records of a font.

    Returns:
        Lines of text, one fact per line
    """
    directory = font.directory
    lines = [
        f"Scaler type: {directory.scaler_type!r}",
        f"Tables: {directory.num_tables}",
    ]
    for record in directory.tables:
        lines.append(f"  {record.tag:<4}  offset={record.offset:<8} length={record.length}")

    lines.append(f"Glyphs: {font.maxp.num_glyphs}")
    lines.append(f"Horizontal metrics: {font.hhea.number_of_h_metrics}")

    lines.append(f"cmap version {font.cmap.version}:")
    for record in font.cmap.encoding_records:
        if record.subtable is None:
            detail = "unsupported format"
        else:
            detail = (
                f"format {record.subtable.format}, "
                f"{len(record.subtable.glyph_index_map)} characters"
            )
        lines.append(f"  ({record.platform_id}, {record.encoding_id}): {detail}")

    lines.append(f"name format {font.name.format}:")
    for record in font.name.records:
        if record.string:
            lines.append(
                f"  ({record.platform_id}, {record.encoding_id}, "
                f"{record.language_id:#06x}) nameID {record.name_id}: {record.string}"
            )

    family = font.family_name
    lines.append(f"Family name: {family if family else '(not found)'}")
    return lines
