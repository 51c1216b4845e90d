"""
SFNT table and record identifiers used by the decoders.

Reference: https://learn.microsoft.com/en-us/typography/opentype/spec/
"""

# Tables that must be present in the directory
REQUIRED_TABLES = ("hhea", "maxp", "hmtx", "cmap", "name")

# cmap subtable formats the character map reader can decode
SUPPORTED_CMAP_FORMATS = (4, 6, 12)

# Name records whose strings are UTF-16BE text
PLATFORM_UNICODE = 0
PLATFORM_WINDOWS = 3
ENCODING_WINDOWS_UNICODE_BMP = 1

# nameID 1: Font Family name
FAMILY_NAME_ID = 1
