"""
Cell width classification constants.
"""

# setcellwidths() does not accept ASCII characters
ASCII_MAX_CODE = 0x80

# Highest valid Unicode scalar value
MAX_CODE_POINT = 0x10FFFF

# Cell width classes
NARROW = 1
WIDE = 2
