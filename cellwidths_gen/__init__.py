"""
Generate Vim ``setcellwidths()`` scripts from TrueType/OpenType fonts.
"""

__version__ = "0.1.0"
