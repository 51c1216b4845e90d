"""
Filesystem path constants.
"""

from pathlib import Path

# Generated script location when --output is not given
DEFAULT_OUTPUT = Path("cellwidths.vim")
