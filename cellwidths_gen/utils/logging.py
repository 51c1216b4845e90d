"""
Shared logging configuration for cellwidths-gen.
"""

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger("cellwidths_gen")


def set_verbosity(verbose: bool = False, quiet: bool = False) -> None:
    """Show debug output when verbose, only warnings and errors when quiet."""
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)


def is_quiet() -> bool:
    """Whether informational messages are suppressed."""
    return not logger.isEnabledFor(logging.INFO)
