"""Logging setup for the fstally CLI.

Library modules log through ``logging.getLogger(__name__)``; this module
routes those records to the shared stderr console.
"""

import logging

from rich.logging import RichHandler

from fstally.utils.formatting import err_console

_HANDLER_NAME = "fstally-rich"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the global CLI flags to a logging level.

    ``--quiet`` wins over ``--verbose`` when both are given.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Install a Rich handler on the ``fstally`` logger.

    Safe to call repeatedly; an existing handler is replaced rather than
    duplicated.

    Args:
        verbose: Show debug records (including skipped entries).
        quiet: Only show errors.
    """
    level = resolve_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger("fstally")

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)

    logger.addHandler(handler)
    logger.setLevel(level)
