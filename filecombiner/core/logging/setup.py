# File: filecombiner/core/logging/setup.py

import logging

from rich.console import Console
from rich.logging import RichHandler

from filecombiner.core.config.settings import settings


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG

    level = logging.getLevelName(settings.LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Installs a single Rich handler on the root logger.
    Only the CLI calls this; library code just uses logging.getLogger(__name__).
    Calling it again replaces the previous Rich handler instead of stacking a new one.
    """
    root = logging.getLogger()

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    # Logs go to stderr so piped stdout (to-string, scan --json) stays clean
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=verbose,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root.addHandler(handler)
    root.setLevel(resolve_level(verbose, quiet))
