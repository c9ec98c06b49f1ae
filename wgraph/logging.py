"""Logging for wgraph.

Every module logs through ``get_logger(__name__)``, a child of the ``wgraph``
logger. The ``wgraph`` logger owns the only handler, which writes to stderr:
the command-line summary lines go to stdout and stay free of log records.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "wgraph"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    force: bool = False,
) -> None:
    """Attach a single handler to the ``wgraph`` logger.

    Later calls do nothing unless ``force`` is set, in which case the existing
    handlers are replaced, as with ``logging.basicConfig(force=True)``.

    Args:
        level: Logging level (default: INFO).
        format_string: Record format (default: ``DEFAULT_FORMAT``).
        handler: Handler to install (default: a stderr ``StreamHandler``).
        force: Reconfigure even if already set up.
    """
    global _configured

    if _configured and not force:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
        old.close()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # pytest's caplog listens on the stdlib root logger
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring ``wgraph`` on first use."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``wgraph`` logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose`` / ``--quiet`` switches to a logging level.

    ``verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO
