"""Logging set-up for the distform command line."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final

from .errors import ConfigurationError

if TYPE_CHECKING:
    from typing import TextIO

LOG_LEVEL_ENV: Final[str] = "DISTFORM_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


def resolve_log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Pick the level from the CLI flags, then ``DISTFORM_LOG_LEVEL``, then INFO."""

    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING

    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return logging.INFO
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigurationError(f"{LOG_LEVEL_ENV} is not a logging level: {name!r}")
    return level


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    stream: TextIO | None = None,
    force: bool = False,
) -> int:
    """Send log records to stderr so stdout only carries command output.

    Returns the level that was applied.
    """

    level = resolve_log_level(verbose=verbose, quiet=quiet)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=force)
    return level
