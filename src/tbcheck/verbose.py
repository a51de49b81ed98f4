"""Debug log configuration for check failures."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path, verbose: bool = False, logger_name: str = "tbcheck"
) -> logging.Logger:
    """
    Route failed-check records to a timestamped debug log.

    Every failed check emits one DEBUG record naming its call site
    ("Check failed at test_x.py:12"). Passing checks emit nothing, so the
    file ends up as an index of where a session's failures happened. The
    decorated line on stdout is unaffected.

    Args:
        debug_file: File receiving the failure records; parents are created.
        verbose: Also echo each failure record to stderr.
        logger_name: Logger to configure. Decorators log to "tbcheck" unless
            given another logger.

    Returns:
        The configured logger.

    Raises:
        RuntimeError: If the logger already has handlers, e.g. a second
            session in the same process would interleave into one file.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    debug_file = Path(debug_file)
    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode="a")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
