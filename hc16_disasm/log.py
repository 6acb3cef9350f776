"""
Logging setup shared by the library and the hc16dis CLI.

Console output goes through rich's RichHandler on stderr so it never mixes
with the listing on stdout. An optional log file captures everything at
DEBUG with the same pipe-separated format the other KingAI tools use.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hc16_disasm"

FILE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def level_for_debug(debug: int) -> int:
    """Map the CLI -d count to a console level."""
    if debug <= 0:
        return logging.WARNING
    if debug == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Calling again replaces the handlers installed by a previous call, so
    the CLI can be run several times in one process (tests do).
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, "_hc16dis", False):
            logger.removeHandler(handler)
            handler.close()

    logger.setLevel(logging.DEBUG if log_file else level)
    logger.propagate = False

    # ── Console handler: stderr, rich formatting ──
    ch = RichHandler(
        console=Console(stderr=True),
        level=level,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    ch._hc16dis = True
    logger.addHandler(ch)

    # ── File handler: captures everything (DEBUG+) ──
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
        fh._hc16dis = True
        logger.addHandler(fh)
        logger.debug("Log file: %s", log_path)

    return logger
