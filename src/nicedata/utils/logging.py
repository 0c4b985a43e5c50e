"""
Logging setup for nicedata.

Modules get their logger with ``get_logger(__name__)`` and never configure
output themselves. Everything logs under the ``"nicedata"`` logger, which
carries only a NullHandler until a script calls ``configure_logging()``:

    ```python
    from nicedata.utils.logging import configure_logging
    configure_logging(level="DEBUG")  # or set NICEDATA_LOG_LEVEL=DEBUG
    ```

Pivot summaries and tooltip assembly log at DEBUG; truncated geo pivots
log at INFO and unusable pivot input at WARNING.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

# logger:line:function prefix
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "NICEDATA_LOG_LEVEL"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Attach a stderr handler to the "nicedata" logger; the root logger is untouched.

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to NICEDATA_LOG_LEVEL
        env var, or "INFO" if unset.
    fmt:
        Log message format. Defaults to a standard format.
    datefmt:
        Date format. Defaults to "%Y-%m-%d %H:%M:%S".
    force:
        Close and drop every handler on the "nicedata" logger first, the
        NullHandler included. Otherwise a second call only updates the level.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("nicedata")
    logger.setLevel(level)

    if fmt is None:
        fmt = DEFAULT_FMT
    if datefmt is None:
        datefmt = DEFAULT_DATEFMT

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        # Skip if we already have a stderr StreamHandler (e.g. from a previous call)
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name.

    If name is None, returns the 'nicedata' logger.
    Otherwise, returns logging.getLogger(name).
    """
    if name is None:
        name = "nicedata"
    return logging.getLogger(name)
