"""Logging setup for svgdoc entry points.

Library modules obtain loggers with ``logging.getLogger(__name__)`` and never
configure handlers themselves.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "svgdoc"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class _CliHandler(logging.StreamHandler):
    pass


def setup_default_logging(level: Union[int, str] = "WARNING", stream: Optional[TextIO] = None) -> None:
    """Route svgdoc log records to ``stream`` (default: current sys.stderr).

    Safe to call repeatedly: the handler installed by a previous call is
    replaced, so level and stream always follow the latest call.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.WARNING)
    else:
        lvl = int(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, _CliHandler):
            logger.removeHandler(handler)

    handler = _CliHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(lvl)


__all__ = ["setup_default_logging"]
