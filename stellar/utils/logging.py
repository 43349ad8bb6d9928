"""Console logging for stellar runners.

Library modules log through ``logging.getLogger(__name__)`` under the
``stellar`` namespace (debug notes on satellite/signal fallbacks and
``erf_inv`` clamping); the export runner attaches the single console
handler here and reports how many bulletins it wrote.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "[%(levelname)s] %(message)s"


def get_logger(name: str = "stellar", level: int = logging.INFO) -> logging.Logger:
    """Return ``name``'s logger with one console handler attached.

    Repeated calls only adjust the level, so child loggers such as
    ``stellar.forecast.timeseries`` never print twice.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
