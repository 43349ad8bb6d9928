"""Utilities for stellar.

NOTE: Keep this package lightweight.
Avoid importing heavy/optional dependencies (matplotlib, pandas, ...) at import time.
"""

from stellar.utils.logging import get_logger
from stellar.utils.timefmt import as_utc, epoch_ms, iso_utc, utc_now

__all__ = [
    "as_utc",
    "epoch_ms",
    "get_logger",
    "iso_utc",
    "utc_now",
]
