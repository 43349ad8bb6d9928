from __future__ import annotations

"""Pytest configuration.

This file is imported during *collection*, so it's the right place to set
process-wide environment variables needed for stable imports.
"""

import os
import tempfile
from datetime import datetime, timezone

import numpy as np
import pytest

# Force a non-interactive backend in test environments.
os.environ.setdefault("MPLBACKEND", "Agg")

# Isolate matplotlib cache to avoid flaky font-cache locking.
os.environ.setdefault("MPLCONFIGDIR", tempfile.mkdtemp(prefix="mplconfig-"))

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
