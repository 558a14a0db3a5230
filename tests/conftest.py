"""Shared test fixtures for BTHome encoder tests.

Tests are pure Python; ``src/`` is put on the path so they run without
installing the package.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bthome_ble import BTHomeData  # noqa: E402


@pytest.fixture
def sample_data() -> BTHomeData:
    """Record used by the reference vectors."""
    return (
        BTHomeData()
        .with_temperature(18.6)
        .with_humidity(20.5)
        .with_illuminance(0.02)
        .with_co2(428)
        .with_pm2_5(49)
    )
