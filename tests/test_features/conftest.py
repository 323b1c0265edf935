"""Shared fixtures for indicator and engine tests.

All data is static and deterministic. No network calls, no randomness.
"""

import pytest

from src.modules.data.types import Candle


@pytest.fixture
def wavy_closes() -> list[float]:
    """60 closes with a repeating up/down pattern and upward drift."""
    moves = [0.5, 0.8, -0.3, 1.0, 0.0, 0.6, -0.7, 0.4, 1.2, -0.5]
    closes = [100.0]
    for i in range(1, 60):
        closes.append(closes[-1] + moves[i % len(moves)])
    return closes


@pytest.fixture
def textbook_closes() -> list[float]:
    """The classic 15-close Wilder RSI worked example."""
    return [
        44.34, 44.09, 44.15, 43.61, 44.33, 44.83, 45.10, 45.42,
        45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28,
    ]


@pytest.fixture
def all_gains_close() -> list[float]:
    """Close series where every bar is up (RSI = 100)."""
    return [100.0 + i for i in range(30)]


@pytest.fixture
def all_losses_close() -> list[float]:
    """Close series where every bar is down (RSI = 0)."""
    return [130.0 - i for i in range(30)]


@pytest.fixture
def sample_candles(wavy_closes: list[float], candle_factory) -> list[Candle]:
    """60 candles with real volume."""
    return candle_factory(wavy_closes)
