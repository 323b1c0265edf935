"""Shared test fixtures: deterministic candles and a test configuration."""

import pytest

from src.modules.data.types import Candle
from src.shared.config import Config


def make_candles(
    closes: list[float],
    volume: float = 1_000.0,
    volume_available: bool = True,
    start: int = 1_700_000_000_000,
    step: int = 14_400_000,
) -> list[Candle]:
    """Build candles around a close series: open 0.2 below, range +/-0.5."""
    return [
        Candle(
            timestamp=start + i * step,
            open=close - 0.2,
            high=close + 0.5,
            low=close - 0.5,
            close=close,
            volume=volume + i * 10,
            volume_available=volume_available,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def candle_factory():
    """Expose make_candles to tests as a fixture."""
    return make_candles


@pytest.fixture
def config() -> Config:
    """Create a test configuration."""
    return Config(
        environment="test",
        log_level="INFO",
        http_timeout=1.0,
        ws_timeout=1.0,
        candle_limit=50,
        catalog_cap=100,
        retry_backoff=0.25,
        coingecko_api_key="",
        coinmarketcap_api_key="",
        deriv_app_id="1089",
    )
