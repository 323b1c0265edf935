"""Market data value types shared by providers, normalizer and engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Candle:
    """One OHLCV interval.

    Attributes:
        timestamp: Interval open time in milliseconds since the epoch.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Traded volume. 0.0 when the venue publishes none.
        volume_available: False when the venue has no volume feed and
            `volume` is a placeholder rather than a measurement.
    """

    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    volume_available: bool = True


@dataclass(frozen=True)
class OrderBook:
    """Snapshot of market depth as (price, quantity) levels."""

    bids: list[tuple[float, float]]
    asks: list[tuple[float, float]]
