"""Feature Engine: orchestrates indicator computation over candles.

Turns a normalized candle list into an IndicatorSet: a mapping of
indicator name to latest value, or None when the data is too short.
This is the single entry point for indicator computation in the scanner.
"""

import pandas as pd

from src.modules.data.types import Candle
from src.modules.features.indicators.momentum import (
    relative_vigor_index,
    rsi,
    stochastic_rsi,
)
from src.modules.features.indicators.volume import money_flow_index
from src.shared.logger import get_logger

logger = get_logger(__name__)

IndicatorSet = dict[str, float | None]

RSI_PERIOD = 14
STOCH_PERIOD = 14
MFI_PERIOD = 14
RVI_PERIOD = 10


def candles_to_frame(candles: list[Candle]) -> pd.DataFrame:
    """Convert candles into an OHLCV DataFrame indexed by timestamp.

    Args:
        candles: Candles ordered oldest-first.

    Returns:
        DataFrame with float columns open, high, low, close, volume.
    """
    df = pd.DataFrame(
        {
            "open": [c.open for c in candles],
            "high": [c.high for c in candles],
            "low": [c.low for c in candles],
            "close": [c.close for c in candles],
            "volume": [c.volume for c in candles],
        },
        index=pd.Index([c.timestamp for c in candles], name="timestamp"),
    )
    return df.astype(float)


class FeatureEngine:
    """Computes the IndicatorSet for a candle list.

    Volume-aware: MFI is only computed when every candle carries real
    volume, otherwise it is reported as None (unavailable).

    Usage:
        engine = FeatureEngine()
        indicators = engine.compute(candles)
    """

    def compute(self, candles: list[Candle]) -> IndicatorSet:
        """Compute RSI, Stochastic RSI, MFI and RVI for the input candles.

        Args:
            candles: Candles ordered oldest-first. May be empty.

        Returns:
            IndicatorSet with keys: rsi, stoch_rsi, mfi, rvi.
        """
        if not candles:
            return {"rsi": None, "stoch_rsi": None, "mfi": None, "rvi": None}

        df = candles_to_frame(candles)

        mfi = None
        if self.has_volume(candles):
            mfi = money_flow_index(
                df["high"], df["low"], df["close"], df["volume"], period=MFI_PERIOD
            )

        result: IndicatorSet = {
            "rsi": rsi(df["close"], period=RSI_PERIOD),
            "stoch_rsi": stochastic_rsi(
                df["close"], rsi_period=RSI_PERIOD, stoch_period=STOCH_PERIOD
            ),
            "mfi": mfi,
            "rvi": relative_vigor_index(
                df["open"], df["high"], df["low"], df["close"], period=RVI_PERIOD
            ),
        }

        logger.debug(f"Computed indicators for {len(candles)} bars", extra={"bars": len(candles)})
        return result

    def compute_rsi(self, candles: list[Candle] | None) -> float | None:
        """Compute only the RSI, as used for the per-timeframe columns.

        Args:
            candles: Candles ordered oldest-first, or None for a failed fetch.

        Returns:
            RSI value or None.
        """
        if not candles:
            return None
        return rsi([c.close for c in candles], period=RSI_PERIOD)

    @staticmethod
    def has_volume(candles: list[Candle]) -> bool:
        """Whether every candle carries a real volume measurement."""
        return bool(candles) and all(c.volume_available for c in candles)

    @staticmethod
    def mean_volume(candles: list[Candle]) -> float | None:
        """Mean volume over the window, or None when volume is unavailable."""
        if not FeatureEngine.has_volume(candles):
            return None
        return float(sum(c.volume for c in candles) / len(candles))
