"""Momentum indicators: RSI, Stochastic RSI, Relative Vigor Index.

Pure functions: numeric sequences in, latest value out. A return value of
None means the input is too short for the indicator, which is an expected
outcome rather than an error.
"""

from collections.abc import Sequence

import pandas as pd

Numbers = Sequence[float] | pd.Series


def _as_series(values: Numbers) -> pd.Series:
    if isinstance(values, pd.Series):
        return values.astype(float).reset_index(drop=True)
    return pd.Series(list(values), dtype=float)


def _check_period(name: str, period: int) -> None:
    if period < 1:
        raise ValueError(f"{name} must be >= 1, got {period}")


def rsi(closes: Numbers, period: int = 14) -> float | None:
    """Calculate the latest Relative Strength Index (Wilder's smoothing).

    The averages are seeded with the simple mean of the first `period`
    gains/losses and then smoothed as avg = (avg * (period - 1) + new) / period.

    Args:
        closes: Closing prices, oldest first.
        period: Lookback period (default 14).

    Returns:
        RSI between 0 and 100, or None if fewer than period + 1 closes.

    Raises:
        ValueError: If period < 1.
    """
    _check_period("Period", period)
    close = _as_series(closes)
    if len(close) < period + 1:
        return None

    delta = close.diff().iloc[1:]
    gains = delta.clip(lower=0.0)
    losses = (-delta).clip(lower=0.0)

    # Seed with the SMA, then Wilder's smoothing (exponential with alpha = 1/period)
    alpha = 1.0 / period
    seeded_gains = pd.concat([pd.Series([gains.iloc[:period].mean()]), gains.iloc[period:]])
    seeded_losses = pd.concat([pd.Series([losses.iloc[:period].mean()]), losses.iloc[period:]])
    avg_gain = seeded_gains.ewm(alpha=alpha, adjust=False).mean().iloc[-1]
    avg_loss = seeded_losses.ewm(alpha=alpha, adjust=False).mean().iloc[-1]

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return float(100.0 - (100.0 / (1.0 + rs)))


def stochastic_rsi(
    closes: Numbers,
    rsi_period: int = 14,
    stoch_period: int = 14,
) -> float | None:
    """Calculate the latest Stochastic RSI.

    RSI is recomputed from scratch over every prefix closes[0..i] for
    i in rsi_period..n-1, then the stochastic formula is applied to the
    last `stoch_period` RSI values.

    Args:
        closes: Closing prices, oldest first.
        rsi_period: RSI lookback period (default 14).
        stoch_period: Stochastic window over the RSI series (default 14).

    Returns:
        Value between 0 and 100 (50 when the RSI window is flat), or None
        if fewer than rsi_period + stoch_period + 1 closes.

    Raises:
        ValueError: If either period < 1.
    """
    _check_period("RSI period", rsi_period)
    _check_period("Stochastic period", stoch_period)
    close = _as_series(closes)
    if len(close) < rsi_period + stoch_period + 1:
        return None

    rsi_values = [rsi(close.iloc[: i + 1], rsi_period) for i in range(rsi_period, len(close))]
    if len(rsi_values) < stoch_period:
        return None

    window = pd.Series(rsi_values[-stoch_period:], dtype=float)
    current = window.iloc[-1]
    lowest = window.min()
    highest = window.max()

    if highest == lowest:
        return 50.0
    return float((current - lowest) / (highest - lowest) * 100.0)


def relative_vigor_index(
    opens: Numbers,
    highs: Numbers,
    lows: Numbers,
    closes: Numbers,
    period: int = 10,
) -> float | None:
    """Calculate the latest Relative Vigor Index on a 0-100 scale.

    Formula: close-open and high-low are each smoothed with the symmetric
    4-bar weighting (x[i] + 2x[i-1] + 2x[i-2] + x[i-3]) / 6. RVI is the sum
    of the last `period` smoothed numerators over the sum of the last
    `period` smoothed denominators, rescaled as 50 + 50 * RVI and clamped
    to [0, 100]. 50 is neutral; above 50 closes are beating opens.

    Args:
        opens: Opening prices, oldest first.
        highs: High prices.
        lows: Low prices.
        closes: Closing prices.
        period: Summation window (default 10).

    Returns:
        RVI between 0 and 100, or None if fewer than period + 3 bars.

    Raises:
        ValueError: If period < 1 or the series lengths differ.
    """
    _check_period("Period", period)
    open_ = _as_series(opens)
    high = _as_series(highs)
    low = _as_series(lows)
    close = _as_series(closes)
    if not len(open_) == len(high) == len(low) == len(close):
        raise ValueError(
            f"Series length mismatch: open={len(open_)}, high={len(high)}, "
            f"low={len(low)}, close={len(close)}"
        )
    if len(close) < period + 3:
        return None

    def weighted(x: pd.Series) -> pd.Series:
        return (x + 2 * x.shift(1) + 2 * x.shift(2) + x.shift(3)) / 6.0

    numerator = weighted(close - open_).iloc[-period:].sum()
    denominator = weighted(high - low).iloc[-period:].sum()

    if denominator == 0:
        return 50.0

    value = 50.0 + 50.0 * (numerator / denominator)
    return float(min(100.0, max(0.0, value)))
