"""Volume indicators: Money Flow Index.

Pure functions: numeric sequences in, latest value out.
"""

from src.modules.features.indicators.momentum import Numbers, _as_series


def money_flow_index(
    highs: Numbers,
    lows: Numbers,
    closes: Numbers,
    volumes: Numbers,
    period: int = 14,
) -> float | None:
    """Calculate the latest Money Flow Index.

    Typical price tp = (high + low + close) / 3 and raw money flow
    tp * volume. Each of the last `period` bars is compared with its
    immediate predecessor: rising tp counts as positive flow, falling tp
    as negative flow, unchanged tp as neither.

    Args:
        highs: High prices, oldest first.
        lows: Low prices.
        closes: Closing prices.
        volumes: Volumes. All four series are expected to share a length.
        period: Lookback period (default 14).

    Returns:
        MFI between 0 and 100 (100 when there is no negative flow), or
        None if fewer than period + 1 bars.

    Raises:
        ValueError: If period < 1.
    """
    if period < 1:
        raise ValueError(f"Period must be >= 1, got {period}")
    close = _as_series(closes)
    if len(close) < period + 1:
        return None

    typical = (_as_series(highs) + _as_series(lows) + close) / 3.0
    raw_flow = typical * _as_series(volumes)

    change = typical.diff()
    window = slice(len(close) - period, len(close))
    positive = raw_flow[window][change[window] > 0].sum()
    negative = raw_flow[window][change[window] < 0].sum()

    if negative == 0:
        return 100.0

    money_ratio = positive / negative
    return float(100.0 - (100.0 / (1.0 + money_ratio)))
