"""Candle Normalizer.

Converts provider-specific candle payloads into an oldest-first list of
Candles. Adapters never raise on bad input: a malformed or empty payload
yields None, meaning "no data for this request".
"""

from collections.abc import Callable
from typing import Any

import numpy as np
import pandas as pd

from src.modules.data.types import Candle
from src.shared.logger import get_logger

logger = get_logger(__name__)

COLUMNS = ["timestamp", "open", "high", "low", "close", "volume"]


def _finalize(df: pd.DataFrame, volume_available: bool = True) -> list[Candle] | None:
    """Coerce columns to numbers, validate, and order oldest-first."""
    if df.empty:
        return None

    df = df[COLUMNS].apply(pd.to_numeric, errors="coerce")
    values = df.to_numpy(dtype=float)
    if not np.isfinite(values).all():
        return None

    df = df.sort_values("timestamp", kind="mergesort")
    return [
        Candle(
            timestamp=int(row.timestamp),
            open=float(row.open),
            high=float(row.high),
            low=float(row.low),
            close=float(row.close),
            volume=float(row.volume),
            volume_available=volume_available,
        )
        for row in df.itertuples(index=False)
    ]


def from_binance(raw: Any) -> list[Candle] | None:
    """Binance klines: [openTime, open, high, low, close, volume, ...], oldest-first."""
    rows = [row[:6] for row in raw]
    return _finalize(pd.DataFrame(rows, columns=COLUMNS))


def from_bybit(raw: Any) -> list[Candle] | None:
    """Bybit v5 klines, newest-first.

    Rows are [startTime, open, high, low, close, volume, turnover]; the
    quote-currency turnover is used as volume.
    """
    rows = raw["result"]["list"]
    df = pd.DataFrame(
        [[r[0], r[1], r[2], r[3], r[4], r[6]] for r in reversed(rows)],
        columns=COLUMNS,
    )
    return _finalize(df)


def from_kucoin(raw: Any) -> list[Candle] | None:
    """KuCoin candles, newest-first, seconds timestamps.

    Rows are [time, open, close, high, low, volume, turnover].
    """
    rows = raw["data"]
    df = pd.DataFrame(
        [[r[0], r[1], r[3], r[4], r[2], r[5]] for r in reversed(rows)],
        columns=COLUMNS,
    )
    df["timestamp"] = pd.to_numeric(df["timestamp"], errors="coerce") * 1000
    return _finalize(df)


def from_cryptocom(raw: Any) -> list[Candle] | None:
    """Crypto.com candlesticks: {t, o, h, l, c, v} objects."""
    rows = raw["result"]["data"]
    df = pd.DataFrame(
        [[r["t"], r["o"], r["h"], r["l"], r["c"], r["v"]] for r in rows],
        columns=COLUMNS,
    )
    return _finalize(df)


def from_coingecko(raw: Any) -> list[Candle] | None:
    """CoinGecko market chart: price samples plus matching volume samples.

    Price-only data, so open, high, low and close all carry the sample price.
    When any price sample lacks a matching volume sample, the whole batch is
    flagged volume-unavailable and the gaps are filled with 0.
    """
    prices = raw["prices"]
    volumes = raw["total_volumes"]
    rows = []
    for i, (ts, price) in enumerate(prices):
        volume = volumes[i][1] if i < len(volumes) else 0
        rows.append([ts, price, price, price, price, volume])
    return _finalize(
        pd.DataFrame(rows, columns=COLUMNS),
        volume_available=len(volumes) >= len(prices),
    )


def from_deriv(raw: Any) -> list[Candle] | None:
    """Deriv ticks_history candles, epoch seconds, no volume feed."""
    rows = raw["candles"]
    df = pd.DataFrame(
        [[c["epoch"], c["open"], c["high"], c["low"], c["close"], 0] for c in rows],
        columns=COLUMNS,
    )
    df["timestamp"] = pd.to_numeric(df["timestamp"], errors="coerce") * 1000
    return _finalize(df, volume_available=False)


ADAPTERS: dict[str, Callable[[Any], list[Candle] | None]] = {
    "binance": from_binance,
    "bybit": from_bybit,
    "kucoin": from_kucoin,
    "cryptocom": from_cryptocom,
    "coingecko": from_coingecko,
    "deriv": from_deriv,
}


def normalize(shape: str, raw: Any) -> list[Candle] | None:
    """Normalize a raw provider payload into Candles.

    Args:
        shape: Payload shape key (see ADAPTERS).
        raw: Decoded JSON payload.

    Returns:
        Candles ordered oldest-first, or None if the payload is empty,
        malformed, or of an unknown shape.
    """
    adapter = ADAPTERS.get(shape)
    if adapter is None:
        logger.warning("Unknown candle payload shape", extra={"shape": shape})
        return None

    try:
        return adapter(raw)
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.warning(
            "Malformed candle payload",
            extra={"shape": shape, "error": str(e)},
        )
        return None
