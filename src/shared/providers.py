"""Provider Descriptor registry.

Each scannable venue carries a static descriptor that configures the
whole pipeline for it: where candles come from, how timeframes map to
the venue's interval names, how symbols are displayed, and how hard the
scanner may hit it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.shared.instruments import (
    DERIV_COMMODITIES,
    DERIV_ETFS,
    DERIV_FOREX,
    DERIV_STOCK_INDICES,
    DERIV_STOCKS,
    DERIV_SYNTHETIC_INDICES,
    L1S_PAIRS,
    MEME_PAIRS,
)

# Provider kinds
EXCHANGE = "exchange"  # REST exchange with a listing endpoint
AGGREGATOR = "aggregator"  # market-data aggregator with a listing endpoint
DERIV = "deriv"  # websocket venue with a static instrument table
STATIC = "static"  # curated list served from another provider's candles

# Timeframes computed for every scanned symbol
RSI_TIMEFRAMES: tuple[str, ...] = ("5m", "15m", "30m", "1h", "4h", "1d")

# Timeframes shown in the pair detail view
DETAIL_TIMEFRAMES: tuple[str, ...] = ("1m", "5m", "15m", "30m", "4h", "12h", "1d")

DEFAULT_TIMEFRAME = "4h"


@dataclass(frozen=True)
class ProviderDescriptor:
    """Static configuration for one scannable venue.

    Attributes:
        id: Registry key (e.g., 'binance').
        name: Human-readable venue name.
        kind: One of EXCHANGE, AGGREGATOR, DERIV, STATIC.
        intervals: Timeframe -> provider interval name. Timeframes
            missing here cannot be served by this venue.
        quote_suffix: Quote-currency suffix used to filter the catalog,
            including any separator (e.g., '-USDT').
        display_quote: Quote appended to bare tickers for display.
        batch_size: Symbols fetched concurrently per batch.
        flaky: Whether short candle responses are retried once.
        inter_batch_delay: Seconds to pause between batches.
        candle_source: Provider id serving candles for this catalog.
            Empty means the venue serves its own candles.
        static_symbols: (symbol, display name) pairs for venues without
            a listing endpoint.
        has_order_book: Whether the venue publishes real market depth.
    """

    id: str
    name: str
    kind: str
    intervals: Mapping[str, str] = field(default_factory=dict)
    quote_suffix: str = ""
    display_quote: str = ""
    batch_size: int = 5
    flaky: bool = False
    inter_batch_delay: float = 0.0
    candle_source: str = ""
    static_symbols: tuple[tuple[str, str], ...] = ()
    has_order_book: bool = False

    def __post_init__(self) -> None:
        # Each descriptor owns a read-only copy of its interval map
        object.__setattr__(self, "intervals", MappingProxyType(dict(self.intervals)))

    @property
    def source_id(self) -> str:
        """Provider id whose endpoints serve this venue's candles."""
        return self.candle_source or self.id

    def display_symbol(self, symbol: str) -> str:
        """Format a provider symbol for display (e.g., 'BTCUSDT' -> 'BTC/USDT').

        Args:
            symbol: Symbol as returned by the catalog.

        Returns:
            Display symbol.
        """
        if self.static_symbols:
            for raw, display in self.static_symbols:
                if raw == symbol:
                    return display
            return symbol

        if self.kind == EXCHANGE and self.quote_suffix:
            quote = self.quote_suffix.lstrip("-_")
            separator = self.quote_suffix[: len(self.quote_suffix) - len(quote)]
            if symbol.endswith(self.quote_suffix):
                base = symbol[: -len(self.quote_suffix)]
                return f"{base}/{quote}"
            if separator:
                return symbol.replace(separator, "/")
            return symbol

        if self.display_quote:
            return f"{symbol.upper()}/{self.display_quote}"
        return symbol

    def source_symbol(self, symbol: str) -> str:
        """Translate a catalog symbol into the candle source's symbol.

        Curated and aggregator catalogs hold bare tickers ('BTC') that the
        candle source knows as a USDT pair ('BTCUSDT').

        Args:
            symbol: Symbol as returned by the catalog.

        Returns:
            Symbol understood by the candle source.
        """
        if not self.candle_source:
            return symbol
        return f"{symbol.upper()}{self.display_quote}"


_BINANCE_INTERVALS = {
    "1m": "1m", "5m": "5m", "15m": "15m", "30m": "30m",
    "1h": "1h", "4h": "4h", "12h": "12h", "1d": "1d",
}

_BYBIT_INTERVALS = {
    "1m": "1", "5m": "5", "15m": "15", "30m": "30",
    "1h": "60", "4h": "240", "12h": "720", "1d": "D",
}

_KUCOIN_INTERVALS = {
    "1m": "1min", "5m": "5min", "15m": "15min", "30m": "30min",
    "1h": "1hour", "4h": "4hour", "12h": "12hour", "1d": "1day",
}

_CRYPTOCOM_INTERVALS = {
    "1m": "1m", "5m": "5m", "15m": "15m", "30m": "30m",
    "1h": "1h", "4h": "4h", "12h": "12h", "1d": "1D",
}

# CoinGecko picks the granularity itself; the interval is the days window.
_COINGECKO_INTERVALS = {
    "1m": "7", "5m": "7", "15m": "7", "30m": "7",
    "1h": "7", "4h": "20", "12h": "20", "1d": "100",
}

# Deriv granularities in seconds; 12h is not an accepted granularity.
_DERIV_INTERVALS = {
    "1m": "60", "5m": "300", "15m": "900", "30m": "1800",
    "1h": "3600", "4h": "14400", "1d": "86400",
}


def _deriv(provider_id: str, name: str, symbols: tuple[tuple[str, str], ...]) -> ProviderDescriptor:
    return ProviderDescriptor(
        id=provider_id,
        name=name,
        kind=DERIV,
        intervals=_DERIV_INTERVALS,
        static_symbols=symbols,
    )


# --- Pre-built Provider Descriptors ---

BINANCE = ProviderDescriptor(
    id="binance",
    name="Binance",
    kind=EXCHANGE,
    intervals=_BINANCE_INTERVALS,
    quote_suffix="USDT",
    has_order_book=True,
)

BYBIT = ProviderDescriptor(
    id="bybit",
    name="Bybit",
    kind=EXCHANGE,
    intervals=_BYBIT_INTERVALS,
    quote_suffix="USDT",
    has_order_book=True,
)

KUCOIN = ProviderDescriptor(
    id="kucoin",
    name="KuCoin",
    kind=EXCHANGE,
    intervals=_KUCOIN_INTERVALS,
    quote_suffix="-USDT",
    has_order_book=True,
)

CRYPTOCOM = ProviderDescriptor(
    id="cryptocom",
    name="Crypto.com",
    kind=EXCHANGE,
    intervals=_CRYPTOCOM_INTERVALS,
    quote_suffix="_USDT",
    has_order_book=True,
)

COINGECKO = ProviderDescriptor(
    id="coingecko",
    name="CoinGecko",
    kind=AGGREGATOR,
    intervals=_COINGECKO_INTERVALS,
    display_quote="USD",
)

COINMARKETCAP = ProviderDescriptor(
    id="coinmarketcap",
    name="CoinMarketCap",
    kind=AGGREGATOR,
    display_quote="USDT",
    candle_source="binance",
)

L1S = ProviderDescriptor(
    id="l1s",
    name="L1S Pairs",
    kind=STATIC,
    display_quote="USDT",
    batch_size=3,
    flaky=True,
    inter_batch_delay=0.3,
    candle_source="binance",
    static_symbols=L1S_PAIRS,
)

MEME = ProviderDescriptor(
    id="meme",
    name="Meme Pairs",
    kind=STATIC,
    display_quote="USDT",
    batch_size=3,
    flaky=True,
    inter_batch_delay=0.3,
    candle_source="bybit",
    static_symbols=MEME_PAIRS,
)

PROVIDERS: dict[str, ProviderDescriptor] = {
    descriptor.id: descriptor
    for descriptor in (
        BINANCE,
        BYBIT,
        KUCOIN,
        CRYPTOCOM,
        COINGECKO,
        COINMARKETCAP,
        _deriv("deriv", "Deriv Synthetic", DERIV_SYNTHETIC_INDICES),
        _deriv("derivforex", "Deriv Forex", DERIV_FOREX),
        _deriv("derivstocks", "Deriv Stocks", DERIV_STOCKS),
        _deriv("derivstockindices", "Deriv Stock Indices", DERIV_STOCK_INDICES),
        _deriv("derivcommodity", "Deriv Commodity", DERIV_COMMODITIES),
        _deriv("derivetfs", "Deriv ETFs", DERIV_ETFS),
        L1S,
        MEME,
    )
}


def get_descriptor(provider_id: str) -> ProviderDescriptor:
    """Look up a provider descriptor by id.

    Args:
        provider_id: Registry key (e.g., 'binance').

    Returns:
        The matching descriptor.

    Raises:
        KeyError: If the provider id is unknown.
    """
    try:
        return PROVIDERS[provider_id]
    except KeyError:
        raise KeyError(f"Unknown provider: {provider_id}") from None
