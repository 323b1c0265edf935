"""Data Provider Protocols.

Defines the interfaces for candle, catalog and order book providers.
"""

from typing import Protocol

from src.modules.data.types import Candle, OrderBook


class CandleProvider(Protocol):
    """Protocol for venues that serve historical candles.

    All providers (Binance, Bybit, Deriv, etc.) implement this interface so
    the market data manager can route to any of them interchangeably.
    """

    @property
    def name(self) -> str:
        """Provider name for logging and error messages."""
        ...

    def get_candles(self, symbol: str, interval: str, limit: int = 100) -> list[Candle]:
        """Fetch recent OHLCV candles for a symbol.

        Args:
            symbol: Venue symbol (e.g., 'BTCUSDT').
            interval: Venue interval name (e.g., '4h', '240', '14400').
            limit: Maximum number of candles to request.

        Returns:
            Candles ordered oldest-first.

        Raises:
            ProviderError: If the provider fails or returns no usable data.
        """
        ...


class CatalogProvider(Protocol):
    """Protocol for venues that publish a tradable symbol listing."""

    @property
    def name(self) -> str:
        """Provider name for logging and error messages."""
        ...

    def list_symbols(self, quote_suffix: str) -> list[str]:
        """List tradable symbols quoted in the given currency.

        Args:
            quote_suffix: Quote suffix including any separator (e.g., '-USDT').
                Aggregators that list coins rather than pairs ignore it.

        Returns:
            Venue symbols in the venue's own order.

        Raises:
            ProviderError: If the listing cannot be fetched or parsed.
        """
        ...


class OrderBookProvider(Protocol):
    """Protocol for venues that publish market depth."""

    @property
    def name(self) -> str:
        """Provider name for logging and error messages."""
        ...

    def get_order_book(self, symbol: str) -> OrderBook:
        """Fetch a depth snapshot for a symbol.

        Raises:
            ProviderError: If the provider fails to fetch data.
        """
        ...


class ProviderError(Exception):
    """Exception raised when a provider fails to fetch data."""

    def __init__(self, provider: str, symbol: str, message: str) -> None:
        """Initialize ProviderError.

        Args:
            provider: Name of the failing provider.
            symbol: Symbol (or listing) that was being fetched.
            message: Error description.
        """
        self.provider = provider
        self.symbol = symbol
        super().__init__(f"[{provider}] Failed to fetch {symbol}: {message}")
