"""Crypto.com Exchange Market Data Provider.

Public v1 REST endpoints: instruments, candlesticks and order book.
"""

from typing import Any

import httpx

from src.modules.data.normalizer import normalize
from src.modules.data.protocols import ProviderError
from src.modules.data.types import Candle, OrderBook
from src.shared.logger import get_logger

logger = get_logger(__name__)


class CryptoComProvider:
    """Crypto.com Exchange market data provider."""

    def __init__(self, timeout: float = 10.0) -> None:
        """Initialize CryptoComProvider.

        Args:
            timeout: Request timeout in seconds.
        """
        self._timeout = timeout
        self._base_url = "https://api.crypto.com/exchange/v1/public"

    @property
    def name(self) -> str:
        """Provider name."""
        return "Crypto.com"

    def list_symbols(self, quote_suffix: str) -> list[str]:
        """List tradable instruments quoted in `quote_suffix` (e.g., '_USDT').

        Raises:
            ProviderError: If the request fails or the payload is malformed.
        """
        data = self._get("/get-instruments", {}, "get-instruments")
        try:
            return [
                s["symbol"]
                for s in data["result"]["data"]
                if s["tradable"] and s["symbol"].endswith(quote_suffix)
            ]
        except (KeyError, TypeError) as e:
            raise ProviderError(self.name, "get-instruments", f"Malformed listing: {e}") from e

    def get_candles(self, symbol: str, interval: str, limit: int = 100) -> list[Candle]:
        """Fetch candlesticks from Crypto.com.

        Args:
            symbol: Instrument name (e.g., 'BTC_USDT').
            interval: Crypto.com timeframe (e.g., '4h', '1D').
            limit: Number of candles to request.

        Returns:
            Candles ordered oldest-first.

        Raises:
            ProviderError: If Crypto.com fails or returns no usable candles.
        """
        logger.info(
            "Fetching candlesticks from Crypto.com",
            extra={"symbol": symbol, "interval": interval, "limit": limit},
        )
        params = {"instrument_name": symbol, "timeframe": interval, "count": limit}
        data = self._get("/get-candlestick", params, symbol)

        candles = normalize("cryptocom", data)
        if not candles:
            raise ProviderError(self.name, symbol, "No data returned")
        return candles[-limit:]

    def get_order_book(self, symbol: str) -> OrderBook:
        """Fetch the top 50 depth levels from Crypto.com.

        Levels arrive as [price, quantity, order count].

        Raises:
            ProviderError: If Crypto.com fails or the payload is malformed.
        """
        data = self._get("/get-book", {"instrument_name": symbol, "depth": 50}, symbol)
        try:
            book = data["result"]["data"][0]
            return OrderBook(
                bids=[(float(level[0]), float(level[1])) for level in book["bids"]],
                asks=[(float(level[0]), float(level[1])) for level in book["asks"]],
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderError(self.name, symbol, f"Malformed order book: {e}") from e

    def _get(self, path: str, params: dict[str, Any], symbol: str) -> Any:
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(f"{self._base_url}{path}", params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                self.name,
                symbol,
                f"HTTP {e.response.status_code}: {e.response.text}",
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(self.name, symbol, str(e)) from e
        except ValueError as e:
            raise ProviderError(self.name, symbol, f"Invalid JSON: {e}") from e
