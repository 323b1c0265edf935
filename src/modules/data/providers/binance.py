"""Binance Spot Market Data Provider.

Public REST endpoints: exchange info, klines and order book depth.
No API key required.
"""

from typing import Any

import httpx

from src.modules.data.normalizer import normalize
from src.modules.data.protocols import ProviderError
from src.modules.data.types import Candle, OrderBook
from src.shared.logger import get_logger

logger = get_logger(__name__)


class BinanceProvider:
    """Binance spot market data provider.

    Serves the Binance catalog and also backs curated catalogs
    (CoinMarketCap listings, L1S pairs) that have no candle endpoint.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        """Initialize BinanceProvider.

        Args:
            timeout: Request timeout in seconds.
        """
        self._timeout = timeout
        self._base_url = "https://api.binance.com/api/v3"

    @property
    def name(self) -> str:
        """Provider name."""
        return "Binance"

    def list_symbols(self, quote_suffix: str) -> list[str]:
        """List symbols with status TRADING quoted in `quote_suffix`.

        Args:
            quote_suffix: Quote currency suffix (e.g., 'USDT').

        Returns:
            Symbols such as 'BTCUSDT', in exchange order.

        Raises:
            ProviderError: If the request fails or the payload is malformed.
        """
        data = self._get("/exchangeInfo", {}, "exchangeInfo")
        try:
            return [
                s["symbol"]
                for s in data["symbols"]
                if s["status"] == "TRADING" and s["symbol"].endswith(quote_suffix)
            ]
        except (KeyError, TypeError) as e:
            raise ProviderError(self.name, "exchangeInfo", f"Malformed listing: {e}") from e

    def get_candles(self, symbol: str, interval: str, limit: int = 100) -> list[Candle]:
        """Fetch klines from Binance.

        Args:
            symbol: Binance symbol (e.g., 'BTCUSDT').
            interval: Binance interval (e.g., '4h').
            limit: Number of klines to request.

        Returns:
            Candles ordered oldest-first.

        Raises:
            ProviderError: If Binance fails or returns no usable candles.
        """
        logger.info(
            "Fetching klines from Binance",
            extra={"symbol": symbol, "interval": interval, "limit": limit},
        )
        data = self._get("/klines", {"symbol": symbol, "interval": interval, "limit": limit}, symbol)

        candles = normalize("binance", data)
        if not candles:
            raise ProviderError(self.name, symbol, "No data returned")
        return candles

    def get_order_book(self, symbol: str) -> OrderBook:
        """Fetch the top 100 depth levels from Binance.

        Raises:
            ProviderError: If Binance fails or the payload is malformed.
        """
        data = self._get("/depth", {"symbol": symbol, "limit": 100}, symbol)
        try:
            return OrderBook(
                bids=[(float(p), float(q)) for p, q in data["bids"]],
                asks=[(float(p), float(q)) for p, q in data["asks"]],
            )
        except (KeyError, TypeError, ValueError) as e:
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
