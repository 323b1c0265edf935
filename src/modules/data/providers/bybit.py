"""Bybit Spot Market Data Provider.

Public v5 REST endpoints: instruments info, kline and order book.
Bybit wraps every payload in {"retCode", "retMsg", "result"}.
"""

from typing import Any

import httpx

from src.modules.data.normalizer import normalize
from src.modules.data.protocols import ProviderError
from src.modules.data.types import Candle, OrderBook
from src.shared.logger import get_logger

logger = get_logger(__name__)


class BybitProvider:
    """Bybit spot market data provider.

    Also backs the curated Meme catalog.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        """Initialize BybitProvider.

        Args:
            timeout: Request timeout in seconds.
        """
        self._timeout = timeout
        self._base_url = "https://api.bybit.com/v5/market"

    @property
    def name(self) -> str:
        """Provider name."""
        return "Bybit"

    def list_symbols(self, quote_suffix: str) -> list[str]:
        """List spot symbols with status Trading quoted in `quote_suffix`.

        Raises:
            ProviderError: If the request fails or the payload is malformed.
        """
        data = self._get("/instruments-info", {"category": "spot"}, "instruments-info")
        try:
            return [
                s["symbol"]
                for s in data["result"]["list"]
                if s["status"] == "Trading" and s["symbol"].endswith(quote_suffix)
            ]
        except (KeyError, TypeError) as e:
            raise ProviderError(self.name, "instruments-info", f"Malformed listing: {e}") from e

    def get_candles(self, symbol: str, interval: str, limit: int = 100) -> list[Candle]:
        """Fetch spot klines from Bybit.

        Args:
            symbol: Bybit symbol (e.g., 'BTCUSDT').
            interval: Bybit interval (e.g., '240', 'D').
            limit: Number of klines to request.

        Returns:
            Candles ordered oldest-first (Bybit returns newest-first).

        Raises:
            ProviderError: If Bybit fails or returns no usable candles.
        """
        logger.info(
            "Fetching klines from Bybit",
            extra={"symbol": symbol, "interval": interval, "limit": limit},
        )
        params = {"category": "spot", "symbol": symbol, "interval": interval, "limit": limit}
        data = self._get("/kline", params, symbol)

        candles = normalize("bybit", data)
        if not candles:
            raise ProviderError(self.name, symbol, "No data returned")
        return candles

    def get_order_book(self, symbol: str) -> OrderBook:
        """Fetch the top 50 depth levels from Bybit.

        Raises:
            ProviderError: If Bybit fails or the payload is malformed.
        """
        data = self._get("/orderbook", {"category": "spot", "symbol": symbol, "limit": 50}, symbol)
        try:
            book = data["result"]
            return OrderBook(
                bids=[(float(p), float(q)) for p, q in book["b"]],
                asks=[(float(p), float(q)) for p, q in book["a"]],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(self.name, symbol, f"Malformed order book: {e}") from e

    def _get(self, path: str, params: dict[str, Any], symbol: str) -> Any:
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(f"{self._base_url}{path}", params=params)
                response.raise_for_status()
                data = response.json()
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

        if isinstance(data, dict) and data.get("retCode", 0) != 0:
            raise ProviderError(self.name, symbol, f"retCode {data['retCode']}: {data.get('retMsg', '')}")
        return data
