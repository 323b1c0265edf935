"""KuCoin Spot Market Data Provider.

Public REST endpoints: symbols, candles and level-2 order book.
KuCoin wraps payloads in {"code": "200000", "data": ...}.
"""

from typing import Any

import httpx

from src.modules.data.normalizer import normalize
from src.modules.data.protocols import ProviderError
from src.modules.data.types import Candle, OrderBook
from src.shared.logger import get_logger

logger = get_logger(__name__)

SUCCESS_CODE = "200000"


class KucoinProvider:
    """KuCoin spot market data provider.

    The candles endpoint has no limit parameter and returns up to 1500
    bars, so the response is trimmed to the most recent `limit` candles.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        """Initialize KucoinProvider.

        Args:
            timeout: Request timeout in seconds.
        """
        self._timeout = timeout
        self._base_url = "https://api.kucoin.com/api/v1"

    @property
    def name(self) -> str:
        """Provider name."""
        return "KuCoin"

    def list_symbols(self, quote_suffix: str) -> list[str]:
        """List symbols with trading enabled quoted in `quote_suffix` (e.g., '-USDT').

        Raises:
            ProviderError: If the request fails or the payload is malformed.
        """
        data = self._get("/symbols", {}, "symbols")
        try:
            return [
                s["symbol"]
                for s in data["data"]
                if s["enableTrading"] and s["symbol"].endswith(quote_suffix)
            ]
        except (KeyError, TypeError) as e:
            raise ProviderError(self.name, "symbols", f"Malformed listing: {e}") from e

    def get_candles(self, symbol: str, interval: str, limit: int = 100) -> list[Candle]:
        """Fetch candles from KuCoin.

        Args:
            symbol: KuCoin symbol (e.g., 'BTC-USDT').
            interval: KuCoin candle type (e.g., '4hour').
            limit: Number of most recent candles to keep.

        Returns:
            Candles ordered oldest-first (KuCoin returns newest-first).

        Raises:
            ProviderError: If KuCoin fails or returns no usable candles.
        """
        logger.info(
            "Fetching candles from KuCoin",
            extra={"symbol": symbol, "interval": interval, "limit": limit},
        )
        data = self._get("/market/candles", {"type": interval, "symbol": symbol}, symbol)

        candles = normalize("kucoin", data)
        if not candles:
            raise ProviderError(self.name, symbol, "No data returned")
        return candles[-limit:]

    def get_order_book(self, symbol: str) -> OrderBook:
        """Fetch the top 100 depth levels from KuCoin.

        Raises:
            ProviderError: If KuCoin fails or the payload is malformed.
        """
        data = self._get("/market/orderbook/level2_100", {"symbol": symbol}, symbol)
        try:
            book = data["data"]
            return OrderBook(
                bids=[(float(p), float(q)) for p, q in book["bids"]],
                asks=[(float(p), float(q)) for p, q in book["asks"]],
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

        if isinstance(data, dict) and str(data.get("code", SUCCESS_CODE)) != SUCCESS_CODE:
            raise ProviderError(self.name, symbol, f"code {data['code']}: {data.get('msg', '')}")
        return data
