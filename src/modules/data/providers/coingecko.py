"""CoinGecko Market Data Provider.

Aggregator data: top coins by market cap and price/volume market charts.
The market chart endpoint is price-only, so candles are flat
(open = high = low = close) and RVI on this feed reads neutral.
"""

from typing import Any

import httpx

from src.modules.data.normalizer import normalize
from src.modules.data.protocols import ProviderError
from src.modules.data.types import Candle
from src.shared.logger import get_logger

logger = get_logger(__name__)


class CoinGeckoProvider:
    """CoinGecko market data provider.

    Works without a key on the public tier; a demo key raises the
    rate limit and is sent as the x-cg-demo-api-key header.
    """

    def __init__(self, api_key: str = "", timeout: float = 10.0) -> None:
        """Initialize CoinGeckoProvider.

        Args:
            api_key: Optional CoinGecko demo API key.
            timeout: Request timeout in seconds.
        """
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = "https://api.coingecko.com/api/v3"

    @property
    def name(self) -> str:
        """Provider name."""
        return "CoinGecko"

    def list_symbols(self, quote_suffix: str = "") -> list[str]:
        """List the top 100 coin ids by market cap.

        Args:
            quote_suffix: Ignored; CoinGecko lists coins, not pairs.

        Raises:
            ProviderError: If the request fails or the payload is malformed.
        """
        params = {
            "vs_currency": "usd",
            "order": "market_cap_desc",
            "per_page": 100,
            "page": 1,
        }
        data = self._get("/coins/markets", params, "coins/markets")
        if not isinstance(data, list):
            raise ProviderError(self.name, "coins/markets", f"Unexpected payload: {data}")
        try:
            return [coin["id"] for coin in data]
        except (KeyError, TypeError) as e:
            raise ProviderError(self.name, "coins/markets", f"Malformed listing: {e}") from e

    def get_candles(self, symbol: str, interval: str, limit: int = 100) -> list[Candle]:
        """Fetch a market chart from CoinGecko.

        Args:
            symbol: CoinGecko coin id (e.g., 'bitcoin').
            interval: Days of history to request (e.g., '20').
            limit: Number of most recent samples to keep.

        Returns:
            Flat candles ordered oldest-first.

        Raises:
            ProviderError: If CoinGecko fails or returns no usable data.
        """
        logger.info(
            "Fetching market chart from CoinGecko",
            extra={"symbol": symbol, "days": interval, "limit": limit},
        )
        params = {"vs_currency": "usd", "days": interval}
        data = self._get(f"/coins/{symbol}/market_chart", params, symbol)

        candles = normalize("coingecko", data)
        if not candles:
            raise ProviderError(self.name, symbol, "No data returned")
        return candles[-limit:]

    def _get(self, path: str, params: dict[str, Any], symbol: str) -> Any:
        headers = {"x-cg-demo-api-key": self._api_key} if self._api_key else {}
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(f"{self._base_url}{path}", params=params, headers=headers)
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
