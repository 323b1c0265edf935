"""CoinMarketCap Listing Provider.

Catalog only: the free tier has no historical OHLCV, so candles for
CoinMarketCap listings are served by the descriptor's candle source.
"""

import httpx

from src.modules.data.protocols import ProviderError
from src.shared.logger import get_logger

logger = get_logger(__name__)


class CoinMarketCapProvider:
    """CoinMarketCap listings provider (requires an API key)."""

    def __init__(self, api_key: str, timeout: float = 10.0) -> None:
        """Initialize CoinMarketCapProvider.

        Args:
            api_key: CoinMarketCap Pro API key.
            timeout: Request timeout in seconds.
        """
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = "https://pro-api.coinmarketcap.com/v1"

    @property
    def name(self) -> str:
        """Provider name."""
        return "CoinMarketCap"

    def list_symbols(self, quote_suffix: str = "", limit: int = 100) -> list[str]:
        """List the top coin tickers by market cap (e.g., 'BTC').

        Args:
            quote_suffix: Ignored; CoinMarketCap lists coins, not pairs.
            limit: Number of listings to request.

        Raises:
            ProviderError: If no API key is configured, the request fails,
                or the payload is malformed.
        """
        if not self._api_key:
            raise ProviderError(self.name, "listings", "COINMARKETCAP_API_KEY is not set")

        logger.info("Fetching listings from CoinMarketCap", extra={"limit": limit})
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(
                    f"{self._base_url}/cryptocurrency/listings/latest",
                    params={"limit": limit},
                    headers={"X-CMC_PRO_API_KEY": self._api_key},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                self.name,
                "listings",
                f"HTTP {e.response.status_code}: {e.response.text}",
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(self.name, "listings", str(e)) from e
        except ValueError as e:
            raise ProviderError(self.name, "listings", f"Invalid JSON: {e}") from e

        try:
            return [coin["symbol"] for coin in data["data"]]
        except (KeyError, TypeError) as e:
            raise ProviderError(self.name, "listings", f"Malformed listing: {e}") from e
