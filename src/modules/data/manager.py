"""Market Data Manager - provider-keyed candle and depth routing.

Maps a scanner provider id onto the provider that actually serves its
candles, translates timeframes and symbols, and turns every provider
failure into "no data" so callers never handle exceptions.
"""

from typing import Any

from src.modules.data.protocols import ProviderError
from src.modules.data.providers.binance import BinanceProvider
from src.modules.data.providers.bybit import BybitProvider
from src.modules.data.providers.coingecko import CoinGeckoProvider
from src.modules.data.providers.coinmarketcap import CoinMarketCapProvider
from src.modules.data.providers.cryptocom import CryptoComProvider
from src.modules.data.providers.deriv import DerivProvider
from src.modules.data.providers.kucoin import KucoinProvider
from src.modules.data.types import Candle, OrderBook
from src.shared.config import Config
from src.shared.logger import get_logger
from src.shared.providers import DERIV, PROVIDERS, ProviderDescriptor

logger = get_logger(__name__)


def build_providers(config: Config) -> dict[str, Any]:
    """Instantiate one client per provider id from configuration.

    All Deriv venues share a single websocket client.

    Args:
        config: Application configuration.

    Returns:
        Mapping of provider id to provider client.
    """
    deriv = DerivProvider(app_id=config.deriv_app_id, timeout=config.ws_timeout)
    providers: dict[str, Any] = {
        "binance": BinanceProvider(timeout=config.http_timeout),
        "bybit": BybitProvider(timeout=config.http_timeout),
        "kucoin": KucoinProvider(timeout=config.http_timeout),
        "cryptocom": CryptoComProvider(timeout=config.http_timeout),
        "coingecko": CoinGeckoProvider(
            api_key=config.coingecko_api_key, timeout=config.http_timeout
        ),
        "coinmarketcap": CoinMarketCapProvider(
            api_key=config.coinmarketcap_api_key, timeout=config.http_timeout
        ),
    }
    for descriptor in PROVIDERS.values():
        if descriptor.kind == DERIV:
            providers[descriptor.id] = deriv
    return providers


class MarketDataManager:
    """Routes candle and order book requests to provider clients.

    This is the `fetch_candles` collaborator of the scanner. It:
    1. Resolves the descriptor and its candle source
    2. Maps the timeframe to the source's interval name
    3. Calls the provider, converting ProviderError into None
    """

    def __init__(self, config: Config, providers: dict[str, Any] | None = None) -> None:
        """Initialize MarketDataManager.

        Args:
            config: Application configuration.
            providers: Optional provider clients keyed by provider id
                (for testing). Defaults to build_providers(config).
        """
        self._config = config
        self._providers = providers if providers is not None else build_providers(config)

    def provider(self, provider_id: str) -> Any | None:
        """Return the client registered for a provider id, if any."""
        return self._providers.get(provider_id)

    def fetch_candles(self, provider_id: str, symbol: str, timeframe: str) -> list[Candle] | None:
        """Fetch candles for a catalog symbol.

        Args:
            provider_id: Scanner provider id (e.g., 'binance', 'l1s').
            symbol: Symbol as returned by that provider's catalog.
            timeframe: Scanner timeframe (e.g., '4h').

        Returns:
            Candles ordered oldest-first, or None if the timeframe is not
            served, the provider is unknown, or the fetch failed.
        """
        descriptor = PROVIDERS.get(provider_id)
        if descriptor is None:
            logger.warning("Unknown provider", extra={"provider": provider_id})
            return None

        source = PROVIDERS[descriptor.source_id]
        interval = source.intervals.get(timeframe)
        if interval is None:
            logger.debug(
                "Timeframe not served by provider",
                extra={"provider": source.id, "timeframe": timeframe},
            )
            return None

        client = self._providers.get(source.id)
        if client is None:
            logger.warning("No client for provider", extra={"provider": source.id})
            return None

        source_symbol = descriptor.source_symbol(symbol)
        try:
            return client.get_candles(source_symbol, interval, limit=self._config.candle_limit)
        except ProviderError as e:
            logger.warning(
                f"Candle fetch failed: {e}",
                extra={"provider": source.id, "symbol": source_symbol, "timeframe": timeframe},
            )
            return None

    def fetch_order_book(self, provider_id: str, symbol: str) -> OrderBook | None:
        """Fetch a depth snapshot for a catalog symbol.

        Venues without real market depth return None (unavailable);
        nothing is synthesized in its place.

        Args:
            provider_id: Scanner provider id.
            symbol: Symbol as returned by that provider's catalog.

        Returns:
            OrderBook or None.
        """
        descriptor = PROVIDERS.get(provider_id)
        if descriptor is None:
            return None

        source: ProviderDescriptor = PROVIDERS[descriptor.source_id]
        client = self._providers.get(source.id)
        if not source.has_order_book or client is None:
            return None

        source_symbol = descriptor.source_symbol(symbol)
        try:
            return client.get_order_book(source_symbol)
        except ProviderError as e:
            logger.warning(
                f"Order book fetch failed: {e}",
                extra={"provider": source.id, "symbol": source_symbol},
            )
            return None
