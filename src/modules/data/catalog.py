"""Symbol Catalog Resolver.

Enumerates the tradable symbols of a provider, filtered to actively
trading quote pairs and capped to bound scan cost. A failing listing is
never fatal: it resolves to an empty catalog.
"""

from src.modules.data.manager import MarketDataManager
from src.modules.data.protocols import ProviderError
from src.shared.config import Config
from src.shared.logger import get_logger
from src.shared.providers import PROVIDERS

logger = get_logger(__name__)


class SymbolCatalog:
    """Resolves provider catalogs.

    Static and Deriv venues answer from their descriptor's instrument
    table; exchanges and aggregators are asked for their live listing.
    """

    def __init__(self, config: Config, manager: MarketDataManager) -> None:
        """Initialize SymbolCatalog.

        Args:
            config: Application configuration (catalog_cap).
            manager: Market data manager holding the provider clients.
        """
        self._cap = config.catalog_cap
        self._manager = manager

    def resolve(self, provider_id: str) -> list[str]:
        """Return up to `catalog_cap` tradable symbols for a provider.

        Args:
            provider_id: Scanner provider id.

        Returns:
            Catalog symbols, or an empty list for unknown providers and
            failed listings.
        """
        descriptor = PROVIDERS.get(provider_id)
        if descriptor is None:
            logger.warning("Unknown provider", extra={"provider": provider_id})
            return []

        if descriptor.static_symbols:
            return [symbol for symbol, _ in descriptor.static_symbols][: self._cap]

        client = self._manager.provider(provider_id)
        if client is None or not hasattr(client, "list_symbols"):
            logger.warning("Provider has no listing endpoint", extra={"provider": provider_id})
            return []

        try:
            symbols = client.list_symbols(descriptor.quote_suffix)
        except ProviderError as e:
            logger.warning(f"Catalog fetch failed: {e}", extra={"provider": provider_id})
            return []

        logger.info(
            f"Resolved {provider_id} catalog",
            extra={"provider": provider_id, "listed": len(symbols), "cap": self._cap},
        )
        return symbols[: self._cap]
