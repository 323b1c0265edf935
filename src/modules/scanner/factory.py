"""Scanner wiring.

Builds the orchestrator and pair analyzer around one shared market data
manager, so both views hit the same provider clients.
"""

from dataclasses import dataclass

from src.modules.data.catalog import SymbolCatalog
from src.modules.data.manager import MarketDataManager
from src.modules.features.engine import FeatureEngine
from src.modules.scanner.detail import PairAnalyzer
from src.modules.scanner.orchestrator import ScanOrchestrator
from src.shared.config import Config, load_config
from src.shared.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Scanner:
    """Entry points handed to the presentation layer."""

    config: Config
    orchestrator: ScanOrchestrator
    analyzer: PairAnalyzer


def build_scanner(config: Config | None = None) -> Scanner:
    """Wire a Scanner from configuration.

    Args:
        config: Application configuration. Defaults to load_config().

    Returns:
        Scanner sharing one MarketDataManager and FeatureEngine.
    """
    config = config or load_config()
    manager = MarketDataManager(config)
    engine = FeatureEngine()
    catalog = SymbolCatalog(config, manager)

    logger.info(
        "Scanner ready",
        extra={"environment": config.environment, "catalog_cap": config.catalog_cap},
    )
    return Scanner(
        config=config,
        orchestrator=ScanOrchestrator(config, manager, catalog, engine=engine),
        analyzer=PairAnalyzer(manager, engine=engine),
    )
