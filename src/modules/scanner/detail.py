"""Pair detail analysis.

Multi-timeframe RSI / Stochastic RSI / MFI table and order book pressure
for a single symbol, as shown when a scan row is opened.
"""

from src.modules.data.manager import MarketDataManager
from src.modules.data.orderbook import orderbook_metrics
from src.modules.features.engine import FeatureEngine
from src.modules.scanner.sorting import average_score
from src.modules.scanner.types import PairDetail, TimeframeAnalysis
from src.shared.logger import get_logger
from src.shared.providers import DETAIL_TIMEFRAMES

logger = get_logger(__name__)

# The detail view needs a longer window than the scan
MIN_DETAIL_CANDLES = 50


class PairAnalyzer:
    """Builds the PairDetail view for one symbol."""

    def __init__(self, manager: MarketDataManager, engine: FeatureEngine | None = None) -> None:
        self._manager = manager
        self._engine = engine or FeatureEngine()

    def analyze(self, provider_id: str, symbol: str) -> PairDetail:
        """Analyze every detail timeframe and the order book.

        Timeframes are fetched one at a time. A timeframe the venue cannot
        serve, or one with fewer than 50 candles, yields an empty row.

        Args:
            provider_id: Scanner provider id.
            symbol: Catalog symbol.

        Returns:
            PairDetail; order_book is None where the venue has no depth.
        """
        rows = [self._analyze_timeframe(provider_id, symbol, tf) for tf in DETAIL_TIMEFRAMES]

        book = self._manager.fetch_order_book(provider_id, symbol)
        metrics = orderbook_metrics(book) if book is not None else None

        logger.info(
            "Pair analyzed",
            extra={
                "provider": provider_id,
                "symbol": symbol,
                "timeframes": sum(1 for r in rows if r.rsi is not None),
                "order_book": metrics is not None,
            },
        )
        return PairDetail(provider_id=provider_id, symbol=symbol, timeframes=rows, order_book=metrics)

    def _analyze_timeframe(self, provider_id: str, symbol: str, timeframe: str) -> TimeframeAnalysis:
        candles = self._manager.fetch_candles(provider_id, symbol, timeframe)
        if not candles or len(candles) < MIN_DETAIL_CANDLES:
            return TimeframeAnalysis(timeframe=timeframe)

        indicators = self._engine.compute(candles)
        return TimeframeAnalysis(
            timeframe=timeframe,
            rsi=indicators["rsi"],
            stoch_rsi=indicators["stoch_rsi"],
            mfi=indicators["mfi"],
            average=average_score(indicators),
            volume=self._engine.mean_volume(candles),
        )
