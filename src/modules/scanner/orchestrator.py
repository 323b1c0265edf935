"""Scan Orchestrator - batched, rate-limited market scans.

Drives one scan over a provider catalog: symbols are fetched in batches
with bounded concurrency, each symbol becomes an InstrumentRecord (or is
dropped), and a snapshot is emitted after every batch.

State machine per scan: Idle -> Running -> Idle. Every scan request gets
a new generation id; a scan whose generation is no longer the latest
drops the batch in flight and stops, so only the most recently
requested scan's results are ever published.
"""

import threading
import time
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor

from src.modules.data.catalog import SymbolCatalog
from src.modules.data.manager import MarketDataManager
from src.modules.data.types import Candle
from src.modules.features.engine import FeatureEngine
from src.modules.scanner.types import InstrumentRecord, ScanProgress, ScanSession, ScanUpdate
from src.shared.config import Config
from src.shared.logger import get_logger
from src.shared.providers import (
    DEFAULT_TIMEFRAME,
    PROVIDERS,
    RSI_TIMEFRAMES,
    ProviderDescriptor,
)

logger = get_logger(__name__)

# Minimum base-timeframe candles for a symbol to be kept
MIN_BASE_CANDLES = 14

# Flaky providers get exactly one retry
MAX_RETRIES = 1


class ScanOrchestrator:
    """Runs batched scans and publishes their progress.

    Usage:
        orchestrator = ScanOrchestrator(config, manager, catalog)
        for update in orchestrator.scan("binance", "4h"):
            render(update)
    """

    def __init__(
        self,
        config: Config,
        manager: MarketDataManager,
        catalog: SymbolCatalog,
        engine: FeatureEngine | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize ScanOrchestrator.

        Args:
            config: Application configuration (retry_backoff).
            manager: Candle source for every provider.
            catalog: Symbol catalog resolver.
            engine: Indicator engine. Defaults to a new FeatureEngine.
            sleep: Sleep function (injectable for tests).
        """
        self._config = config
        self._manager = manager
        self._catalog = catalog
        self._engine = engine or FeatureEngine()
        self._sleep = sleep
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Generation id of the most recently requested scan."""
        with self._lock:
            return self._generation

    def is_current(self, generation: int) -> bool:
        """Whether `generation` is still the most recently requested scan."""
        with self._lock:
            return generation == self._generation

    def _start_session(self, provider_id: str, timeframe: str) -> ScanSession:
        with self._lock:
            self._generation += 1
            generation = self._generation
        return ScanSession(
            generation=generation,
            provider_id=provider_id,
            timeframe=timeframe,
            in_progress=True,
        )

    def scan(self, provider_id: str, timeframe: str = DEFAULT_TIMEFRAME) -> Iterator[ScanUpdate]:
        """Start a scan and return its stream of updates.

        The generation id is allocated immediately, so requesting a scan
        supersedes any scan still running.

        Args:
            provider_id: Scanner provider id (e.g., 'binance').
            timeframe: Base timeframe for price, volume and the oscillators.

        Returns:
            Iterator of ScanUpdate snapshots; the last one has
            in_progress=False unless the scan was superseded.
        """
        session = self._start_session(provider_id, timeframe)
        return self._run(session)

    def run_scan(
        self,
        provider_id: str,
        timeframe: str = DEFAULT_TIMEFRAME,
        on_update: Callable[[ScanUpdate], None] | None = None,
    ) -> ScanSession:
        """Run a scan to completion, forwarding each update to `on_update`.

        Args:
            provider_id: Scanner provider id.
            timeframe: Base timeframe.
            on_update: Optional progress callback.

        Returns:
            The finished (or superseded) ScanSession.
        """
        session = self._start_session(provider_id, timeframe)
        for update in self._run(session):
            if on_update is not None:
                on_update(update)
        return session

    def _run(self, session: ScanSession) -> Iterator[ScanUpdate]:
        descriptor = PROVIDERS.get(session.provider_id)
        symbols = self._catalog.resolve(session.provider_id) if descriptor else []
        total = len(symbols)
        session.progress = ScanProgress(completed=0, total=total)

        logger.info(
            "Scan started",
            extra={
                "generation": session.generation,
                "provider": session.provider_id,
                "timeframe": session.timeframe,
                "symbols": total,
            },
        )

        if descriptor is None or total == 0:
            session.in_progress = False
            yield session.snapshot()
            return

        yield session.snapshot()

        batch_size = descriptor.batch_size
        with ThreadPoolExecutor(max_workers=batch_size) as pool:
            for start in range(0, total, batch_size):
                if not self.is_current(session.generation):
                    self._supersede(session)
                    return

                batch = symbols[start : start + batch_size]
                records = list(
                    pool.map(
                        lambda symbol: self._safe_fetch(descriptor, symbol, session.timeframe),
                        batch,
                    )
                )

                # A newer scan started while this batch was in flight
                if not self.is_current(session.generation):
                    self._supersede(session)
                    return

                session.results.extend(r for r in records if r is not None)
                completed = min(start + batch_size, total)
                session.progress = ScanProgress(completed=completed, total=total)
                if completed == total:
                    session.in_progress = False
                yield session.snapshot()

                if completed < total and descriptor.inter_batch_delay > 0:
                    self._sleep(descriptor.inter_batch_delay)

        logger.info(
            "Scan finished",
            extra={
                "generation": session.generation,
                "provider": session.provider_id,
                "records": len(session.results),
                "symbols": total,
            },
        )

    def _supersede(self, session: ScanSession) -> None:
        session.in_progress = False
        session.superseded = True
        logger.info(
            "Scan superseded, dropping remaining batches",
            extra={"generation": session.generation, "provider": session.provider_id},
        )

    def _safe_fetch(
        self, descriptor: ProviderDescriptor, symbol: str, timeframe: str
    ) -> InstrumentRecord | None:
        try:
            return self.fetch_record(descriptor, symbol, timeframe)
        except Exception:
            logger.exception(
                "Unexpected error scanning symbol",
                extra={"provider": descriptor.id, "symbol": symbol},
            )
            return None

    def fetch_record(
        self, descriptor: ProviderDescriptor, symbol: str, timeframe: str
    ) -> InstrumentRecord | None:
        """Fetch candles for one symbol and build its InstrumentRecord.

        The base timeframe supplies price, mean volume, RSI, Stochastic
        RSI, MFI and RVI. RSI is also computed for every RSI timeframe;
        those fetches run one after another so a batch never has more
        requests in flight than symbols.

        Args:
            descriptor: Provider being scanned.
            symbol: Catalog symbol.
            timeframe: Base timeframe.

        Returns:
            The record, or None if the base candles are missing or too
            short (after one retry for flaky providers).
        """
        candles = self._fetch_base(descriptor, symbol, timeframe)
        if candles is None:
            return None

        indicators = self._engine.compute(candles)
        for tf in RSI_TIMEFRAMES:
            tf_candles = candles if tf == timeframe else self._manager.fetch_candles(
                descriptor.id, symbol, tf
            )
            indicators[f"rsi_{tf}"] = self._engine.compute_rsi(tf_candles)

        return InstrumentRecord(
            symbol=descriptor.display_symbol(symbol),
            raw_symbol=symbol,
            price=candles[-1].close,
            volume=self._engine.mean_volume(candles),
            indicators=indicators,
        )

    def _fetch_base(
        self, descriptor: ProviderDescriptor, symbol: str, timeframe: str
    ) -> list[Candle] | None:
        retries = 0
        while True:
            candles = self._manager.fetch_candles(descriptor.id, symbol, timeframe)
            if candles and len(candles) >= MIN_BASE_CANDLES:
                return candles
            if not descriptor.flaky or retries >= MAX_RETRIES:
                logger.info(
                    "Insufficient candles, skipping symbol",
                    extra={
                        "provider": descriptor.id,
                        "symbol": symbol,
                        "candles": len(candles) if candles else 0,
                    },
                )
                return None
            retries += 1
            self._sleep(self._config.retry_backoff)
