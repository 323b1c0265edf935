from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from src.modules.data.orderbook import OrderBookMetrics


@dataclass(frozen=True)
class InstrumentRecord:
    """One scanned symbol. Replaced wholesale on every scan."""
    symbol: str
    raw_symbol: str
    price: float
    volume: Optional[float]
    indicators: Mapping[str, Optional[float]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "indicators", MappingProxyType(dict(self.indicators)))


@dataclass(frozen=True)
class ScanProgress:
    """Symbols processed so far out of the catalog size."""
    completed: int = 0
    total: int = 0


@dataclass(frozen=True)
class ScanUpdate:
    """Snapshot emitted after every landed batch."""
    generation: int
    progress: ScanProgress
    results: tuple[InstrumentRecord, ...]
    in_progress: bool


@dataclass
class ScanSession:
    """State of one scan: owned by the orchestrator, observed via updates."""
    generation: int
    provider_id: str
    timeframe: str
    results: list[InstrumentRecord] = field(default_factory=list)
    progress: ScanProgress = field(default_factory=ScanProgress)
    in_progress: bool = False
    superseded: bool = False

    def snapshot(self) -> ScanUpdate:
        """Freeze the current state into an update."""
        return ScanUpdate(
            generation=self.generation,
            progress=self.progress,
            results=tuple(self.results),
            in_progress=self.in_progress,
        )


@dataclass(frozen=True)
class TimeframeAnalysis:
    """Indicator row for one timeframe of the pair detail view."""
    timeframe: str
    rsi: Optional[float] = None
    stoch_rsi: Optional[float] = None
    mfi: Optional[float] = None
    average: Optional[float] = None
    volume: Optional[float] = None


@dataclass(frozen=True)
class PairDetail:
    """Multi-timeframe analysis plus order book pressure for one symbol."""
    provider_id: str
    symbol: str
    timeframes: list[TimeframeAnalysis]
    order_book: Optional[OrderBookMetrics] = None
