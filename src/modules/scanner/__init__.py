"""Market scanner: batched scans, sorting, and pair detail."""

from src.modules.scanner.detail import PairAnalyzer
from src.modules.scanner.factory import Scanner, build_scanner
from src.modules.scanner.orchestrator import ScanOrchestrator
from src.modules.scanner.sorting import filter_by_range, filter_records, sort_records

__all__ = [
    "PairAnalyzer",
    "ScanOrchestrator",
    "Scanner",
    "build_scanner",
    "filter_by_range",
    "filter_records",
    "sort_records",
]
