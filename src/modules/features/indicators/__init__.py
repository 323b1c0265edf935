"""Technical indicators for the scanner.

All indicators are pure functions: numeric sequences in, latest value out.
None means the input was too short. No state, no side effects.
"""

from src.modules.features.indicators.momentum import (
    relative_vigor_index,
    rsi,
    stochastic_rsi,
)
from src.modules.features.indicators.volume import money_flow_index

__all__ = [
    "rsi",
    "stochastic_rsi",
    "relative_vigor_index",
    "money_flow_index",
]
