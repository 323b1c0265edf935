"""Sort and filter utilities for scan results.

Pure functions over InstrumentRecord lists. Missing indicator values sort
to the bottom in both directions: ascending sorts treat them as the
field's maximum, descending sorts as its minimum.
"""

import math
from typing import Mapping

from src.modules.scanner.types import InstrumentRecord
from src.shared.providers import RSI_TIMEFRAMES

# Oscillator fields live on [0, 100]
OSCILLATOR_FIELDS = {"rsi", "stoch_rsi", "mfi", "rvi", "avg"} | {
    f"rsi_{tf}" for tf in RSI_TIMEFRAMES
}
UNBOUNDED_FIELDS = {"price", "volume"}
SORT_FIELDS = OSCILLATOR_FIELDS | UNBOUNDED_FIELDS | {"symbol"}

# Neutral value substituted for a missing oscillator in the average score
NEUTRAL = 50.0


def average_score(indicators: Mapping[str, float | None]) -> float:
    """Mean of RSI, Stochastic RSI and MFI, counting missing values as 50."""
    values = [indicators.get(key) for key in ("rsi", "stoch_rsi", "mfi")]
    return sum(NEUTRAL if v is None else v for v in values) / 3


def field_value(record: InstrumentRecord, field: str) -> float | None:
    """Read a numeric field from a record.

    Args:
        record: Scanned instrument.
        field: 'price', 'volume', 'avg', or an indicator key.

    Returns:
        The value, or None when it is missing.
    """
    if field == "price":
        return record.price
    if field == "volume":
        return record.volume
    if field == "avg":
        return average_score(record.indicators)
    return record.indicators.get(field)


def parse_sort_key(sort_key: str) -> tuple[str, bool]:
    """Split '<field>_<asc|desc>' into (field, descending).

    Raises:
        ValueError: If the key has no direction or names an unknown field.
    """
    field, _, direction = sort_key.rpartition("_")
    if direction not in ("asc", "desc") or field not in SORT_FIELDS:
        raise ValueError(f"Unknown sort key: {sort_key}")
    return field, direction == "desc"


def _missing_value(field: str, descending: bool) -> float:
    if field in OSCILLATOR_FIELDS:
        return 0.0 if descending else 100.0
    return -math.inf if descending else math.inf


def sort_records(records: list[InstrumentRecord], sort_key: str) -> list[InstrumentRecord]:
    """Stable sort of records by a sort key such as 'rsi_1h_asc'.

    Args:
        records: Records to sort. Not modified.
        sort_key: '<field>_<asc|desc>'; fields are price, volume, symbol,
            avg, rsi, stoch_rsi, mfi, rvi, and rsi_<timeframe>.

    Returns:
        New sorted list. Ties keep their input order.

    Raises:
        ValueError: If the sort key is unknown.
    """
    field, descending = parse_sort_key(sort_key)

    if field == "symbol":
        return sorted(records, key=lambda r: r.symbol.lower(), reverse=descending)

    missing = _missing_value(field, descending)

    def key(record: InstrumentRecord) -> float:
        value = field_value(record, field)
        return missing if value is None else value

    # sorted(reverse=True) keeps ties in input order, so both directions are stable
    return sorted(records, key=key, reverse=descending)


def filter_records(records: list[InstrumentRecord], query: str) -> list[InstrumentRecord]:
    """Case-insensitive substring match on the display symbol.

    A blank query returns the records unchanged.
    """
    needle = query.strip().lower()
    if not needle:
        return list(records)
    return [r for r in records if needle in r.symbol.lower()]


def filter_by_range(
    records: list[InstrumentRecord],
    field: str,
    lower: float | None = None,
    upper: float | None = None,
    require_value: bool = False,
) -> list[InstrumentRecord]:
    """Keep records whose `field` lies within [lower, upper].

    Args:
        records: Records to filter.
        field: Numeric field (see field_value).
        lower: Inclusive lower bound, or None for unbounded.
        upper: Inclusive upper bound, or None for unbounded.
        require_value: Drop records missing the field. When False they
            pass through.

    Returns:
        Filtered list in input order.
    """
    result = []
    for record in records:
        value = field_value(record, field)
        if value is None:
            if not require_value:
                result.append(record)
            continue
        if lower is not None and value < lower:
            continue
        if upper is not None and value > upper:
            continue
        result.append(record)
    return result
