"""Feature Engine: orchestrates indicator computation.

Computes the IndicatorSet for a normalized candle list.
Volume-aware: MFI is reported as unavailable for venues without volume.
"""

from src.modules.features.engine import FeatureEngine

__all__ = ["FeatureEngine"]
