"""Tests for individual technical indicators.

Each indicator function is tested for:
- Correct output on known data
- Edge cases (too short, flat, all-gains, all-losses)
- Validation errors (bad parameters)
"""

import pandas as pd
import pytest

from src.modules.features.indicators.momentum import (
    relative_vigor_index,
    rsi,
    stochastic_rsi,
)
from src.modules.features.indicators.volume import money_flow_index

# ========================================================================
# RSI Tests
# ========================================================================


class TestRSI:
    """Tests for Relative Strength Index."""

    def test_rsi_output_range(self, wavy_closes: list[float]) -> None:
        """RSI should be between 0 and 100."""
        for end in range(15, len(wavy_closes) + 1):
            value = rsi(wavy_closes[:end])
            assert value is not None
            assert 0.0 <= value <= 100.0

    def test_rsi_textbook_example(self, textbook_closes: list[float]) -> None:
        """The 15-close worked example seeds to 3.34 gains vs 1.40 losses."""
        assert rsi(textbook_closes, period=14) == pytest.approx(70.464, abs=0.01)

    def test_rsi_wilder_smoothing(self) -> None:
        """After the SMA seed, averages follow (avg * (p - 1) + new) / p."""
        # gains [1, 0, 1], losses [0, 1, 0]; seed 0.5 / 0.5 -> 0.75 / 0.25
        assert rsi([1.0, 2.0, 1.0, 2.0], period=2) == pytest.approx(75.0)

    def test_rsi_insufficient_data(self, textbook_closes: list[float]) -> None:
        """Fewer than period + 1 closes should return None."""
        assert rsi(textbook_closes[:14], period=14) is None
        assert rsi([], period=14) is None
        assert rsi(textbook_closes[:15], period=14) is not None

    def test_rsi_all_gains(self, all_gains_close: list[float]) -> None:
        """RSI should be 100 when losses are zero throughout."""
        assert rsi(all_gains_close) == 100.0

    def test_rsi_all_losses(self, all_losses_close: list[float]) -> None:
        """RSI should be 0 when every bar is down."""
        assert rsi(all_losses_close) == 0.0

    def test_rsi_single_loss_breaks_saturation(self, all_gains_close: list[float]) -> None:
        """One down bar inside the window keeps RSI below 100."""
        closes = all_gains_close[:20] + [all_gains_close[19] - 0.5] + all_gains_close[20:]
        value = rsi(closes)
        assert value is not None
        assert 90.0 < value < 100.0

    def test_rsi_accepts_series_with_offset_index(self, textbook_closes: list[float]) -> None:
        """A pandas Series with a non-zero index gives the same result."""
        series = pd.Series(textbook_closes, index=range(100, 115))
        assert rsi(series) == pytest.approx(rsi(textbook_closes))

    def test_rsi_bad_period(self, wavy_closes: list[float]) -> None:
        """Should raise ValueError for period < 1."""
        with pytest.raises(ValueError, match="Period"):
            rsi(wavy_closes, period=0)


# ========================================================================
# Stochastic RSI Tests
# ========================================================================


class TestStochasticRSI:
    """Tests for Stochastic RSI."""

    def test_stoch_rsi_output_range(self, wavy_closes: list[float]) -> None:
        """Stochastic RSI should be between 0 and 100."""
        value = stochastic_rsi(wavy_closes)
        assert value is not None
        assert 0.0 <= value <= 100.0

    def test_stoch_rsi_insufficient_data(self, wavy_closes: list[float]) -> None:
        """Needs rsi_period + stoch_period + 1 closes."""
        assert stochastic_rsi(wavy_closes[:28], 14, 14) is None
        assert stochastic_rsi(wavy_closes[:29], 14, 14) is not None

    def test_stoch_rsi_flat_window_is_neutral(self, all_gains_close: list[float]) -> None:
        """A constant RSI window (all 100) returns 50."""
        assert stochastic_rsi(all_gains_close, 14, 14) == 50.0

    def test_stoch_rsi_at_window_high(self) -> None:
        """Current RSI at the top of the window returns 100."""
        # RSI(2) series: 50, 75, 87.5
        assert stochastic_rsi([1.0, 2.0, 1.0, 2.0, 3.0], 2, 2) == pytest.approx(100.0)

    def test_stoch_rsi_at_window_low(self) -> None:
        """Current RSI at the bottom of the window returns 0."""
        # RSI(2) series: 50, 75, 37.5
        assert stochastic_rsi([1.0, 2.0, 1.0, 2.0, 1.0], 2, 2) == pytest.approx(0.0)

    def test_stoch_rsi_bad_periods(self, wavy_closes: list[float]) -> None:
        """Should raise ValueError for either period < 1."""
        with pytest.raises(ValueError, match="RSI period"):
            stochastic_rsi(wavy_closes, rsi_period=0)
        with pytest.raises(ValueError, match="Stochastic period"):
            stochastic_rsi(wavy_closes, stoch_period=0)


# ========================================================================
# MFI Tests
# ========================================================================


class TestMoneyFlowIndex:
    """Tests for Money Flow Index."""

    def test_mfi_known_value(self) -> None:
        """Rising bar counts positive, falling bar negative."""
        closes = [10.0, 11.0, 10.5]
        volumes = [1.0, 2.0, 4.0]
        # positive 11 * 2 = 22, negative 10.5 * 4 = 42 -> 100 * 22 / 64
        result = money_flow_index(closes, closes, closes, volumes, period=2)
        assert result == pytest.approx(34.375)

    def test_mfi_window_uses_last_period_bars_only(self) -> None:
        """Bars before the window never contribute flow."""
        closes = [20.0, 10.0, 11.0, 10.5]
        volumes = [100.0, 1.0, 2.0, 4.0]
        result = money_flow_index(closes, closes, closes, volumes, period=2)
        assert result == pytest.approx(34.375)

    def test_mfi_no_negative_flow(self, all_gains_close: list[float]) -> None:
        """MFI should be 100 when there is no negative flow."""
        volumes = [1_000.0] * len(all_gains_close)
        result = money_flow_index(
            all_gains_close, all_gains_close, all_gains_close, volumes
        )
        assert result == 100.0

    def test_mfi_no_positive_flow(self, all_losses_close: list[float]) -> None:
        """MFI should be 0 when every bar has falling typical price."""
        volumes = [1_000.0] * len(all_losses_close)
        result = money_flow_index(
            all_losses_close, all_losses_close, all_losses_close, volumes
        )
        assert result == pytest.approx(0.0)

    def test_mfi_output_range(self, wavy_closes: list[float]) -> None:
        """MFI should be between 0 and 100."""
        highs = [c + 0.5 for c in wavy_closes]
        lows = [c - 0.5 for c in wavy_closes]
        volumes = [1_000.0 + i * 10 for i in range(len(wavy_closes))]
        result = money_flow_index(highs, lows, wavy_closes, volumes)
        assert result is not None
        assert 0.0 <= result <= 100.0

    def test_mfi_insufficient_data(self, wavy_closes: list[float]) -> None:
        """Fewer than period + 1 bars should return None."""
        short = wavy_closes[:14]
        assert money_flow_index(short, short, short, [1.0] * 14) is None

    def test_mfi_bad_period(self, wavy_closes: list[float]) -> None:
        """Should raise ValueError for period < 1."""
        with pytest.raises(ValueError, match="Period"):
            money_flow_index(wavy_closes, wavy_closes, wavy_closes, wavy_closes, period=0)


# ========================================================================
# RVI Tests
# ========================================================================


class TestRelativeVigorIndex:
    """Tests for Relative Vigor Index (0-100 scale)."""

    def test_rvi_full_bullish_bars(self) -> None:
        """Closing at the high after opening at the low reads 100."""
        lows = [float(i) for i in range(20)]
        highs = [x + 2.0 for x in lows]
        assert relative_vigor_index(lows, highs, lows, highs) == pytest.approx(100.0)

    def test_rvi_full_bearish_bars(self) -> None:
        """Closing at the low after opening at the high reads 0."""
        lows = [float(i) for i in range(20)]
        highs = [x + 2.0 for x in lows]
        assert relative_vigor_index(highs, highs, lows, lows) == pytest.approx(0.0)

    def test_rvi_partial_vigor(self) -> None:
        """close - open = 0.2 over a 1.0 range gives 50 + 50 * 0.2."""
        closes = [100.0 + i for i in range(20)]
        opens = [c - 0.2 for c in closes]
        highs = [c + 0.5 for c in closes]
        lows = [c - 0.5 for c in closes]
        assert relative_vigor_index(opens, highs, lows, closes) == pytest.approx(60.0)

    def test_rvi_doji_bars_are_neutral(self) -> None:
        """Zero ranges give a zero denominator and read 50."""
        flat = [100.0] * 20
        assert relative_vigor_index(flat, flat, flat, flat) == 50.0

    def test_rvi_insufficient_data(self) -> None:
        """Needs period + 3 bars for the 4-bar weighting."""
        bars = [100.0 + i for i in range(12)]
        assert relative_vigor_index(bars, bars, bars, bars, period=10) is None
        bars = [100.0 + i for i in range(13)]
        assert relative_vigor_index(bars, bars, bars, bars, period=10) is not None

    def test_rvi_length_mismatch(self) -> None:
        """Should raise ValueError when series lengths differ."""
        with pytest.raises(ValueError, match="mismatch"):
            relative_vigor_index([1.0] * 20, [1.0] * 20, [1.0] * 19, [1.0] * 20)

    def test_rvi_bad_period(self) -> None:
        """Should raise ValueError for period < 1."""
        bars = [1.0] * 20
        with pytest.raises(ValueError, match="Period"):
            relative_vigor_index(bars, bars, bars, bars, period=0)
