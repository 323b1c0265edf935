"""Tests for scanner wiring."""

from unittest.mock import MagicMock, patch

from src.modules.scanner import PairAnalyzer, ScanOrchestrator, build_scanner
from src.shared.config import Config


class TestBuildScanner:
    """Tests for build_scanner."""

    @patch("src.modules.data.manager.build_providers")
    def test_uses_given_config(self, mock_build: MagicMock, config: Config) -> None:
        mock_build.return_value = {}

        scanner = build_scanner(config)

        assert scanner.config is config
        assert isinstance(scanner.orchestrator, ScanOrchestrator)
        assert isinstance(scanner.analyzer, PairAnalyzer)
        mock_build.assert_called_once_with(config)

    @patch.dict("os.environ", {"CATALOG_CAP": "7"}, clear=True)
    @patch("src.modules.data.manager.build_providers")
    def test_loads_config_from_environment(self, mock_build: MagicMock) -> None:
        mock_build.return_value = {}

        scanner = build_scanner()

        assert scanner.config.catalog_cap == 7

    @patch("src.modules.data.manager.build_providers")
    def test_end_to_end_static_scan(
        self, mock_build: MagicMock, config: Config, candle_factory
    ) -> None:
        """A curated catalog scans through the shared Binance client."""
        binance = MagicMock()
        binance.get_candles.return_value = candle_factory([100.0 + i for i in range(30)])
        mock_build.return_value = {"binance": binance}

        scanner = build_scanner(config)
        session = scanner.orchestrator.run_scan("l1s", "4h")

        assert session.progress.completed == session.progress.total == 7
        assert [r.symbol for r in session.results][:2] == ["BTC/USDT", "ETH/USDT"]
        assert session.results[0].indicators["rsi"] == 100.0
        binance.get_candles.assert_any_call("BTCUSDT", "4h", limit=50)
