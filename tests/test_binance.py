"""Tests for Binance market data provider."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from src.modules.data.protocols import ProviderError
from src.modules.data.providers.binance import BinanceProvider


def _mock_client(mock_client_class: MagicMock, payload: object) -> MagicMock:
    """Wire a mocked httpx.Client context manager returning `payload`."""
    mock_response = MagicMock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None

    mock_client = MagicMock()
    mock_client.get.return_value = mock_response
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    mock_client_class.return_value = mock_client
    return mock_client


@pytest.fixture
def provider() -> BinanceProvider:
    """Create a BinanceProvider instance for testing."""
    return BinanceProvider(timeout=5.0)


@pytest.fixture
def sample_klines() -> list[list[object]]:
    """Sample Binance klines response."""
    return [
        [1_700_000_000_000, "37000.0", "37500.0", "36800.0", "37400.0", "120.5", 1_700_014_399_999],
        [1_700_014_400_000, "37400.0", "37900.0", "37300.0", "37850.0", "98.1", 1_700_028_799_999],
    ]


class TestBinanceProvider:
    """Tests for BinanceProvider."""

    def test_name_property(self, provider: BinanceProvider) -> None:
        """Test provider name."""
        assert provider.name == "Binance"

    @patch("src.modules.data.providers.binance.httpx.Client")
    def test_get_candles_success(
        self,
        mock_client_class: MagicMock,
        provider: BinanceProvider,
        sample_klines: list[list[object]],
    ) -> None:
        """Test successful kline fetch."""
        mock_client = _mock_client(mock_client_class, sample_klines)

        candles = provider.get_candles("BTCUSDT", "4h", limit=2)

        assert len(candles) == 2
        assert candles[-1].close == 37850.0
        assert candles[0].volume == 120.5
        mock_client.get.assert_called_once_with(
            "https://api.binance.com/api/v3/klines",
            params={"symbol": "BTCUSDT", "interval": "4h", "limit": 2},
        )
        mock_client_class.assert_called_once_with(timeout=5.0)

    @patch("src.modules.data.providers.binance.httpx.Client")
    def test_get_candles_empty_response(
        self,
        mock_client_class: MagicMock,
        provider: BinanceProvider,
    ) -> None:
        """Test empty response raises ProviderError."""
        _mock_client(mock_client_class, [])

        with pytest.raises(ProviderError) as exc_info:
            provider.get_candles("BTCUSDT", "4h")

        assert "No data returned" in str(exc_info.value)
        assert exc_info.value.symbol == "BTCUSDT"

    @patch("src.modules.data.providers.binance.httpx.Client")
    def test_get_candles_http_error(
        self,
        mock_client_class: MagicMock,
        provider: BinanceProvider,
    ) -> None:
        """Test HTTP error raises ProviderError."""
        mock_client = _mock_client(mock_client_class, None)
        mock_response = mock_client.get.return_value
        mock_response.status_code = 400
        mock_response.text = '{"code":-1121,"msg":"Invalid symbol."}'
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            message="Bad Request",
            request=MagicMock(),
            response=mock_response,
        )

        with pytest.raises(ProviderError) as exc_info:
            provider.get_candles("NOPEUSDT", "4h")

        assert "Binance" in str(exc_info.value)
        assert "HTTP 400" in str(exc_info.value)

    @patch("src.modules.data.providers.binance.httpx.Client")
    def test_get_candles_network_error(
        self,
        mock_client_class: MagicMock,
        provider: BinanceProvider,
    ) -> None:
        """Test transport failure raises ProviderError."""
        mock_client = _mock_client(mock_client_class, None)
        mock_client.get.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(ProviderError, match="connection refused"):
            provider.get_candles("BTCUSDT", "4h")

    @patch("src.modules.data.providers.binance.httpx.Client")
    def test_list_symbols_filters_status_and_quote(
        self,
        mock_client_class: MagicMock,
        provider: BinanceProvider,
    ) -> None:
        """Only TRADING symbols ending in the quote suffix are listed."""
        _mock_client(
            mock_client_class,
            {
                "symbols": [
                    {"symbol": "BTCUSDT", "status": "TRADING"},
                    {"symbol": "ETHBTC", "status": "TRADING"},
                    {"symbol": "LUNAUSDT", "status": "BREAK"},
                    {"symbol": "ETHUSDT", "status": "TRADING"},
                ]
            },
        )

        assert provider.list_symbols("USDT") == ["BTCUSDT", "ETHUSDT"]

    @patch("src.modules.data.providers.binance.httpx.Client")
    def test_list_symbols_malformed(
        self,
        mock_client_class: MagicMock,
        provider: BinanceProvider,
    ) -> None:
        """A listing without symbols raises ProviderError."""
        _mock_client(mock_client_class, {"code": 0})

        with pytest.raises(ProviderError, match="Malformed listing"):
            provider.list_symbols("USDT")

    @patch("src.modules.data.providers.binance.httpx.Client")
    def test_get_order_book(
        self,
        mock_client_class: MagicMock,
        provider: BinanceProvider,
    ) -> None:
        """Depth levels are parsed into float (price, quantity) pairs."""
        _mock_client(
            mock_client_class,
            {
                "lastUpdateId": 1,
                "bids": [["37000.0", "1.5"], ["36990.0", "2.0"]],
                "asks": [["37010.0", "0.5"]],
            },
        )

        book = provider.get_order_book("BTCUSDT")

        assert book.bids == [(37000.0, 1.5), (36990.0, 2.0)]
        assert book.asks == [(37010.0, 0.5)]
