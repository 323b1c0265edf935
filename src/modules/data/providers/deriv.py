"""Deriv Market Data Provider.

Candles for synthetic indices, forex, stocks, stock indices, commodities
and ETFs via the Deriv websocket API (`ticks_history` with style=candles).
Deriv publishes no volume and no order book for these instruments.
"""

import json
from typing import Any

from websocket import WebSocketException, WebSocketTimeoutException, create_connection

from src.modules.data.normalizer import normalize
from src.modules.data.protocols import ProviderError
from src.modules.data.types import Candle
from src.shared.logger import get_logger

logger = get_logger(__name__)


class DerivProvider:
    """Deriv websocket candle provider.

    Opens one short-lived connection per request. The connection timeout
    bounds the whole exchange, so a silent server resolves to a
    ProviderError instead of blocking the scan.
    """

    def __init__(self, app_id: str = "1089", timeout: float = 10.0) -> None:
        """Initialize DerivProvider.

        Args:
            app_id: Deriv application id.
            timeout: Socket timeout in seconds.
        """
        self._timeout = timeout
        self._url = f"wss://ws.derivws.com/websockets/v3?app_id={app_id}"

    @property
    def name(self) -> str:
        """Provider name."""
        return "Deriv"

    def get_candles(self, symbol: str, interval: str, limit: int = 100) -> list[Candle]:
        """Fetch candles from Deriv.

        Args:
            symbol: Deriv symbol (e.g., 'R_100', 'frxEURUSD').
            interval: Granularity in seconds (e.g., '14400').
            limit: Number of candles to request.

        Returns:
            Candles ordered oldest-first, flagged as having no volume.

        Raises:
            ProviderError: On API error, timeout, or unusable payload.
        """
        logger.info(
            "Fetching candles from Deriv",
            extra={"symbol": symbol, "granularity": interval, "limit": limit},
        )
        request = {
            "ticks_history": symbol,
            "adjust_start_time": 1,
            "count": limit,
            "end": "latest",
            "granularity": int(interval),
            "style": "candles",
        }

        data = self._request(request, symbol)

        candles = normalize("deriv", data)
        if not candles:
            raise ProviderError(self.name, symbol, "No data returned")
        return candles

    def _request(self, request: dict[str, Any], symbol: str) -> dict[str, Any]:
        """Send one request and wait for its candles or error reply."""
        ws = None
        try:
            ws = create_connection(self._url, timeout=self._timeout)
            ws.send(json.dumps(request))
            while True:
                message = json.loads(ws.recv())
                if "error" in message:
                    error = message["error"]
                    raise ProviderError(self.name, symbol, f"{error.get('code')}: {error.get('message')}")
                if "candles" in message:
                    return message
        except WebSocketTimeoutException as e:
            raise ProviderError(self.name, symbol, f"Timed out after {self._timeout}s") from e
        except (WebSocketException, OSError) as e:
            raise ProviderError(self.name, symbol, str(e)) from e
        except ValueError as e:
            raise ProviderError(self.name, symbol, f"Invalid JSON: {e}") from e
        finally:
            if ws is not None:
                ws.close()
