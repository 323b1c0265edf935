"""Configuration loader for the market scanner.

Loads configuration from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Attributes:
        environment: Current environment (dev/prod).
        log_level: Logging level name for all scanner loggers.
        http_timeout: Timeout in seconds for REST provider requests.
        ws_timeout: Timeout in seconds for websocket provider requests.
        candle_limit: Number of candles requested per fetch.
        catalog_cap: Maximum number of symbols scanned per provider.
        retry_backoff: Seconds to wait before retrying a flaky fetch.
        coingecko_api_key: Optional CoinGecko demo API key.
        coinmarketcap_api_key: CoinMarketCap API key (catalog only).
        deriv_app_id: Deriv websocket application id.
    """

    environment: str
    log_level: str
    http_timeout: float
    ws_timeout: float
    candle_limit: int
    catalog_cap: int
    retry_backoff: float
    coingecko_api_key: str
    coinmarketcap_api_key: str
    deriv_app_id: str


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_config() -> Config:
    """Load configuration from environment variables.

    Returns:
        Config object with all settings.

    Raises:
        ValueError: If a numeric environment variable cannot be parsed.
    """
    return Config(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        http_timeout=_get_float("HTTP_TIMEOUT", 10.0),
        ws_timeout=_get_float("WS_TIMEOUT", 10.0),
        candle_limit=_get_int("CANDLE_LIMIT", 100),
        catalog_cap=_get_int("CATALOG_CAP", 100),
        retry_backoff=_get_float("RETRY_BACKOFF", 0.5),
        coingecko_api_key=os.getenv("COINGECKO_API_KEY", ""),
        coinmarketcap_api_key=os.getenv("COINMARKETCAP_API_KEY", ""),
        deriv_app_id=os.getenv("DERIV_APP_ID", "1089"),
    )
