"""Binance public REST API client."""

from .errors import BinanceApiError, BinanceError, BinanceProtocolError
from .http_client import DEFAULT_BASE_URL, BinanceHttpClient

__all__ = [
    "BinanceApiError",
    "BinanceError",
    "BinanceHttpClient",
    "BinanceProtocolError",
    "DEFAULT_BASE_URL",
]
