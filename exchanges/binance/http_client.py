from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

from .errors import BinanceApiError, BinanceProtocolError

DEFAULT_BASE_URL = "https://api.binance.com"
LOGGER_NAME = "binance_rest"


class BinanceHttpClient:
    """Binance public REST endpoints.

    Every call is a single GET. Results are classified by body content only,
    the HTTP status code is never looked at.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session=None,
        timeout: float | None = None,
        logger=None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    @classmethod
    def from_config(cls, settings, *, session=None, logger=None) -> "BinanceHttpClient":
        return cls(
            base_url=settings.base_url,
            session=session,
            timeout=settings.timeout_seconds,
            logger=logger,
        )

    def request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        self.logger.debug("GET %s params=%s", url, params)
        # transport errors propagate untouched
        response = self.session.get(url, params=params, timeout=self.timeout)
        body = response.text
        if not body:
            raise BinanceProtocolError("No body")

        payload = json.loads(body)
        if isinstance(payload, dict) and payload.get("code") and payload.get("msg"):
            raise BinanceApiError(payload["msg"], payload["code"])
        return payload

    def exchange_info(self) -> Dict:
        """Current exchange trading rules and symbol information."""
        return self.request("/api/v3/exchangeInfo")

    def ticker_price_change(self, symbols: str) -> Any:
        """24 hour rolling window price change statistics for one symbol.

        Failures are logged and handed back as the return value instead of
        being raised. Existing callers check ``isinstance(result, Exception)``.
        """
        try:
            return self.request("/api/v3/ticker/24hr", params={"symbol": symbols})
        except Exception as exc:  # noqa: BLE001
            self.logger.error("Ticker 24hr request failed for %s: %s", symbols, exc)
            return exc

    def klines(
        self,
        symbol: str,
        interval: str,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
    ) -> list:
        """Kline/candlestick bars for a symbol, identified by their open time."""
        params = {
            "symbol": symbol,
            "interval": interval,
            "startTime": start_time,
            "endTime": end_time,
            "limit": limit,
        }
        return self.request("/api/v3/klines", params=params)
