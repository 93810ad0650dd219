from __future__ import annotations


class BinanceError(Exception):
    """Base class for errors raised by the REST client itself."""


class BinanceProtocolError(BinanceError):
    pass


class BinanceApiError(BinanceError):
    """Error reported by Binance inside the response body as ``code``/``msg``."""

    def __init__(self, message: str, code: int | str) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
