"""Errors raised by the Fogswap client.

Transport and decoding failures are not wrapped: network problems surface as
``httpx.HTTPError``, malformed bodies as ``json.JSONDecodeError`` and schema
mismatches as ``pydantic.ValidationError``.
"""

from typing import Optional


class FogswapError(Exception):
    """Base exception for all Fogswap client errors."""
    pass


class UnsupportedMethodError(FogswapError):
    """Raised when the request dispatcher is asked for a method other than GET or POST."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unsupported method: {method}")


UnsupportedMethod = UnsupportedMethodError


class SendRequestError(FogswapError):
    """Raised when the API answers with any HTTP status other than 200."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"send request error: HTTP {status_code}")


class FogswapApiError(FogswapError):
    """An error reported by the server in the response envelope.

    ``message`` holds the server's ``error.message`` exactly as received.
    """

    label = "Fogswap API Error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.label} : {message}")


class GetAvailableCoinsError(FogswapApiError):
    """Token list request rejected by the server."""

    label = "Get Available Coins Error"


class GetEstimatedExchangeAmountError(FogswapApiError):
    """Quote request rejected by the server."""

    label = "Get Estimated Exchange Amount Error"


class CreateTransactionError(FogswapApiError):
    """Transaction creation rejected by the server."""

    label = "Create Transaction Error"


class GetTransactionInfoError(FogswapApiError):
    """Transaction lookup rejected by the server."""

    label = "Get Transaction Info Error"
