"""Python client for the Fogswap cross-chain swap API.

Operations:
- get_token_list: tokens available per network
- get_quote: estimated output for a prospective swap
- create_transaction: open a swap and obtain its payin address
- get_transaction_info: poll a swap's status
"""

__version__ = "0.1.0"

from fogswap.client import FogswapClient
from fogswap.config import FogswapSettings, get_settings
from fogswap.errors import (
    CreateTransactionError,
    FogswapApiError,
    FogswapError,
    GetAvailableCoinsError,
    GetEstimatedExchangeAmountError,
    GetTransactionInfoError,
    SendRequestError,
    UnsupportedMethod,
    UnsupportedMethodError,
)
from fogswap.models import (
    ConvertUsd,
    QuoteResponse,
    TokenInfo,
    TokenList,
    TransactionInfo,
    TxType,
)

__all__ = [
    # Client
    "FogswapClient",
    # Configuration
    "FogswapSettings",
    "get_settings",
    # Models
    "ConvertUsd",
    "QuoteResponse",
    "TokenInfo",
    "TokenList",
    "TransactionInfo",
    "TxType",
    # Errors
    "FogswapError",
    "FogswapApiError",
    "UnsupportedMethod",
    "UnsupportedMethodError",
    "SendRequestError",
    "GetAvailableCoinsError",
    "GetEstimatedExchangeAmountError",
    "CreateTransactionError",
    "GetTransactionInfoError",
]
