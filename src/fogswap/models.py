"""Response models for the Fogswap API."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TxType(str, Enum):
    """Swap privacy mode."""

    STANDARD = "standard"
    PRIVATE = "private"

    def __str__(self) -> str:
        return self.value


class FogswapModel(BaseModel):
    """Base for API payloads: immutable, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class TokenInfo(FogswapModel):
    """A token tradable on a network."""

    token: str = Field(..., description="Token symbol")
    network: str = Field(..., description="Network name")
    contract_address: str = Field(..., description="Contract address (sentinel for native assets)")
    image: str = Field(..., description="Token icon URL")
    is_native: bool = Field(..., description="Whether this is the network's native asset")


class TokenList(FogswapModel):
    """Tokens available on one network."""

    network: str
    network_image: str
    tokens: list[TokenInfo]

    def find(self, symbol: str) -> Optional[TokenInfo]:
        """Find a token on this network by symbol (case-insensitive)."""
        symbol = symbol.upper()
        for token in self.tokens:
            if token.token.upper() == symbol:
                return token
        return None


class ConvertUsd(FogswapModel):
    """USD value of each side of a quote, when the server can price it."""

    from_: Optional[float] = Field(None, alias="from")
    to: Optional[float] = None


class QuoteResponse(FogswapModel):
    """Point-in-time estimate for a prospective swap."""

    network_from: str
    contract_address_from: str
    amount_from: float
    network_to: str
    contract_address_to: str
    amount_to: float
    convert_usd: ConvertUsd
    tx_type: TxType

    @property
    def rate(self) -> Optional[float]:
        """Output units received per input unit."""
        if self.amount_from == 0:
            return None
        return self.amount_to / self.amount_from


class TransactionInfo(FogswapModel):
    """Server-side swap record.

    ``status`` is forwarded verbatim; the server's vocabulary (waiting,
    confirming, finished, ...) is not a closed set.
    """

    id: str
    created_at: int
    tx_type: TxType

    network_from: str
    contract_address_from: str

    contract_address_to: str
    network_to: str

    amount_from: float
    amount_to: float

    payin_address: str
    payin_extra_id: Optional[str] = None
    payin_hash: Optional[str] = None

    payout_address: str
    payout_extra_id: Optional[str] = None
    payout_hash: Optional[str] = None

    convert_usd: Optional[float] = None

    status: str

    @property
    def created_at_datetime(self) -> datetime:
        """Creation time as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.created_at, tz=timezone.utc)
