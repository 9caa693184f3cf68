"""Async client for the Fogswap swap API.

API base: https://api.fogswap.io/v1

Every endpoint answers with the same envelope: ``{"error": {"message": ...}}``
on failure or ``{"result": ...}`` on success.
"""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

from fogswap.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, FogswapSettings
from fogswap.errors import (
    CreateTransactionError,
    FogswapApiError,
    GetAvailableCoinsError,
    GetEstimatedExchangeAmountError,
    GetTransactionInfoError,
    SendRequestError,
    UnsupportedMethodError,
)
from fogswap.models import QuoteResponse, TokenList, TransactionInfo, TxType

logger = logging.getLogger(__name__)

T = TypeVar("T")

TOKENS_ENDPOINT = "/market/tokens"
QUOTE_ENDPOINT = "/transaction/quote"
CREATE_ENDPOINT = "/transaction/create"
INFO_ENDPOINT = "/transaction/info"

_TOKEN_LISTS = TypeAdapter(list[TokenList])
_QUOTE = TypeAdapter(QuoteResponse)
_TRANSACTION = TypeAdapter(TransactionInfo)


class _Envelope(BaseModel):
    """Top-level response shape shared by all endpoints."""

    error: Any = None
    result: Any = None


class _ErrorDetail(BaseModel):
    message: str


class FogswapClient:
    """Client for the Fogswap API.

    Holds one ``httpx.AsyncClient`` that is shared by all calls, so several
    operations may be awaited concurrently on the same instance.

    Usage:
        async with FogswapClient() as sdk:
            quote = await sdk.get_quote(1.0, "sol", "SOL", "sol", "SOL")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        settings: Optional[FogswapSettings] = None,
    ):
        """Initialize the client.

        Without ``settings`` the environment is never consulted: unset
        arguments fall back to the public API, no timeout and the default
        User-Agent.

        Args:
            base_url: API base URL
            client: Pre-configured httpx client; it is not closed by this instance
            timeout: Request timeout in seconds (None = no timeout)
            settings: Opt-in defaults, e.g. ``FogswapSettings()`` for FOGSWAP_* variables
        """
        if settings is not None:
            base_url = base_url or settings.api_root
            timeout = timeout if timeout is not None else settings.timeout
            user_agent = settings.user_agent
        else:
            user_agent = DEFAULT_USER_AGENT
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=timeout, headers={"User-Agent": user_agent})
        self.client = client

    async def __aenter__(self) -> "FogswapClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    async def _send_request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        GET payloads become query parameters with ``None`` values dropped.
        POST payloads are sent as a JSON body, ``None`` values kept as null.

        Raises:
            UnsupportedMethodError: method is neither GET nor POST
            SendRequestError: response status is not 200
        """
        method = str(method).upper()
        url = f"{self.base_url}{endpoint}"

        if method == "GET":
            params = None
            if payload is not None:
                params = {key: value for key, value in payload.items() if value is not None}
            logger.debug(f"Fogswap GET {url} params={params}")
            response = await self.client.get(url, params=params)
        elif method == "POST":
            logger.debug(f"Fogswap POST {url}")
            headers = {"Content-Type": "application/json"}
            if payload is not None:
                response = await self.client.post(url, headers=headers, json=payload)
            else:
                response = await self.client.post(url, headers=headers)
        else:
            raise UnsupportedMethodError(method)

        logger.debug(f"Fogswap {method} {url} -> {response.status_code}")
        if response.status_code != 200:
            logger.warning(f"Fogswap API error: {response.status_code} for {method} {endpoint}")
            raise SendRequestError(response.status_code, url)

        return response.json()

    @staticmethod
    def _unwrap(body: Any, error_cls: type[FogswapApiError], adapter: TypeAdapter[T]) -> T:
        """Raise the server error carried by the envelope, or decode its result."""
        envelope = _Envelope.model_validate(body)

        if isinstance(envelope.error, dict):
            detail = _ErrorDetail.model_validate(envelope.error)
            logger.warning(f"Fogswap {error_cls.label}: {detail.message}")
            raise error_cls(detail.message)

        return adapter.validate_python(envelope.result)

    async def get_token_list(self) -> list[TokenList]:
        """Get the tokens available for swapping, grouped by network.

        Raises:
            GetAvailableCoinsError: the server rejected the request
        """
        body = await self._send_request("GET", TOKENS_ENDPOINT)
        return self._unwrap(body, GetAvailableCoinsError, _TOKEN_LISTS)

    async def get_quote(
        self,
        amount_from: float,
        network_from: str,
        contract_address_from: str,
        network_to: str,
        contract_address_to: str,
        tx_type: Optional[TxType] = None,
        is_use_xmr: Optional[bool] = None,
    ) -> QuoteResponse:
        """Get a quote for a swap.

        Args:
            amount_from: Amount of the source token to swap
            network_from: Source network (e.g., "sol")
            contract_address_from: Source token contract address
            network_to: Destination network
            contract_address_to: Destination token contract address
            tx_type: Standard or private swap (server default when None)
            is_use_xmr: Route the swap through XMR

        Returns:
            The quote, including the expected output amount

        Raises:
            GetEstimatedExchangeAmountError: the server could not quote the swap
        """
        body = await self._send_request(
            "GET",
            QUOTE_ENDPOINT,
            {
                "amount_from": amount_from,
                "network_from": network_from,
                "contract_address_from": contract_address_from,
                "network_to": network_to,
                "contract_address_to": contract_address_to,
                "tx_type": _tx_type_value(tx_type),
                "is_use_xmr": is_use_xmr,
            },
        )
        return self._unwrap(body, GetEstimatedExchangeAmountError, _QUOTE)

    async def create_transaction(
        self,
        network_from: str,
        contract_address_from: str,
        network_to: str,
        contract_address_to: str,
        amount_from: float,
        payout_address: str,
        payout_extra_id: Optional[str] = None,
        tx_type: Optional[TxType] = None,
        is_use_xmr: Optional[bool] = None,
    ) -> TransactionInfo:
        """Create a swap transaction.

        The returned record holds the payin address the user must fund.

        Args:
            network_from: Source network
            contract_address_from: Source token contract address
            network_to: Destination network
            contract_address_to: Destination token contract address
            amount_from: Amount of the source token to swap
            payout_address: Address that receives the swapped tokens
            payout_extra_id: Memo/tag for the payout address, if the chain uses one
            tx_type: Standard or private swap
            is_use_xmr: Route the swap through XMR

        Raises:
            CreateTransactionError: the server refused to create the transaction
        """
        body = await self._send_request(
            "POST",
            CREATE_ENDPOINT,
            {
                "network_from": network_from,
                "contract_address_from": contract_address_from,
                "amount_from": amount_from,
                "network_to": network_to,
                "contract_address_to": contract_address_to,
                "payout_address": payout_address,
                "payout_extra_id": payout_extra_id,
                "tx_type": _tx_type_value(tx_type),
                "is_use_xmr": is_use_xmr,
            },
        )
        return self._unwrap(body, CreateTransactionError, _TRANSACTION)

    async def get_transaction_info(self, tx_id: str) -> TransactionInfo:
        """Get the current state of a transaction.

        Raises:
            GetTransactionInfoError: the server has no such transaction or refused the lookup
        """
        body = await self._send_request("GET", INFO_ENDPOINT, {"tx_id": tx_id})
        return self._unwrap(body, GetTransactionInfoError, _TRANSACTION)


def _tx_type_value(tx_type: Optional[TxType]) -> Optional[str]:
    if tx_type is None:
        return None
    return TxType(tx_type).value
