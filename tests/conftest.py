"""Pytest configuration and fixtures."""

import json
from typing import Callable

import httpx
import pytest
import pytest_asyncio

from fogswap.client import FogswapClient
from fogswap.config import get_settings

BASE_URL = "https://api.fogswap.test/v1"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from FOGSWAP_* variables and the settings cache."""
    for name in ("FOGSWAP_BASE_URL", "FOGSWAP_TIMEOUT", "FOGSWAP_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeFogswap:
    """Canned HTTP responder that records every request it serves."""

    def __init__(self, status_code: int = 200, body=None, content: bytes | None = None):
        self.status_code = status_code
        self.body = body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest_asyncio.fixture
async def make_client() -> Callable[[FakeFogswap], FogswapClient]:
    """Build FogswapClients wired to a FakeFogswap via httpx.MockTransport."""
    http_clients: list[httpx.AsyncClient] = []

    def factory(fake: FakeFogswap) -> FogswapClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
        http_clients.append(http_client)
        return FogswapClient(base_url=BASE_URL, client=http_client)

    yield factory

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def quote_result() -> dict:
    return {
        "network_from": "sol",
        "contract_address_from": "SOL",
        "amount_from": 1.0,
        "network_to": "sol",
        "contract_address_to": "SOL",
        "amount_to": 0.9,
        "convert_usd": {"from": 100.0, "to": 90.0},
        "tx_type": "private",
    }


@pytest.fixture
def transaction_result() -> dict:
    return {
        "id": "S7ZulO3j16",
        "created_at": 1700000000,
        "tx_type": "standard",
        "network_from": "sol",
        "contract_address_from": "SOL",
        "contract_address_to": "0xdac17f958d2ee523a2206206994597c13d831ec7",
        "network_to": "eth",
        "amount_from": 0.5,
        "amount_to": 71.25,
        "payin_address": "5ZWj7a1f8tWkjBESHKgrLmXshuXxqeY9SYcfbshpAqPG",
        "payin_extra_id": None,
        "payin_hash": None,
        "payout_address": "0x3f5CE5FBFe3E9af3971dD833D26bA9b5C936f0bE",
        "payout_extra_id": None,
        "payout_hash": None,
        "convert_usd": 71.3,
        "status": "waiting",
    }
