"""Pytest configuration and fixtures."""

import copy
import json
from typing import Any, Dict, List

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from unittest.mock import AsyncMock, MagicMock

from config.settings import Settings

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
WSTETH = "0x7f39C581F595B53c5cb19bD0b3f8dA6c935E2Ca0"
ORACLE = "0x48F7E36EB6B826B2dF4B2E630B62Cd25e89E40e2"
IRM = "0x870aC11D48B15DB9a138Cf899d20F13F79Ba00BC"

# ~4% APR expressed as a WAD per-second rate
SAMPLE_RATE = 1268391679


@pytest.fixture
def sample_market() -> Dict[str, Any]:
    """A raw WETH/USDC market record as returned by the Morpho API."""
    return {
        "uniqueKey": "0xb323495f7e4148be5643a4ea4a8221eef163e4bccfdedc2a6f4696baacbc86cc",
        "loanAsset": {
            "address": USDC,
            "decimals": 6,
            "symbol": "USDC",
            "priceUsd": "1.00",
            "chain": {"network": "ethereum"},
        },
        "collateralAsset": {
            "address": WETH,
            "symbol": "WETH",
        },
        "oracleAddress": ORACLE,
        "irmAddress": IRM,
        "lltv": "860000000000000000",
        "state": {
            "price": "3000000000000000000000000000000000000",
            "fee": 0,
            "supplyAssets": "1000000",
            "borrowAssets": "500000",
            "supplyShares": "1000000000000",
            "borrowShares": "500000000000",
            "timestamp": 1700000000,
            "rewards": [
                {
                    "yearlySupplyTokens": "250000000000000000000000",
                    "asset": {"decimals": 18, "priceUsd": "0.52"},
                }
            ],
        },
    }


@pytest.fixture
def idle_market(sample_market) -> Dict[str, Any]:
    """A USDC market with no collateral asset and no rewards."""
    market = copy.deepcopy(sample_market)
    market["uniqueKey"] = "0x54efdee08e272e929034a8f26f7ca34b1ebe364b275391169b28c6d7db24dbc8"
    market["collateralAsset"] = None
    market["oracleAddress"] = "0x0000000000000000000000000000000000000000"
    market["irmAddress"] = "0x0000000000000000000000000000000000000000"
    market["lltv"] = "0"
    market["state"]["rewards"] = []
    market["state"]["supplyAssets"] = "2500000"
    market["state"]["borrowAssets"] = "0"
    return market


@pytest.fixture
def wsteth_market(sample_market) -> Dict[str, Any]:
    """A wstETH/USDC market with a 10% fee."""
    market = copy.deepcopy(sample_market)
    market["uniqueKey"] = "0xb8fc70e82bc5bb53e773626fcc6a23f7eefa036918d7ef216ecfb1950a94a85e"
    market["collateralAsset"] = {"address": WSTETH, "symbol": "wstETH"}
    market["state"]["fee"] = 0.1
    market["state"]["supplyAssets"] = "7000000"
    return market


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        morpho_api_url="http://127.0.0.1:1/graphql",
        raw_response_path=tmp_path / "raw_graphql_response.json",
        enrich_max_concurrency=4,
    )


@pytest.fixture
def mock_web3():
    """Web3 double whose borrowRateView call returns SAMPLE_RATE."""
    web3 = MagicMock()
    borrow_rate_view = web3.eth.contract.return_value.functions.borrowRateView
    borrow_rate_view.return_value.call = AsyncMock(return_value=SAMPLE_RATE)
    return web3


def markets_response(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"data": {"markets": {"items": items}}}


class FakeGraphQLServer:
    """In-process stand-in for the Morpho GraphQL endpoint."""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self.status = 200
        self.body = json.dumps(markets_response([]))
        self.raw: bytes = None
        self.server: TestServer = None

    def respond(self, payload: Any = None, status: int = 200, text: str = None, raw: bytes = None) -> None:
        self.status = status
        self.raw = raw
        self.body = text if text is not None else json.dumps(payload)

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(await request.json())
        if self.raw is not None:
            return web.Response(status=self.status, body=self.raw, content_type="application/json")
        return web.Response(status=self.status, text=self.body, content_type="application/json")

    @property
    def url(self) -> str:
        return str(self.server.make_url("/graphql"))


@pytest_asyncio.fixture
async def graphql_server():
    """Start a fake GraphQL server for the duration of a test."""
    fake = FakeGraphQLServer()
    app = web.Application()
    app.router.add_post("/graphql", fake.handle)
    fake.server = TestServer(app)
    await fake.server.start_server()
    yield fake
    await fake.server.close()


@pytest_asyncio.fixture
async def http_session():
    async with aiohttp.ClientSession() as session:
        yield session
