"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import create_app

ICP_LEDGER = "ryjl3-tyaaa-aaaaa-aaaba-cai"


@pytest.fixture
def ledger() -> AsyncMock:
    """Ledger client double: ICP-like metadata, 1.005 ICP balance."""
    mock = AsyncMock()
    mock.balance_of.return_value = 100_500_000
    mock.name.return_value = "Internet Computer"
    mock.symbol.return_value = "ICP"
    mock.decimals.return_value = 8
    return mock


@pytest.fixture
async def client(ledger: AsyncMock) -> AsyncClient:
    """Async HTTP client bound to an app wired to the ledger double."""
    app = create_app(ledger=ledger, network="ic")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
