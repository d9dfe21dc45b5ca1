"""Integration tests for the ic_token HTTP surface.

The app is wired to the AsyncMock ledger from tests/conftest.py, so no
replica is needed.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from src.ic_account.domain.account_id import derive_account_identifier
from src.ic_account.domain.principal import Principal
from src.ic_common.errors import InvalidNetworkConfigurationError
from src.main import create_app

ICP_LEDGER = "ryjl3-tyaaa-aaaaa-aaaba-cai"
ANON = "2vxsx-fae"
SUB = "01" * 32


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

class TestApp:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": "0.1.0", "network": "ic"}

    async def test_request_id_header(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.headers["X-Request-ID"].startswith("req_")

    def test_invalid_network_aborts_creation(self) -> None:
        with pytest.raises(InvalidNetworkConfigurationError):
            create_app(ledger=AsyncMock(), network="devnet")


# ---------------------------------------------------------------------------
# Account identifiers
# ---------------------------------------------------------------------------

class TestAccountId:
    async def test_default_subaccount(self, client: AsyncClient) -> None:
        resp = await client.get(f"/api/v1/accounts/{ANON}/account-id")
        assert resp.status_code == 200
        body = resp.json()
        assert body["code"] == 0
        assert body["data"] == {
            "principal": ANON,
            "subaccount": None,
            "account_id": derive_account_identifier(Principal.anonymous()),
        }
        assert body["request_id"] == resp.headers["X-Request-ID"]

    async def test_with_subaccount(self, client: AsyncClient) -> None:
        resp = await client.get(f"/api/v1/accounts/{ANON}/account-id", params={"subaccount": SUB})
        data = resp.json()["data"]
        assert data["subaccount"] == SUB
        assert data["account_id"] == derive_account_identifier(
            Principal.anonymous(), bytes.fromhex(SUB)
        )

    async def test_invalid_principal(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/accounts/2vxsx-faf/account-id")
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == 1001
        assert body["data"] is None

    async def test_subaccount_not_hex(self, client: AsyncClient) -> None:
        resp = await client.get(f"/api/v1/accounts/{ANON}/account-id", params={"subaccount": "zz"})
        assert resp.status_code == 422
        assert resp.json()["code"] == 1001

    async def test_subaccount_wrong_length(self, client: AsyncClient) -> None:
        resp = await client.get(f"/api/v1/accounts/{ANON}/account-id", params={"subaccount": "00"})
        assert resp.status_code == 422
        assert resp.json()["code"] == 1002


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

class TestTokens:
    async def test_well_known(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/tokens/well-known")
        data = resp.json()["data"]
        assert data["network"] == "ic"
        assert data["ledgers"]["ICP"] == ICP_LEDGER

    async def test_token_info(self, client: AsyncClient, ledger: AsyncMock) -> None:
        resp = await client.get(f"/api/v1/tokens/{ICP_LEDGER}")
        assert resp.status_code == 200
        assert resp.json()["data"] == {
            "token_id": ICP_LEDGER,
            "name": "Internet Computer",
            "symbol": "ICP",
            "decimals": 8,
        }
        ledger.name.assert_awaited_once_with(ICP_LEDGER)

    async def test_token_info_is_cached(self, client: AsyncClient, ledger: AsyncMock) -> None:
        await client.get(f"/api/v1/tokens/{ICP_LEDGER}")
        await client.get(f"/api/v1/tokens/{ICP_LEDGER}")
        assert ledger.symbol.await_count == 1

    async def test_token_info_fallback(self, client: AsyncClient, ledger: AsyncMock) -> None:
        ledger.name.side_effect = RuntimeError("canister not found")
        resp = await client.get(f"/api/v1/tokens/{ICP_LEDGER}")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["name"] == "Unknown Token"
        assert data["decimals"] == 8


# ---------------------------------------------------------------------------
# Balances
# ---------------------------------------------------------------------------

class TestBalance:
    async def test_formatted_balance(self, client: AsyncClient) -> None:
        resp = await client.get(f"/api/v1/tokens/{ICP_LEDGER}/balance/{ANON}")
        assert resp.status_code == 200
        assert resp.json()["data"] == {
            "token_id": ICP_LEDGER,
            "principal": ANON,
            "subaccount": None,
            "balance_raw": "100500000",
            "decimals": 8,
            "symbol": "ICP",
            "balance_display": "1.005",
        }

    async def test_large_balance_is_exact(self, client: AsyncClient, ledger: AsyncMock) -> None:
        ledger.balance_of.return_value = 2**80 + 1
        resp = await client.get(f"/api/v1/tokens/{ICP_LEDGER}/balance/{ANON}")
        data = resp.json()["data"]
        assert data["balance_raw"] == str(2**80 + 1)
        assert data["balance_display"] == "12089258196146291.74706177"

    async def test_subaccount_forwarded(self, client: AsyncClient, ledger: AsyncMock) -> None:
        await client.get(
            f"/api/v1/tokens/{ICP_LEDGER}/balance/{ANON}", params={"subaccount": SUB}
        )
        ledger.balance_of.assert_awaited_once_with(
            ICP_LEDGER,
            {"owner": Principal.anonymous(), "subaccount": [bytes.fromhex(SUB)]},
        )

    async def test_ledger_failure(self, client: AsyncClient, ledger: AsyncMock) -> None:
        ledger.balance_of.side_effect = ConnectionError("replica unreachable")
        resp = await client.get(f"/api/v1/tokens/{ICP_LEDGER}/balance/{ANON}")
        assert resp.status_code == 502
        body = resp.json()
        assert body["code"] == 2001
        assert body["message"] == f"Failed to query {ICP_LEDGER} balance: replica unreachable"
        assert body["data"] is None
