"""Ledger client Protocol — dependency inversion for testability.

The embedding application provides the real ICRC-1 agent (Candid over
HTTPS); unit tests inject an AsyncMock that conforms to this Protocol.
Any exception raised by these calls is treated as a remote failure.
"""

from typing import Any, Protocol


class LedgerClientProtocol(Protocol):
    async def balance_of(self, token_id: str, account: dict[str, Any]) -> int:
        """icrc1_balance_of. `account` is {"owner": Principal, "subaccount": [bytes] | []}."""
        ...

    async def name(self, token_id: str) -> str: ...

    async def symbol(self, token_id: str) -> str: ...

    async def decimals(self, token_id: str) -> int: ...

    async def fetch_root_key(self) -> None:
        """Trust the local replica's root key. Only called on the local network."""
        ...
