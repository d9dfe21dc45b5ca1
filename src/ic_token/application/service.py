"""TokenBalanceService — thin composition layer over an ICRC-1 ledger client.

Remote failures never escape this boundary: balance queries come back as
BalanceQueryResult.failure, metadata fetches fall back to UNKNOWN_TOKEN.
Identity and configuration errors are programmer errors and propagate.
"""

import asyncio
import logging

from config.settings import Settings, settings
from src.ic_account.domain.account_id import derive_account_identifier
from src.ic_account.domain.models import Account
from src.ic_account.domain.principal import Principal
from src.ic_common.errors import RemoteQueryError
from src.ic_common.network import NetworkConfig, get_network_config
from src.ic_common.units import format_balance
from src.ic_token.domain.cache import TokenMetadataCache
from src.ic_token.domain.ledger import LedgerClientProtocol
from src.ic_token.domain.models import (
    BalanceQueryResult,
    FormattedBalance,
    FormattedBalanceResult,
    TokenMetadata,
)

logger = logging.getLogger(__name__)


class TokenBalanceService:
    def __init__(
        self,
        ledger: LedgerClientProtocol,
        cache: TokenMetadataCache | None = None,
        network: str | None = None,
        cfg: Settings | None = None,
    ) -> None:
        self._cfg = cfg or settings
        self._ledger = ledger
        self._cache = cache if cache is not None else TokenMetadataCache()
        # Raises InvalidNetworkConfigurationError; setup must abort
        self._network = (
            NetworkConfig.from_name(network, self._cfg)
            if network is not None
            else get_network_config(self._cfg)
        )

    @property
    def network(self) -> NetworkConfig:
        return self._network

    @property
    def settings(self) -> Settings:
        return self._cfg

    @property
    def cache(self) -> TokenMetadataCache:
        return self._cache

    async def prepare(self) -> None:
        """Trust the local replica's root key; no-op on mainnet."""
        if not self._network.is_local:
            return
        try:
            await self._ledger.fetch_root_key()
        except Exception:
            # Queries will fail certificate checks later and surface there
            logger.error("Failed to fetch local root key from %s", self._network.host, exc_info=True)

    # --- accounts ---

    def generate_account(
        self, principal: Principal, subaccount: bytes | None = None
    ) -> Account:
        return Account(owner=principal, subaccount=subaccount)

    def generate_default_account(self, principal: Principal) -> Account:
        return self.generate_account(principal)

    def generate_account_id(
        self, principal: Principal, subaccount: bytes | None = None
    ) -> str:
        return derive_account_identifier(principal, subaccount)

    # --- balances ---

    async def query_balance(
        self,
        token_id: str,
        principal: Principal,
        subaccount: bytes | None = None,
    ) -> BalanceQueryResult:
        account = self.generate_account(principal, subaccount)
        logger.info(
            "Querying token balance: canister=%s principal=%s subaccount=%s",
            token_id,
            principal,
            account.subaccount.hex() if account.subaccount is not None else "none",
        )

        try:
            balance = await self._ledger.balance_of(token_id, account.to_ledger_arg())
        except Exception as exc:
            err = RemoteQueryError(token_id, str(exc) or type(exc).__name__)
            logger.error(err.message, exc_info=True)
            return BalanceQueryResult.failure(err.message)

        if isinstance(balance, bool) or not isinstance(balance, int) or balance < 0:
            err = RemoteQueryError(token_id, f"ledger returned invalid balance {balance!r}")
            logger.error(err.message)
            return BalanceQueryResult.failure(err.message)

        logger.info("Balance retrieved: canister=%s balance=%d", token_id, balance)
        return BalanceQueryResult.success(balance)

    async def get_token_info(self, token_id: str) -> TokenMetadata:
        return await self._cache.get(token_id, lambda: self._fetch_token_info(token_id))

    async def _fetch_token_info(self, token_id: str) -> TokenMetadata:
        logger.info("Fetching token info for %s", token_id)
        name, symbol, decimals = await asyncio.gather(
            self._ledger.name(token_id),
            self._ledger.symbol(token_id),
            self._ledger.decimals(token_id),
        )
        return TokenMetadata(name=name, symbol=symbol, decimals=int(decimals))

    @staticmethod
    def format_balance(balance: int, decimals: int) -> str:
        return format_balance(balance, decimals)

    async def query_formatted_balance(
        self,
        token_id: str,
        principal: Principal,
        subaccount: bytes | None = None,
    ) -> FormattedBalanceResult:
        """Metadata and balance are fetched concurrently; formatting waits for both."""
        self.generate_account(principal, subaccount)  # fail fast on bad identity
        metadata, result = await asyncio.gather(
            self.get_token_info(token_id),
            self.query_balance(token_id, principal, subaccount),
        )
        if result.balance is None:
            return FormattedBalanceResult(error=result.error)

        return FormattedBalanceResult(
            value=FormattedBalance(
                token_id=token_id,
                balance=result.balance,
                decimals=metadata.decimals,
                symbol=metadata.symbol,
                display=format_balance(result.balance, metadata.decimals),
            )
        )
