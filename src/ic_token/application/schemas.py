"""Pydantic response schemas for the ic_token API.

Raw balances are serialised as decimal strings: JSON consumers in the
browser would silently round ints above 2**53.
"""

from pydantic import BaseModel

from src.ic_token.domain.models import FormattedBalance, TokenMetadata


class AccountIdResponse(BaseModel):
    principal: str
    subaccount: str | None  # hex, None = default subaccount
    account_id: str


class TokenInfoResponse(BaseModel):
    token_id: str
    name: str
    symbol: str
    decimals: int

    @classmethod
    def from_metadata(cls, token_id: str, metadata: TokenMetadata) -> "TokenInfoResponse":
        return cls(
            token_id=token_id,
            name=metadata.name,
            symbol=metadata.symbol,
            decimals=metadata.decimals,
        )


class BalanceResponse(BaseModel):
    token_id: str
    principal: str
    subaccount: str | None
    balance_raw: str
    decimals: int
    symbol: str
    balance_display: str

    @classmethod
    def from_formatted(
        cls, principal: str, subaccount: bytes | None, formatted: FormattedBalance
    ) -> "BalanceResponse":
        return cls(
            token_id=formatted.token_id,
            principal=principal,
            subaccount=subaccount.hex() if subaccount is not None else None,
            balance_raw=str(formatted.balance),
            decimals=formatted.decimals,
            symbol=formatted.symbol,
            balance_display=formatted.display,
        )


class WellKnownTokensResponse(BaseModel):
    network: str
    ledgers: dict[str, str]  # symbol -> ledger canister id
