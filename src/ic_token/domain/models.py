"""Domain models for ic_token — pure dataclasses, no transport dependency."""

from dataclasses import dataclass

from src.ic_common.units import validate_decimals


@dataclass(frozen=True)
class TokenMetadata:
    name: str
    symbol: str
    decimals: int

    def __post_init__(self) -> None:
        validate_decimals(self.decimals)


# Returned (never cached) when the ledger cannot be reached for metadata
UNKNOWN_TOKEN = TokenMetadata(name="Unknown Token", symbol="", decimals=8)


@dataclass(frozen=True)
class BalanceQueryResult:
    """Either a raw balance or a human-readable error, never both."""

    balance: int | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.balance is None) == (self.error is None):
            raise ValueError("BalanceQueryResult needs exactly one of balance/error")

    @classmethod
    def success(cls, balance: int) -> "BalanceQueryResult":
        return cls(balance=balance)

    @classmethod
    def failure(cls, error: str) -> "BalanceQueryResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class FormattedBalance:
    token_id: str
    balance: int        # raw, smallest unit
    decimals: int
    symbol: str
    display: str        # format_balance(balance, decimals)


@dataclass(frozen=True)
class FormattedBalanceResult:
    """Either a formatted balance or a human-readable error, never both."""

    value: FormattedBalance | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("FormattedBalanceResult needs exactly one of value/error")

    @property
    def ok(self) -> bool:
        return self.error is None
