"""Domain models for ic_account — pure dataclasses, no transport dependency."""

from dataclasses import dataclass
from typing import Any

from src.ic_account.domain.principal import Principal
from src.ic_common.errors import InvalidIdentityError, InvalidSubaccountError

SUBACCOUNT_LENGTH = 32
DEFAULT_SUBACCOUNT = bytes(SUBACCOUNT_LENGTH)


def normalize_subaccount(subaccount: bytes | bytearray | None) -> bytes | None:
    """Return ``subaccount`` as immutable 32 bytes, or None when absent."""
    if subaccount is None:
        return None
    if not isinstance(subaccount, (bytes, bytearray)):
        raise InvalidIdentityError(
            f"subaccount must be bytes, got {type(subaccount).__name__}"
        )
    if len(subaccount) != SUBACCOUNT_LENGTH:
        raise InvalidSubaccountError(len(subaccount))
    return bytes(subaccount)


def parse_subaccount_hex(text: str | None) -> bytes | None:
    """Decode a hex subaccount from user input (query string, CLI arg)."""
    if text is None or text == "":
        return None
    try:
        raw = bytes.fromhex(text)
    except ValueError:
        raise InvalidIdentityError(f"subaccount is not hex: {text!r}") from None
    return normalize_subaccount(raw)


@dataclass(frozen=True)
class Account:
    """ICRC-1 structured account: owner + optional subaccount."""

    owner: Principal
    subaccount: bytes | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.owner, Principal):
            raise InvalidIdentityError(
                f"owner must be a Principal, got {type(self.owner).__name__}"
            )
        object.__setattr__(self, "subaccount", normalize_subaccount(self.subaccount))

    @property
    def effective_subaccount(self) -> bytes:
        return self.subaccount if self.subaccount is not None else DEFAULT_SUBACCOUNT

    def to_ledger_arg(self) -> dict[str, Any]:
        """Argument shape for icrc1_balance_of: subaccount is `opt vec nat8`."""
        return {
            "owner": self.owner,
            "subaccount": [self.subaccount] if self.subaccount is not None else [],
        }
