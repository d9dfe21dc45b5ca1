"""Legacy textual account identifier.

Layout (32 bytes, rendered as 64 lowercase hex chars):
  - 4 bytes:  CRC-32 (big-endian) of the digest below
  - 28 bytes: SHA-224( b"\\x0aaccount-id" + owner bytes + 32-byte subaccount )

Pure function of (owner, subaccount); safe to call from any task.
"""

import hashlib

from src.ic_account.domain.models import DEFAULT_SUBACCOUNT, normalize_subaccount
from src.ic_account.domain.principal import Principal
from src.ic_common.checksum import CHECKSUM_LENGTH, checksum
from src.ic_common.errors import InvalidAccountIdentifierError, InvalidIdentityError

DOMAIN_SEPARATOR = b"\x0aaccount-id"
DIGEST_LENGTH = 28
ACCOUNT_ID_LENGTH = CHECKSUM_LENGTH + DIGEST_LENGTH


def _owner_bytes(holder: Principal | str) -> bytes:
    if isinstance(holder, Principal):
        return holder.to_bytes()
    if isinstance(holder, str):
        return Principal.from_text(holder).to_bytes()
    raise InvalidIdentityError(f"cannot encode holder of type {type(holder).__name__}")


def account_record(holder: Principal | str, subaccount: bytes | None = None) -> bytes:
    """The hashed preimage: separator ++ owner ++ subaccount (zero-filled if absent)."""
    sub = normalize_subaccount(subaccount)
    return DOMAIN_SEPARATOR + _owner_bytes(holder) + (sub if sub is not None else DEFAULT_SUBACCOUNT)


def derive_account_identifier_bytes(
    holder: Principal | str, subaccount: bytes | None = None
) -> bytes:
    digest = hashlib.sha224(account_record(holder, subaccount)).digest()
    return checksum(digest) + digest


def derive_account_identifier(
    holder: Principal | str, subaccount: bytes | None = None
) -> str:
    """Derive the 64-char hex account identifier. Raises InvalidIdentityError."""
    return derive_account_identifier_bytes(holder, subaccount).hex()


def parse_account_identifier(account_id: str) -> bytes:
    """Decode and checksum-verify a hex account identifier."""
    if len(account_id) != ACCOUNT_ID_LENGTH * 2:
        raise InvalidAccountIdentifierError(
            account_id, f"expected {ACCOUNT_ID_LENGTH * 2} hex chars, got {len(account_id)}"
        )
    try:
        raw = bytes.fromhex(account_id)
    except ValueError:
        raise InvalidAccountIdentifierError(account_id, "not a hex string") from None

    crc, digest = raw[:CHECKSUM_LENGTH], raw[CHECKSUM_LENGTH:]
    if checksum(digest) != crc:
        raise InvalidAccountIdentifierError(account_id, "checksum mismatch")
    return raw


def is_valid_account_identifier(account_id: str) -> bool:
    try:
        parse_account_identifier(account_id)
    except InvalidAccountIdentifierError:
        return False
    return True
