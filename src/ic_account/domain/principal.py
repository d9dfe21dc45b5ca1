"""Principal — the holder identity that owns ledger funds.

Byte form is opaque (0–29 bytes). Text form is the canonical grouped
base32 encoding:

    text = group5(lower(base32(crc32_be(raw) + raw)))   e.g. "2vxsx-fae"
"""

import base64
import binascii
from dataclasses import dataclass

from src.ic_common.checksum import CHECKSUM_LENGTH, checksum
from src.ic_common.errors import InvalidIdentityError

MAX_PRINCIPAL_LENGTH = 29
_ANONYMOUS_BYTES = b"\x04"
_GROUP_SIZE = 5


@dataclass(frozen=True)
class Principal:
    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes):
            raise InvalidIdentityError(f"principal bytes must be bytes, got {type(self.raw).__name__}")
        if len(self.raw) > MAX_PRINCIPAL_LENGTH:
            raise InvalidIdentityError(
                f"principal is {len(self.raw)} bytes, max {MAX_PRINCIPAL_LENGTH}"
            )

    # --- constructors ---

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> "Principal":
        return cls(bytes(data))

    @classmethod
    def from_hex(cls, text: str) -> "Principal":
        try:
            return cls(bytes.fromhex(text))
        except ValueError:
            raise InvalidIdentityError(f"not a hex string: {text!r}") from None

    @classmethod
    def from_text(cls, text: str) -> "Principal":
        """Parse canonical text form. Checksum and canonical spelling are both enforced."""
        compact = text.replace("-", "").upper()
        compact += "=" * (-len(compact) % 8)
        try:
            decoded = base64.b32decode(compact)
        except (binascii.Error, ValueError):
            raise InvalidIdentityError(f"not a principal: {text!r}") from None

        if len(decoded) < CHECKSUM_LENGTH:
            raise InvalidIdentityError(f"principal text too short: {text!r}")
        crc, raw = decoded[:CHECKSUM_LENGTH], decoded[CHECKSUM_LENGTH:]
        if checksum(raw) != crc:
            raise InvalidIdentityError(f"principal checksum mismatch: {text!r}")

        principal = cls(raw)
        if principal.to_text() != text:
            raise InvalidIdentityError(f"principal text is not canonical: {text!r}")
        return principal

    @classmethod
    def anonymous(cls) -> "Principal":
        return cls(_ANONYMOUS_BYTES)

    @classmethod
    def management_canister(cls) -> "Principal":
        return cls(b"")

    # --- encodings ---

    def to_bytes(self) -> bytes:
        return self.raw

    def to_text(self) -> str:
        encoded = base64.b32encode(checksum(self.raw) + self.raw).decode("ascii")
        encoded = encoded.rstrip("=").lower()
        return "-".join(
            encoded[i : i + _GROUP_SIZE] for i in range(0, len(encoded), _GROUP_SIZE)
        )

    def is_anonymous(self) -> bool:
        return self.raw == _ANONYMOUS_BYTES

    def __str__(self) -> str:
        return self.to_text()
