"""CRC-32 checksum used by account identifiers and principal text encoding.

Standard reflected CRC-32 (polynomial 0xEDB88320, init 0xFFFFFFFF, final
complement), identical to zlib's, so other ledger clients interoperate.
"""

import zlib

CHECKSUM_LENGTH = 4


def crc32(data: bytes) -> int:
    """Return the CRC-32 of ``data`` as an unsigned 32-bit int."""
    return zlib.crc32(data) & 0xFFFFFFFF


def checksum(data: bytes) -> bytes:
    """Return the CRC-32 of ``data`` as 4 big-endian bytes.

    >>> checksum(b"123456789").hex()
    'cbf43926'
    """
    return crc32(data).to_bytes(CHECKSUM_LENGTH, "big")
