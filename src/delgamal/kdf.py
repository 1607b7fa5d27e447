from __future__ import annotations

from hashlib import sha512

from .errors import InvalidArgumentError
from .interfaces import GroupElement

# SHA-512 output length; also the fixed plaintext length.
HASH_BYTE_SIZE = 64


def int_to_bytes(x: int) -> bytes:
    """Minimal big-endian encoding of a non-negative integer (0 -> b"")."""
    return x.to_bytes((x.bit_length() + 7) // 8, "big")


def sha512_kdf(element: GroupElement) -> bytes:
    """K = SHA-512(big-endian bytes of the group element)."""
    return sha512(int_to_bytes(element)).digest()


def xor_bytes(left: bytes, right: bytes) -> bytes:
    if len(left) != len(right):
        raise InvalidArgumentError(f"xor of unequal lengths {len(left)} and {len(right)}")
    return bytes(a ^ b for a, b in zip(left, right))
