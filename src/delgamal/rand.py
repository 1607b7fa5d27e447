from __future__ import annotations

import secrets

from .errors import InvalidArgumentError, RandomnessSourceError


def random_bits(bits: int) -> bytes:
    """Return ceil(bits/8) bytes of secure randomness, big-endian.

    The two most significant of the requested bits are forced to 1, so the
    product of two such values never loses bit length. If bits is not a
    multiple of 8, the leading padding bits of byte 0 are forced to 0.
    Costs two bits of entropy; not meant for small bit counts.
    """
    if bits <= 2:
        raise InvalidArgumentError(f"bits must be > 2; got {bits}")

    nbytes = (bits + 7) // 8
    try:
        out = bytearray(secrets.token_bytes(nbytes))
    except (OSError, NotImplementedError) as e:
        raise RandomnessSourceError("secure randomness source unavailable") from e

    pad = 8 * nbytes - bits
    out[0] &= 0xFF >> pad
    out[0] |= 0xC0 >> pad
    return bytes(out)


def random_below(n: int) -> int:
    """Uniform integer in [0, n) from the secure randomness source."""
    if n <= 0:
        raise InvalidArgumentError(f"upper bound must be positive; got {n}")
    try:
        return secrets.randbelow(n)
    except (OSError, NotImplementedError) as e:
        raise RandomnessSourceError("secure randomness source unavailable") from e
