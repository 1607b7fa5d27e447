"""Byte encodings for the public protocol values.

Each record is a 2-byte ASCII tag followed by its fields. Integers are a
4-byte big-endian length and the minimal big-endian magnitude; byte-string
fields are written verbatim. The ciphertext body c is the last field of
its record and runs to the end.

Decoders return None as ⊥ on malformed input. PrivateKey has no encoding.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .core import Ciphertext, DecryptionShare, PrivateKeyShare, PublicKey
from .errors import InvalidArgumentError
from .interfaces import GroupElement, Scalar
from .kdf import int_to_bytes

TAG_PUBLIC_KEY = b"PK"
TAG_KEY_SHARE = b"KS"
TAG_CIPHERTEXT = b"CT"
TAG_DECRYPTION_SHARE = b"DS"

_LEN_BYTES = 4


def _put_int(x: int) -> bytes:
    if x < 0:
        raise InvalidArgumentError(f"cannot encode negative integer {x}")
    body = int_to_bytes(x)
    return len(body).to_bytes(_LEN_BYTES, "big") + body


def _take_int(buf: bytes, off: int) -> Tuple[int, int]:
    end = off + _LEN_BYTES
    if end > len(buf):
        raise ValueError("truncated length prefix")
    size = int.from_bytes(buf[off:end], "big")
    if end + size > len(buf):
        raise ValueError("truncated integer")
    return int.from_bytes(buf[end:end + size], "big"), end + size


def _take_ints(buf: bytes, tag: bytes, count: int) -> Optional[Tuple[List[int], int]]:
    if not buf.startswith(tag):
        return None
    off = len(tag)
    out: List[int] = []
    try:
        for _ in range(count):
            v, off = _take_int(buf, off)
            out.append(v)
    except ValueError:
        return None
    return out, off


def _decode_exact(buf: bytes, tag: bytes, count: int) -> Optional[List[int]]:
    got = _take_ints(buf, tag, count)
    if got is None:
        return None
    values, off = got
    if off != len(buf):
        return None  # trailing bytes
    return values


def encode_public_key(pub: PublicKey) -> bytes:
    return TAG_PUBLIC_KEY + b"".join(_put_int(v) for v in (pub.p, pub.q, pub.g, pub.y))


def decode_public_key(data: bytes) -> Optional[PublicKey]:
    values = _decode_exact(data, TAG_PUBLIC_KEY, 4)
    if values is None:
        return None
    p, q, g, y = values
    return PublicKey(p=p, q=q, g=GroupElement(g), y=GroupElement(y))


def encode_key_share(share: PrivateKeyShare) -> bytes:
    return TAG_KEY_SHARE + _put_int(share.id) + _put_int(share.value)


def decode_key_share(data: bytes) -> Optional[PrivateKeyShare]:
    values = _decode_exact(data, TAG_KEY_SHARE, 2)
    if values is None:
        return None
    share_id, value = values
    if share_id < 1:
        return None  # custodian ids start at 1
    return PrivateKeyShare(id=share_id, value=Scalar(value))


def encode_ciphertext(ctxt: Ciphertext) -> bytes:
    return TAG_CIPHERTEXT + _put_int(ctxt.r) + ctxt.c


def decode_ciphertext(data: bytes) -> Optional[Ciphertext]:
    got = _take_ints(data, TAG_CIPHERTEXT, 1)
    if got is None:
        return None
    (r,), off = got
    return Ciphertext(r=GroupElement(r), c=bytes(data[off:]))


def encode_decryption_share(share: DecryptionShare) -> bytes:
    return TAG_DECRYPTION_SHARE + _put_int(share.id) + _put_int(share.value)


def decode_decryption_share(data: bytes) -> Optional[DecryptionShare]:
    values = _decode_exact(data, TAG_DECRYPTION_SHARE, 2)
    if values is None:
        return None
    share_id, value = values
    if share_id < 1:
        return None  # custodian ids start at 1
    return DecryptionShare(id=share_id, value=GroupElement(value))
