from __future__ import annotations

import pytest

from delgamal import Ciphertext, DecryptionShare, PrivateKeyShare, PublicKey
from delgamal.codec import (
    decode_ciphertext,
    decode_decryption_share,
    decode_key_share,
    decode_public_key,
    encode_ciphertext,
    encode_decryption_share,
    encode_key_share,
    encode_public_key,
)
from delgamal.errors import InvalidArgumentError
from delgamal.interfaces import GroupElement, Scalar


def test_public_key_layout():
    raw = encode_public_key(PublicKey(p=23, q=11, g=GroupElement(4), y=GroupElement(16)))
    assert raw == (
        b"PK"
        + b"\x00\x00\x00\x01\x17"
        + b"\x00\x00\x00\x01\x0b"
        + b"\x00\x00\x00\x01\x04"
        + b"\x00\x00\x00\x01\x10"
    )
    assert decode_public_key(raw) == PublicKey(p=23, q=11, g=GroupElement(4), y=GroupElement(16))


def test_zero_is_encoded_empty():
    raw = encode_decryption_share(DecryptionShare(id=1, value=GroupElement(0)))
    assert raw == b"DS" + b"\x00\x00\x00\x01\x01" + b"\x00\x00\x00\x00"
    assert decode_decryption_share(raw) == DecryptionShare(id=1, value=GroupElement(0))


def test_ciphertext_body_is_verbatim():
    body = bytes(range(64))
    raw = encode_ciphertext(Ciphertext(r=GroupElement(2**1000 + 7), c=body))
    assert raw.endswith(body)
    assert decode_ciphertext(raw) == Ciphertext(r=GroupElement(2**1000 + 7), c=body)


def test_key_share_decodes():
    share = PrivateKeyShare(id=6, value=Scalar(2**255 - 19))
    assert decode_key_share(encode_key_share(share)) == share


def test_decoders_reject_malformed():
    raw = encode_public_key(PublicKey(p=23, q=11, g=GroupElement(4), y=GroupElement(16)))
    assert decode_public_key(raw[:-1]) is None  # truncated
    assert decode_public_key(raw + b"\x00") is None  # trailing bytes
    assert decode_public_key(b"garbage") is None
    assert decode_key_share(raw) is None  # wrong tag
    assert decode_ciphertext(b"CT\x00\x00") is None
    assert decode_decryption_share(b"") is None


def test_negative_integers_are_rejected():
    with pytest.raises(InvalidArgumentError):
        encode_key_share(PrivateKeyShare(id=-1, value=Scalar(3)))


def test_decoders_reject_non_positive_ids():
    zero_id = b"\x00\x00\x00\x00" + b"\x00\x00\x00\x01\x05"
    assert decode_key_share(b"KS" + zero_id) is None
    assert decode_decryption_share(b"DS" + zero_id) is None
