"""Distributed hashed ElGamal: KeyGen, Enc, Dec, Recover.

A trusted dealer runs KeyGen once and hands one PrivateKeyShare to each of
n custodians. Anyone encrypts under the PublicKey. To decrypt, any t + 1
custodians each run Dec on the ciphertext, and Recover combines their
DecryptionShares in the exponent without ever rebuilding x or k.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import InvalidArgumentError, KeyDestroyedError
from .interfaces import KDF, GroupElement, GroupFieldOps, Scalar, ScalarFieldOps, SecretSharing
from .kdf import xor_bytes
from .schnorr import SchnorrGroup, SearchLimits, generate_schnorr_group

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Params:
    group_field: Callable[[int], GroupFieldOps]  # Z/pZ from p
    scalar_field: Callable[[int], ScalarFieldOps]  # Z/qZ from q
    sharing: SecretSharing
    KDF: KDF
    kdf_len: int  # KDF output length == plaintext length
    limits: SearchLimits = field(default_factory=SearchLimits)


@dataclass(frozen=True)
class PublicKey(SchnorrGroup):
    """Schnorr group plus y = g^x mod p."""

    y: GroupElement


class PrivateKey:
    """The unsplit exponent x, held by the dealer only until shares are out.

    Call destroy() (or use the key as a context manager) once the shares
    have been distributed. Reading x afterwards raises KeyDestroyedError.
    """

    __slots__ = ("_x",)

    def __init__(self, x: Scalar) -> None:
        self._x: Optional[Scalar] = x

    @property
    def x(self) -> Scalar:
        if self._x is None:
            raise KeyDestroyedError("private key has been destroyed")
        return self._x

    @property
    def destroyed(self) -> bool:
        return self._x is None

    def destroy(self) -> None:
        self._x = None

    def __enter__(self) -> "PrivateKey":
        return self

    def __exit__(self, *exc) -> None:
        self.destroy()

    def __repr__(self) -> str:
        state = "destroyed" if self._x is None else "redacted"
        return f"PrivateKey(<{state}>)"


@dataclass(frozen=True)
class PrivateKeyShare:
    id: int
    value: Scalar


@dataclass(frozen=True)
class Ciphertext:
    """r = g^k mod p; c = message XOR KDF(y^k mod p)."""

    r: GroupElement
    c: bytes


@dataclass(frozen=True)
class DecryptionShare:
    id: int
    value: GroupElement


def KeyGen(
    params: Params,
    p_bits: int,
    q_bits: int,
    t: int,
    n: int,
) -> Tuple[PublicKey, PrivateKey, List[PrivateKeyShare]]:
    """Dealer-side key generation for (t+1)-out-of-n decryption.

    Dealer:
      (p, q, g) := GenerateSchnorrGroup(p_bits, q_bits)
      x <-$ Z/qZ; y := g^x mod p
      (x_1 .. x_n) := Split(x, t, n) over Z/qZ

    Any t + 1 of the returned shares interpolate to x. The PrivateKey is
    returned for testing and must be destroyed once the shares are sent.
    """
    # Checked before the group search, which dominates KeyGen's cost.
    if not 0 <= t < n:
        raise InvalidArgumentError(f"need 0 <= t < n; got t={t}, n={n}")

    group = generate_schnorr_group(p_bits, q_bits, params.limits)

    # Z/qZ: the exponent x and the sharing polynomial.
    zq = params.scalar_field(group.q)
    # Z/pZ: everything inside G.
    zp = params.group_field(group.p)

    x = zq.rand()
    y = zp.exp(group.g, x)
    pub = PublicKey(p=group.p, q=group.q, g=group.g, y=y)

    shares = [
        PrivateKeyShare(id=s.id, value=s.value)
        for s in params.sharing.split(x, t, n, zq)
    ]
    logger.debug("generated %d key shares, any %d recover", n, t + 1)
    return pub, PrivateKey(x), shares


def Enc(params: Params, pub: PublicKey, message: bytes) -> Ciphertext:
    """k <-$ Z/qZ; r := g^k; c := message XOR KDF(y^k).

    message must be exactly params.kdf_len bytes; there is no padding.
    """
    if len(message) != params.kdf_len:
        raise InvalidArgumentError(
            f"message must be exactly {params.kdf_len} bytes; got {len(message)}"
        )

    zq = params.scalar_field(pub.q)
    zp = params.group_field(pub.p)

    # Fresh per call: reusing k reuses the pad.
    k = zq.rand()
    r = zp.exp(pub.g, k)
    key = params.KDF(zp.exp(pub.y, k))

    return Ciphertext(r=r, c=xor_bytes(bytes(message), key))


def Dec(params: Params, pub: PublicKey, key_share: PrivateKeyShare, ctxt: Ciphertext) -> DecryptionShare:
    """Custodian-side partial decryption: d_i := r^{x_i} mod p.

    The share is not checked against pub or ctxt; pairing them is the
    caller's job.
    """
    zp = params.group_field(pub.p)
    value = zp.exp(ctxt.r, key_share.value)
    return DecryptionShare(id=key_share.id, value=value)


def Recover(
    params: Params,
    pub: PublicKey,
    shares: Sequence[DecryptionShare],
    ctxt: Ciphertext,
) -> bytes:
    """Combine decryption shares in the exponent and unmask the message.

      L_i := LagrangeBasis(i, ids) over Z/qZ
      z := prod d_i^{L_i} mod p        (= r^x = y^k)
      message := c XOR KDF(z)

    Needs at least t + 1 shares of distinct custodians. Duplicate ids raise
    InvalidArgumentError; too few shares cannot be detected here and yield a
    wrong message.
    """
    if not shares:
        raise InvalidArgumentError("no decryption shares supplied")
    if len(ctxt.c) != params.kdf_len:
        raise InvalidArgumentError(
            f"ciphertext body must be {params.kdf_len} bytes; got {len(ctxt.c)}"
        )

    ids = [s.id for s in shares]
    if len(set(ids)) != len(ids):
        raise InvalidArgumentError(f"duplicate custodian ids in {ids}")

    zp = params.group_field(pub.p)
    # Lagrange coefficients live in Z/qZ, the field the key was shared over.
    zq = params.scalar_field(pub.q)

    z = zp.element(1)
    for i, share in enumerate(shares):
        basis = params.sharing.lagrange_basis(i, ids, zq)
        z = zp.mul(z, zp.exp(share.value, basis))

    return xor_bytes(ctxt.c, params.KDF(z))
