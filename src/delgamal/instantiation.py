from __future__ import annotations

from typing import Optional

from .core import Params
from .gf import Zp, Zq
from .kdf import HASH_BYTE_SIZE, sha512_kdf
from .schnorr import SearchLimits
from .shamir import PolynomialSharing


def make_params(limits: Optional[SearchLimits] = None) -> Params:
    """Default wiring: prime fields via ecdsa, polynomial sharing, SHA-512 KDF."""
    return Params(
        group_field=Zp,
        scalar_field=Zq,
        sharing=PolynomialSharing(),
        KDF=sha512_kdf,
        kdf_len=HASH_BYTE_SIZE,
        limits=limits or SearchLimits(),
    )
