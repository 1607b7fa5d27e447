"""Distributed (threshold) hashed ElGamal over Schnorr groups."""

from .core import (
    Ciphertext,
    Dec,
    DecryptionShare,
    Enc,
    KeyGen,
    Params,
    PrivateKey,
    PrivateKeyShare,
    PublicKey,
    Recover,
)
from .errors import (
    ElGamalError,
    FieldConstructionError,
    InvalidArgumentError,
    KeyDestroyedError,
    RandomnessSourceError,
    RetryLimitExceededError,
)
from .instantiation import make_params
from .interfaces import (
    KDF,
    GroupElement,
    GroupFieldOps,
    Scalar,
    ScalarFieldOps,
    SecretSharing,
    Share,
)
from .rand import random_bits
from .schnorr import SchnorrGroup, SearchLimits, generate_schnorr_group

__all__ = [
    "Ciphertext",
    "Dec",
    "DecryptionShare",
    "ElGamalError",
    "Enc",
    "FieldConstructionError",
    "GroupElement",
    "GroupFieldOps",
    "InvalidArgumentError",
    "KDF",
    "KeyDestroyedError",
    "KeyGen",
    "Params",
    "PrivateKey",
    "PrivateKeyShare",
    "PublicKey",
    "RandomnessSourceError",
    "Recover",
    "RetryLimitExceededError",
    "Scalar",
    "ScalarFieldOps",
    "SchnorrGroup",
    "SearchLimits",
    "SecretSharing",
    "Share",
    "generate_schnorr_group",
    "make_params",
    "random_bits",
]
