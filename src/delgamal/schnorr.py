"""Schnorr groups: prime-order-q subgroups of (Z/pZ)* with p = q*r + 1."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError, RetryLimitExceededError
from .gf import Zp, is_probable_prime
from .interfaces import GroupElement, Scalar
from .rand import random_bits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchnorrGroup:
    """Order-q subgroup G of the multiplicative group of integers mod p.

    Attributes:
        p: Prime modulus.
        q: Prime order of G; divides p - 1.
        g: Generator of G.
    """

    p: int
    q: int
    g: GroupElement

    def validate(self) -> None:
        """Re-check the group invariants; raise InvalidArgumentError on failure."""
        if not is_probable_prime(self.p):
            raise InvalidArgumentError(f"p is not prime: {self.p}")
        if not is_probable_prime(self.q):
            raise InvalidArgumentError(f"q is not prime: {self.q}")
        if (self.p - 1) % self.q != 0:
            raise InvalidArgumentError("q does not divide p - 1")
        zp = Zp(self.p)
        if zp.element(self.g) == 1:
            raise InvalidArgumentError("g is the identity")
        if zp.exp(self.g, Scalar(self.q)) != 1:
            raise InvalidArgumentError("g does not have order q")


@dataclass(frozen=True)
class SearchLimits:
    """Upper bounds on the rejection-sampling loops of group generation.

    Rejections are the normal path; a bound only turns a practically
    impossible non-termination into RetryLimitExceededError.
    """

    max_prime_attempts: int = 100_000
    max_modulus_attempts: int = 100_000
    max_generator_attempts: int = 1_000


def _random_prime(bits: int, attempts: int) -> int:
    for i in range(1, attempts + 1):
        # Top two bits set by random_bits, low bit set here.
        candidate = int.from_bytes(random_bits(bits), "big") | 1
        if is_probable_prime(candidate):
            logger.debug("found %d-bit prime q after %d attempts", bits, i)
            return candidate
    raise RetryLimitExceededError(f"no {bits}-bit prime found in {attempts} attempts")


def generate_schnorr_group(
    p_bits: int,
    q_bits: int,
    limits: Optional[SearchLimits] = None,
) -> SchnorrGroup:
    """Generate a Schnorr group with bitlen(p) = p_bits and bitlen(q) = q_bits.

    q_bits must be strictly less than p_bits, and both q_bits and
    p_bits - q_bits must exceed 2.

    Raises:
        InvalidArgumentError: On inconsistent bit lengths.
        RandomnessSourceError: If the secure randomness source fails.
        RetryLimitExceededError: If a search loop exhausts its bound.
    """
    if q_bits >= p_bits:
        raise InvalidArgumentError(f"q_bits must be < p_bits; got q_bits={q_bits}, p_bits={p_bits}")
    limits = limits or SearchLimits()
    r_bits = p_bits - q_bits

    q = _random_prime(q_bits, limits.max_prime_attempts)

    # p = r*q + 1. r and q both carry their top two bits, so r*q has exactly
    # p_bits bits and cannot be the largest p_bits value; +1 cannot overflow.
    for i in range(1, limits.max_modulus_attempts + 1):
        r = int.from_bytes(random_bits(r_bits), "big")
        candidate = r * q + 1
        if is_probable_prime(candidate):
            p = candidate
            logger.debug("found %d-bit prime p = r*q + 1 after %d attempts", p_bits, i)
            break
    else:
        raise RetryLimitExceededError(
            f"no prime p = r*q + 1 of {p_bits} bits in {limits.max_modulus_attempts} attempts"
        )

    # Any h^((p-1)/q) != 1 has order exactly q, since q is prime.
    zp = Zp(p)
    cofactor = Scalar((p - 1) // q)
    for i in range(1, limits.max_generator_attempts + 1):
        g = zp.exp(zp.rand_element(), cofactor)
        if g != 1:
            logger.debug("found generator after %d attempts", i)
            return SchnorrGroup(p=p, q=q, g=g)

    raise RetryLimitExceededError(f"no generator found in {limits.max_generator_attempts} attempts")
