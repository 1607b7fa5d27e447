"""Exception types raised by the distributed ElGamal core."""

from __future__ import annotations


class ElGamalError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(ElGamalError, ValueError):
    """A caller-supplied parameter violates a precondition."""


class RandomnessSourceError(ElGamalError):
    """The secure randomness source is unavailable. Never retried."""


class FieldConstructionError(ElGamalError, ValueError):
    """A finite field was requested over a modulus that is not prime."""


class RetryLimitExceededError(ElGamalError, RuntimeError):
    """A rejection-sampling loop ran past its configured bound."""


class KeyDestroyedError(ElGamalError, RuntimeError):
    """A private key was used after its destruction step."""
