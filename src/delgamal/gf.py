"""Prime fields Z/pZ and Z/qZ as distinct types.

Both are plain integers mod a prime underneath. They are kept as two
classes so that group elements (mod p) and exponents (mod q) cannot be
swapped silently.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecdsa.numbertheory import inverse_mod, is_prime

from .errors import FieldConstructionError
from .interfaces import GroupElement, Scalar
from .rand import random_below


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin via ecdsa; false-positive rate below 2^-80."""
    if n < 2:
        return False
    return is_prime(n)


def _check_modulus(modulus: int) -> None:
    if not isinstance(modulus, int) or not is_probable_prime(modulus):
        raise FieldConstructionError(f"field modulus must be prime; got {modulus!r}")


def _inv(value: int, modulus: int) -> int:
    value %= modulus
    if value == 0:
        raise ZeroDivisionError("0 has no inverse")
    return inverse_mod(value, modulus)


@dataclass(frozen=True)
class Zq:
    """Z/qZ: private exponents, polynomial coefficients, Lagrange weights."""

    modulus: int

    def __post_init__(self) -> None:
        _check_modulus(self.modulus)

    def rand(self) -> Scalar:
        return Scalar(random_below(self.modulus))

    def element(self, value: int) -> Scalar:
        return Scalar(value % self.modulus)

    def add(self, left: Scalar, right: Scalar) -> Scalar:
        return Scalar((left + right) % self.modulus)

    def sub(self, left: Scalar, right: Scalar) -> Scalar:
        return Scalar((left - right) % self.modulus)

    def mul(self, left: Scalar, right: Scalar) -> Scalar:
        return Scalar((left * right) % self.modulus)

    def neg(self, value: Scalar) -> Scalar:
        return Scalar((-value) % self.modulus)

    def inv(self, value: Scalar) -> Scalar:
        return Scalar(_inv(value, self.modulus))


@dataclass(frozen=True)
class Zp:
    """Z/pZ, used only for elements of the order-q subgroup G and its cosets."""

    modulus: int

    def __post_init__(self) -> None:
        _check_modulus(self.modulus)

    def element(self, value: int) -> GroupElement:
        return GroupElement(value % self.modulus)

    def rand_element(self) -> GroupElement:
        # [2, p): skip 0 and the identity.
        return GroupElement(random_below(self.modulus - 2) + 2)

    def mul(self, left: GroupElement, right: GroupElement) -> GroupElement:
        return GroupElement((left * right) % self.modulus)

    def exp(self, base: GroupElement, exponent: Scalar) -> GroupElement:
        # Exponents are not reduced: a share value may exceed q and still
        # act correctly on elements of order q.
        if exponent < 0:
            return GroupElement(pow(self.inv(base), -exponent, self.modulus))
        return GroupElement(pow(base, exponent, self.modulus))

    def inv(self, value: GroupElement) -> GroupElement:
        return GroupElement(_inv(value, self.modulus))
