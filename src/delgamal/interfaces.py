"""Interface definitions for the collaborators of the ElGamal core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NewType, Protocol, Sequence

# Z/pZ and Z/qZ are both "integers mod a prime", but a value of one must
# never be fed where the other is expected.
GroupElement = NewType("GroupElement", int)
Scalar = NewType("Scalar", int)


@dataclass(frozen=True)
class Share:
    """One evaluation (id, f(id)) of a sharing polynomial over Z/qZ."""

    id: int
    value: Scalar


class ScalarFieldOps(Protocol):
    """Arithmetic in Z/qZ: exponents, polynomial coefficients, Lagrange weights."""

    @property
    def modulus(self) -> int:
        ...

    def rand(self) -> Scalar:
        ...

    def element(self, value: int) -> Scalar:
        ...

    def add(self, left: Scalar, right: Scalar) -> Scalar:
        ...

    def sub(self, left: Scalar, right: Scalar) -> Scalar:
        ...

    def mul(self, left: Scalar, right: Scalar) -> Scalar:
        ...

    def neg(self, value: Scalar) -> Scalar:
        ...

    def inv(self, value: Scalar) -> Scalar:
        ...


class GroupFieldOps(Protocol):
    """Arithmetic in Z/pZ restricted to what the subgroup G needs."""

    @property
    def modulus(self) -> int:
        ...

    def element(self, value: int) -> GroupElement:
        ...

    def rand_element(self) -> GroupElement:
        ...

    def mul(self, left: GroupElement, right: GroupElement) -> GroupElement:
        ...

    def exp(self, base: GroupElement, exponent: Scalar) -> GroupElement:
        ...

    def inv(self, value: GroupElement) -> GroupElement:
        ...


class SecretSharing(Protocol):
    """Polynomial t-out-of-n sharing: any t+1 shares determine the secret."""

    def split(self, secret: Scalar, t: int, n: int, field: ScalarFieldOps) -> List[Share]:
        ...

    def recover(self, shares: Sequence[Share], field: ScalarFieldOps) -> Scalar:
        ...

    def lagrange_basis(self, index: int, node_ids: Sequence[int], field: ScalarFieldOps) -> Scalar:
        ...


class KDF(Protocol):
    """Fixed-output key derivation over a group element."""

    def __call__(self, element: GroupElement) -> bytes:
        ...
