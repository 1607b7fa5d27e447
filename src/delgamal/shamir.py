"""Polynomial t-out-of-n secret sharing over Z/qZ.

A secret s is hidden as the constant term of a random polynomial f of
degree t. Share i is the point (i, f(i)), i = 1 .. n. Any t + 1 points
determine f and hence f(0) = s; t or fewer points say nothing about s.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .errors import InvalidArgumentError
from .interfaces import Scalar, ScalarFieldOps, Share


@dataclass(frozen=True)
class PolynomialSharing:
    """Stateless implementation of the SecretSharing interface."""

    def split(self, secret: Scalar, t: int, n: int, field: ScalarFieldOps) -> List[Share]:
        """Split *secret* into *n* shares, any *t* + 1 of which recover it.

        Args:
            secret: Constant term of the sharing polynomial.
            t: Degree of the polynomial.
            n: Number of shares, with ids 1 .. n.
            field: Z/qZ in which coefficients and evaluations live.

        Raises:
            InvalidArgumentError: If t < 0, t >= n, or n >= q (ids would
                collide mod q).
        """
        if t < 0:
            raise InvalidArgumentError(f"t must be >= 0; got {t}")
        if t >= n:
            raise InvalidArgumentError(f"t must be < n (t+1 shares reconstruct); got t={t}, n={n}")
        if n >= field.modulus:
            raise InvalidArgumentError(f"n must be < field modulus {field.modulus}; got {n}")

        # coef[0] is the secret, coef[k] the coefficient of x^k.
        coef = [field.element(secret)] + [field.rand() for _ in range(t)]

        shares: List[Share] = []
        for i in range(1, n + 1):
            x = field.element(i)
            y = coef[-1]
            for c in reversed(coef[:-1]):
                y = field.add(field.mul(y, x), c)
            shares.append(Share(id=i, value=y))
        return shares

    def recover(self, shares: Sequence[Share], field: ScalarFieldOps) -> Scalar:
        """Interpolate f(0) from all supplied shares."""
        if not shares:
            raise InvalidArgumentError("no shares supplied")

        ids = [s.id for s in shares]
        secret = field.element(0)
        for i, share in enumerate(shares):
            basis = self.lagrange_basis(i, ids, field)
            secret = field.add(secret, field.mul(field.element(share.value), basis))
        return secret

    def lagrange_basis(self, index: int, node_ids: Sequence[int], field: ScalarFieldOps) -> Scalar:
        """Lagrange basis polynomial for node *index*, evaluated at x = 0.

            L_j(0) = prod_{m != j} x_m / (x_m - x_j)

        Raises:
            InvalidArgumentError: On an out-of-range index or on two nodes
                equal mod q.
        """
        if not 0 <= index < len(node_ids):
            raise InvalidArgumentError(f"index {index} out of range for {len(node_ids)} nodes")

        x_j = field.element(node_ids[index])
        num = field.element(1)
        den = field.element(1)
        for m, node in enumerate(node_ids):
            if m == index:
                continue
            x_m = field.element(node)
            if x_m == x_j:
                raise InvalidArgumentError(
                    f"duplicate node id {node_ids[index]} at positions {index} and {m}"
                )
            num = field.mul(num, x_m)
            den = field.mul(den, field.sub(x_m, x_j))

        return field.mul(num, field.inv(den))
