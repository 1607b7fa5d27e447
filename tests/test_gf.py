from __future__ import annotations

import pytest

from delgamal.errors import FieldConstructionError
from delgamal.gf import Zp, Zq, is_probable_prime
from delgamal.interfaces import GroupElement, Scalar


def test_field_rejects_composite_modulus():
    for bad in (0, 1, 4, 21, 2**64):
        with pytest.raises(FieldConstructionError):
            Zq(bad)
        with pytest.raises(FieldConstructionError):
            Zp(bad)


def test_field_keeps_modulus():
    assert Zp(23).modulus == 23
    assert Zq(11).modulus == 11


def test_scalar_arithmetic():
    zq = Zq(11)
    assert zq.add(Scalar(7), Scalar(9)) == 5
    assert zq.sub(Scalar(3), Scalar(4)) == 10
    assert zq.mul(Scalar(6), Scalar(2)) == 1
    assert zq.neg(Scalar(2)) == 9
    assert zq.inv(Scalar(6)) == 2
    assert zq.element(-1) == 10
    with pytest.raises(ZeroDivisionError):
        zq.inv(Scalar(0))
    for _ in range(20):
        assert 0 <= zq.rand() < 11


def test_group_arithmetic():
    zp = Zp(23)
    g = GroupElement(4)
    assert zp.exp(g, Scalar(2)) == 16
    assert zp.exp(g, Scalar(11)) == 1
    assert zp.exp(GroupElement(3), Scalar(14)) == 4
    assert zp.mul(GroupElement(12), GroupElement(2)) == 1
    assert zp.inv(GroupElement(12)) == 2
    # negative exponents go through the inverse
    assert zp.exp(g, Scalar(-2)) == zp.inv(GroupElement(16))
    for _ in range(20):
        assert 2 <= zp.rand_element() < 23


def test_is_probable_prime():
    assert is_probable_prime(2)
    assert is_probable_prime(2**127 - 1)
    assert not is_probable_prime(1)
    assert not is_probable_prime(-7)
    assert not is_probable_prime(561)  # Carmichael
