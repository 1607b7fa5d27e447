from __future__ import annotations

import secrets

import pytest

from delgamal.errors import InvalidArgumentError, RandomnessSourceError
from delgamal.rand import random_below, random_bits


def test_random_bits_whole_bytes():
    out = random_bits(24)
    assert len(out) == 3
    # top two requested bits forced to 1
    assert out[0] & 0xC0 == 0xC0


def test_random_bits_partial_byte():
    out = random_bits(14)
    assert len(out) == 2
    # two padding bits are zero, the next two are forced to 1
    assert out[0] & 0xC0 == 0
    assert out[0] & 0x30 == 0x30
    assert int.from_bytes(out, "big").bit_length() == 14


def test_random_bits_rejects_small_counts():
    with pytest.raises(InvalidArgumentError):
        random_bits(2)
    with pytest.raises(ValueError):
        random_bits(0)


def test_random_source_failure_is_typed(monkeypatch):
    def boom(*_args):
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "token_bytes", boom)
    monkeypatch.setattr(secrets, "randbelow", boom)

    with pytest.raises(RandomnessSourceError):
        random_bits(64)
    with pytest.raises(RandomnessSourceError):
        random_below(1000)


def test_random_below_range():
    for _ in range(50):
        assert 0 <= random_below(7) < 7
    with pytest.raises(InvalidArgumentError):
        random_below(0)
