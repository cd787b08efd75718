"""Tests for src/core/bignum/normalize.py — canonical form."""

from src.core.bignum import BigInt, is_normalized, normalize


class TestNormalize:
    def test_trims_leading_zero_limbs(self):
        b = normalize(BigInt.from_limbs([1, 0, 0]))
        assert b.length == 1
        assert b.limbs() == (1,)

    def test_all_zero_becomes_single_zero_limb(self):
        b = normalize(BigInt.from_limbs([0, 0, 0]))
        assert b.length == 1
        assert b.limbs() == (0,)

    def test_empty_becomes_zero(self):
        assert normalize(BigInt()).limbs() == (0,)

    def test_keeps_inner_zero_limbs(self):
        b = normalize(BigInt.from_limbs([0, 0, 7, 0]))
        assert b.limbs() == (0, 0, 7)

    def test_returns_same_object(self):
        b = BigInt.from_limbs([3, 0])
        assert normalize(b) is b

    def test_capacity_unchanged(self):
        b = BigInt.from_limbs([1, 0, 0, 0, 0])
        assert b.capacity == 8
        normalize(b)
        assert b.capacity == 8

    def test_idempotent_on_canonical(self):
        b = BigInt.from_int(2**70 + 3)
        before = b.limbs()
        normalize(b)
        assert b.limbs() == before

    def test_twice_equals_once(self):
        for limbs in ([0], [0, 0], [5, 0, 0], [0, 9, 0], [1, 2, 3]):
            once = normalize(BigInt.from_limbs(limbs)).limbs()
            twice = normalize(normalize(BigInt.from_limbs(limbs))).limbs()
            assert once == twice


class TestIsNormalized:
    def test_canonical(self):
        assert is_normalized(BigInt.zero())
        assert is_normalized(BigInt.from_int(2**32))

    def test_not_canonical(self):
        assert not is_normalized(BigInt())
        assert not is_normalized(BigInt.from_limbs([0, 0]))
        assert not is_normalized(BigInt.from_limbs([4, 0]))
