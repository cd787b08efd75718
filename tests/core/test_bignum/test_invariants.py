"""Tests for src/core/bignum/invariants.py."""

import pytest

from src.core.bignum import (
    INVARIANT_REGISTRY,
    BigInt,
    BigNumInvariantError,
    check_all,
    parse_decimal,
    require_canonical,
)


class TestCanonicalValuesPass:
    def test_registry_has_5_invariants(self):
        assert len(INVARIANT_REGISTRY) == 5

    @pytest.mark.parametrize("text", ["0", "1", "4294967296", "99999999999999999999999999"])
    def test_parsed_values_pass(self, text):
        assert check_all(parse_decimal(text)) == []

    def test_require_canonical_returns_buffer(self):
        b = BigInt.from_int(10)
        assert require_canonical(b) is b


class TestViolations:
    def test_empty_buffer(self):
        violations = check_all(BigInt())
        assert "inv_initialized" in violations
        assert "inv_zero_canonical" in violations

    def test_leading_zero(self):
        assert check_all(BigInt.from_limbs([1, 0])) == ["inv_no_leading_zero"]

    def test_wide_zero(self):
        violations = check_all(BigInt.from_limbs([0, 0]))
        assert "inv_no_leading_zero" in violations
        assert "inv_zero_canonical" in violations

    def test_limb_out_of_range(self):
        b = BigInt.from_int(1)
        b._limbs[0] = 2**32
        assert "inv_limbs_in_range" in check_all(b)

    def test_require_canonical_raises(self):
        with pytest.raises(BigNumInvariantError) as exc_info:
            require_canonical(BigInt.from_limbs([1, 0]))
        assert exc_info.value.violations == ["inv_no_leading_zero"]
