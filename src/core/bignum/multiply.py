"""Schoolbook multiplication of limb buffers.

O(an * bn) limb products. Every partial sum ``r[i+j] + a[i]*b[j] + carry`` is
below 2**64, so one carry pass per row suffices and the product never needs
more than ``an + bn`` limbs.
"""

from __future__ import annotations

from .limbs import LIMB_BITS, LIMB_MASK, BigInt
from .normalize import normalize


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """Return ``a * b`` as a new canonical buffer; neither operand is modified."""
    if a.is_zero() or b.is_zero():
        return BigInt.zero()

    an = a.length
    bn = b.length
    rn = an + bn

    out = BigInt()
    out.reserve(rn)
    out.length = rn

    r = out._limbs
    a_limbs = a._limbs
    b_limbs = b._limbs
    for i in range(an):
        ai = a_limbs[i]
        carry = 0
        for j in range(bn):
            partial = r[i + j] + ai * b_limbs[j] + carry
            r[i + j] = partial & LIMB_MASK
            carry = partial >> LIMB_BITS
        # r[i + bn] has not been written by any earlier row.
        r[i + bn] = carry

    return normalize(out)
