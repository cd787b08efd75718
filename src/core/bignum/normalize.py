"""Canonical form for limb buffers.

A buffer is canonical when it has no most-significant zero limb, except that
zero itself is exactly one zero limb.
"""

from __future__ import annotations

from .limbs import BigInt


def normalize(buffer: BigInt) -> BigInt:
    """Trim leading zero limbs in place and return ``buffer``.

    An all-zero (or empty) buffer ends up as the single-zero-limb form.
    Normalizing a canonical buffer is a no-op.
    """
    limbs = buffer._limbs
    n = buffer._length
    while n > 0 and limbs[n - 1] == 0:
        n -= 1
    if n == 0:
        buffer.set_to_zero()
    else:
        buffer._length = n
    return buffer


def is_normalized(buffer: BigInt) -> bool:
    n = buffer.length
    if n == 0:
        return False
    return n == 1 or buffer[n - 1] != 0
