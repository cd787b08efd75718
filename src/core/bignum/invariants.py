"""Invariant checkers for limb buffers.

Each function returns True when the invariant holds; ``check_all()`` returns the
ids of the violated ones (empty = canonical).
"""

from __future__ import annotations

from typing import Callable

from .errors import BigNumInvariantError
from .limbs import LIMB_MASK, BigInt


def inv_initialized(b: BigInt) -> bool:
    return b.length > 0


def inv_no_leading_zero(b: BigInt) -> bool:
    if b.length <= 1:
        return True
    return b[b.length - 1] != 0


def inv_zero_canonical(b: BigInt) -> bool:
    if not b.is_zero():
        return True
    return b.length == 1


def inv_capacity_covers_length(b: BigInt) -> bool:
    return b.capacity >= b.length


def inv_limbs_in_range(b: BigInt) -> bool:
    return all(isinstance(x, int) and 0 <= x <= LIMB_MASK for x in b.limbs())


INVARIANT_REGISTRY: dict[str, Callable[[BigInt], bool]] = {
    "inv_initialized": inv_initialized,
    "inv_no_leading_zero": inv_no_leading_zero,
    "inv_zero_canonical": inv_zero_canonical,
    "inv_capacity_covers_length": inv_capacity_covers_length,
    "inv_limbs_in_range": inv_limbs_in_range,
}


def check_all(buffer: BigInt) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(buffer)
    ]


def require_canonical(buffer: BigInt) -> BigInt:
    violations = check_all(buffer)
    if violations:
        raise BigNumInvariantError(violations)
    return buffer
