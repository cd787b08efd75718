"""Hexadecimal rendering of limb buffers."""

from __future__ import annotations

from .limbs import BigInt


def to_hex(buffer: BigInt) -> str:
    """``0x``-prefixed lowercase hex; zero renders as ``0x0``.

    The top limb is unpadded and every lower limb is exactly 8 digits.
    """
    if buffer.is_zero():
        return "0x0"
    limbs = buffer.limbs()
    top = len(limbs) - 1
    while limbs[top] == 0:
        top -= 1
    parts = [f"0x{limbs[top]:x}"]
    parts.extend(f"{limbs[k]:08x}" for k in range(top - 1, -1, -1))
    return "".join(parts)
