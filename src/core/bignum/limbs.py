"""Growable limb buffer: the storage behind every big integer.

A ``BigInt`` holds unsigned 32-bit limbs in little-endian order (index 0 is the
least significant word) plus a logical ``length``. The backing list is sized to
``capacity`` and grows geometrically (4, 8, 16, ...) through ``reserve()``.

Sibling modules in this package (parser, multiplier, canonicalizer) operate on
``_limbs`` directly; nothing outside the package should.
"""

from __future__ import annotations

import sys
from typing import Iterable

from .errors import LimbCapacityError

LIMB_BITS: int = 32
LIMB_BASE: int = 1 << LIMB_BITS
LIMB_MASK: int = LIMB_BASE - 1

# First allocation size; every later growth doubles.
MIN_CAPACITY: int = 4
# Largest limb count the platform can index.
MAX_CAPACITY: int = sys.maxsize


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_limb(name: str, value: int) -> None:
    _require_int(name, value)
    if not (0 <= value <= LIMB_MASK):
        raise ValueError(f"{name} must be in [0, 2**{LIMB_BITS})")


def _significant(limbs: tuple[int, ...]) -> tuple[int, ...]:
    n = len(limbs)
    while n > 0 and limbs[n - 1] == 0:
        n -= 1
    return limbs[:n]


class BigInt:
    """Non-negative integer stored as a growable sequence of 32-bit limbs.

    A fresh instance is empty (capacity 0, length 0). Call ``set_to_zero()``
    or build it through ``zero()``, ``from_int()`` or the parser before use.
    """

    __slots__ = ("_limbs", "_length")

    def __init__(self) -> None:
        self._limbs: list[int] = []
        self._length = 0

    # -- Construction --------------------------------------------------------

    @classmethod
    def zero(cls) -> BigInt:
        out = cls()
        out.set_to_zero()
        return out

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> BigInt:
        """Build a buffer holding ``limbs`` verbatim (no normalization)."""
        out = cls()
        for i, limb in enumerate(limbs):
            require_limb(f"limbs[{i}]", limb)
            out.push(limb)
        return out

    @classmethod
    def from_int(cls, value: int) -> BigInt:
        """Canonical buffer for a non-negative Python int."""
        _require_int("value", value)
        if value < 0:
            raise ValueError("value must be non-negative")
        if value == 0:
            return cls.zero()
        out = cls()
        while value:
            out.push(value & LIMB_MASK)
            value >>= LIMB_BITS
        return out

    def copy(self) -> BigInt:
        out = BigInt()
        out.reserve(self._length)
        out._limbs[: self._length] = self._limbs[: self._length]
        out._length = self._length
        return out

    # -- Storage -------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self._limbs)

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        _require_int("length", value)
        if not (0 <= value <= self.capacity):
            raise ValueError(f"length must be in [0, capacity={self.capacity}]")
        self._length = value

    def reserve(self, capacity: int) -> None:
        """Ensure room for at least ``capacity`` limbs.

        Growth starts at ``MIN_CAPACITY`` and doubles. Raises
        ``LimbCapacityError`` if doubling would pass ``MAX_CAPACITY`` or the
        interpreter cannot allocate the storage.
        """
        _require_int("capacity", capacity)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        current = len(self._limbs)
        if current >= capacity:
            return
        new_capacity = current if current else MIN_CAPACITY
        while new_capacity < capacity:
            if new_capacity > (MAX_CAPACITY >> 1):
                raise LimbCapacityError(capacity)
            new_capacity <<= 1
        try:
            self._limbs.extend([0] * (new_capacity - current))
        except MemoryError as exc:
            raise LimbCapacityError(capacity) from exc

    def set_to_zero(self) -> None:
        self.reserve(1)
        self._limbs[0] = 0
        self._length = 1

    def push(self, limb: int) -> None:
        """Append ``limb`` above the current most-significant limb."""
        require_limb("limb", limb)
        self.reserve(self._length + 1)
        self._limbs[self._length] = limb
        self._length += 1

    def release(self) -> None:
        """Drop the backing storage; the buffer returns to the empty state."""
        self._limbs = []
        self._length = 0

    # -- Reading -------------------------------------------------------------

    def limbs(self) -> tuple[int, ...]:
        """Significant limbs, least significant first."""
        return tuple(self._limbs[: self._length])

    def is_zero(self) -> bool:
        for i in range(self._length - 1, -1, -1):
            if self._limbs[i]:
                return False
        return True

    def to_int(self) -> int:
        value = 0
        for i in range(self._length - 1, -1, -1):
            value = (value << LIMB_BITS) | self._limbs[i]
        return value

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> int:
        _require_int("index", index)
        if not (0 <= index < self._length):
            raise IndexError("limb index out of range")
        return self._limbs[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return _significant(self.limbs()) == _significant(other.limbs())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"0x{limb:08x}" for limb in self.limbs())
        return f"BigInt(length={self._length}, capacity={self.capacity}, limbs=[{body}])"
