"""`bignum`: arbitrary-precision unsigned integers on 32-bit limbs.

- growable little-endian limb buffer with geometric capacity growth,
- canonical form (no leading zero limb; zero is one zero limb),
- decimal parsing by repeated multiply-by-ten-and-add,
- schoolbook O(n*m) multiplication,
- ``0x``-prefixed hexadecimal rendering.

The reference constants and test vectors live in
`src/kernels/bignum/schoolbook_mul_v1.yaml`.

Public API:
- `parse_decimal(text) -> BigInt` (raises `DecimalParseError`)
- `try_parse_decimal(text) -> ParseResult`
- `multiply(a, b) -> BigInt`
- `to_hex(buffer) -> str`
- `normalize(buffer) -> BigInt`
"""

from .errors import BigNumInvariantError, DecimalParseError, LimbCapacityError
from .hexfmt import to_hex
from .invariants import INVARIANT_REGISTRY, check_all, require_canonical
from .limbs import LIMB_BITS, LIMB_MASK, MAX_CAPACITY, MIN_CAPACITY, BigInt
from .multiply import multiply
from .normalize import is_normalized, normalize
from .parse import mul10_add, mul_small_add, parse_decimal, try_parse_decimal
from .types import ParseFailure, ParseResult

__all__ = [
    "BigInt",
    "LIMB_BITS",
    "LIMB_MASK",
    "MIN_CAPACITY",
    "MAX_CAPACITY",
    "parse_decimal",
    "try_parse_decimal",
    "mul10_add",
    "mul_small_add",
    "multiply",
    "to_hex",
    "normalize",
    "is_normalized",
    "check_all",
    "require_canonical",
    "INVARIANT_REGISTRY",
    "ParseFailure",
    "ParseResult",
    "DecimalParseError",
    "LimbCapacityError",
    "BigNumInvariantError",
]
