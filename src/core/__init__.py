"""
Core arithmetic (functional core, no IO)
"""

from .bignum import (
    BigInt,
    multiply,
    parse_decimal,
    to_hex,
    try_parse_decimal,
)

__all__ = [
    "BigInt",
    "multiply",
    "parse_decimal",
    "to_hex",
    "try_parse_decimal",
]
