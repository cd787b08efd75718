"""Decimal text to limb buffer.

The number is accumulated one digit at a time with ``result = result * 10 +
digit``. Each step runs a single carry pass over the limbs and appends a new
limb only when a nonzero carry falls off the top, so the buffer stays
canonical between steps.
"""

from __future__ import annotations

from .errors import DecimalParseError
from .limbs import LIMB_BITS, LIMB_MASK, BigInt, require_limb
from .normalize import normalize
from .types import ParseFailure, ParseResult

# C-locale isspace(): space, \t, \n, \v, \f, \r.
ASCII_WHITESPACE = frozenset(" \t\n\v\f\r")


def mul_small_add(buffer: BigInt, factor: int, addend: int) -> None:
    """In place: ``buffer = buffer * factor + addend`` for single-limb operands."""
    require_limb("factor", factor)
    require_limb("addend", addend)
    if buffer.length == 0:
        buffer.set_to_zero()

    limbs = buffer._limbs
    carry = addend
    for i in range(buffer.length):
        # < 2**64: (2**32 - 1)**2 + (2**32 - 1)
        cur = limbs[i] * factor + carry
        limbs[i] = cur & LIMB_MASK
        carry = cur >> LIMB_BITS
    if carry:
        buffer.push(carry)
    elif factor == 0:
        # A zero factor can leave zero limbs above the addend.
        normalize(buffer)


def mul10_add(buffer: BigInt, digit: int) -> None:
    """In place: ``buffer = buffer * 10 + digit``."""
    if not isinstance(digit, int) or isinstance(digit, bool) or not (0 <= digit <= 9):
        raise ValueError("digit must be an int in [0, 9]")
    mul_small_add(buffer, 10, digit)


def _failed(failure: ParseFailure, position: int) -> ParseResult:
    return ParseResult(ok=False, failure=failure, position=position)


def try_parse_decimal(text: str) -> ParseResult:
    """
    Parse an unsigned decimal literal without raising on bad input.

    Accepted shape: optional leading whitespace, an optional single ``+``, one
    or more ASCII digits. The first whitespace character after the digits ends
    the number; whatever follows it is ignored.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")

    result = BigInt.zero()
    end = len(text)
    pos = 0
    while pos < end and text[pos] in ASCII_WHITESPACE:
        pos += 1

    signed = False
    if pos < end and text[pos] == "+":
        signed = True
        pos += 1

    if pos == end or text[pos] in ASCII_WHITESPACE:
        return _failed(ParseFailure.SIGN_ONLY if signed else ParseFailure.EMPTY, pos)
    if text[pos] == "-" and not signed:
        return _failed(ParseFailure.NEGATIVE, pos)

    for pos in range(pos, end):
        ch = text[pos]
        if ch in ASCII_WHITESPACE:
            break
        if not ("0" <= ch <= "9"):
            return _failed(ParseFailure.NON_DIGIT, pos)
        mul10_add(result, ord(ch) - ord("0"))

    return ParseResult(ok=True, value=normalize(result))


def parse_decimal(text: str) -> BigInt:
    """Parse an unsigned decimal literal; raises ``DecimalParseError`` on bad input."""
    res = try_parse_decimal(text)
    if not res.ok:
        assert res.failure is not None and res.position is not None
        raise DecimalParseError(res.failure, res.position)
    assert res.value is not None
    return res.value
