"""Value types shared across the big-integer engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .limbs import BigInt


@unique
class ParseFailure(Enum):
    """Why a decimal string was rejected."""
    EMPTY = "empty"
    SIGN_ONLY = "sign_only"
    NEGATIVE = "negative"
    NON_DIGIT = "non_digit"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of ``try_parse_decimal()``.

    ``value`` is set only when ``ok`` is True; ``failure`` and ``position``
    only when it is False.
    """

    ok: bool
    value: BigInt | None = None
    failure: ParseFailure | None = None
    position: int | None = None
