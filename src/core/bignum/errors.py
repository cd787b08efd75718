"""Exception types for the big-integer engine.

``parse_decimal()`` raises ``DecimalParseError``; callers that prefer a plain
success/failure value use ``try_parse_decimal()`` instead.
"""

from __future__ import annotations

from .types import ParseFailure


class DecimalParseError(ValueError):
    """Raised when a string is not an unsigned decimal literal."""

    def __init__(self, failure: ParseFailure, position: int) -> None:
        self.failure = failure
        self.position = position
        super().__init__(f"invalid decimal input: {failure.value} at position {position}")


class LimbCapacityError(Exception):
    """Raised when a limb buffer cannot grow to the requested capacity."""

    def __init__(self, requested: int) -> None:
        self.requested = requested
        super().__init__(f"capacity overflow: cannot hold {requested} limbs")


class BigNumInvariantError(Exception):
    """Raised when a value violates one or more representation invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
