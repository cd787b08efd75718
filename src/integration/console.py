"""
Interactive multiplier console (imperative shell).

Reads two decimal numbers from stdin, one prompted line each, multiplies them
with the `bignum` core and prints the product in hex. All IO lives here; the
arithmetic stays in `src.core.bignum`.

Exit status: 0 on success, 1 on an input error, invalid input, or a number too
large to hold.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from ..core.bignum import (
    BigNumInvariantError,
    LimbCapacityError,
    multiply,
    require_canonical,
    to_hex,
    try_parse_decimal,
)


# Matches a 4096-byte line buffer: 4095 characters, newline included.
MAX_LINE_CHARS = 4095

FIRST_PROMPT = "Enter first (decimal) number: "
SECOND_PROMPT = "Enter second (decimal) number: "
INPUT_ERROR_MESSAGE = "Input error."
INVALID_INPUT_MESSAGE = "Invalid input. Please enter decimal digits only."
CAPACITY_ERROR_MESSAGE = "capacity overflow"
RESULT_PREFIX = "Result (hex): "


@dataclass(frozen=True)
class ConsoleConfig:
    max_line_chars: int = MAX_LINE_CHARS
    first_prompt: str = FIRST_PROMPT
    second_prompt: str = SECOND_PROMPT

    def __post_init__(self) -> None:
        if not isinstance(self.max_line_chars, int) or isinstance(self.max_line_chars, bool) or self.max_line_chars <= 0:
            raise ValueError("max_line_chars must be a positive int")


class ConsoleInputError(Exception):
    """Raised when a line cannot be read (EOF or over-long line)."""


def read_line(stream: TextIO, *, max_chars: int) -> str:
    """
    Read one line of at most ``max_chars`` characters (newline included).

    A final line without a trailing newline is accepted. EOF before any
    character, or a line that does not fit, raises ``ConsoleInputError``.
    """
    line = stream.readline(max_chars + 1)
    if not line:
        raise ConsoleInputError("end of input")
    if len(line) > max_chars:
        raise ConsoleInputError(f"line longer than {max_chars} characters")
    return line


def _prompt(stdout: TextIO, text: str) -> None:
    stdout.write(text)
    stdout.flush()


def run(
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    *,
    config: ConsoleConfig = ConsoleConfig(),
) -> int:
    try:
        _prompt(stdout, config.first_prompt)
        a_text = read_line(stdin, max_chars=config.max_line_chars)
        _prompt(stdout, config.second_prompt)
        b_text = read_line(stdin, max_chars=config.max_line_chars)
    except (ConsoleInputError, OSError, UnicodeDecodeError):
        print(INPUT_ERROR_MESSAGE, file=stderr)
        return 1

    try:
        a = try_parse_decimal(a_text)
        b = try_parse_decimal(b_text)
        if not (a.ok and b.ok):
            print(INVALID_INPUT_MESSAGE, file=stderr)
            return 1
        assert a.value is not None and b.value is not None
        product = require_canonical(multiply(a.value, b.value))
    except LimbCapacityError:
        print(CAPACITY_ERROR_MESSAGE, file=stderr)
        return 1
    except BigNumInvariantError as exc:
        print(f"internal error: {exc}", file=stderr)
        return 1

    print(f"{RESULT_PREFIX}{to_hex(product)}", file=stdout)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    _ = argv
    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
