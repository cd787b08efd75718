#!/usr/bin/env python3
"""
Fail-closed validator for src/kernels/bignum/schoolbook_mul_v1.yaml.

- checks schema + required fields
- checks the recorded constants against the Python core
- runs every product/reject vector through the core
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.bignum import (  # noqa: E402
    LIMB_BITS,
    MIN_CAPACITY,
    DecimalParseError,
    ParseFailure,
    multiply,
    parse_decimal,
    to_hex,
    try_parse_decimal,
)
from src.core.bignum.reference import load_reference, reference_path  # noqa: E402
from src.integration.console import MAX_LINE_CHARS  # noqa: E402

VECTORS_PATH = reference_path()


@dataclass(frozen=True)
class CheckError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise CheckError(f"{name} must be an object")
    return obj


def _require_list(obj: Any, *, name: str) -> list[Any]:
    if not isinstance(obj, list):
        raise CheckError(f"{name} must be a list")
    return obj


def _require_str(obj: Any, *, name: str, allow_empty: bool = False) -> str:
    if not isinstance(obj, str) or (not allow_empty and not obj.strip()):
        raise CheckError(f"{name} must be a non-empty string")
    return obj


def load_vectors(path: Path = VECTORS_PATH) -> dict[str, Any]:
    try:
        return load_reference(path)
    except ValueError as exc:
        raise CheckError(str(exc)) from exc


def validate_vectors(root: dict[str, Any]) -> int:
    """Check every vector; return how many were checked."""
    constants = _require_mapping(root.get("constants"), name="constants")
    expected = {
        "limb_bits": LIMB_BITS,
        "min_capacity": MIN_CAPACITY,
        "max_line_chars": MAX_LINE_CHARS,
    }
    for key, value in expected.items():
        if constants.get(key) != value:
            raise CheckError(f"constants.{key}={constants.get(key)!r} but core uses {value!r}")

    seen_ids: set[str] = set()
    checked = 0

    for idx, obj in enumerate(_require_list(root.get("products"), name="products")):
        vec = _require_mapping(obj, name=f"products[{idx}]")
        vid = _require_str(vec.get("id"), name=f"products[{idx}].id")
        if vid in seen_ids:
            raise CheckError(f"duplicate vector id: {vid}")
        seen_ids.add(vid)
        try:
            a = parse_decimal(_require_str(vec.get("a"), name=f"{vid}.a"))
            b = parse_decimal(_require_str(vec.get("b"), name=f"{vid}.b"))
        except DecimalParseError as exc:
            raise CheckError(f"{vid}: {exc}") from exc
        want = _require_str(vec.get("hex"), name=f"{vid}.hex")
        for label, got in (("a*b", to_hex(multiply(a, b))), ("b*a", to_hex(multiply(b, a)))):
            if got != want:
                raise CheckError(f"{vid}: {label} = {got}, expected {want}")
        checked += 1

    for idx, obj in enumerate(_require_list(root.get("rejects"), name="rejects")):
        vec = _require_mapping(obj, name=f"rejects[{idx}]")
        vid = _require_str(vec.get("id"), name=f"rejects[{idx}].id")
        if vid in seen_ids:
            raise CheckError(f"duplicate vector id: {vid}")
        seen_ids.add(vid)
        text = _require_str(vec.get("text"), name=f"{vid}.text", allow_empty=True)
        try:
            want = ParseFailure(_require_str(vec.get("failure"), name=f"{vid}.failure"))
        except ValueError as exc:
            raise CheckError(f"{vid}: unknown failure {vec.get('failure')!r}") from exc
        res = try_parse_decimal(text)
        if res.ok:
            raise CheckError(f"{vid}: {text!r} parsed but should be rejected")
        if res.failure is not want:
            raise CheckError(f"{vid}: failure {res.failure} but expected {want}")
        checked += 1

    return checked


def main(argv: list[str] | None = None) -> int:
    _ = argv
    if not VECTORS_PATH.exists():
        print(f"missing vectors file: {VECTORS_PATH}", file=sys.stderr)
        return 2
    try:
        checked = validate_vectors(load_vectors(VECTORS_PATH))
    except CheckError as exc:
        print(f"bignum vectors invalid: {exc}", file=sys.stderr)
        return 1
    print(f"ok ({checked} vectors)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
