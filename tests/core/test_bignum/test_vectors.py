# [TESTER] v1

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from typing import Any

import pytest

from src.core.bignum import LIMB_BITS, MIN_CAPACITY, ParseFailure, multiply, parse_decimal, to_hex, try_parse_decimal
from src.core.bignum.reference import load_reference, reference_constants, reference_path
from src.integration.console import MAX_LINE_CHARS

ROOT = Path(__file__).resolve().parents[3]


def _load_vectors() -> dict[str, Any]:
    return load_reference()


def _import_tool(module_name: str, rel_path: str) -> Any:
    abs_path = ROOT / rel_path
    if not abs_path.exists():
        pytest.skip(f"tool not found at {abs_path}")
    spec = importlib.util.spec_from_file_location(module_name, abs_path)
    assert spec and spec.loader, f"Could not load spec for {module_name} from {abs_path}"
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


VECTORS = _load_vectors()


def test_constants_match_core() -> None:
    constants = VECTORS["constants"]
    assert constants["limb_bits"] == LIMB_BITS
    assert constants["min_capacity"] == MIN_CAPACITY
    assert constants["max_line_chars"] == MAX_LINE_CHARS


@pytest.mark.parametrize("vec", VECTORS["products"], ids=lambda v: v["id"])
def test_product_vector(vec: dict[str, Any]) -> None:
    a = parse_decimal(vec["a"])
    b = parse_decimal(vec["b"])
    assert to_hex(multiply(a, b)) == vec["hex"]
    assert to_hex(multiply(b, a)) == vec["hex"]
    assert int(vec["hex"], 16) == a.to_int() * b.to_int()


@pytest.mark.parametrize("vec", VECTORS["rejects"], ids=lambda v: v["id"])
def test_reject_vector(vec: dict[str, Any]) -> None:
    res = try_parse_decimal(vec["text"])
    assert res.ok is False
    assert res.failure is ParseFailure(vec["failure"])


def test_vector_checker_tool_accepts_shipped_file(capsys: pytest.CaptureFixture[str]) -> None:
    tool = _import_tool("tools.check_bignum_vectors", "tools/check_bignum_vectors.py")
    assert tool.main([]) == 0
    assert capsys.readouterr().out.startswith("ok (")


def test_vector_checker_tool_rejects_wrong_product() -> None:
    tool = _import_tool("tools.check_bignum_vectors", "tools/check_bignum_vectors.py")
    root = _load_vectors()
    root["products"][0]["hex"] = "0x1"
    with pytest.raises(tool.CheckError, match="expected 0x1"):
        tool.validate_vectors(root)


def test_vector_checker_tool_rejects_constant_drift() -> None:
    tool = _import_tool("tools.check_bignum_vectors", "tools/check_bignum_vectors.py")
    root = _load_vectors()
    root["constants"]["min_capacity"] = 8
    with pytest.raises(tool.CheckError, match="min_capacity"):
        tool.validate_vectors(root)


def test_reference_path_points_at_shipped_file() -> None:
    assert reference_path() == ROOT / "src" / "kernels" / "bignum" / "schoolbook_mul_v1.yaml"
    assert reference_constants()["limb_bits"] == 32


def test_load_reference_rejects_unknown_schema(tmp_path: Path) -> None:
    p = tmp_path / "bad.yaml"
    p.write_text("schema: something/else\nconstants: {}\nproducts: []\nrejects: []\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unsupported reference schema"):
        load_reference(p)


def test_load_reference_rejects_missing_section(tmp_path: Path) -> None:
    p = tmp_path / "bad.yaml"
    p.write_text("schema: bignum/schoolbook-mul/v1\nconstants: {}\nproducts: []\n", encoding="utf-8")
    with pytest.raises(ValueError, match="rejects"):
        load_reference(p)
