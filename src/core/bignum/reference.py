"""
Loader for the reference constants and vectors in
`src/kernels/bignum/schoolbook_mul_v1.yaml`.

The YAML file records the limb width, initial capacity and console line limit
alongside known products and rejected inputs. Tools and tests read it through
this module so there is one parser for the file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

REFERENCE_SCHEMA = "bignum/schoolbook-mul/v1"


def reference_path() -> Path:
    # src/core/bignum/reference.py -> src/ -> kernels/bignum/schoolbook_mul_v1.yaml
    return Path(__file__).resolve().parents[2] / "kernels" / "bignum" / "schoolbook_mul_v1.yaml"


def load_reference(path: Path | None = None) -> dict[str, Any]:
    """Parse a reference file; raises ValueError on a wrong shape or schema."""
    p = reference_path() if path is None else path
    obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise ValueError("reference YAML must be a mapping")
    schema = obj.get("schema")
    if schema != REFERENCE_SCHEMA:
        raise ValueError(f"unsupported reference schema: {schema!r}")
    for key in ("constants", "products", "rejects"):
        if key not in obj:
            raise ValueError(f"reference YAML missing '{key}'")
    return dict(obj)


@lru_cache(maxsize=1)
def _cached_reference() -> dict[str, Any]:
    return load_reference()


def reference_constants() -> dict[str, Any]:
    """Constants block of the shipped reference file (cached)."""
    return dict(_cached_reference()["constants"])
