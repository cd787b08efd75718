"""
Kernel reference data.

- `src/kernels/bignum/` holds the reference constants and product/reject
  vectors (.yaml) that the Python core in `src/core/bignum/` is checked against.
"""
