"""
flopchain Chain: matrix-chain multiplication ordering.

Finds the parenthesization of M1 * M2 * ... * Mn that minimizes total
FLOPs under the ShapeMatrix cost model:
  1. Dynamic program over sub-chains (Numba JIT kernel, int64 tables)
  2. Recursive rendering of the split table into a bracketed string
  3. Optional brute-force enumeration for cost tables and cross-checks

Example:
    from flopchain import ShapeMatrix
    from flopchain.chain import optimal_mult_order

    A, B, C, D = (ShapeMatrix(40, 20), ShapeMatrix(20, 30),
                  ShapeMatrix(30, 10), ShapeMatrix(10, 30))
    optimal_mult_order([A, B, C, D])
    # ("((M1 * (M2 * M3)) * M4)", 50200)

Author: flopchain contributors
"""

from flopchain.chain import fast
from flopchain.chain.optimizer import (
    optimal_mult_order, left_to_right_cost, check_chain,
    fits_int64, chain_tables_exact,
)
from flopchain.chain.orders import all_parenthesizations, count_parenthesizations

__all__ = [
    "optimal_mult_order", "left_to_right_cost", "check_chain",
    "fits_int64", "chain_tables_exact",
    "all_parenthesizations", "count_parenthesizations", "fast",
]
