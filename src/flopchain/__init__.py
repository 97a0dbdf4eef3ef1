"""
flopchain - FLOP accounting for shape-only matrix expressions
=============================================================

Tracks the shape and the accumulated FLOP cost of matrix expressions
without storing any entries, and finds the cheapest order to evaluate a
matrix-chain product.

Quick start:
    import flopchain
    from flopchain import ShapeMatrix

    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 10)
    print(A * B)                 # <dims: 2 x 10, flops: 190>

    # Cheapest parenthesization of a chain
    order, flops = flopchain.optimal_mult_order([A, B, ShapeMatrix(10, 3)])

    # Optimal vs left-to-right summary
    report = flopchain.chain_report([A, B, ShapeMatrix(10, 3)])

Author: flopchain contributors
License: MIT
"""

__version__ = "0.2.0"
__author__ = "flopchain contributors"

from flopchain.errors import FlopChainError, DimensionMismatch, InputShapeError
from flopchain.matrix import (
    ShapeMatrix, add_cost, mul_cost,
    matrix_sum, matrix_product, sum_of, product_of,
)
from flopchain.chain import (
    optimal_mult_order, left_to_right_cost, all_parenthesizations,
    count_parenthesizations,
)
from flopchain.report import chain_report
from flopchain import chain

__all__ = [
    "ShapeMatrix", "add_cost", "mul_cost",
    "matrix_sum", "matrix_product", "sum_of", "product_of",
    "optimal_mult_order", "left_to_right_cost", "all_parenthesizations",
    "count_parenthesizations", "chain_report", "chain",
    "FlopChainError", "DimensionMismatch", "InputShapeError",
]
