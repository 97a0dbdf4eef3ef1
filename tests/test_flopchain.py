"""Tests for flopchain value algebra, reductions and reports."""
import numpy as np
import pytest

import flopchain
from flopchain import (
    ShapeMatrix, DimensionMismatch, InputShapeError, FlopChainError,
    matrix_sum, matrix_product, sum_of, product_of, chain_report,
)


def test_version():
    assert flopchain.__version__ == "0.2.0"


def test_author():
    assert flopchain.__author__ == "flopchain contributors"


def test_leaf():
    A = ShapeMatrix(2, 10)
    assert A.nrow == 2
    assert A.ncol == 10
    assert A.shape == (2, 10)
    assert A.add_ops == 0
    assert A.mult_ops == 0
    assert A.flops == 0


def test_leaf_accepts_numpy_integers():
    A = ShapeMatrix(np.int64(3), np.int32(4))
    assert A.shape == (3, 4)
    assert type(A.nrow) is int
    assert type(A.ncol) is int
    assert A == ShapeMatrix(3, 4)
    B = A * ShapeMatrix(np.int64(4), 2)
    assert type(B.flops) is int
    assert B.flops == 3 * 4 * 3


def test_leaf_rejects_bad_dims():
    with pytest.raises(ValueError):
        ShapeMatrix(0, 3)
    with pytest.raises(ValueError):
        ShapeMatrix(3, -1)
    with pytest.raises(TypeError):
        ShapeMatrix(2.0, 3)
    with pytest.raises(TypeError):
        ShapeMatrix(True, 3)
    with pytest.raises(TypeError):
        ShapeMatrix(np.float64(2.0), 3)
    with pytest.raises(ValueError):
        ShapeMatrix(np.int64(0), 3)


def test_add():
    A = ShapeMatrix(2, 10)
    B = ShapeMatrix(2, 10)
    C = A + B
    assert C.shape == (2, 10)
    assert C.add_ops == 20
    assert C.mult_ops == 0
    assert C.flops == 20


def test_mul():
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 10)
    C = A * B
    assert C.shape == (2, 10)
    assert C.add_ops == 90
    assert C.mult_ops == 100
    assert C.flops == 190


def test_matmul_operator_alias():
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 10)
    assert A @ B == A * B


def test_inplace_mul_rebinds():
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 10)
    D = ShapeMatrix(10, 2)
    original = D
    D *= A * B
    assert D.shape == (10, 10)
    assert D.flops == 570
    assert original.flops == 0


def test_inplace_add_rebinds():
    A = ShapeMatrix(3, 4)
    A += ShapeMatrix(3, 4)
    A += ShapeMatrix(3, 4)
    assert A.shape == (3, 4)
    assert A.flops == 24


def test_mixed_expression_shape():
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 10)
    C = ShapeMatrix(10, 3)
    D = ShapeMatrix(3, 8)
    E = ShapeMatrix(2, 7)
    F = ShapeMatrix(7, 8)
    G = A * B * C * D + E * F
    G2 = (A * (B * C)) * D + E * F
    assert G.shape == (2, 8)
    assert G2.shape == (2, 8)


def test_cost_rules():
    """Cost of a derived value = operand costs + cost of the operation."""
    np.random.seed(7)
    for _ in range(50):
        r, m, c = (int(x) for x in np.random.randint(1, 30, size=3))
        A = ShapeMatrix(r, m) + ShapeMatrix(r, m)
        B = ShapeMatrix(m, c) * ShapeMatrix(c, c)
        P = A * B
        assert P.shape == (r, c)
        assert P.flops == A.flops + B.flops + r * m * (2 * c - 1)
        assert P.flops == A.flops + B.flops + flopchain.mul_cost(A, B)
        S = A + A
        assert S.flops == 2 * A.flops + r * m
        assert S.flops == 2 * A.flops + flopchain.add_cost(A, A)
        assert P.flops >= max(A.flops, B.flops)


def test_associativity_of_shape_not_flops():
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 3)
    C = ShapeMatrix(3, 10)
    left = (A * B) * C
    right = A * (B * C)
    assert left.shape == right.shape == (2, 10)
    assert left.flops == 164
    assert right.flops == 475
    assert left != right


def test_add_shape_mismatch():
    with pytest.raises(DimensionMismatch) as exc:
        ShapeMatrix(2, 10) + ShapeMatrix(3, 10)
    assert exc.value.left == (2, 10)
    assert exc.value.right == (3, 10)
    assert exc.value.op == "+"
    assert exc.value.position is None


def test_mul_shape_mismatch():
    with pytest.raises(DimensionMismatch) as exc:
        ShapeMatrix(2, 5) * ShapeMatrix(4, 10)
    assert "A: 2x5, B: 4x10" in str(exc.value)
    assert exc.value.op == "*"


def test_errors_are_value_errors():
    assert issubclass(DimensionMismatch, FlopChainError)
    assert issubclass(InputShapeError, FlopChainError)
    assert issubclass(FlopChainError, ValueError)


def test_non_matrix_operand():
    A = ShapeMatrix(2, 2)
    with pytest.raises(TypeError):
        A + 1
    with pytest.raises(TypeError):
        A * 2.0
    assert (A == (2, 2)) is False


def test_immutable():
    A = ShapeMatrix(2, 2)
    with pytest.raises(AttributeError):
        A.nrow = 3
    with pytest.raises(AttributeError):
        A._add_ops = 5


def test_equality_is_structural_over_flops():
    """Same shape and total flops compare equal even with a different add/mult split."""
    X = ShapeMatrix(2, 2) * ShapeMatrix(2, 2)
    Y = ShapeMatrix(2, 2) + ShapeMatrix(2, 2) + ShapeMatrix(2, 2) + ShapeMatrix(2, 2)
    assert (X.add_ops, X.mult_ops) == (4, 8)
    assert (Y.add_ops, Y.mult_ops) == (12, 0)
    assert X == Y
    assert hash(X) == hash(Y)
    assert ShapeMatrix(2, 3) != ShapeMatrix(3, 2)
    assert len({ShapeMatrix(4, 4), ShapeMatrix(4, 4)}) == 1


def test_str_and_repr():
    C = ShapeMatrix(2, 5) * ShapeMatrix(5, 10)
    assert str(C) == "<dims: 2 x 10, flops: 190>"
    assert str(ShapeMatrix(3, 4)) == "<dims: 3 x 4, flops: 0>"
    assert repr(C) == "ShapeMatrix(2 x 10, adds=90, mults=100, flops=190)"


# === Reductions ===

def test_sum_reductions():
    A, B, C = ShapeMatrix(2, 10), ShapeMatrix(2, 10), ShapeMatrix(2, 10)
    expected = (A + B) + C
    assert matrix_sum([A, B, C]) == expected
    assert sum_of(A, B, C) == expected
    assert matrix_sum(iter([A, B, C])) == expected
    assert expected.flops == 40


def test_product_reductions():
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 10)
    C = ShapeMatrix(10, 3)
    D = ShapeMatrix(3, 8)
    expected = ((A * B) * C) * D
    assert matrix_product([A, B, C, D]) == expected
    assert product_of(A, B, C, D) == expected
    assert expected.shape == (2, 8)
    assert expected.flops == 380


def test_single_element_reductions():
    A = ShapeMatrix(4, 4)
    assert matrix_sum([A]) == A
    assert product_of(A) == A


def test_empty_reductions():
    with pytest.raises(ValueError):
        matrix_sum([])
    with pytest.raises(ValueError):
        product_of()


def test_reduction_propagates_mismatch():
    with pytest.raises(DimensionMismatch):
        matrix_product([ShapeMatrix(2, 3), ShapeMatrix(3, 4), ShapeMatrix(5, 6)])


# === Report ===

def test_chain_report():
    chain = [ShapeMatrix(40, 20), ShapeMatrix(20, 30),
             ShapeMatrix(30, 10), ShapeMatrix(10, 30)]
    report = chain_report(chain, ["A", "B", "C", "D"])
    assert report["num_factors"] == 4
    assert report["shape"] == (40, 30)
    assert report["optimal_order"] == "((A * (B * C)) * D)"
    assert report["min_flops"] == 50200
    assert report["left_to_right_order"] == "(((A * B) * C) * D)"
    assert report["left_to_right_flops"] == 93600
    assert report["left_to_right_flops"] == matrix_product(chain).flops
    assert report["savings"] == 43400
    assert report["speedup"] == 1.86
    assert report["num_orders"] == 5


def test_chain_report_empty():
    report = chain_report([])
    assert report["num_factors"] == 0
    assert report["shape"] is None
    assert report["optimal_order"] == ""
    assert report["min_flops"] == 0
    assert report["speedup"] == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
