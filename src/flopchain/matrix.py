"""
flopchain matrix: shape-only matrices that accumulate FLOP cost.

A ShapeMatrix carries no entries, only (nrow, ncol) and the number of
scalar additions and multiplications it took to produce it. Combining
values with + and * propagates both, so evaluating an expression over
leaves gives the result shape and the total cost of the real
computation.

Cost rules:
  A + B : one add per output element          -> A.nrow * A.ncol
  A * B : A.ncol mults, A.ncol - 1 adds per
          each of A.nrow * B.ncol outputs      -> A.nrow * A.ncol * (2 * B.ncol - 1)

Usage:
    from flopchain import ShapeMatrix
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 10)
    print(A * B)   # <dims: 2 x 10, flops: 190>
"""

from functools import reduce
import numbers
import operator

from flopchain.errors import DimensionMismatch


class ShapeMatrix:
    """
    Immutable shape-only matrix with a cumulative FLOP counter.

    Parameters
    ----------
    nrow, ncol : int
        Matrix dimensions, both >= 1.

    Examples
    --------
    >>> A = ShapeMatrix(2, 10)
    >>> (A + A).flops
    20
    >>> (ShapeMatrix(2, 5) * ShapeMatrix(5, 10)).shape
    (2, 10)
    """

    __slots__ = ("_nrow", "_ncol", "_add_ops", "_mult_ops")

    def __init__(self, nrow, ncol):
        dims = []
        for label, value in (("nrow", nrow), ("ncol", ncol)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"{label} must be an integer, got {type(value).__name__}")
            value = int(value)
            if value < 1:
                raise ValueError(f"{label} must be >= 1, got {value}")
            dims.append(value)
        self._init(dims[0], dims[1], 0, 0)

    @classmethod
    def _derived(cls, nrow, ncol, add_ops, mult_ops):
        """Build a value produced by the algebra (dimensions already checked)."""
        obj = object.__new__(cls)
        obj._init(nrow, ncol, add_ops, mult_ops)
        return obj

    def _init(self, nrow, ncol, add_ops, mult_ops):
        object.__setattr__(self, "_nrow", nrow)
        object.__setattr__(self, "_ncol", ncol)
        object.__setattr__(self, "_add_ops", add_ops)
        object.__setattr__(self, "_mult_ops", mult_ops)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def nrow(self):
        return self._nrow

    @property
    def ncol(self):
        return self._ncol

    @property
    def shape(self):
        return (self._nrow, self._ncol)

    @property
    def add_ops(self):
        """Scalar additions accumulated so far."""
        return self._add_ops

    @property
    def mult_ops(self):
        """Scalar multiplications accumulated so far."""
        return self._mult_ops

    @property
    def flops(self):
        """Total FLOPs: add_ops + mult_ops."""
        return self._add_ops + self._mult_ops

    # Algebra

    def __add__(self, other):
        if not isinstance(other, ShapeMatrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatch(self.shape, other.shape, "+")
        return ShapeMatrix._derived(
            self._nrow,
            self._ncol,
            self._add_ops + other._add_ops + self._nrow * self._ncol,
            self._mult_ops + other._mult_ops,
        )

    def __mul__(self, other):
        if not isinstance(other, ShapeMatrix):
            return NotImplemented
        if self._ncol != other._nrow:
            raise DimensionMismatch(self.shape, other.shape, "*")
        inner = self._nrow * self._ncol
        return ShapeMatrix._derived(
            self._nrow,
            other._ncol,
            self._add_ops + other._add_ops + inner * (other._ncol - 1),
            self._mult_ops + other._mult_ops + inner * other._ncol,
        )

    __matmul__ = __mul__

    # Structural equality over (nrow, ncol, flops)

    def __eq__(self, other):
        if not isinstance(other, ShapeMatrix):
            return NotImplemented
        return (self._nrow, self._ncol, self.flops) == (other._nrow, other._ncol, other.flops)

    def __hash__(self):
        return hash((self._nrow, self._ncol, self.flops))

    def __str__(self):
        return f"<dims: {self._nrow} x {self._ncol}, flops: {self.flops}>"

    def __repr__(self):
        return (f"ShapeMatrix({self._nrow} x {self._ncol}, adds={self._add_ops}, "
                f"mults={self._mult_ops}, flops={self.flops})")


def add_cost(A, B):
    """FLOPs added by A + B (one add per output element)."""
    return A.nrow * B.ncol


def mul_cost(A, B):
    """FLOPs added by A * B."""
    return A.nrow * A.ncol * (2 * B.ncol - 1)


def _fold(op, matrices, label):
    matrices = list(matrices)
    if not matrices:
        raise ValueError(f"{label} of an empty sequence")
    return reduce(op, matrices)


def matrix_sum(matrices):
    """
    Left-fold + over a non-empty sequence: ((m1 + m2) + m3) + ...

    Parameters
    ----------
    matrices : iterable of ShapeMatrix

    Returns
    -------
    ShapeMatrix
    """
    return _fold(operator.add, matrices, "matrix_sum")


def matrix_product(matrices):
    """
    Left-fold * over a non-empty sequence: ((m1 * m2) * m3) * ...

    Parameters
    ----------
    matrices : iterable of ShapeMatrix

    Returns
    -------
    ShapeMatrix
    """
    return _fold(operator.mul, matrices, "matrix_product")


def sum_of(*matrices):
    """Variadic form of matrix_sum: sum_of(A, B, C) == (A + B) + C."""
    return _fold(operator.add, matrices, "sum_of")


def product_of(*matrices):
    """Variadic form of matrix_product: product_of(A, B, C) == (A * B) * C."""
    return _fold(operator.mul, matrices, "product_of")
