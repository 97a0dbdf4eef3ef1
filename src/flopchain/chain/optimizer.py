"""
Chain Optimizer: optimal parenthesization of a matrix-chain product.

Given factors M1, ..., Mn with M_i.ncol == M_{i+1}.nrow, finds the
parenthesization minimizing total multiplication FLOPs under the
ShapeMatrix cost model (2 * inner - 1 FLOPs per output entry) with the
classic O(n^3) dynamic program.

Usage:
    from flopchain.chain import optimal_mult_order
    order, flops = optimal_mult_order([A, B, C, D], ["A", "B", "C", "D"])
    # ("((A * (B * C)) * D)", 50200)
"""

import numpy as np

from flopchain.chain import fast as _fast
from flopchain.errors import DimensionMismatch, InputShapeError
from flopchain.matrix import mul_cost

INT64_MAX = int(np.iinfo(np.int64).max)


def _resolve_names(matrices, names):
    n = len(matrices)
    if names is not None and len(names) > 0:
        names = [str(name) for name in names]
        if len(names) != n:
            raise InputShapeError(n, len(names))
        return names
    return [f"M{i + 1}" for i in range(n)]


def check_chain(matrices):
    """
    Raise DimensionMismatch at the first adjacent pair that cannot multiply.

    Parameters
    ----------
    matrices : sequence of ShapeMatrix
    """
    for i in range(len(matrices) - 1):
        left, right = matrices[i], matrices[i + 1]
        if left.ncol != right.nrow:
            raise DimensionMismatch(left.shape, right.shape, "*", position=i)


def prepare_chain(matrices, names=None):
    """Validate a chain and its names; return (list of matrices, names)."""
    matrices = list(matrices)
    names = _resolve_names(matrices, names)
    check_chain(matrices)
    return matrices, names


def fits_int64(matrices):
    """
    True if the DP over this chain cannot exceed the int64 range.

    Every candidate cost of a sub-chain of length L is a sum of L - 1
    terms nrow * inner * (2 * ncol - 1), each bounded by D**2 * (2*D - 1)
    with D the largest dimension in the chain.
    """
    if len(matrices) < 2:
        return True
    d = max(max(m.nrow, m.ncol) for m in matrices)
    return (len(matrices) - 1) * d * d * (2 * d - 1) <= INT64_MAX


def chain_tables_exact(matrices):
    """
    Same tables as fast.chain_tables_jit, computed with Python ints.

    Used when the chain is too large for int64. The tables are numpy
    object arrays so they index like the kernel's output.
    """
    n = len(matrices)
    rows = [m.nrow for m in matrices]
    cols = [m.ncol for m in matrices]
    min_cost = np.zeros((n, n), dtype=object)
    split = np.full((n, n), -1, dtype=object)
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            tail = 2 * cols[j] - 1
            best = None
            best_k = -1
            for k in range(i, j):
                q = min_cost[i, k] + min_cost[k + 1, j] + rows[i] * cols[k] * tail
                if best is None or q < best:
                    best = q
                    best_k = k
            min_cost[i, j] = best
            split[i, j] = best_k
    return min_cost, split


def render_order(split, names, i, j):
    """Render the parenthesization of factors i..j from a split table."""
    if i == j:
        return names[i]
    k = int(split[i, j])
    return f"({render_order(split, names, i, k)} * {render_order(split, names, k + 1, j)})"


def left_to_right_cost(matrices):
    """
    FLOPs of the plain left-associated product ((M1 * M2) * M3) * ...

    Parameters
    ----------
    matrices : sequence of ShapeMatrix
        A compatible chain.

    Returns
    -------
    int
        0 for chains shorter than 2.
    """
    matrices = list(matrices)
    check_chain(matrices)
    total = 0
    for k in range(1, len(matrices)):
        # running product is matrices[0].nrow x matrices[k - 1].ncol
        total += matrices[0].nrow * matrices[k - 1].ncol * (2 * matrices[k].ncol - 1)
    return total


def optimal_mult_order(matrices, names=None, verbose=False):
    """
    Find the cheapest parenthesization of a matrix chain.

    Parameters
    ----------
    matrices : sequence of ShapeMatrix
        Factors in multiplication order. Only their shapes are used;
        accumulated flops of the factors are ignored.
    names : sequence of str, optional
        One label per factor. Defaults to M1, M2, ...
    verbose : bool
        Print a one-line summary.

    Returns
    -------
    tuple of (str, int)
        Parenthesization string and its total multiplication FLOPs.
        ("", 0) for an empty chain.

    Raises
    ------
    InputShapeError
        A non-empty names list whose length differs from the chain's.
    DimensionMismatch
        Adjacent factors with M_i.ncol != M_{i+1}.nrow.
    """
    matrices, names = prepare_chain(matrices, names)
    n = len(matrices)

    if n == 0:
        return "", 0
    if n == 1:
        return names[0], 0
    if n == 2:
        order = f"({names[0]} * {names[1]})"
        flops = mul_cost(matrices[0], matrices[1])
    else:
        if fits_int64(matrices):
            rows, cols = _fast.pack_shapes(matrices)
            min_cost, split = _fast.chain_tables_jit(rows, cols)
        else:
            min_cost, split = chain_tables_exact(matrices)
        order = render_order(split, names, 0, n - 1)
        flops = int(min_cost[0, n - 1])

    if verbose:
        naive = left_to_right_cost(matrices)
        print(f"  [flopchain] {n} factors, {matrices[0].nrow:,} x {matrices[-1].ncol:,}: "
              f"{order} flops={flops:,} (left-to-right: {naive:,})")

    return order, flops
