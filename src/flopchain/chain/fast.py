"""
Chain Fast: Numba JIT-compiled kernels for the matrix-chain DP.

The O(n^3) table fill is the only hot loop in the package. Shapes are
passed as two int64 arrays, rows[i] = M_i.nrow and cols[i] = M_i.ncol,
so the kernels never touch Python objects.

Costs are accumulated in int64. optimizer.fits_int64 decides whether a
chain fits; larger chains go through the Python-int DP in optimizer.py.

Author: flopchain contributors
"""

import numpy as np
from numba import njit


# ============================================================
# DP kernel: min_cost and split tables
# ============================================================

@njit(cache=True)
def chain_tables_jit(rows, cols):
    """Fill the matrix-chain DP tables.

    min_cost[i, j] is the minimum multiplication FLOPs for factors i..j,
    split[i, j] the k such that the optimum is (i..k) * (k+1..j).
    Ties keep the smallest k.

    Parameters
    ----------
    rows : numpy array of int64
        Row count of each factor.
    cols : numpy array of int64
        Column count of each factor.

    Returns
    -------
    tuple of 2D numpy arrays of int64
        (min_cost, split). split is -1 where undefined (i >= j).
    """
    n = len(rows)
    min_cost = np.zeros((n, n), dtype=np.int64)
    split = np.full((n, n), -1, np.int64)
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            tail = 2 * cols[j] - 1
            best = np.int64(0)
            best_k = -1
            for k in range(i, j):
                q = min_cost[i, k] + min_cost[k + 1, j] + rows[i] * cols[k] * tail
                if best_k < 0 or q < best:
                    best = q
                    best_k = k
            min_cost[i, j] = best
            split[i, j] = best_k
    return min_cost, split


# ============================================================
# Tree cost: re-evaluate a parenthesization from its split table
# ============================================================

@njit(cache=True)
def tree_cost_jit(rows, cols, split, i, j):
    """Total multiplication FLOPs of the tree encoded by split over i..j.

    Parameters
    ----------
    rows, cols : numpy arrays of int64
        Factor shapes.
    split : 2D numpy array of int64
        Split table (any valid one, not only the optimal one).
    i, j : int
        Inclusive factor range.

    Returns
    -------
    int64
    """
    if i >= j:
        return np.int64(0)
    k = split[i, j]
    return (tree_cost_jit(rows, cols, split, i, k)
            + tree_cost_jit(rows, cols, split, k + 1, j)
            + rows[i] * cols[k] * (2 * cols[j] - 1))


def pack_shapes(matrices):
    """Pack factor shapes into the (rows, cols) int64 arrays the kernels take."""
    rows = np.array([m.nrow for m in matrices], dtype=np.int64)
    cols = np.array([m.ncol for m in matrices], dtype=np.int64)
    return rows, cols
