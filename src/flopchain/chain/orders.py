"""
Chain Orders: enumerate every parenthesization of a matrix chain.

The number of full parenthesizations of n factors is the Catalan number
C(n-1), so enumeration is only practical for short chains. It is used to
print cost tables and to cross-check the optimizer.
"""

from math import comb

from flopchain.chain.optimizer import prepare_chain
from flopchain.matrix import ShapeMatrix


def count_parenthesizations(n):
    """Number of full parenthesizations of an n-factor chain (1 for n <= 1)."""
    if n <= 1:
        return 1
    m = n - 1
    return comb(2 * m, m) // (m + 1)


def all_parenthesizations(matrices, names=None):
    """
    Every full parenthesization of a chain with its evaluated result.

    Each factor is re-created as a zero-cost leaf of the same shape, so
    the flops of each result are exactly the multiplication cost of that
    tree, comparable with optimal_mult_order.

    Parameters
    ----------
    matrices : sequence of ShapeMatrix
        A compatible chain.
    names : sequence of str, optional
        One label per factor. Defaults to M1, M2, ...

    Returns
    -------
    list of (str, ShapeMatrix)
        Ordered by the position of the outermost split, then recursively
        by the left and right subtrees. Empty for an empty chain.
    """
    matrices, names = prepare_chain(matrices, names)
    n = len(matrices)
    if n == 0:
        return []
    if n == 1:
        return [(names[0], ShapeMatrix(matrices[0].nrow, matrices[0].ncol))]

    memo = {}

    def trees(i, j):
        if (i, j) in memo:
            return memo[(i, j)]
        if i == j:
            result = [(names[i], ShapeMatrix(matrices[i].nrow, matrices[i].ncol))]
        else:
            result = []
            for k in range(i, j):
                for left_str, left in trees(i, k):
                    for right_str, right in trees(k + 1, j):
                        result.append((f"({left_str} * {right_str})", left * right))
        memo[(i, j)] = result
        return result

    return trees(0, n - 1)
