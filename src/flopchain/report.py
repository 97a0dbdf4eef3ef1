"""
flopchain Report: cost summary of a matrix chain.

Analyzes a chain and returns a report with:
  - Number of factors and result shape
  - Optimal parenthesization and its FLOPs
  - Left-to-right evaluation cost, savings and speedup

Usage:
    import flopchain
    report = flopchain.chain_report([A, B, C, D])
    print(report["optimal_order"], report["speedup"])
"""

from flopchain.chain.optimizer import optimal_mult_order, left_to_right_cost, prepare_chain
from flopchain.chain.orders import count_parenthesizations


def _left_to_right_order(names):
    if not names:
        return ""
    order = names[0]
    for name in names[1:]:
        order = f"({order} * {name})"
    return order


def chain_report(matrices, names=None):
    """
    Compare the optimal and the left-to-right evaluation of a chain.

    Parameters
    ----------
    matrices : sequence of ShapeMatrix
        A compatible chain.
    names : sequence of str, optional
        One label per factor. Defaults to M1, M2, ...

    Returns
    -------
    dict
        num_factors, shape, optimal_order, min_flops, left_to_right_order,
        left_to_right_flops, savings, speedup, num_orders.
    """
    matrices, names = prepare_chain(matrices, names)
    n = len(matrices)

    order, min_flops = optimal_mult_order(matrices, names)
    naive = left_to_right_cost(matrices)

    if min_flops > 0:
        speedup = round(naive / min_flops, 2)
    else:
        speedup = 1.0

    return {
        "num_factors": n,
        "shape": (matrices[0].nrow, matrices[-1].ncol) if n else None,
        "optimal_order": order,
        "min_flops": min_flops,
        "left_to_right_order": _left_to_right_order(names),
        "left_to_right_flops": naive,
        "savings": naive - min_flops,
        "speedup": speedup,
        "num_orders": count_parenthesizations(n),
    }
