"""
Parenthesization cost table
===========================

Prints every way to evaluate a short matrix chain, with the FLOPs of
each, and marks the one the optimizer picks.

Usage:
  pip install -e .
  python examples/parenthesization_table.py
"""

import flopchain
from flopchain import ShapeMatrix


def print_table(matrices, names):
    order, best = flopchain.optimal_mult_order(matrices, names, verbose=True)
    rows = flopchain.all_parenthesizations(matrices, names)
    width = max(len(s) for s, _ in rows)

    print(f"\n{'Order':<{width}} {'Adds':>10} {'Mults':>10} {'FLOPs':>10}")
    print("-" * (width + 33))
    for s, result in rows:
        mark = "  <- optimal" if s == order else ""
        print(f"{s:<{width}} {result.add_ops:>10,} {result.mult_ops:>10,} "
              f"{result.flops:>10,}{mark}")

    report = flopchain.chain_report(matrices, names)
    print(f"\n{report['num_orders']} orders, optimal {best:,} FLOPs, "
          f"left-to-right {report['left_to_right_flops']:,} "
          f"(speedup {report['speedup']}x)")


def main():
    A = ShapeMatrix(2, 5)
    B = ShapeMatrix(5, 3)
    C = ShapeMatrix(3, 10)

    print(f"(A * B) * C: {(A * B) * C!r}")
    print(f"A * (B * C): {A * (B * C)!r}")

    print("\n=== 4-factor chain ===")
    print_table(
        [ShapeMatrix(40, 20), ShapeMatrix(20, 30),
         ShapeMatrix(30, 10), ShapeMatrix(10, 30)],
        ["A", "B", "C", "D"],
    )


if __name__ == "__main__":
    main()
