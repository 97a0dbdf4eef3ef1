"""
flopchain errors: the two kinds of programmer error the library raises.

Both derive from FlopChainError (a ValueError), so a single except
clause catches everything the library signals.
"""


class FlopChainError(ValueError):
    """Base class for flopchain errors."""


def _fmt_shape(shape):
    return f"{shape[0]}x{shape[1]}"


class DimensionMismatch(FlopChainError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes
    ----------
    left, right : tuple of int
        (nrow, ncol) of the left and right operand.
    op : str
        "+" or "*".
    position : int or None
        Index of the left factor when raised while validating a chain,
        None for a plain binary operation.
    """

    def __init__(self, left, right, op, position=None):
        self.left = tuple(left)
        self.right = tuple(right)
        self.op = op
        self.position = position

        if op == "+":
            what = "shapes differ"
        else:
            what = f"inner dimensions differ ({self.left[1]} != {self.right[0]})"
        where = f" at factors {position}, {position + 1}" if position is not None else ""
        super().__init__(
            f"dimension mismatch for '{op}'{where}: {what}; "
            f"A: {_fmt_shape(self.left)}, B: {_fmt_shape(self.right)}"
        )


class InputShapeError(FlopChainError):
    """Names list length does not match the number of matrices."""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"expected {expected} names, got {got}")
