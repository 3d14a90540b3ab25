"""
Error kinds raised while parsing and balancing equations.

All failures are deterministic for a given input, so none of them is worth
retrying. Messages are meant for developers; mapping a ``kind`` to a
localized user-facing message is the caller's job.
"""

__all__ = [
    "BalanceError",
    "ParseFailure",
    "MissingEqualsSign",
    "SolveFailure",
    "UnbalancedElements",
    "InfiniteSolution",
    "ArithmeticInvalid",
    "InconsistentSolution",
]

from typing import Iterable, Tuple


class BalanceError(ValueError):
    """Base class for every failure reported by chembalance."""

    kind = "balance_error"


class ParseFailure(BalanceError):
    """A formula substring is not grammatically valid."""

    kind = "parse_failure"

    def __init__(self, offending_text: str, reason: str = "invalid formula"):
        self.offending_text = offending_text
        self.reason = reason
        super().__init__(f"{offending_text!r} is not a valid formula ({reason})")


class MissingEqualsSign(BalanceError):
    """The equation text has no reagent/product separator."""

    kind = "missing_equals_sign"

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"{text!r} has no '='; expected 'A + B + ... = C + D + ...'"
        )


class SolveFailure(BalanceError):
    """Base class for failures of the coefficient solver."""

    kind = "solve_failure"


class UnbalancedElements(SolveFailure):
    """An element appears on one side of the equation only."""

    kind = "unbalanced_elements"

    def __init__(self, elements: Iterable[str]):
        self.elements: Tuple[str, ...] = tuple(elements)
        super().__init__(
            "reagent and product element sets differ: "
            + ", ".join(self.elements)
        )


class InfiniteSolution(SolveFailure):
    """Too few independent element equations to pin a unique solution."""

    kind = "infinite_solution"

    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns
        super().__init__(
            f"{rows} element equation(s) cannot determine {columns} coefficients"
        )


class ArithmeticInvalid(SolveFailure):
    """Elimination reached a degenerate state (zero lcm operand)."""

    kind = "arithmetic_invalid"

    def __init__(self, a: int, b: int):
        self.operands = (a, b)
        super().__init__(f"lcm requires positive operands, got {a} and {b}")


class InconsistentSolution(SolveFailure):
    """Back-substitution produced a vector that does not balance every element."""

    kind = "inconsistent_solution"

    def __init__(self, elements: Iterable[str]):
        self.elements: Tuple[str, ...] = tuple(elements)
        super().__init__(
            "no positive coefficients balance: " + ", ".join(self.elements)
        )
