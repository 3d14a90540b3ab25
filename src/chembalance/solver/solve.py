"""
Integer coefficient solver for chemical equations.

Balancing means finding a positive integer null vector of the element-by-
chemical matrix. The matrix is reduced with fraction-free Gaussian
elimination (rows are scaled by lcms instead of divided), then the
coefficients are recovered by back-substitution from an anchor of 1 on the
last chemical, rescaling with lcms so every value stays an integer.
"""

__all__ = ["solve", "eliminate", "back_substitute"]

from typing import List, Optional, Sequence

from loguru import logger

from ..config import CONFIG
from ..errors import InconsistentSolution, InfiniteSolution
from ..formula.model import ParsedFormula
from .arithmetic import lcm
from .matrix import CoefficientMatrix


def eliminate(matrix: CoefficientMatrix) -> None:
    """
    Forward elimination in place over pivots ``0 .. columns - 2``.

    A zero pivot is replaced by the first lower row with a nonzero entry in
    that column. When there is none, elimination carries on and the
    degenerate pivot surfaces during back-substitution.
    """
    for pivot in range(matrix.columns - 1):
        if matrix[pivot, pivot] == 0:
            for row in range(pivot + 1, matrix.rows):
                if matrix[row, pivot] != 0:
                    logger.debug(f"Swapping rows {pivot} and {row} for pivot {pivot}")
                    matrix.swap_rows(pivot, row)
                    break

        for row in range(pivot + 1, matrix.rows):
            matrix.cancel(pivot, row, pivot)


def back_substitute(matrix: CoefficientMatrix) -> List[int]:
    """
    Recover the minimal integer coefficients from an eliminated matrix.

    Each pivot row reads ``a*x + s = 0`` where ``s`` is the weighted sum of
    the already solved columns. With ``l = lcm(|a|, |s|)``, ``x`` becomes
    ``l / |a|`` and every solved value is scaled by ``l / |s|``.

    Raises:
        ArithmeticInvalid: If a pivot or a weighted sum is zero
    """
    columns = matrix.columns
    # solved[0] belongs to the last column, solved[1] to the one before, ...
    solved = [1]
    for row in range(columns - 2, -1, -1):
        other = abs(
            sum(
                matrix[row, column] * value
                for column, value in zip(range(columns - 1, row, -1), solved)
            )
        )
        pivot = abs(matrix[row, row])
        multiple = lcm(pivot, other)
        factor = multiple // other
        solved = [value * factor for value in solved]
        solved.append(multiple // pivot)

    solved.reverse()
    return solved


def solve(
    reagents: Sequence[ParsedFormula],
    products: Sequence[ParsedFormula],
    ordering: Optional[str] = None,
    strict: Optional[bool] = None,
    verify: Optional[bool] = None,
) -> List[int]:
    """
    Compute the smallest positive integer coefficients balancing an equation.

    Args:
        reagents: Left-hand side formulas, in order
        products: Right-hand side formulas, in order
        ordering: Matrix row ordering ("first_seen" or "sorted"); CONFIG default
        strict: Require identical element sets on both sides; CONFIG default
        verify: Check the result against a fresh matrix; CONFIG default

    Returns:
        One coefficient per chemical, reagents first, then products

    Raises:
        UnbalancedElements: If a product element is absent from every reagent
        InfiniteSolution: If there are fewer elements than chemicals minus one
        ArithmeticInvalid: If elimination degenerates (zero lcm operand)
        InconsistentSolution: If the recovered vector does not balance
        ValueError: If either side is empty

    Example:
        >>> from chembalance.formula import parse
        >>> solve([parse("H2O")], [parse("H2"), parse("O2")])
        [2, 2, 1]
    """
    if not reagents or not products:
        raise ValueError("an equation needs at least one reagent and one product")
    verify = CONFIG["verify_solution"] if verify is None else verify

    matrix = CoefficientMatrix.build(reagents, products, ordering=ordering, strict=strict)

    required = matrix.columns - 1
    if matrix.rows < required:
        raise InfiniteSolution(matrix.rows, matrix.columns)

    eliminate(matrix)
    coefficients = back_substitute(matrix)
    logger.debug(f"Back-substitution produced {coefficients}")

    if verify:
        residuals = CoefficientMatrix.build(
            reagents, products, ordering=ordering, strict=strict
        ).residuals(coefficients)
        unbalanced = [symbol for symbol, surplus in residuals.items() if surplus]
        if unbalanced:
            raise InconsistentSolution(unbalanced)

    return coefficients
