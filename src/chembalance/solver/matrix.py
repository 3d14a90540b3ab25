"""
Element-by-chemical coefficient matrix.

Rows are elements, columns are chemicals (reagents first, then products).
A cell holds the atom count of the row's element in the column's chemical,
negated for products, so a balanced coefficient vector is a null vector of
the matrix.
"""

__all__ = ["element_order", "CoefficientMatrix"]

from typing import Dict, List, Optional, Sequence

from loguru import logger

from ..config import CONFIG, ELEMENT_ORDERINGS
from ..errors import UnbalancedElements
from ..formula.model import ParsedFormula
from .arithmetic import lcm


def element_order(
    reagents: Sequence[ParsedFormula],
    products: Sequence[ParsedFormula],
    ordering: Optional[str] = None,
    strict: Optional[bool] = None,
) -> List[str]:
    """
    Collect the element symbols that label the matrix rows.

    Every product element must occur in some reagent. With ``strict`` the
    reverse is required too, so both sides use exactly the same elements.

    Args:
        reagents: Left-hand side formulas
        products: Right-hand side formulas
        ordering: "first_seen" (reagent order) or "sorted"; CONFIG default
        strict: Also reject reagent-only elements; CONFIG default

    Returns:
        Reagent element symbols in the requested order

    Raises:
        UnbalancedElements: If a product (or, when strict, a reagent) element
            is missing from the other side
        ValueError: If ``ordering`` is unknown

    Example:
        >>> from chembalance.formula import parse
        >>> element_order([parse("NaOH"), parse("HCl")], [parse("NaCl"), parse("H2O")])
        ['Na', 'O', 'H', 'Cl']
    """
    ordering = ordering or CONFIG["element_ordering"]
    strict = CONFIG["strict_elements"] if strict is None else strict
    if ordering not in ELEMENT_ORDERINGS:
        raise ValueError(
            f"unknown element ordering {ordering!r}; expected one of {ELEMENT_ORDERINGS}"
        )

    elements: Dict[str, None] = {}
    for reagent in reagents:
        elements.update(dict.fromkeys(reagent.counts))

    product_elements: Dict[str, None] = {}
    for product in products:
        product_elements.update(dict.fromkeys(product.counts))

    missing = [symbol for symbol in product_elements if symbol not in elements]
    if strict:
        missing += [symbol for symbol in elements if symbol not in product_elements]
    if missing:
        raise UnbalancedElements(missing)

    if ordering == "sorted":
        return sorted(elements)
    return list(elements)


class CoefficientMatrix:
    """
    Row-major grid of Python ints, mutated in place by elimination.

    Python ints are arbitrary precision, so lcm scaling never overflows.
    """

    def __init__(
        self,
        elements: Sequence[str],
        cells: List[List[int]],
        reagent_count: int,
        columns: Optional[int] = None,
    ) -> None:
        self.elements = list(elements)
        self.cells = cells
        self.reagent_count = reagent_count
        # Column count comes from the chemicals; there may be no element rows
        if columns is None:
            columns = len(cells[0]) if cells else reagent_count
        self.columns = columns

    @classmethod
    def build(
        cls,
        reagents: Sequence[ParsedFormula],
        products: Sequence[ParsedFormula],
        ordering: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> "CoefficientMatrix":
        """Build the signed matrix; +count for reagents, -count for products."""
        elements = element_order(reagents, products, ordering=ordering, strict=strict)
        cells = [
            [reagent.count(symbol) for reagent in reagents]
            + [-product.count(symbol) for product in products]
            for symbol in elements
        ]
        logger.debug(
            f"Built {len(elements)}x{len(reagents) + len(products)} matrix "
            f"for elements {elements}"
        )
        return cls(elements, cells, len(reagents), len(reagents) + len(products))

    @property
    def rows(self) -> int:
        return len(self.cells)

    def __getitem__(self, position) -> int:
        row, column = position
        return self.cells[row][column]

    def swap_rows(self, first: int, second: int) -> None:
        self.cells[first], self.cells[second] = self.cells[second], self.cells[first]
        self.elements[first], self.elements[second] = (
            self.elements[second],
            self.elements[first],
        )

    def cancel(self, pivot_row: int, row: int, column: int) -> None:
        """
        Zero ``row`` at ``column`` using ``pivot_row``, keeping integers exact.

        Both rows are scaled to the lcm of their entries in ``column`` and
        subtracted from ``column`` onward. The pivot row is left untouched.
        """
        target = self.cells[row][column]
        if target == 0:
            return
        pivot = self.cells[pivot_row][column]
        multiple = lcm(abs(pivot), abs(target))
        pivot_factor = multiple // pivot
        row_factor = multiple // target

        pivot_cells = self.cells[pivot_row]
        row_cells = self.cells[row]
        for index in range(column, self.columns):
            row_cells[index] = (
                pivot_cells[index] * pivot_factor - row_cells[index] * row_factor
            )

    def residuals(self, coefficients: Sequence[int]) -> Dict[str, int]:
        """Signed atom surplus per element; all zero for a balanced vector."""
        return {
            symbol: sum(cell * value for cell, value in zip(cells, coefficients))
            for symbol, cells in zip(self.elements, self.cells)
        }

    def to_rows(self) -> List[List[int]]:
        return [list(cells) for cells in self.cells]

    def __repr__(self) -> str:
        return (
            f"CoefficientMatrix(elements={self.elements!r}, "
            f"cells={self.cells!r}, reagent_count={self.reagent_count}, columns={self.columns})"
        )
