"""
End-to-end balancing of equation text.
"""

__all__ = ["BalancedEquation", "balance", "balance_formulas"]

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from ..formula.model import ParsedFormula
from ..formula.parser import parse
from ..solver.solve import solve
from .split import parse_equation


@dataclass(frozen=True)
class BalancedEquation:
    """Parsed formulas of both sides and their coefficients (reagents first)."""

    reagents: Tuple[ParsedFormula, ...]
    products: Tuple[ParsedFormula, ...]
    coefficients: Tuple[int, ...]

    @property
    def reagent_coefficients(self) -> Tuple[int, ...]:
        return self.coefficients[: len(self.reagents)]

    @property
    def product_coefficients(self) -> Tuple[int, ...]:
        return self.coefficients[len(self.reagents) :]

    def pairs(self) -> Tuple[List[Tuple[int, ParsedFormula]], List[Tuple[int, ParsedFormula]]]:
        """(coefficient, formula) pairs for the reagent and product sides."""
        return (
            list(zip(self.reagent_coefficients, self.reagents)),
            list(zip(self.product_coefficients, self.products)),
        )

    def __str__(self) -> str:
        left, right = self.pairs()
        return " = ".join(
            " + ".join(
                f"{coefficient}{formula.source_text}"
                if coefficient > 1
                else formula.source_text
                for coefficient, formula in side
            )
            for side in (left, right)
        )


def _balanced(
    reagents: Sequence[ParsedFormula],
    products: Sequence[ParsedFormula],
    ordering: Optional[str],
    strict: Optional[bool],
) -> BalancedEquation:
    coefficients = solve(reagents, products, ordering=ordering, strict=strict)
    result = BalancedEquation(tuple(reagents), tuple(products), tuple(coefficients))
    logger.debug(f"Balanced: {result}")
    return result


def balance(
    text: str,
    ordering: Optional[str] = None,
    strict: Optional[bool] = None,
) -> BalancedEquation:
    """
    Balance an equation written as "A + B = C + D".

    Args:
        text: Equation text; formulas are trimmed before parsing
        ordering: Matrix row ordering, see ``solve``
        strict: Require identical element sets on both sides, see ``solve``

    Returns:
        BalancedEquation

    Raises:
        MissingEqualsSign: If the text has no "="
        ParseFailure: For the first formula that is not valid
        SolveFailure: If no unique minimal coefficients exist

    Example:
        >>> str(balance("Fe + O2 = Fe2O3"))
        '4Fe + 3O2 = 2Fe2O3'
    """
    reagents, products = parse_equation(text)
    return _balanced(reagents, products, ordering, strict)


def balance_formulas(
    reagents: Sequence[str],
    products: Sequence[str],
    ordering: Optional[str] = None,
    strict: Optional[bool] = None,
) -> BalancedEquation:
    """Balance already split, trimmed formula strings."""
    return _balanced(
        [parse(formula) for formula in reagents],
        [parse(formula) for formula in products],
        ordering,
        strict,
    )
