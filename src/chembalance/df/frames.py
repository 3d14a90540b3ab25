"""
Tabular views of formulas and balanced equations - requires polars.
"""

__all__ = [
    "composition_frame",
    "coefficient_frame",
    "element_balance_frame",
]

from typing import Dict, List, Sequence

import polars as pl

from ..equation.balance import BalancedEquation
from ..formula.model import ParsedFormula


def _union_elements(formulas: Sequence[ParsedFormula]) -> List[str]:
    seen: Dict[str, None] = {}
    for formula in formulas:
        seen.update(dict.fromkeys(formula.counts))
    return list(seen)


def composition_frame(formulas: Sequence[ParsedFormula]) -> pl.DataFrame:
    """
    One row per formula, one column per element (first-seen order).

    Args:
        formulas: Parsed formulas

    Returns:
        DataFrame with a "formula" column and an Int64 count column per element

    Example:
        >>> from chembalance.formula import parse
        >>> composition_frame([parse("H2O"), parse("NaOH")])
        shape: (2, 4)
        ┌─────────┬─────┬─────┬─────┐
        │ formula ┆ H   ┆ O   ┆ Na  │
        │ ---     ┆ --- ┆ --- ┆ --- │
        │ str     ┆ i64 ┆ i64 ┆ i64 │
        ╞═════════╪═════╪═════╪═════╡
        │ H2O     ┆ 2   ┆ 1   ┆ 0   │
        │ NaOH    ┆ 1   ┆ 1   ┆ 1   │
        └─────────┴─────┴─────┴─────┘
    """
    elements = _union_elements(formulas)
    schema = {"formula": pl.Utf8, **{symbol: pl.Int64 for symbol in elements}}
    data = {"formula": [formula.source_text for formula in formulas]}
    for symbol in elements:
        data[symbol] = [formula.count(symbol) for formula in formulas]
    return pl.DataFrame(data, schema=schema)


def coefficient_frame(balanced: BalancedEquation) -> pl.DataFrame:
    """
    Coefficients of a balanced equation as rows of (side, formula, coefficient).

    Example:
        >>> from chembalance.equation import balance
        >>> coefficient_frame(balance("H2O = H2 + O2"))["coefficient"].to_list()
        [2, 2, 1]
    """
    left, right = balanced.pairs()
    sides = ["reagent"] * len(left) + ["product"] * len(right)
    pairs = left + right
    return pl.DataFrame(
        {
            "side": sides,
            "formula": [formula.source_text for _, formula in pairs],
            "coefficient": [coefficient for coefficient, _ in pairs],
        },
        schema={"side": pl.Utf8, "formula": pl.Utf8, "coefficient": pl.Int64},
    )


def element_balance_frame(balanced: BalancedEquation) -> pl.DataFrame:
    """
    Weighted atom totals per element on each side, with a balance flag.

    Args:
        balanced: Result of ``balance``

    Returns:
        DataFrame with columns element, reagent_atoms, product_atoms, balanced
    """
    left, right = balanced.pairs()
    elements = _union_elements(balanced.reagents + balanced.products)
    frame = pl.DataFrame(
        {
            "element": elements,
            "reagent_atoms": [
                sum(c * formula.count(symbol) for c, formula in left)
                for symbol in elements
            ],
            "product_atoms": [
                sum(c * formula.count(symbol) for c, formula in right)
                for symbol in elements
            ],
        },
        schema={"element": pl.Utf8, "reagent_atoms": pl.Int64, "product_atoms": pl.Int64},
    )
    return frame.with_columns(
        (pl.col("reagent_atoms") == pl.col("product_atoms")).alias("balanced")
    )
