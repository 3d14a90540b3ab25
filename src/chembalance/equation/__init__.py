"""
Equation subpackage - splits equation text and balances it end to end.
"""

from chembalance.equation.split import (
    split_equation,
    parse_equation,
)

from chembalance.equation.balance import (
    BalancedEquation,
    balance,
    balance_formulas,
)

__all__ = [
    # split
    "split_equation",
    "parse_equation",
    # balance
    "BalancedEquation",
    "balance",
    "balance_formulas",
]
