"""
DataFrame utilities subpackage - requires polars.

Tabular views of formula compositions and balanced equations.
"""

from chembalance.df.frames import (
    composition_frame,
    coefficient_frame,
    element_balance_frame,
)

__all__ = [
    "composition_frame",
    "coefficient_frame",
    "element_balance_frame",
]
