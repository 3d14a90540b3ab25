"""
Solver subpackage - no external dependencies beyond loguru.

Integer linear algebra for balancing: coefficient matrix construction,
fraction-free elimination and back-substitution.
"""

from chembalance.solver.arithmetic import (
    gcd,
    lcm,
)

from chembalance.solver.matrix import (
    element_order,
    CoefficientMatrix,
)

from chembalance.solver.solve import (
    solve,
    eliminate,
    back_substitute,
)

__all__ = [
    # arithmetic
    "gcd",
    "lcm",
    # matrix
    "element_order",
    "CoefficientMatrix",
    # solve
    "solve",
    "eliminate",
    "back_substitute",
]
