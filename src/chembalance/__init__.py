"""
chembalance - Chemical equation balancing with exact integer arithmetic.

This package is organized into focused subpackages:

- formula/  Formula parsing (no dependencies)
            - parser: parse, parse_cached
            - model: ParsedFormula
            - normalize: normalize_subscripts
            - validate: validate_formula

- solver/   Integer linear algebra (loguru only)
            - arithmetic: gcd, lcm
            - matrix: element_order, CoefficientMatrix
            - solve: solve, eliminate, back_substitute

- equation/ Equation text handling
            - split: split_equation, parse_equation
            - balance: balance, balance_formulas, BalancedEquation

- df/       DataFrame views (requires polars)
            - frames: composition_frame, coefficient_frame, element_balance_frame

- errors    ParseFailure, MissingEqualsSign, SolveFailure and its kinds
- config    CONFIG defaults
- cli       Command line entry point (requires fire)

Usage:
    from chembalance import balance, parse, solve
    str(balance("C3H8 + O2 = CO2 + H2O"))   # 'C3H8 + 5O2 = 3CO2 + 4H2O'
    solve([parse("H2O")], [parse("H2"), parse("O2")])   # [2, 2, 1]
"""

__version__ = "0.1.0"

from loguru import logger

# Library logging stays silent until an application opts in
logger.disable("chembalance")

from chembalance.errors import (
    BalanceError,
    ParseFailure,
    MissingEqualsSign,
    SolveFailure,
    UnbalancedElements,
    InfiniteSolution,
    ArithmeticInvalid,
    InconsistentSolution,
)

from chembalance.formula import (
    ParsedFormula,
    parse,
    parse_cached,
    normalize_subscripts,
    validate_formula,
)

from chembalance.solver import (
    gcd,
    lcm,
    element_order,
    CoefficientMatrix,
    solve,
)

from chembalance.equation import (
    split_equation,
    parse_equation,
    BalancedEquation,
    balance,
    balance_formulas,
)

__all__ = [
    "__version__",
    # errors
    "BalanceError",
    "ParseFailure",
    "MissingEqualsSign",
    "SolveFailure",
    "UnbalancedElements",
    "InfiniteSolution",
    "ArithmeticInvalid",
    "InconsistentSolution",
    # formula
    "ParsedFormula",
    "parse",
    "parse_cached",
    "normalize_subscripts",
    "validate_formula",
    # solver
    "gcd",
    "lcm",
    "element_order",
    "CoefficientMatrix",
    "solve",
    # equation
    "split_equation",
    "parse_equation",
    "BalancedEquation",
    "balance",
    "balance_formulas",
]
