"""
Command line interface for chembalance.

    chembalance balance "Fe + O2 = Fe2O3"
    chembalance parse "(C15H31COO)2Ca"
    chembalance matrix "NaOH + HCl = NaCl + H2O"

Failures print ``error: <kind>: <message>`` and exit with status 1.
"""

import sys
from typing import Dict, NoReturn, Optional

import fire
from loguru import logger

from .config import CONFIG, ELEMENT_ORDERINGS
from .df.frames import composition_frame
from .equation.balance import balance as balance_equation
from .equation.split import parse_equation
from .errors import BalanceError
from .formula.normalize import normalize_subscripts
from .formula.parser import parse as parse_formula

__all__ = ["balance", "parse", "matrix", "main"]


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    level = CONFIG["log_level_verbose"] if verbose else CONFIG["log_level"]
    logger.add(sys.stderr, level=level)
    logger.enable("chembalance")


def _exit(kind: str, message: str) -> NoReturn:
    print(f"error: {kind}: {message}", file=sys.stderr)
    raise SystemExit(1)


def _fail(error: BalanceError) -> NoReturn:
    _exit(error.kind, str(error))


def balance(
    equation: str,
    ordering: Optional[str] = None,
    strict: Optional[bool] = None,
    subscripts: bool = False,
    verbose: bool = False,
) -> str:
    """Balance EQUATION ("A + B = C + D") and return it with coefficients.

    Args:
        equation: Equation text
        ordering: Matrix row ordering, "first_seen" or "sorted"
        strict: Require identical element sets on both sides
        subscripts: Accept Unicode subscript digits (e.g. "H₂O")
        verbose: Log matrix construction and elimination steps
    """
    _configure_logging(verbose)
    if ordering is not None and ordering not in ELEMENT_ORDERINGS:
        _exit(
            "invalid_argument",
            f"unknown ordering {ordering!r}; expected one of {', '.join(ELEMENT_ORDERINGS)}",
        )
    if subscripts:
        equation = normalize_subscripts(equation)
    logger.info(f"Balancing {equation!r}")
    try:
        result = balance_equation(equation, ordering=ordering, strict=strict)
    except BalanceError as e:
        _fail(e)
    return str(result)


def parse(formula: str, subscripts: bool = False, verbose: bool = False) -> Dict[str, int]:
    """Parse FORMULA and return its element counts."""
    _configure_logging(verbose)
    if subscripts:
        formula = normalize_subscripts(formula)
    try:
        parsed = parse_formula(formula.strip())
    except BalanceError as e:
        _fail(e)
    return dict(parsed.counts)


def matrix(equation: str, verbose: bool = False) -> str:
    """Show the element composition of every formula in EQUATION."""
    _configure_logging(verbose)
    try:
        reagents, products = parse_equation(equation)
    except BalanceError as e:
        _fail(e)
    return str(composition_frame(reagents + products))


def main() -> None:
    fire.Fire(
        {
            "balance": balance,
            "parse": parse,
            "matrix": matrix,
        }
    )


if __name__ == "__main__":
    main()
