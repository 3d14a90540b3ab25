"""
Formula subpackage - no external dependencies.

Parses formula strings such as "(C15H31COO)2Ca" into element counts.
"""

from chembalance.formula.model import ParsedFormula

from chembalance.formula.parser import (
    parse,
    parse_cached,
)

from chembalance.formula.normalize import normalize_subscripts

from chembalance.formula.validate import validate_formula

__all__ = [
    # model
    "ParsedFormula",
    # parser
    "parse",
    "parse_cached",
    # normalize
    "normalize_subscripts",
    # validate
    "validate_formula",
]
