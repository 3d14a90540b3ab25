"""Split and parse equation text."""

__all__ = ["split_equation", "parse_equation"]

from typing import List, Tuple

from ..config import CONFIG
from ..errors import MissingEqualsSign
from ..formula.model import ParsedFormula
from ..formula.parser import parse


def split_equation(text: str) -> Tuple[List[str], List[str]]:
    """
    Split "A + B = C + D" into trimmed reagent and product substrings.

    Only the first "=" separates the sides; any further "=" stays in the
    product text and is rejected by the parser.

    Raises:
        MissingEqualsSign: If the text has no "="

    Example:
        >>> split_equation("CH4 + O2 = CO2 + H2O")
        (['CH4', 'O2'], ['CO2', 'H2O'])
    """
    separator = CONFIG["equation_separator"]
    if separator not in text:
        raise MissingEqualsSign(text)
    left, right = text.split(separator, 1)
    term = CONFIG["term_separator"]
    return (
        [part.strip() for part in left.split(term)],
        [part.strip() for part in right.split(term)],
    )


def parse_equation(text: str) -> Tuple[List[ParsedFormula], List[ParsedFormula]]:
    """Parse every formula of an equation; the first invalid one raises ParseFailure."""
    reagents, products = split_equation(text)
    return [parse(part) for part in reagents], [parse(part) for part in products]
