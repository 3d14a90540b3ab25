"""
Formula validation without exceptions.
"""

from typing import Optional, Tuple

from ..errors import ParseFailure
from .parser import parse_cached

__all__ = ["validate_formula"]


def validate_formula(formula: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a formula string.

    Args:
        formula: Formula text to validate

    Returns:
        Tuple of (is_valid, error_message)
        If valid, error_message is None

    Example:
        >>> validate_formula("Fe2(SO4)3")
        (True, None)
        >>> validate_formula("2H")
        (False, "'2H' is not a valid formula (count with no preceding element)")
    """
    if formula != formula.strip():
        return False, (
            f"{formula!r} has surrounding whitespace; trim it before parsing"
        )
    try:
        parse_cached(formula)
    except ParseFailure as e:
        return False, str(e)
    return True, None
