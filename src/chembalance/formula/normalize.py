"""Normalize subscript digits to regular digits."""

__all__ = ["SUBSCRIPT_MAP", "normalize_subscripts"]

# Subscript to digit translation table
SUBSCRIPT_MAP = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")


def normalize_subscripts(text: str) -> str:
    """
    Convert subscript digits to regular digits.

    The parser only accepts ASCII digits; callers that take pasted,
    typeset formulas run them through this first.

    Example:
        >>> normalize_subscripts("C₆H₁₂O₆")
        'C6H12O6'
    """
    return text.translate(SUBSCRIPT_MAP)
