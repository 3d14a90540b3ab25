"""
Library configuration and defaults.

Tunable behaviour is centralized here. Functions read these values at call
time when the matching keyword argument is left as ``None``; the exception is
``parse_cache_size``, which sizes the parse cache when the package is imported.
"""

from typing import Any, Dict

__all__ = ["CONFIG", "ELEMENT_ORDERINGS"]

# Supported row orderings for the coefficient matrix
ELEMENT_ORDERINGS = ("first_seen", "sorted")

CONFIG: Dict[str, Any] = {
    # Solver
    "element_ordering": "first_seen",  # Matrix row order (see ELEMENT_ORDERINGS)
    "strict_elements": False,  # True also rejects reagent-only elements
    "verify_solution": True,  # Re-check the vector against a fresh matrix
    # Equation text
    "equation_separator": "=",  # Splits reagents from products (first one only)
    "term_separator": "+",  # Splits formulas within one side
    # Parser
    "parse_cache_size": 256,  # Entries kept by parse_cached (read once, at import)
    # CLI
    "log_level": "INFO",  # Sink level when --verbose is not given
    "log_level_verbose": "DEBUG",
}
