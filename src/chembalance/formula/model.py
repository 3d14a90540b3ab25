"""ParsedFormula dataclass."""

__all__ = ["ParsedFormula"]

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True, eq=False, repr=False)
class ParsedFormula:
    """
    Element counts of one formula together with its source text.

    ``counts`` keeps first-seen key order and is exposed read-only; the
    instance owns a private copy of whatever mapping it was built from.

    Example:
        >>> f = ParsedFormula({"H": 2, "O": 1}, "H2O")
        >>> f.count("H"), f.count("N")
        (2, 0)
    """

    counts: Mapping[str, int]
    source_text: str = field(default="")

    def __post_init__(self) -> None:
        owned = dict(self.counts)
        for symbol, count in owned.items():
            if count < 1:
                raise ValueError(f"count of {symbol!r} must be >= 1, got {count}")
        object.__setattr__(self, "counts", MappingProxyType(owned))

    @property
    def elements(self) -> Tuple[str, ...]:
        """Element symbols in first-seen order."""
        return tuple(self.counts)

    @property
    def atom_total(self) -> int:
        return sum(self.counts.values())

    def count(self, symbol: str) -> int:
        """Atom count of ``symbol``, 0 when absent."""
        return self.counts.get(symbol, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedFormula):
            return NotImplemented
        return (
            dict(self.counts) == dict(other.counts)
            and self.source_text == other.source_text
        )

    def __hash__(self) -> int:
        return hash((frozenset(self.counts.items()), self.source_text))

    def __repr__(self) -> str:
        return f"ParsedFormula({dict(self.counts)!r}, {self.source_text!r})"

    def __str__(self) -> str:
        return self.source_text
