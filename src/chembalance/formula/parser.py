"""
Chemical formula parser.

Formulas are read one character at a time by an explicit state machine.
Nested groups are tracked with a stack of accumulators rather than by
recursion, so nesting depth is bounded only by memory.

Grammar:
    formula    := term+
    term       := element count? | "(" formula ")" count?
    element    := [A-Z][a-z]*
    count      := [1-9][0-9]*
"""

__all__ = ["parse", "parse_cached", "State", "CharClass"]

from enum import Enum
from functools import lru_cache
from string import ascii_lowercase, ascii_uppercase, digits
from typing import Callable, Dict, List, NoReturn, Tuple

from ..config import CONFIG
from ..errors import ParseFailure
from .model import ParsedFormula


class State(Enum):
    """What kind of token the scanner is in the middle of."""

    START = "start"  # no pending token in the current scope
    NAME = "name"  # reading an element symbol
    COUNT = "count"  # reading the count after an element symbol
    CLOSED = "closed"  # just read ")", multiplier not started
    MULTIPLIER = "multiplier"  # reading the multiplier after ")"


class CharClass(Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    OPEN = "open"
    CLOSE = "close"
    OTHER = "other"


def _classify(char: str) -> CharClass:
    if char in ascii_uppercase:
        return CharClass.UPPER
    if char in ascii_lowercase:
        return CharClass.LOWER
    if char in digits:
        return CharClass.DIGIT
    if char == "(":
        return CharClass.OPEN
    if char == ")":
        return CharClass.CLOSE
    return CharClass.OTHER


class _Scanner:
    """Single-use state machine over one formula string."""

    def __init__(self, formula: str) -> None:
        self.formula = formula
        self.state = State.START
        self.stack: List[Dict[str, int]] = []
        self.current: Dict[str, int] = {}
        self.name = ""
        self.count = 0
        self.multiplier = 0

    def fail(self, reason: str) -> NoReturn:
        raise ParseFailure(self.formula, reason)

    # -- accumulator operations ------------------------------------------

    def commit(self, count: int) -> None:
        self.current[self.name] = self.current.get(self.name, 0) + count
        self.name = ""
        self.count = 0

    def open_group(self) -> None:
        self.stack.append(self.current)
        self.current = {}

    def close_group(self) -> None:
        if not self.stack:
            self.fail("unmatched ')'")
        if not self.current:
            self.fail("empty group")

    def finish_group(self, multiplier: int) -> None:
        parent = self.stack.pop()
        for symbol, count in self.current.items():
            parent[symbol] = parent.get(symbol, 0) + count * multiplier
        self.current = parent
        self.multiplier = 0

    # -- transitions -----------------------------------------------------

    def start_upper(self, char: str) -> State:
        self.name = char
        return State.NAME

    def start_open(self, char: str) -> State:
        self.open_group()
        return State.START

    def start_close(self, char: str) -> State:
        self.close_group()
        return State.CLOSED

    def start_digit(self, char: str) -> State:
        self.fail("count with no preceding element")

    def start_lower(self, char: str) -> State:
        self.fail("lowercase letter with no element")

    def name_upper(self, char: str) -> State:
        self.commit(1)
        return self.start_upper(char)

    def name_lower(self, char: str) -> State:
        self.name += char
        return State.NAME

    def name_digit(self, char: str) -> State:
        if char == "0":
            self.fail("count with a leading zero")
        self.count = int(char)
        return State.COUNT

    def name_open(self, char: str) -> State:
        self.commit(1)
        return self.start_open(char)

    def name_close(self, char: str) -> State:
        self.commit(1)
        return self.start_close(char)

    def count_upper(self, char: str) -> State:
        self.commit(self.count)
        return self.start_upper(char)

    def count_lower(self, char: str) -> State:
        self.fail("lowercase letter after a count")

    def count_digit(self, char: str) -> State:
        self.count = self.count * 10 + int(char)
        return State.COUNT

    def count_open(self, char: str) -> State:
        self.commit(self.count)
        return self.start_open(char)

    def count_close(self, char: str) -> State:
        self.commit(self.count)
        return self.start_close(char)

    def closed_digit(self, char: str) -> State:
        if char == "0":
            self.fail("multiplier with a leading zero")
        self.multiplier = int(char)
        return State.MULTIPLIER

    def closed_other(self, char: str) -> State:
        self.finish_group(1)
        return self.dispatch(State.START, char)

    def multiplier_digit(self, char: str) -> State:
        self.multiplier = self.multiplier * 10 + int(char)
        return State.MULTIPLIER

    def multiplier_other(self, char: str) -> State:
        self.finish_group(self.multiplier)
        return self.dispatch(State.START, char)

    # -- driver ----------------------------------------------------------

    def dispatch(self, state: State, char: str) -> State:
        handler = _TRANSITIONS.get((state, _classify(char)))
        if handler is None:
            self.fail(f"unexpected character {char!r}")
        return handler(self, char)

    def run(self) -> Dict[str, int]:
        for char in self.formula:
            self.state = self.dispatch(self.state, char)

        if self.state is State.NAME:
            self.commit(1)
        elif self.state is State.COUNT:
            self.commit(self.count)
        elif self.state is State.CLOSED:
            self.finish_group(1)
        elif self.state is State.MULTIPLIER:
            self.finish_group(self.multiplier)

        if self.stack:
            self.fail("unmatched '('")
        if not self.current:
            self.fail("empty formula")
        return self.current


_Transition = Callable[[_Scanner, str], State]

_TRANSITIONS: Dict[Tuple[State, CharClass], _Transition] = {
    (State.START, CharClass.UPPER): _Scanner.start_upper,
    (State.START, CharClass.LOWER): _Scanner.start_lower,
    (State.START, CharClass.DIGIT): _Scanner.start_digit,
    (State.START, CharClass.OPEN): _Scanner.start_open,
    (State.START, CharClass.CLOSE): _Scanner.start_close,
    (State.NAME, CharClass.UPPER): _Scanner.name_upper,
    (State.NAME, CharClass.LOWER): _Scanner.name_lower,
    (State.NAME, CharClass.DIGIT): _Scanner.name_digit,
    (State.NAME, CharClass.OPEN): _Scanner.name_open,
    (State.NAME, CharClass.CLOSE): _Scanner.name_close,
    (State.COUNT, CharClass.UPPER): _Scanner.count_upper,
    (State.COUNT, CharClass.LOWER): _Scanner.count_lower,
    (State.COUNT, CharClass.DIGIT): _Scanner.count_digit,
    (State.COUNT, CharClass.OPEN): _Scanner.count_open,
    (State.COUNT, CharClass.CLOSE): _Scanner.count_close,
    (State.CLOSED, CharClass.UPPER): _Scanner.closed_other,
    (State.CLOSED, CharClass.LOWER): _Scanner.closed_other,
    (State.CLOSED, CharClass.DIGIT): _Scanner.closed_digit,
    (State.CLOSED, CharClass.OPEN): _Scanner.closed_other,
    (State.CLOSED, CharClass.CLOSE): _Scanner.closed_other,
    (State.MULTIPLIER, CharClass.UPPER): _Scanner.multiplier_other,
    (State.MULTIPLIER, CharClass.LOWER): _Scanner.multiplier_other,
    (State.MULTIPLIER, CharClass.DIGIT): _Scanner.multiplier_digit,
    (State.MULTIPLIER, CharClass.OPEN): _Scanner.multiplier_other,
    (State.MULTIPLIER, CharClass.CLOSE): _Scanner.multiplier_other,
}


def parse(formula: str) -> ParsedFormula:
    """
    Parse a formula into element counts.

    Args:
        formula: Formula text, already trimmed (e.g. "Mg(OH)2")

    Returns:
        ParsedFormula with merged counts and the formula as source text

    Raises:
        ParseFailure: If the formula is not valid; no partial result is kept

    Example:
        >>> parse("CH3COONa").counts
        mappingproxy({'C': 2, 'H': 3, 'O': 2, 'Na': 1})
        >>> dict(parse("Ca(OH)2").counts)
        {'Ca': 1, 'O': 2, 'H': 2}
    """
    counts = _Scanner(formula).run()
    return ParsedFormula(counts, formula)


@lru_cache(maxsize=CONFIG["parse_cache_size"])
def parse_cached(formula: str) -> ParsedFormula:
    """
    Parse formula with caching. ParsedFormula is immutable, so sharing is safe.

    The cache size comes from CONFIG["parse_cache_size"] at import time.
    """
    return parse(formula)
