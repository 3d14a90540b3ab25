"""
Integer gcd/lcm used by fraction-free elimination.
"""

__all__ = ["gcd", "lcm"]

from ..errors import ArithmeticInvalid


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of two positive integers (binary/Stein's algorithm).

    Example:
        >>> gcd(12, 18)
        6
        >>> gcd(7, 7)
        7
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd operands must be non-negative, got {a} and {b}")
    if a == 0 or b == 0:
        return a | b
    if a == b:
        return a

    shift = 0
    while not (a | b) & 1:
        shift += 1
        a >>= 1
        b >>= 1
    while not a & 1:
        a >>= 1
    while True:
        while not b & 1:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a
        if b == 0:
            return a << shift


def lcm(a: int, b: int) -> int:
    """
    Least common multiple of two strictly positive integers.

    Raises:
        ArithmeticInvalid: If either operand is zero or negative

    Example:
        >>> lcm(4, 6)
        12
    """
    if a <= 0 or b <= 0:
        raise ArithmeticInvalid(a, b)
    return a * b // gcd(a, b)
