"""
CalcBigInt — целые числа произвольной точности

Знаковые целые в sign-magnitude представлении (limbs по основанию 10^9)
и точная арифметика над ними: сложение, вычитание, умножение,
усечённое деление с остатком и НОД.
"""

# Value object
from calcbigint.core.domain import BigInteger, compare

# Codec
from calcbigint.core.math.codec import InvalidFormat, format, parse

# Arithmetic
from calcbigint.core.math.additive import add, subtract
from calcbigint.core.math.multiplicative import multiply
from calcbigint.core.math.division import DivisionByZero, DivisionStrategy, divmod
from calcbigint.core.math.gcd import gcd

__all__ = [
    # Value object
    "BigInteger",
    "compare",
    # Codec
    "InvalidFormat",
    "format",
    "parse",
    # Arithmetic — Exceptions
    "DivisionByZero",
    # Arithmetic — Types
    "DivisionStrategy",
    # Arithmetic — Functions
    "add",
    "subtract",
    "multiply",
    "divmod",
    "gcd",
]

__version__ = "0.1.0"
