"""
Domain models and value objects.

Contains the arbitrary-precision BigInteger value object.
"""

from calcbigint.core.domain.big_integer import BigInteger, compare

__all__ = [
    "BigInteger",
    "compare",
]
