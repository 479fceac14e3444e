"""
GCD Engine — Наибольший общий делитель

Алгоритм Евклида поверх Division Engine: (x, y) → (y, x mod y),
пока y ≠ 0. Знаки входов игнорируются, результат всегда неотрицателен.
Завершается, т.к. остаток строго меньше делителя.
"""

from calcbigint.core.domain.big_integer import BigInteger
from calcbigint.core.domain.limbs import is_zero_magnitude
from calcbigint.core.math.division import DivisionStrategy, divmod_magnitudes


def gcd(
    a: BigInteger,
    b: BigInteger,
    strategy: DivisionStrategy = DivisionStrategy.ESTIMATE,
) -> BigInteger:
    """
    НОД двух чисел по модулю.

    Properties:
        - gcd(a, 0) == |a|
        - gcd(0, 0) == 0
        - gcd(a, b) == gcd(b, a mod b)

    Examples:
        >>> str(gcd(BigInteger.from_int(48), BigInteger.from_int(-18)))
        '6'
    """
    x, y = a.magnitude, b.magnitude
    while not is_zero_magnitude(y):
        _, r = divmod_magnitudes(x, y, strategy)
        x, y = y, r
    return BigInteger.from_limbs(1, x)
