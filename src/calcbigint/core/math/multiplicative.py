"""
Multiplicative Engine — Умножение в столбик

Классическое O(len(a)·len(b)) умножение: для каждой пары limbs
произведение + перенос + накопленное значение раскладывается на
limb результата (mod LIMB_BASE) и перенос (div LIMB_BASE).

Быстрые алгоритмы (Karatsuba и т.п.) не используются.
"""

from typing import Sequence

from calcbigint.core.domain.big_integer import BigInteger
from calcbigint.core.domain.limbs import (
    LIMB_BASE,
    ZERO_MAGNITUDE,
    is_zero_magnitude,
    normalize_magnitude,
)


def multiply_magnitudes(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """
    Произведение магнитуд в столбик.

    Каждое промежуточное значение < LIMB_BASE^2, т.е. помещается в 64 бита.
    """
    if is_zero_magnitude(x) or is_zero_magnitude(y):
        return ZERO_MAGNITUDE

    result = [0] * (len(x) + len(y))
    for i, xi in enumerate(x):
        if xi == 0:
            continue
        carry = 0
        for j, yj in enumerate(y):
            current = result[i + j] + xi * yj + carry
            result[i + j] = current % LIMB_BASE
            carry = current // LIMB_BASE
        k = i + len(y)
        while carry:
            current = result[k] + carry
            result[k] = current % LIMB_BASE
            carry = current // LIMB_BASE
            k += 1

    return normalize_magnitude(result)


def multiply_magnitude_by_limb(x: Sequence[int], factor: int) -> tuple[int, ...]:
    """
    Умножение магнитуды на один limb, factor ∈ [0, LIMB_BASE).

    Используется делением для вычисления divisor × q̂.
    """
    if factor == 0:
        return ZERO_MAGNITUDE

    result = []
    carry = 0
    for limb in x:
        carry += limb * factor
        result.append(carry % LIMB_BASE)
        carry //= LIMB_BASE
    if carry:
        result.append(carry)

    return normalize_magnitude(result)


def multiply(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Знаковое умножение a × b.

    Знак результата — произведение знаков операндов; ноль всегда положителен.

    Properties:
        - Identity: multiply(a, one) == a
        - Zero: multiply(a, zero) == zero
    """
    return BigInteger.from_limbs(
        a.sign * b.sign, multiply_magnitudes(a.magnitude, b.magnitude)
    )
