"""
Additive Engine — Сложение и вычитание

Операции над магнитудами (ripple-carry / ripple-borrow) и их знаковые
комбинации. Время работы пропорционально max(len(x), len(y)).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. subtract_magnitudes требует |x| >= |y|
2. Результат всегда нормализован (без старших нулевых limbs)
3. Равные по модулю операнды разных знаков дают канонический ноль
"""

from typing import Sequence

from calcbigint.core.domain.big_integer import BigInteger
from calcbigint.core.domain.limbs import (
    LIMB_BASE,
    Ordering,
    compare_magnitudes,
    normalize_magnitude,
)


# =============================================================================
# МАГНИТУДЫ
# =============================================================================


def add_magnitudes(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """
    Сложение магнитуд с переносом.

    Результат удлиняется на один limb, если после старшего limb остался перенос.

    Examples:
        >>> add_magnitudes((999_999_999,), (1,))
        (0, 1)
    """
    if len(x) < len(y):
        x, y = y, x

    result = []
    carry = 0
    for i in range(len(y)):
        carry += x[i] + y[i]
        result.append(carry % LIMB_BASE)
        carry //= LIMB_BASE
    for i in range(len(y), len(x)):
        carry += x[i]
        result.append(carry % LIMB_BASE)
        carry //= LIMB_BASE
    if carry:
        result.append(carry)

    return normalize_magnitude(result)


def subtract_magnitudes(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """
    Вычитание магнитуд с заёмом: |x| - |y|.

    Args:
        x: Уменьшаемое, |x| >= |y|
        y: Вычитаемое

    Returns:
        Нормализованная разность

    Raises:
        ValueError: Если |x| < |y|
    """
    if compare_magnitudes(x, y) is Ordering.LESS:
        raise ValueError("subtract_magnitudes requires |x| >= |y|")

    result = []
    borrow = 0
    for i in range(len(x)):
        diff = x[i] - borrow - (y[i] if i < len(y) else 0)
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize_magnitude(result)


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Знаковое сложение a + b.

    Одинаковые знаки: сумма магнитуд, знак сохраняется.
    Разные знаки: из большей магнитуды вычитается меньшая,
    знак берётся у операнда с большей магнитудой.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Associative: add(add(a, b), c) == add(a, add(b, c))
        - Identity: add(a, zero) == a
    """
    if a.sign == b.sign:
        return BigInteger.from_limbs(a.sign, add_magnitudes(a.magnitude, b.magnitude))

    order = compare_magnitudes(a.magnitude, b.magnitude)
    if order is Ordering.EQUAL:
        return BigInteger.zero()
    if order is Ordering.GREATER:
        return BigInteger.from_limbs(a.sign, subtract_magnitudes(a.magnitude, b.magnitude))
    return BigInteger.from_limbs(b.sign, subtract_magnitudes(b.magnitude, a.magnitude))


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    """Знаковое вычитание: a - b = add(a, -b)"""
    return add(a, b.negate())
