"""
Division Engine — Деление с остатком

Усечённое деление (частное округляется к нулю), остаток имеет знак
делимого (или равен нулю):

    a = quotient × b + remainder,  |remainder| < |b|

Деление в столбик по limbs от старшего к младшему. Две стратегии,
дающие побитово одинаковый результат:

- ESTIMATE (по умолчанию): оценка цифры частного q̂ по двум старшим limbs
  остатка и старшему limb делителя (Knuth, Algorithm D в основании 10^9).
  Делитель и делимое предварительно масштабируются на
  d = LIMB_BASE // (v_top + 1), чтобы старший limb делителя был >= LIMB_BASE / 2;
  тогда q̂ никогда не меньше истинной цифры и превышает её не более чем на 2.
  Если после вычитания divisor × q̂ остаток отрицателен, q̂ уменьшается
  и делитель прибавляется обратно — столько раз, сколько потребуется.
- BINARY_SEARCH: бинарный поиск цифры в [0, LIMB_BASE) сравнением
  divisor × candidate с текущим остатком. Медленнее в O(log LIMB_BASE) раз.

Делитель из одного limb обрабатывается коротким делением при любой стратегии.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль → DivisionByZero (никогда не sentinel)
2. Операнды не изменяются; рабочие буферы локальны
3. Частное и остаток нормализованы, ноль положителен
"""

from enum import Enum
from typing import Sequence

from calcbigint.core.domain.big_integer import BigInteger
from calcbigint.core.domain.limbs import (
    LIMB_BASE,
    ZERO_MAGNITUDE,
    Ordering,
    compare_magnitudes,
    is_zero_magnitude,
    normalize_magnitude,
)
from calcbigint.core.math.additive import subtract_magnitudes
from calcbigint.core.math.multiplicative import multiply_magnitude_by_limb


# =============================================================================
# EXCEPTIONS & STRATEGY
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """Делитель равен нулю"""

    def __init__(self, dividend: BigInteger):
        super().__init__(f"division of {dividend} by zero")
        self.dividend = dividend


class DivisionStrategy(str, Enum):
    """Способ нахождения очередной цифры частного"""

    ESTIMATE = "estimate"
    BINARY_SEARCH = "binary_search"


# =============================================================================
# КОРОТКОЕ ДЕЛЕНИЕ
# =============================================================================


def divmod_by_limb(u: Sequence[int], divisor: int) -> tuple[tuple[int, ...], int]:
    """
    Деление магнитуды на один limb, divisor ∈ (0, LIMB_BASE).

    Returns:
        (частное, остаток) — остаток как int < divisor
    """
    if not 0 < divisor < LIMB_BASE:
        raise ValueError(f"divisor must be in (0, {LIMB_BASE}), got {divisor}")

    quotient = [0] * len(u)
    remainder = 0
    for i in range(len(u) - 1, -1, -1):
        remainder = remainder * LIMB_BASE + u[i]
        quotient[i] = remainder // divisor
        remainder -= quotient[i] * divisor

    return normalize_magnitude(quotient), remainder


# =============================================================================
# ДЛИННОЕ ДЕЛЕНИЕ
# =============================================================================


def _divmod_estimate(u: Sequence[int], v: Sequence[int]) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Длинное деление с оценкой и коррекцией q̂; len(v) >= 2, |u| >= |v|"""
    n = len(v)
    m = len(u) - n

    # Масштабирование: старший limb делителя становится >= LIMB_BASE // 2
    scale = LIMB_BASE // (v[-1] + 1)
    vn = list(multiply_magnitude_by_limb(v, scale))
    un = list(multiply_magnitude_by_limb(u, scale))
    un.extend([0] * (m + n + 1 - len(un)))

    v_top = vn[n - 1]
    v_next = vn[n - 2]
    quotient = [0] * (m + 1)

    for j in range(m, -1, -1):
        # Оценка по двум старшим limbs текущего остатка
        top_two = un[j + n] * LIMB_BASE + un[j + n - 1]
        q_hat = top_two // v_top
        r_hat = top_two - q_hat * v_top
        while q_hat >= LIMB_BASE or q_hat * v_next > r_hat * LIMB_BASE + un[j + n - 2]:
            q_hat -= 1
            r_hat += v_top
            if r_hat >= LIMB_BASE:
                break

        # un[j .. j+n] -= vn × q̂
        borrow = 0
        carry = 0
        for i in range(n):
            product = q_hat * vn[i] + carry
            carry = product // LIMB_BASE
            diff = un[i + j] - product % LIMB_BASE - borrow
            if diff < 0:
                diff += LIMB_BASE
                borrow = 1
            else:
                borrow = 0
            un[i + j] = diff
        top = un[j + n] - carry - borrow

        # q̂ оказалась слишком большой: прибавляем делитель обратно
        while top < 0:
            q_hat -= 1
            carry = 0
            for i in range(n):
                total = un[i + j] + vn[i] + carry
                un[i + j] = total % LIMB_BASE
                carry = total // LIMB_BASE
            top += carry

        un[j + n] = top
        quotient[j] = q_hat

    remainder, _ = divmod_by_limb(un[:n], scale)
    return normalize_magnitude(quotient), remainder


def _divmod_binary_search(u: Sequence[int], v: Sequence[int]) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Длинное деление с бинарным поиском каждой цифры частного"""
    quotient = [0] * len(u)
    remainder: tuple[int, ...] = ZERO_MAGNITUDE

    for i in range(len(u) - 1, -1, -1):
        # remainder = remainder × LIMB_BASE + u[i]
        remainder = normalize_magnitude((u[i],) + remainder)
        if compare_magnitudes(remainder, v) is Ordering.LESS:
            continue

        low, high = 1, LIMB_BASE - 1
        while low < high:
            candidate = (low + high + 1) // 2
            trial = multiply_magnitude_by_limb(v, candidate)
            if compare_magnitudes(trial, remainder) is Ordering.GREATER:
                high = candidate - 1
            else:
                low = candidate

        quotient[i] = low
        remainder = subtract_magnitudes(remainder, multiply_magnitude_by_limb(v, low))

    return normalize_magnitude(quotient), remainder


def divmod_magnitudes(
    u: Sequence[int],
    v: Sequence[int],
    strategy: DivisionStrategy = DivisionStrategy.ESTIMATE,
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Деление магнитуд: (|u| // |v|, |u| % |v|).

    Args:
        u: Делимое (нормализованная магнитуда)
        v: Делитель (нормализованная ненулевая магнитуда)
        strategy: Способ нахождения цифр частного

    Returns:
        (частное, остаток) как нормализованные магнитуды

    Raises:
        ValueError: Если v равен нулю
    """
    if is_zero_magnitude(v):
        raise ValueError("divisor magnitude is zero")

    if compare_magnitudes(u, v) is Ordering.LESS:
        return ZERO_MAGNITUDE, normalize_magnitude(u)

    if len(v) == 1:
        quotient, remainder = divmod_by_limb(u, v[0])
        return quotient, (remainder,)

    strategy = DivisionStrategy(strategy)
    if strategy is DivisionStrategy.BINARY_SEARCH:
        return _divmod_binary_search(u, v)
    return _divmod_estimate(u, v)


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def divmod(
    a: BigInteger,
    b: BigInteger,
    strategy: DivisionStrategy = DivisionStrategy.ESTIMATE,
) -> tuple[BigInteger, BigInteger]:
    """
    Усечённое деление с остатком.

    Частное округляется к нулю, остаток имеет знак делимого или равен нулю.

    Args:
        a: Делимое
        b: Делитель
        strategy: DivisionStrategy.ESTIMATE или DivisionStrategy.BINARY_SEARCH

    Returns:
        (quotient, remainder), где a == quotient × b + remainder

    Raises:
        DivisionByZero: Если b равен нулю

    Examples:
        >>> [str(x) for x in divmod(BigInteger.from_int(-7), BigInteger.from_int(2))]
        ['-3', '-1']
    """
    if b.is_zero():
        raise DivisionByZero(a)

    q_magnitude, r_magnitude = divmod_magnitudes(a.magnitude, b.magnitude, strategy)
    quotient = BigInteger.from_limbs(a.sign * b.sign, q_magnitude)
    remainder = BigInteger.from_limbs(a.sign, r_magnitude)
    return quotient, remainder


def quotient(
    a: BigInteger,
    b: BigInteger,
    strategy: DivisionStrategy = DivisionStrategy.ESTIMATE,
) -> BigInteger:
    """Частное усечённого деления"""
    return divmod(a, b, strategy)[0]


def remainder(
    a: BigInteger,
    b: BigInteger,
    strategy: DivisionStrategy = DivisionStrategy.ESTIMATE,
) -> BigInteger:
    """Остаток усечённого деления (знак делимого)"""
    return divmod(a, b, strategy)[1]
