"""
Limbs — Positional Representation Primitives

Магнитуда числа хранится как tuple limbs по основанию 10^9,
младший limb первым (little-endian по limbs).

Модуль содержит только то, что нужно всем движкам сразу:
- Константы основания (LIMB_BASE, LIMB_DIGITS)
- Нормализация магнитуды (удаление старших нулевых limbs)
- Сравнение магнитуд

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Старший limb ненулевой, кроме канонического нуля (0,)
2. Магнитуда всегда содержит хотя бы один limb
3. Каждый limb ∈ [0, LIMB_BASE)
"""

from enum import IntEnum
from typing import Final, Sequence

# =============================================================================
# ОСНОВАНИЕ
# =============================================================================

# Наибольшая степень 10, квадрат которой (плюс перенос) помещается в 64 бита
LIMB_BASE: Final[int] = 1_000_000_000

# Количество десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 9

# Каноническая магнитуда нуля
ZERO_MAGNITUDE: Final[tuple[int, ...]] = (0,)


class Ordering(IntEnum):
    """Результат сравнения двух значений"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_magnitude(limbs: Sequence[int]) -> tuple[int, ...]:
    """
    Удаление старших нулевых limbs.

    Args:
        limbs: Limbs в порядке от младшего к старшему (может быть пустым)

    Returns:
        Нормализованная магнитуда, минимум один limb

    Examples:
        >>> normalize_magnitude([5, 0, 0])
        (5,)
        >>> normalize_magnitude([])
        (0,)
    """
    size = len(limbs)
    while size > 1 and limbs[size - 1] == 0:
        size -= 1
    if size == 0:
        return ZERO_MAGNITUDE
    return tuple(limbs[:size])


def is_zero_magnitude(limbs: Sequence[int]) -> bool:
    """Проверка, что магнитуда равна нулю (ожидается нормализованная)"""
    return len(limbs) == 1 and limbs[0] == 0


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(x: Sequence[int], y: Sequence[int]) -> Ordering:
    """
    Сравнение двух нормализованных магнитуд.

    Сначала сравнивается длина, затем limbs от старшего к младшему.
    Корректно только для нормализованных магнитуд (без старших нулей).

    Args:
        x: Первая магнитуда
        y: Вторая магнитуда

    Returns:
        Ordering.LESS / Ordering.EQUAL / Ordering.GREATER
    """
    if len(x) != len(y):
        return Ordering.LESS if len(x) < len(y) else Ordering.GREATER

    for i in range(len(x) - 1, -1, -1):
        if x[i] != y[i]:
            return Ordering.LESS if x[i] < y[i] else Ordering.GREATER

    return Ordering.EQUAL
