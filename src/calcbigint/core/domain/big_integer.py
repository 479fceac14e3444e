"""
BigInteger — Модель целого числа произвольной точности

Immutable Pydantic модель: знак + магнитуда в виде tuple limbs
по основанию 10^9 (младший limb первым).

Все арифметические операции создают новый экземпляр и никогда не
изменяют операнды. Операторы Python (+, -, *, //, %, divmod, abs,
сравнения) делегируют в движки core.math.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
A. Старший limb ненулевой, кроме канонического нуля (0,)
B. Ноль всегда имеет знак +1
C. Магнитуда содержит хотя бы один limb
"""

from typing import Sequence

from pydantic import BaseModel, Field, StrictInt, field_validator

from calcbigint.core.domain.limbs import (
    LIMB_BASE,
    ZERO_MAGNITUDE,
    Ordering,
    compare_magnitudes,
    is_zero_magnitude,
    normalize_magnitude,
)


# =============================================================================
# BIGINTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Целое число произвольной точности в sign-magnitude представлении.

    Immutable модель (frozen=True): каждая операция возвращает новый экземпляр.
    Прямое создание с нарушением инвариантов вызывает ValidationError;
    для ненормализованных limbs используйте from_limbs().
    """

    magnitude: tuple[StrictInt, ...] = Field(
        ..., min_length=1, description="Limbs по основанию 10^9, младший первым"
    )
    sign: StrictInt = Field(..., description="+1 или -1; ноль всегда +1")

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def validate_limbs(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка диапазона limbs и отсутствия старших нулей"""
        for limb in v:
            if not 0 <= limb < LIMB_BASE:
                raise ValueError(f"limb {limb} out of range [0, {LIMB_BASE})")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("magnitude has leading zero limbs")
        return v

    @field_validator("sign")
    @classmethod
    def validate_sign(cls, v: int, info) -> int:
        """Проверка знака: только ±1, ноль без отрицательного знака"""
        if v not in (1, -1):
            raise ValueError(f"sign must be +1 or -1, got {v}")
        if "magnitude" in info.data and v == -1:
            if is_zero_magnitude(info.data["magnitude"]):
                raise ValueError("zero must have sign +1")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigInteger":
        return cls(magnitude=ZERO_MAGNITUDE, sign=1)

    @classmethod
    def one(cls) -> "BigInteger":
        return cls(magnitude=(1,), sign=1)

    @classmethod
    def from_limbs(cls, sign: int, limbs: Sequence[int]) -> "BigInteger":
        """
        Создание из произвольных limbs с нормализацией.

        Старшие нулевые limbs удаляются, знак нуля приводится к +1.

        Args:
            sign: +1 или -1
            limbs: Limbs от младшего к старшему

        Returns:
            Нормализованный BigInteger
        """
        magnitude = normalize_magnitude(limbs)
        if is_zero_magnitude(magnitude):
            sign = 1
        return cls(magnitude=magnitude, sign=sign)

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Конверсия из встроенного int любого размера.

        Examples:
            >>> BigInteger.from_int(-1_000_000_007).magnitude
            (7, 1)
        """
        sign = -1 if value < 0 else 1
        remaining = abs(value)
        limbs = []
        while remaining:
            remaining, limb = divmod(remaining, LIMB_BASE)
            limbs.append(limb)
        return cls.from_limbs(sign, limbs)

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    def is_negative(self) -> bool:
        return self.sign < 0

    def limb_count(self) -> int:
        return len(self.magnitude)

    def to_int(self) -> int:
        """Конверсия во встроенный int"""
        value = 0
        for limb in reversed(self.magnitude):
            value = value * LIMB_BASE + limb
        return self.sign * value

    def negate(self) -> "BigInteger":
        """Смена знака (ноль остаётся положительным)"""
        if self.is_zero():
            return self
        return BigInteger(magnitude=self.magnitude, sign=-self.sign)

    def abs(self) -> "BigInteger":
        if self.sign > 0:
            return self
        return BigInteger(magnitude=self.magnitude, sign=1)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        from calcbigint.core.math import codec

        return codec.format(self)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        # Совпадает с hash(int) для равных значений
        return hash(self.to_int())

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.sign == other.sign and self.magnitude == other.magnitude

    def __lt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self.abs()

    # Движки импортируют BigInteger, поэтому здесь импорт на уровне функции

    def __add__(self, other: object) -> "BigInteger":
        from calcbigint.core.math.additive import add

        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: object) -> "BigInteger":
        return self.__add__(other)

    def __sub__(self, other: object) -> "BigInteger":
        from calcbigint.core.math.additive import subtract

        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: object) -> "BigInteger":
        from calcbigint.core.math.additive import subtract

        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other: object) -> "BigInteger":
        from calcbigint.core.math.multiplicative import multiply

        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: object) -> "BigInteger":
        return self.__mul__(other)

    def __divmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        """Усечённое деление: частное к нулю, остаток со знаком делимого"""
        from calcbigint.core.math import division

        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return division.divmod(self, other)

    def __rdivmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        from calcbigint.core.math import division

        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return division.divmod(other, self)

    def __floordiv__(self, other: object) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: object) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]


# =============================================================================
# СРАВНЕНИЕ СО ЗНАКОМ
# =============================================================================


def compare(a: BigInteger, b: BigInteger) -> Ordering:
    """
    Сравнение двух BigInteger с учётом знака.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        Ordering.LESS / Ordering.EQUAL / Ordering.GREATER
    """
    if a.sign != b.sign:
        return Ordering.LESS if a.sign < b.sign else Ordering.GREATER

    by_magnitude = compare_magnitudes(a.magnitude, b.magnitude)
    if a.sign < 0:
        return Ordering(-by_magnitude)
    return by_magnitude


def _coerce(value: object):
    """BigInteger как есть, int → BigInteger, иначе NotImplemented"""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger.from_int(value)
    return NotImplemented
