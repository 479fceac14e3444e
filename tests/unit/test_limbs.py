"""
Тесты для модуля Limbs

Проверяет:
1. Константы основания
2. Нормализацию магнитуды
3. Сравнение магнитуд (длина, затем limbs от старшего)
"""

from calcbigint.core.domain.limbs import (
    LIMB_BASE,
    LIMB_DIGITS,
    ZERO_MAGNITUDE,
    Ordering,
    compare_magnitudes,
    is_zero_magnitude,
    normalize_magnitude,
)


class TestConstants:
    """Тесты констант основания"""

    def test_base_is_power_of_ten_matching_digits(self) -> None:
        """LIMB_BASE == 10^LIMB_DIGITS"""
        assert LIMB_BASE == 10**LIMB_DIGITS
        assert LIMB_DIGITS == 9

    def test_square_with_carry_fits_64_bits(self) -> None:
        """Произведение двух limbs плюс перенос и накопитель помещается в 64 бита"""
        worst = (LIMB_BASE - 1) * (LIMB_BASE - 1) + 2 * (LIMB_BASE - 1)
        assert worst < 2**64


class TestNormalizeMagnitude:
    """Тесты для normalize_magnitude"""

    def test_drops_leading_zero_limbs(self) -> None:
        assert normalize_magnitude([5, 7, 0, 0]) == (5, 7)

    def test_keeps_single_zero(self) -> None:
        assert normalize_magnitude([0, 0, 0]) == ZERO_MAGNITUDE

    def test_empty_is_zero(self) -> None:
        assert normalize_magnitude([]) == (0,)

    def test_inner_zeros_kept(self) -> None:
        """Нули в младших и средних позициях не удаляются"""
        assert normalize_magnitude((0, 0, 3)) == (0, 0, 3)

    def test_returns_tuple(self) -> None:
        assert isinstance(normalize_magnitude([1, 2]), tuple)


class TestIsZeroMagnitude:
    """Тесты для is_zero_magnitude"""

    def test_zero(self) -> None:
        assert is_zero_magnitude((0,))

    def test_nonzero(self) -> None:
        assert not is_zero_magnitude((1,))
        assert not is_zero_magnitude((0, 1))


class TestCompareMagnitudes:
    """Тесты для compare_magnitudes"""

    def test_longer_is_greater(self) -> None:
        """Длина решает, даже если младшие limbs меньше"""
        assert compare_magnitudes((0, 1), (LIMB_BASE - 1,)) is Ordering.GREATER
        assert compare_magnitudes((LIMB_BASE - 1,), (0, 1)) is Ordering.LESS

    def test_same_length_compares_from_most_significant(self) -> None:
        assert compare_magnitudes((9, 1), (0, 2)) is Ordering.LESS
        assert compare_magnitudes((0, 2), (9, 1)) is Ordering.GREATER

    def test_equal(self) -> None:
        assert compare_magnitudes((1, 2, 3), (1, 2, 3)) is Ordering.EQUAL
        assert compare_magnitudes((0,), (0,)) is Ordering.EQUAL

    def test_differs_only_in_lowest_limb(self) -> None:
        assert compare_magnitudes((4, 5, 6), (3, 5, 6)) is Ordering.GREATER

    def test_ordering_values(self) -> None:
        """Ordering совместим с -1 / 0 / 1"""
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1
