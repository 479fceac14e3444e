"""
Тесты для Division Engine

Проверяет:
1. Усечённое деление: частное к нулю, остаток со знаком делимого
2. DivisionByZero для нулевого делителя
3. Короткое деление на один limb
4. Длинное деление: оценка q̂ и коррекция (add-back) на граничных делителях
5. Совпадение стратегий ESTIMATE и BINARY_SEARCH
"""

import pytest

from calcbigint.core.domain import BigInteger
from calcbigint.core.domain.limbs import LIMB_BASE
from calcbigint.core.math.codec import format, parse
from calcbigint.core.math.division import (
    DivisionByZero,
    DivisionStrategy,
    divmod,
    divmod_by_limb,
    divmod_magnitudes,
    quotient,
    remainder,
)

STRATEGIES = [DivisionStrategy.ESTIMATE, DivisionStrategy.BINARY_SEARCH]

B = LIMB_BASE

# Пары (делимое, делитель), на которых оценка q̂ требует коррекции
# или q̂ упирается в LIMB_BASE - 1
HARD_CASES = [
    (B**4 - 1, B**2 - 1),
    (B**6, B**2 + 1),
    (B**5 - B**3, B**2 - B),
    ((B // 2) * B**4 + 1, (B // 2) * B + B - 1),
    ((B - 1) * B**3 + (B - 1) * B**2, (B - 1) * B + B - 1),
    (B**7 - 1, 1 * B + (B - 1)),
    (123456789 * B**5 + 987654321, 1 * B**2 + 2),
    (5 * B**3 + 4 * B**2 + 3 * B + 2, 5 * B + 5),
    (B**3 * (B - 2) + B**2 * (B - 1), B * (B - 1) + (B - 1)),
    (2 * B**4, B**2 - 1),
    (B**10 + 7, B**5 - 3),
]


def big(n: int) -> BigInteger:
    return BigInteger.from_int(n)


def truncating(a: int, b: int) -> tuple[int, int]:
    """Эталон усечённого деления на встроенных int"""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# =============================================================================
# ЗНАКОВОЕ ДЕЛЕНИЕ
# =============================================================================


class TestDivmod:
    """Тесты для divmod"""

    def test_truncates_toward_zero(self) -> None:
        q, r = divmod(parse("-7"), parse("2"))
        assert format(q) == "-3"
        assert format(r) == "-1"

    @pytest.mark.parametrize(
        ("a", "b"),
        [(7, 2), (-7, 2), (7, -2), (-7, -2), (6, 3), (-6, 3), (1, 5), (-1, 5), (0, 5)],
    )
    def test_sign_combinations(self, a: int, b: int) -> None:
        q, r = divmod(big(a), big(b))
        assert (q.to_int(), r.to_int()) == truncating(a, b)

    def test_smaller_dividend(self) -> None:
        """|a| < |b| → частное 0, остаток = a со знаком"""
        q, r = divmod(big(-(10**9)), big(10**20))
        assert q == BigInteger.zero()
        assert r.to_int() == -(10**9)

    def test_exact_division_gives_positive_zero_remainder(self) -> None:
        q, r = divmod(big(-(10**30)), big(10**15))
        assert q.to_int() == -(10**15)
        assert r == BigInteger.zero()
        assert r.sign == 1

    def test_zero_dividend_negative_divisor(self) -> None:
        q, r = divmod(BigInteger.zero(), big(-(10**20)))
        assert q.sign == 1
        assert r.sign == 1

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            divmod(parse("5"), parse("0"))

    @pytest.mark.parametrize("a", [0, 1, -1, 10**40])
    def test_division_by_zero_for_every_dividend(self, a: int) -> None:
        with pytest.raises(DivisionByZero, match="by zero"):
            divmod(big(a), BigInteger.zero())

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divmod(big(1), big(0))

    def test_operands_not_mutated(self) -> None:
        a, b = big(10**40 + 12345), big(-(10**20 + 7))
        divmod(a, b)
        assert a.to_int() == 10**40 + 12345
        assert b.to_int() == -(10**20 + 7)

    def test_quotient_and_remainder_helpers(self) -> None:
        assert quotient(big(-17), big(5)).to_int() == -3
        assert remainder(big(-17), big(5)).to_int() == -2

    def test_strategy_accepts_string_value(self) -> None:
        q, r = divmod(big(10**30 + 1), big(10**12 + 3), "binary_search")
        assert (q.to_int(), r.to_int()) == truncating(10**30 + 1, 10**12 + 3)


# =============================================================================
# ДЛИННОЕ ДЕЛЕНИЕ
# =============================================================================


class TestLongDivision:
    """Тесты многолимбового деления для обеих стратегий"""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize(("a", "b"), HARD_CASES)
    def test_hard_cases(self, strategy: DivisionStrategy, a: int, b: int) -> None:
        for sa, sb in [(1, 1), (-1, 1), (1, -1), (-1, -1)]:
            q, r = divmod(big(sa * a), big(sb * b), strategy)
            assert (q.to_int(), r.to_int()) == truncating(sa * a, sb * b)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_division_identity(self, strategy: DivisionStrategy) -> None:
        a = parse("-" + "918273645" * 12)
        b = parse("1234567890123456789")
        q, r = divmod(a, b, strategy)
        assert (q * b + r) == a
        assert abs(r) < abs(b)
        assert r.is_zero() or r.sign == a.sign

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_equal_operands(self, strategy: DivisionStrategy) -> None:
        a = big(10**50 + 99)
        q, r = divmod(a, a, strategy)
        assert q == BigInteger.one()
        assert r == BigInteger.zero()

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_same_length_operands(self, strategy: DivisionStrategy) -> None:
        a, b = 9 * B**3 + 1, 2 * B**3 + 5
        q, r = divmod(big(a), big(b), strategy)
        assert (q.to_int(), r.to_int()) == (a // b, a % b)

    def test_strategies_agree_on_magnitudes(self) -> None:
        u = (LIMB_BASE - 1, 0, LIMB_BASE - 1, 1, 0, 7)
        v = (3, LIMB_BASE - 1, 2)
        assert divmod_magnitudes(u, v, DivisionStrategy.ESTIMATE) == divmod_magnitudes(
            u, v, DivisionStrategy.BINARY_SEARCH
        )

    def test_zero_divisor_magnitude(self) -> None:
        with pytest.raises(ValueError, match="zero"):
            divmod_magnitudes((1,), (0,))


# =============================================================================
# КОРОТКОЕ ДЕЛЕНИЕ
# =============================================================================


class TestDivmodByLimb:
    """Тесты для divmod_by_limb"""

    def test_simple(self) -> None:
        assert divmod_by_limb((17,), 5) == ((3,), 2)

    def test_multi_limb(self) -> None:
        value = 10**30 + 7
        magnitude = big(value).magnitude
        q, r = divmod_by_limb(magnitude, 999_999_937)
        assert BigInteger(magnitude=q, sign=1).to_int() == value // 999_999_937
        assert r == value % 999_999_937

    def test_unnormalized_input(self) -> None:
        """Старшие нули во входе допустимы, частное нормализуется"""
        assert divmod_by_limb((10, 0, 0), 3) == ((3,), 1)

    @pytest.mark.parametrize("divisor", [0, LIMB_BASE, -1])
    def test_divisor_out_of_range(self, divisor: int) -> None:
        with pytest.raises(ValueError, match="divisor must be in"):
            divmod_by_limb((1,), divisor)
