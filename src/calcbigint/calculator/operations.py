"""
Calculator Operations — выбор и выполнение операции над текстовыми операндами

Слой над core: работает только с публичным интерфейсом
(parse / format / add / subtract / multiply / divmod / gcd),
никогда не обращается к limbs напрямую.

Используется batch-режимом, интерактивным меню и CLI.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from calcbigint.core.domain.big_integer import BigInteger
from calcbigint.core.math.additive import add, subtract
from calcbigint.core.math.codec import format, parse
from calcbigint.core.math.division import DivisionStrategy, divmod
from calcbigint.core.math.gcd import gcd
from calcbigint.core.math.multiplicative import multiply

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    - division_strategy — способ нахождения цифр частного (DIVIDE и GCD)
    - log_level — уровень логирования для CLI
    """
    division_strategy: DivisionStrategy = DivisionStrategy.ESTIMATE
    log_level: str = "WARNING"


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


class UnknownOperation(ValueError):
    """Селектор операции не распознан"""

    def __init__(self, selector: str):
        super().__init__(f"unknown operation selector {selector!r}")
        self.selector = selector


class Operation(str, Enum):
    """Операция калькулятора; значение — номер пункта меню"""
    ADD = "1"
    SUBTRACT = "2"
    MULTIPLY = "3"
    DIVIDE = "4"
    GCD = "5"

    @classmethod
    def from_selector(cls, selector: str) -> "Operation":
        """
        Операция по номеру меню или имени (регистр не важен).

        Examples:
            >>> Operation.from_selector("4")
            <Operation.DIVIDE: '4'>
            >>> Operation.from_selector(" Mul ")
            <Operation.MULTIPLY: '3'>

        Raises:
            UnknownOperation: Если селектор не распознан
        """
        key = selector.strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key in _SELECTOR_ALIASES:
            return _SELECTOR_ALIASES[key]
        raise UnknownOperation(selector)


_SELECTOR_ALIASES: dict[str, Operation] = {
    "add": Operation.ADD,
    "+": Operation.ADD,
    "sub": Operation.SUBTRACT,
    "subtract": Operation.SUBTRACT,
    "-": Operation.SUBTRACT,
    "mul": Operation.MULTIPLY,
    "multiply": Operation.MULTIPLY,
    "*": Operation.MULTIPLY,
    "div": Operation.DIVIDE,
    "divmod": Operation.DIVIDE,
    "/": Operation.DIVIDE,
    "gcd": Operation.GCD,
    "mdc": Operation.GCD,
}


# =============================================================================
# РЕЗУЛЬТАТ
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат операции: упорядоченные пары (метка, значение)."""

    operation: Operation
    values: tuple[tuple[str, BigInteger], ...]

    def lines(self) -> list[str]:
        """Строки вида 'Quociente: 123'"""
        return [f"{label}: {format(value)}" for label, value in self.values]

    def values_only(self) -> list[str]:
        """Канонический текст значений без меток"""
        return [format(value) for _, value in self.values]


def evaluate(
    operation: Operation,
    a_text: str,
    b_text: str,
    config: Optional[CalculatorConfig] = None,
) -> OperationResult:
    """
    Разбор операндов и выполнение операции.

    Args:
        operation: Операция
        a_text: Текст первого операнда
        b_text: Текст второго операнда
        config: Конфигурация (default: CalculatorConfig())

    Returns:
        OperationResult с метками Resultado / Quociente + Resto

    Raises:
        InvalidFormat: Если операнд не является целым числом
        DivisionByZero: Если DIVIDE с нулевым делителем
    """
    config = config or CalculatorConfig()

    try:
        a = parse(a_text)
        b = parse(b_text)
    except ValueError:
        logger.warning("Rejected operand for %s", operation.name)
        raise

    logger.info(
        "Evaluating %s on operands of %d and %d limbs",
        operation.name,
        a.limb_count(),
        b.limb_count(),
    )

    if operation is Operation.ADD:
        values = (("Resultado", add(a, b)),)
    elif operation is Operation.SUBTRACT:
        values = (("Resultado", subtract(a, b)),)
    elif operation is Operation.MULTIPLY:
        values = (("Resultado", multiply(a, b)),)
    elif operation is Operation.DIVIDE:
        q, r = divmod(a, b, config.division_strategy)
        values = (("Quociente", q), ("Resto", r))
    else:
        values = (("Resultado", gcd(a, b, config.division_strategy)),)

    return OperationResult(operation=operation, values=values)
