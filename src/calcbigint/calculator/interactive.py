"""
Interactive Mode — меню калькулятора на текстовых потоках

Цикл: меню → выбор → два операнда → результат с метками.
Ошибки ввода и деление на ноль выводятся сообщением, цикл продолжается.
Завершение по пункту "Sair" или концу входного потока.
"""

import logging
import sys
from typing import Optional, TextIO

from calcbigint.calculator.operations import (
    CalculatorConfig,
    Operation,
    UnknownOperation,
    evaluate,
)
from calcbigint.core.math.codec import InvalidFormat
from calcbigint.core.math.division import DivisionByZero

logger = logging.getLogger(__name__)

EXIT_CHOICE = "6"

MENU = (
    "=== CalcBigInt ===\n"
    "1) Soma\n"
    "2) Subtracao\n"
    "3) Multiplicacao\n"
    "4) Divisao\n"
    "5) MDC\n"
    f"{EXIT_CHOICE}) Sair\n"
    "Escolha: "
)


def _prompt(stdin: TextIO, stdout: TextIO, message: str) -> Optional[str]:
    """Вывод приглашения и чтение строки; None при конце потока"""
    stdout.write(message)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def run_interactive(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    config: Optional[CalculatorConfig] = None,
) -> int:
    """
    Запуск интерактивного меню.

    Args:
        stdin: Входной поток (default: sys.stdin)
        stdout: Выходной поток (default: sys.stdout)
        config: Конфигурация калькулятора

    Returns:
        Количество успешно выполненных операций
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    completed = 0

    while True:
        choice = _prompt(stdin, stdout, MENU)
        if choice is None or choice.strip() == EXIT_CHOICE:
            break

        try:
            operation = Operation.from_selector(choice)
        except UnknownOperation:
            stdout.write(f"Opcao invalida: {choice.strip()}\n")
            continue

        a_text = _prompt(stdin, stdout, "Digite o primeiro numero:\n")
        if a_text is None:
            break
        b_text = _prompt(stdin, stdout, "Digite o segundo numero:\n")
        if b_text is None:
            break

        try:
            result = evaluate(operation, a_text, b_text, config)
        except InvalidFormat as e:
            stdout.write(f"Erro: numero invalido {e.text!r}\n")
            continue
        except DivisionByZero:
            stdout.write("Erro: divisao por zero\n")
            continue

        for line in result.lines():
            stdout.write(line + "\n")
        completed += 1

    logger.info("Interactive session finished after %d operations", completed)
    return completed
