"""
Batch Mode — вычисление по входному файлу

Формат входного файла (UTF-8): три непустые строки
    1. селектор операции ("1".."5" или имя: add, sub, mul, div, gcd)
    2. операнд A
    3. операнд B

Выходной файл: по одному каноническому значению на строку,
для деления — частное, затем остаток.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from calcbigint.calculator.operations import (
    CalculatorConfig,
    Operation,
    OperationResult,
    evaluate,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BatchFormatError(ValueError):
    """Входной файл не содержит трёх непустых строк"""


@dataclass(frozen=True)
class BatchJob:
    """Задание batch-режима"""
    operation: Operation
    a_text: str
    b_text: str


def read_job(path: PathLike) -> BatchJob:
    """
    Чтение задания из файла.

    Raises:
        FileNotFoundError: Если файл не найден
        BatchFormatError: Если непустых строк меньше трёх
        UnknownOperation: Если селектор не распознан
    """
    with open(path, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f if line.strip()]

    if len(lines) < 3:
        raise BatchFormatError(
            f"{path}: expected 3 non-blank lines (operation, A, B), got {len(lines)}"
        )
    if len(lines) > 3:
        logger.warning("%s: ignoring %d trailing lines", path, len(lines) - 3)

    return BatchJob(
        operation=Operation.from_selector(lines[0]),
        a_text=lines[1],
        b_text=lines[2],
    )


def write_result(path: PathLike, result: OperationResult) -> None:
    """Запись значений результата, по одному на строку"""
    with open(path, "w", encoding="utf-8") as f:
        for text in result.values_only():
            f.write(text + "\n")


def run_batch(
    input_path: PathLike,
    output_path: PathLike,
    config: Optional[CalculatorConfig] = None,
) -> OperationResult:
    """
    Выполнение batch-задания: чтение, вычисление, запись.

    Выходной файл не создаётся, если вычисление завершилось ошибкой.

    Returns:
        Результат операции
    """
    job = read_job(input_path)
    logger.info("Batch job %s: %s", input_path, job.operation.name)

    result = evaluate(job.operation, job.a_text, job.b_text, config)
    write_result(output_path, result)

    logger.info("Batch result written to %s", output_path)
    return result
