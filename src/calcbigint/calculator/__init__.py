"""Calculator — операции, batch-режим и интерактивное меню поверх core.

Внешний слой над арифметикой произвольной точности:
- Выбор операции по номеру меню или имени
- Batch-режим: задание из файла, результат в файл
- Интерактивное меню на текстовых потоках
"""

from .operations import (
    CalculatorConfig,
    Operation,
    OperationResult,
    UnknownOperation,
    evaluate,
)
from .batch import BatchFormatError, BatchJob, read_job, run_batch, write_result
from .interactive import EXIT_CHOICE, run_interactive

__all__ = [
    "CalculatorConfig",
    "Operation",
    "OperationResult",
    "UnknownOperation",
    "evaluate",
    "BatchFormatError",
    "BatchJob",
    "read_job",
    "run_batch",
    "write_result",
    "EXIT_CHOICE",
    "run_interactive",
]
