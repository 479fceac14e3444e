"""Command-line interface for CalcBigInt.

Provides the `calcbigint` command with subcommands for:
- Evaluating a single operation
- Batch mode (job file in, result file out)
- Interactive menu on stdin/stdout (default)

Exit codes: 0 on success, 1 on invalid input or division by zero,
2 on usage errors.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from calcbigint.calculator.batch import BatchFormatError, run_batch
from calcbigint.calculator.interactive import run_interactive
from calcbigint.calculator.operations import (
    CalculatorConfig,
    Operation,
    UnknownOperation,
    evaluate,
)
from calcbigint.core.math.codec import InvalidFormat
from calcbigint.core.math.division import DivisionByZero, DivisionStrategy

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _config_from_args(args: argparse.Namespace) -> CalculatorConfig:
    return CalculatorConfig(
        division_strategy=DivisionStrategy(args.division_strategy),
        log_level=args.log_level,
    )


def cmd_eval(args: argparse.Namespace, config: CalculatorConfig) -> int:
    """Evaluate one operation and print the labelled result."""
    try:
        operation = Operation.from_selector(args.operation)
        result = evaluate(operation, args.a, args.b, config)
    except (UnknownOperation, InvalidFormat, DivisionByZero) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    for line in result.lines():
        print(line)
    return EXIT_OK


def cmd_batch(args: argparse.Namespace, config: CalculatorConfig) -> int:
    """Run a batch job file."""
    try:
        run_batch(args.input, args.output, config)
    except OSError as e:
        print(f"error: cannot access {e.filename}: {e.strerror}", file=sys.stderr)
        return EXIT_FAILURE
    except (BatchFormatError, UnknownOperation, InvalidFormat, DivisionByZero) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


def cmd_interactive(args: argparse.Namespace, config: CalculatorConfig) -> int:
    """Run the interactive menu."""
    run_interactive(sys.stdin, sys.stdout, config)
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="calcbigint",
        description="Arbitrary-precision integer calculator",
    )
    parser.add_argument(
        "--division-strategy",
        choices=[strategy.value for strategy in DivisionStrategy],
        default=DivisionStrategy.ESTIMATE.value,
        help="Quotient digit search for division and GCD (default: estimate)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for stderr (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # eval command
    eval_parser = subparsers.add_parser("eval", help="Evaluate one operation")
    eval_parser.add_argument(
        "operation",
        help="Operation: 1-5 or add, sub, mul, div, gcd",
    )
    eval_parser.add_argument("a", help="First operand")
    eval_parser.add_argument("b", help="Second operand")
    eval_parser.set_defaults(func=cmd_eval)

    # batch command
    batch_parser = subparsers.add_parser("batch", help="Run a batch job file")
    batch_parser.add_argument(
        "input",
        help="Job file: operation, operand A, operand B on three lines",
    )
    batch_parser.add_argument("output", help="Result file")
    batch_parser.set_defaults(func=cmd_batch)

    # interactive command
    interactive_parser = subparsers.add_parser("interactive", help="Interactive menu")
    interactive_parser.set_defaults(func=cmd_interactive)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    config = _config_from_args(args)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    logger.debug("Running command %s", args.command or "interactive")

    if args.command is None:
        return cmd_interactive(args, config)

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
