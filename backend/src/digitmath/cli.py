"""
Command-line entry points.

Usage:
    digitmath-factorial 25
    digitmath-multiply "[1,5]" "[1,2]"

Both commands print the computed value; invalid input is reported on
stderr with exit status 1.
"""

import argparse
import logging
import sys

from digitmath.config import get_settings
from digitmath.domain.digits import DigitArrayInteger
from digitmath.domain.errors import InvalidInput
from digitmath.services.factorial import FactorialService

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the command-line tools."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )


def factorial_main(argv: list[str] | None = None) -> int:
    """Print n! for the given n (default taken from settings)."""
    parser = argparse.ArgumentParser(
        prog="digitmath-factorial",
        description="Compute n! using addition-only arithmetic.",
    )
    parser.add_argument(
        "n",
        nargs="?",
        type=int,
        default=None,
        help="Non-negative integer (default: DEFAULT_FACTORIAL_N, 100)",
    )
    _add_log_level(parser)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    n = args.n if args.n is not None else get_settings().default_factorial_n

    try:
        result = FactorialService().calculate(n)
    except InvalidInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"{n}! = {result}")
    return 0


def multiply_main(argv: list[str] | None = None) -> int:
    """Print the product of two JSON digit arrays."""
    parser = argparse.ArgumentParser(
        prog="digitmath-multiply",
        description="Multiply two numbers given as JSON arrays of digits.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 15 * 2
  digitmath-multiply "[1,5]" "[2]"
        """,
    )
    parser.add_argument("a", help='First number, most significant digit first, e.g. "[1,5]"')
    parser.add_argument("b", help='Second number, most significant digit first, e.g. "[2]"')
    _add_log_level(parser)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        a = DigitArrayInteger.from_json(args.a)
        b = DigitArrayInteger.from_json(args.b)
    except InvalidInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.debug(f"Multiplying {len(a.digits)}-digit by {len(b.digits)}-digit number")
    print(f"{a} * {b} = {a.multiply(b)}")
    return 0


def run_factorial() -> None:
    sys.exit(factorial_main())


def run_multiply() -> None:
    sys.exit(multiply_main())
