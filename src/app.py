"""
Quantity measurement demo

Prints sample equality checks between quantities, or compares two
quantities given on the command line:

    python -m src.app
    python -m src.app --compare 1 ft 12 in
"""

import argparse
import logging
import sys

import structlog

from src.core.contracts import quantity_from_contract
from src.core.domain import Length, LengthUnit, Quantity, Weight, WeightUnit
from src.core.errors import InvalidValueError, QuantityError

logger = structlog.get_logger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Configure structlog once for the CLI process."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def sample_pairs() -> list[tuple[Quantity, Quantity]]:
    return [
        (Length(1.0, LengthUnit.FOOT), Length(1.0, LengthUnit.FOOT)),
        (Length(1.0, LengthUnit.INCH), Length(1.0, LengthUnit.INCH)),
        (Length(1.0, LengthUnit.FOOT), Length(12.0, LengthUnit.INCH)),
        (Length(1.0, LengthUnit.YARD), Length(36.0, LengthUnit.INCH)),
        (Weight(1.0, WeightUnit.KILOGRAM), Weight(1000.0, WeightUnit.GRAM)),
    ]


def render_comparison(a: Quantity, b: Quantity) -> str:
    return f"{a} == {b}: {a == b}"


def _parse_quantity(value_text: str, unit_text: str) -> Quantity:
    try:
        value = float(value_text)
    except ValueError:
        raise InvalidValueError(f"value must be a number, got {value_text!r}", argument="value") from None
    return quantity_from_contract({"value": value, "unit": unit_text})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quantity-demo", description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--compare",
        nargs=4,
        metavar=("VALUE_A", "UNIT_A", "VALUE_B", "UNIT_B"),
        help="compare two quantities, e.g. --compare 1 ft 12 in",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="structlog level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.compare is None:
        for a, b in sample_pairs():
            print(render_comparison(a, b))
        return 0

    value_a, unit_a, value_b, unit_b = args.compare
    try:
        a = _parse_quantity(value_a, unit_a)
        b = _parse_quantity(value_b, unit_b)
    except QuantityError as e:
        logger.warning("quantity_rejected", kind=e.kind, argument=e.argument)
        print(f"error: {e.kind} ({e.argument}): {e}", file=sys.stderr)
        return 2

    print(render_comparison(a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())
