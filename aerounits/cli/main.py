"""
Command-line interface for aerounits.

Usage:
    python -m aerounits units [--dimension velocity]
    python -m aerounits convert 10 ms kph [--json]
    python -m aerounits calc add 1:in 1:ft [--json]
    python -m aerounits q 154.412 knots [--altitude 15000 ft] [--json]
    python -m aerounits serve [--port 8000]
"""

import argparse
import logging
import sys

import uvicorn

from aerounits import __version__
from aerounits.aero import dynamic_pressure
from aerounits.calculator import calculate, convert_quantity, list_units
from aerounits.models.schemas import (
    CalculationRequest,
    ConvertRequest,
    Operation,
    QuantityModel,
)
from aerounits.units import Dimension, Quantity, UnitError

logger = logging.getLogger(__name__)


def parse_operand(text: str):
    """
    Parse a CLI operand: "VALUE" for a plain number or "VALUE:UNIT" for a quantity.

    Raises:
        argparse.ArgumentTypeError: if the value is not a number
    """
    value_text, _, unit_text = text.partition(":")
    try:
        value = float(value_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid operand '{text}' (expected VALUE or VALUE:UNIT)")
    if unit_text:
        return {"value": value, "unit": unit_text}
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="aerounits",
        description="Units-of-measure arithmetic and light plane design formulae. "
                    "WARNING: Formulae are for conceptual design only, NOT for certification.",
    )
    parser.add_argument("--version", action="version", version=f"aerounits {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # units command
    units_parser = subparsers.add_parser(
        "units",
        help="List registered units",
    )
    units_parser.add_argument(
        "--dimension", "-d",
        choices=[d.value for d in Dimension],
        default=None,
        help="Only list units of this dimension",
    )

    # convert command
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a value between units of the same dimension",
    )
    convert_parser.add_argument("value", type=float, help="Numeric value")
    convert_parser.add_argument("unit", help="Unit of the value, e.g. ms")
    convert_parser.add_argument("to_unit", help="Target unit, e.g. kph")
    convert_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # calc command
    calc_parser = subparsers.add_parser(
        "calc",
        help="Apply add, subtract, multiply, divide or negate",
    )
    calc_parser.add_argument(
        "operation",
        choices=[op.value for op in Operation],
        help="Operation to apply",
    )
    calc_parser.add_argument("a", type=parse_operand, help="Left operand: VALUE or VALUE:UNIT")
    calc_parser.add_argument(
        "b",
        type=parse_operand,
        nargs="?",
        default=None,
        help="Right operand: VALUE or VALUE:UNIT (omit for negate)",
    )
    calc_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # q command
    q_parser = subparsers.add_parser(
        "q",
        help="Dynamic pressure (psf) at a velocity and altitude",
    )
    q_parser.add_argument("value", type=float, help="Velocity value")
    q_parser.add_argument("unit", help="Velocity unit, e.g. knots")
    q_parser.add_argument(
        "--altitude", "-a",
        nargs=2,
        metavar=("VALUE", "UNIT"),
        default=None,
        help="Altitude (default sea level)",
    )
    q_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _fmt_quantity(model: QuantityModel) -> str:
    return f"{model.value} {model.unit.value}"


def cmd_units(args: argparse.Namespace) -> int:
    """List registered units."""
    dimension = Dimension(args.dimension) if args.dimension else None
    for info in list_units(dimension):
        marker = "*" if info.base else " "
        print(f"{marker} {info.id.value:<8} {info.dimension.value:<13} {info.description}")
    print("\n* base unit of its dimension", file=sys.stderr)
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert a value between units."""
    try:
        request = ConvertRequest(
            quantity=QuantityModel(value=args.value, unit=args.unit),
            to_unit=args.to_unit,
        )
        result = convert_quantity(request)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(_fmt_quantity(result.result))
    return 0


def cmd_calc(args: argparse.Namespace) -> int:
    """Apply an arithmetic operation."""
    try:
        request = CalculationRequest(operation=args.operation, a=args.a, b=args.b)
        result = calculate(request)
    except (ValueError, ZeroDivisionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    elif isinstance(result.result, QuantityModel):
        print(_fmt_quantity(result.result))
    else:
        print(result.result)
    return 0


def cmd_q(args: argparse.Namespace) -> int:
    """Compute dynamic pressure."""
    try:
        velocity = Quantity(args.value, args.unit)
        if args.altitude:
            altitude = Quantity(float(args.altitude[0]), args.altitude[1])
            q = dynamic_pressure(velocity, altitude)
        else:
            q = dynamic_pressure(velocity)
    except (UnitError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    model = QuantityModel.from_quantity(q)
    if args.json:
        print(model.model_dump_json(indent=2))
    else:
        print(_fmt_quantity(model))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    logger.info("Serving aerounits API on %s:%d", args.host, args.port)
    uvicorn.run("aerounits.api.server:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def cli(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "units": cmd_units,
        "convert": cmd_convert,
        "calc": cmd_calc,
        "q": cmd_q,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        logger.debug("Running command %s", args.command)
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
