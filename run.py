import sys
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter

from fixedpoint.domain.exceptions import DecimalError, FatalDecimalError
from fixedpoint.domain.services import PrecisionService
from fixedpoint.domain.values import DecimalValue, RoundingMode
from fixedpoint.shared.config import get_settings
from fixedpoint.shared.di import get_container
from fixedpoint.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Fixed-point decimal toolbox",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a number and print its canonical form.")
    parse_parser.add_argument("value")
    parse_parser.set_defaults(func=run_parse)

    upscale_parser = subparsers.add_parser("upscale", help="Append trailing zeros to a number.")
    upscale_parser.add_argument("value")
    upscale_parser.add_argument("amount", type=int)
    upscale_parser.set_defaults(func=run_upscale)

    downscale_parser = subparsers.add_parser(
        "downscale", help="Drop fractional digits from a number, rounding."
    )
    downscale_parser.add_argument("value")
    downscale_parser.add_argument("amount", type=int)
    downscale_parser.set_defaults(func=run_downscale)

    negate_parser = subparsers.add_parser("negate", help="Negate a number.")
    negate_parser.add_argument("value")
    negate_parser.add_argument(
        "--rounding",
        action="store_true",
        help="Drop one digit instead of failing when the negation overflows",
    )
    negate_parser.set_defaults(func=run_negate)

    normalize_parser = subparsers.add_parser(
        "normalize", help="Rescale a number to the configured (or given) scaling."
    )
    normalize_parser.add_argument("value")
    normalize_parser.add_argument("--scaling", type=int, default=None)
    normalize_parser.set_defaults(func=run_normalize)

    compare_parser = subparsers.add_parser(
        "compare", aliases=["eq"], help="Tell whether two numbers are equal."
    )
    compare_parser.add_argument("left")
    compare_parser.add_argument("right")
    compare_parser.set_defaults(func=run_compare)

    return parser


def _rounding_mode() -> RoundingMode:
    return RoundingMode(get_settings().ROUNDING_MODE)


def run_parse(args: Namespace) -> str:
    return str(DecimalValue.parse(args.value))


def run_upscale(args: Namespace) -> str:
    return str(DecimalValue.parse(args.value).try_upscale_by(args.amount))


def run_downscale(args: Namespace) -> str:
    return str(DecimalValue.parse(args.value).downscale_by(args.amount, _rounding_mode()))


def run_negate(args: Namespace) -> str:
    value = DecimalValue.parse(args.value)

    if args.rounding:
        return str(value.rounding_neg(_rounding_mode()))

    return str(-value)


def run_normalize(args: Namespace) -> str:
    container = get_container(default_scaling=args.scaling)
    precision: PrecisionService = container.precision_service()

    return str(precision.normalize(DecimalValue.parse(args.value)))


def run_compare(args: Namespace) -> str:
    left = DecimalValue.parse(args.left)
    right = DecimalValue.parse(args.right)

    return "equal" if left == right else "not equal"


def main(argv: list[str] = None) -> int:
    settings = get_settings()

    configure_logging(
        log_level=settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS,
        force=True,
    )

    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.debug("command_starting", command=args.command)

    try:
        output = args.func(args)
    except (DecimalError, FatalDecimalError) as e:
        logger.info("command_rejected", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        return 1

    print(output)
    logger.debug("command_completed", command=args.command, output=output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
