"""hllcheck CLI entry point.

Usage: uv run hllcheck [command]
"""
import argparse
import logging
import sys

log = logging.getLogger("hllcheck")


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    from hllcheck.comparison.engine import DEFAULT_SEED
    from hllcheck.estimators import BUILTIN_ESTIMATORS

    p = subparsers.add_parser(
        "compare",
        help="Run the accuracy comparison and print the report.",
    )
    p.add_argument(
        "--estimator", choices=BUILTIN_ESTIMATORS, default="hll",
        help="Primary estimator (default: hll)",
    )
    p.add_argument(
        "--against", choices=BUILTIN_ESTIMATORS, default=None,
        help="Optional second estimator fed the same streams.",
    )
    p.add_argument(
        "--precision", type=int, default=11,
        help="HyperLogLog precision for the primary estimator (default: 11)",
    )
    p.add_argument(
        "--against-precision", type=int, default=None,
        help="HyperLogLog precision for the second estimator "
             "(default: same as --precision)",
    )
    p.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help=f"RNG seed for reproducible runs (default: {DEFAULT_SEED})",
    )
    p.add_argument(
        "--max-size", type=int, default=None,
        help="Skip catalog entries with more draws than this.",
    )


def _add_params_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "params",
        help="List the parameter catalog.",
    )
    p.add_argument(
        "--max-size", type=int, default=None,
        help="Only list entries with at most this many draws.",
    )


def _run_compare(args: argparse.Namespace) -> None:
    from hllcheck.comparison.engine import run_comparison
    from hllcheck.estimators import builtin_factory
    from hllcheck.generator.params import select_params

    try:
        primary = builtin_factory(args.estimator, precision=args.precision)
        secondary = None
        if args.against is not None:
            precision = args.against_precision
            if precision is None:
                precision = args.precision
            secondary = builtin_factory(args.against, precision=precision)
    except ValueError as exc:
        raise SystemExit(f"hllcheck: {exc}") from None

    run_comparison(
        primary,
        secondary,
        sys.stdout,
        seed=args.seed,
        params=select_params(args.max_size),
    )


def _run_params(args: argparse.Namespace) -> None:
    from hllcheck.generator.params import select_params

    print(f"{'Size':>12} {'Duplication p':>14}")
    for param in select_params(args.max_size):
        print(f"{param.size:>12,} {param.duplication_probability:>14.2f}")


def main(argv: list[str] | None = None) -> None:
    from hllcheck.domain.errors import HllCheckError

    parser = argparse.ArgumentParser(
        prog="hllcheck",
        description="Accuracy comparison harness for cardinality estimators.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress to stderr (-vv for per-run detail).",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_compare_parser(subparsers)
    _add_params_parser(subparsers)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "compare":
            _run_compare(args)
        elif args.command == "params":
            _run_params(args)
    except HllCheckError as exc:
        log.error("%s", exc)
        sys.exit(1)
