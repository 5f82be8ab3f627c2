"""CLI entry point for decompcast.

Enables ``python -m decompcast <command>`` usage.

Subcommands:
    run     - Decompose a series and forecast ahead.
    version - Print decompcast version.
"""

from __future__ import annotations

import argparse
import logging
import sys

import pandas as pd

from decompcast.core.config import DEFAULT_SEASON_LENGTH, MODELS, NORMALIZATIONS


def _load_values(args: argparse.Namespace) -> list[float]:
    """Collect observation values from positional entries or a CSV file."""
    from decompcast.core.errors import EContract
    from decompcast.series import parse_value

    if args.input:
        df = pd.read_csv(args.input)
        if args.column not in df.columns:
            raise EContract(
                f"Column {args.column!r} not found in {args.input}",
                context={"found": list(df.columns)},
                fix_hint="Pass --column with the name of the value column",
            )
        return [parse_value(v) for v in df[args.column].tolist()]
    return [parse_value(v) for v in args.values]


def _print_tables(result) -> None:
    for name, table in result.tables().items():
        print(f"== {name} ==")
        if len(table) == 0:
            print("(no rows)")
        else:
            print(table.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
        print()


def _cmd_run(args: argparse.Namespace) -> int:
    """Run the decomposition pipeline."""
    from decompcast.core.config import DecompositionConfig
    from decompcast.core.errors import DecompCastError
    from decompcast.export import export_csv, export_workbook
    from decompcast.pipeline import run_pipeline
    from decompcast.series import from_values

    try:
        config = DecompositionConfig(
            season_length=args.season_length,
            model=args.model,
            horizon=args.horizon,
            normalization=args.normalization,
            include_boundary=args.boundary,
        )
        result = run_pipeline(from_values(_load_values(args)), config)
    except (DecompCastError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(result.to_payload().model_dump_json(indent=2))
    else:
        _print_tables(result)

    if args.xlsx:
        export_workbook(result, args.xlsx)
        print(f"Workbook saved to {args.xlsx}")
    if args.csv_dir:
        export_csv(result, args.csv_dir)
        print(f"Tables saved to {args.csv_dir}")
    return 0


def _cmd_version() -> int:
    """Print version string."""
    import decompcast

    print(decompcast.__version__)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="decompcast",
        description="decompcast - Classical decomposition forecasting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    run = subparsers.add_parser("run", help="Decompose a series and forecast")
    run.add_argument("values", nargs="*", help="Observed values in period order")
    run.add_argument("--input", "-i", help="CSV file with one value per row")
    run.add_argument("--column", "-c", default="value", help="Value column in --input")
    run.add_argument("--model", "-m", choices=MODELS, default="additive")
    run.add_argument("--horizon", "-H", type=int, default=0, help="Periods to forecast")
    run.add_argument("--season-length", "-s", type=int, default=DEFAULT_SEASON_LENGTH)
    run.add_argument("--normalization", choices=NORMALIZATIONS, default="geometric")
    run.add_argument("--boundary", action="store_true", help="Include a boundary forecast row")
    run.add_argument("--json", action="store_true", help="Print a JSON payload instead of tables")
    run.add_argument("--xlsx", help="Export stage tables to a workbook")
    run.add_argument("--csv-dir", help="Export stage tables as CSV files")

    subparsers.add_parser("version", help="Print version")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        return _cmd_run(args)
    elif args.command == "version":
        return _cmd_version()
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
