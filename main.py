"""log-retrieval — query daily application log files from the command line."""

import logging
import sys
from argparse import ArgumentParser
from dataclasses import replace

import yaml

from log_retrieval.config import load_config
from log_retrieval.errors import LogRetrievalError
from log_retrieval.formatter import get_formatter
from log_retrieval.service import LogQueryService
from log_retrieval.validation import ValidationError, parse_date, validate_log_id


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="log-retrieval",
        description="Query daily application log files.",
    )
    query = parser.add_mutually_exclusive_group()
    query.add_argument(
        "--log-id",
        help="Show every entry for a correlation id over the last 3 days",
    )
    query.add_argument(
        "--search",
        help="Search message, path, and log id (case-insensitive)",
    )
    query.add_argument(
        "--list-files",
        action="store_true",
        help="List the dates that have a log file",
    )
    parser.add_argument(
        "--date",
        help="Date (YYYY-MM-DD): show that day's entries, or restrict --search to it",
    )
    parser.add_argument(
        "--level",
        help="Filter by log level (e.g. ERROR, WARN, INFO, DEBUG)",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--log-dir", help="Override the log directory")
    parser.add_argument("--config", help="Path to a YAML config file")
    return parser


def run_query(args, service: LogQueryService) -> int:
    """Execute the selected query and print results. Returns an exit code."""
    formatter = get_formatter(args.output)

    if args.list_files:
        for day in service.available_dates():
            print(day)
        return 0

    day = parse_date(args.date) if args.date else None

    if args.log_id:
        records = service.get_by_correlation_id(validate_log_id(args.log_id))
        total = len(records)
    elif args.search is not None:
        records, total = service.search(args.search, day=day, level=args.level)
    else:
        records, total = service.get_by_date(day, level=args.level)

    output = formatter(records)
    if output:
        print(output)
    print(f"\n--- {total} result(s) ---", file=sys.stderr)
    return 0


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [log-retrieval] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)

    # --date on its own selects the by-date query
    if not (args.log_id or args.list_files or args.search is not None or args.date):
        print("Error: provide --date, --log-id, --search, or --list-files", file=sys.stderr)
        return 1
    if args.log_id and args.date:
        print("Error: --log-id always covers the last 3 days and cannot take --date",
              file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
        if args.log_dir:
            config = replace(config, log_dir=args.log_dir)
    except (ValueError, yaml.YAMLError) as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    logging.getLogger().setLevel(config.log_level)

    try:
        return run_query(args, LogQueryService(config))
    except (ValidationError, LogRetrievalError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
