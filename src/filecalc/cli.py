"""
CLI entrypoint: filecalc <operation> <file_path>.
"""

import argparse
import logging
import sys
from typing import Optional

from .config import DEFAULTS, load_config
from .processing import Operation, aggregate_file

log = logging.getLogger(__name__)

INVALID_OPERATION = "Invalid operation. Use 'mean' or 'sum'"


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Parser for the options that may follow <operation> <file_path>."""
    p = argparse.ArgumentParser(
        prog=prog,
        description="Compute the sum or mean of the numbers in a file (one per line).",
        add_help=False,
        allow_abbrev=False,
    )
    # a flag given without a value is ignored instead of exiting with 2
    p.add_argument("--config", nargs="?", help="Optional config YAML/JSON.")
    p.add_argument("--log-level", nargs="?", help="Logging level (overrides config).")
    return p


def parse_args(argv=None, prog: Optional[str] = None):
    """
    Take operation and file_path by position, then parse the remaining options.

    The first two tokens are never read as options, so a path such as
    `-values.txt` reaches the aggregator. Either positional is None when fewer
    than two tokens were given.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser(prog)
    args, extra = parser.parse_known_args(argv[2:])
    args.operation = argv[0] if len(argv) >= 1 else None
    args.file_path = argv[1] if len(argv) >= 2 else None
    return parser, args, extra


def print_usage(prog: str) -> None:
    print(f"Usage: {prog} <operation> <file_path>")
    print("Operations: mean, sum")


def resolve_operation(token: str) -> Optional[Operation]:
    try:
        return Operation.parse(token)
    except ValueError:
        return None


def _setup_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None, prog: Optional[str] = None) -> int:
    parser, args, extra = parse_args(argv, prog)

    if args.operation is None or args.file_path is None:
        print_usage(parser.prog)
        return 0

    operation = resolve_operation(args.operation)
    if operation is None:
        print(INVALID_OPERATION)
        return 0

    cfg = dict(DEFAULTS)
    if args.config:
        try:
            cfg = load_config(args.config)
        except (OSError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    _setup_logging(args.log_level or cfg["log_level"])
    if extra:
        log.debug("Ignoring extra arguments: %s", " ".join(extra))

    try:
        result = aggregate_file(args.file_path, operation, encoding=cfg["encoding"])
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
