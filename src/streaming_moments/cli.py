"""Command line entry point for streaming moment estimates."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from pydantic import ValidationError

from .config import MomentSettings
from .logging_utils import configure_logging
from .stream import PairParseError, accumulate_lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Streaming mean, variance and covariance of (x, y) pairs")
    parser.add_argument("path", nargs="?", default="-", help="Input file with one x,y pair per line ('-' for stdin)")
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("--delimiter", help="Column delimiter (default ',')")
    parser.add_argument("--skip-header", action="store_true", help="Skip the first data row")
    parser.add_argument("--skip-invalid", action="store_true", help="Log and skip malformed rows")
    args = parser.parse_args(argv)

    try:
        settings = MomentSettings.from_toml(args.config) if args.config else MomentSettings()
    except (OSError, ValueError) as exc:
        # ValidationError and TOMLDecodeError are both ValueErrors.
        print(f"error: {exc}", file=sys.stderr)
        return 2

    overrides: dict[str, object] = {}
    if args.delimiter is not None:
        overrides["delimiter"] = args.delimiter
    if args.skip_header:
        overrides["skip_header"] = True
    if args.skip_invalid:
        overrides["skip_invalid"] = True
    try:
        reader = settings.reader.model_validate({**settings.reader.model_dump(), **overrides})
    except ValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        configure_logging(settings.logging)
    except OSError as exc:
        print(f"error: cannot open log file: {exc}", file=sys.stderr)
        return 2

    try:
        if args.path == "-":
            accumulator = accumulate_lines(sys.stdin, reader)
        else:
            with open(args.path, "r", encoding="utf-8") as stream:
                accumulator = accumulate_lines(stream, reader)
    except (OSError, UnicodeDecodeError, PairParseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(accumulator.snapshot().model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
