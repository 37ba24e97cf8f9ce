"""CLI entrypoint for wuw."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, TextIO

from .aggregator import DirectoryAggregator
from .classifier import DependencyClassifier, build_lookup
from .config import ConfigError, WuwConfig, load_config
from .logging import configure_logging, get_logger
from .report import write_report

_DESCRIPTION = (
    "'wuw' is a program for quickly seeing what parts of your Go project depend "
    "on what other parts of your project, or what external dependencies they use, "
    "so that you can quickly understand the architecture of a codebase."
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wuw",
        description=_DESCRIPTION,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--no-std",
        action="store_true",
        help="Exclude stdlib packages (including golang.org/x/).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .wuw.yml or the directory containing it (defaults to current directory).",
    )
    parser.add_argument(
        "dirs",
        nargs="*",
        help="Directories to scan. Read one per line from stdin when omitted.",
    )
    return parser


def _read_stdin_dirs(stream: TextIO) -> List[str]:
    if stream.isatty():
        return []
    return [line.strip() for line in stream if line.strip()]


def build_aggregator(config: WuwConfig, *, no_std: bool) -> DirectoryAggregator:
    """Wire the aggregator from configuration and CLI overrides."""
    classifier = DependencyClassifier(
        exclude_standard=no_std or config.no_std,
        lookup=build_lookup(config.std_lookup, go_binary=config.go_binary),
        std_prefixes=config.std_prefixes,
    )
    return DirectoryAggregator(
        classifier,
        source_suffix=config.source_suffix,
        stop_after=config.stop_after,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for wuw."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    dirs = list(args.dirs) or _read_stdin_dirs(sys.stdin)
    if not dirs:
        parser.print_help(sys.stderr)
        parser.exit(1)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"wuw: invalid configuration: {exc}\n")

    logger.debug("Scanning %d directories", len(dirs))
    report = build_aggregator(config, no_std=bool(args.no_std)).scan(dirs)
    write_report(report, sys.stdout, sys.stderr)

    if not report.ok:
        parser.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
