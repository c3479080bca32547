"""CLI entrypoint for Spotdocs."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from spotdocs import __version__
from spotdocs.config import load_config
from spotdocs.config.loader import normalize_encoding
from spotdocs.config.model import ReportConfig
from spotdocs.constants.branding import CLI_DESCRIPTION
from spotdocs.constants.reporting import DEFAULT_OUTPUT_FILENAME, REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from spotdocs.exceptions import ConfigError, SpotdocsError
from spotdocs.exceptions.validation import format_errors
from spotdocs.io import atomic_output, file_sha256
from spotdocs.parsers.spotbugs_xml import parse_spotbugs_xml
from spotdocs.reporting.generator import generate_report
from spotdocs.reporting.stdout import SummaryReporter
from spotdocs.validation import preflight_validate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="spotdocs",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Convert a SpotBugs XML result into an XDocs report")
    generate.add_argument("-i", "--input", type=Path, required=True, help="SpotBugs XML result file")
    generate.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_FILENAME),
        help=f"XDocs output file (default: {DEFAULT_OUTPUT_FILENAME})",
    )
    generate.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root holding spotdocs.yaml")
    generate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    generate.add_argument("--threshold", default=None, help="Threshold code or name, e.g. 1 or High")
    generate.add_argument("--effort", default=None, help="Analysis effort, e.g. Default or Max")
    generate.add_argument("--encoding", default=None, help="Output encoding (default: UTF-8)")
    generate.add_argument(
        "-s",
        "--source-root",
        action="append",
        default=None,
        help="Compile source root (repeat flag for multiple values)",
    )
    generate.add_argument(
        "-t",
        "--test-source-root",
        action="append",
        default=None,
        help="Test source root (repeat flag for multiple values)",
    )
    generate.add_argument(
        "--tool-version",
        default=None,
        help="Analyzer version for the report header (default: read from the input)",
    )
    generate.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    generate.add_argument("--no-color", action="store_true", help="Disable colored output")
    generate.add_argument("-v", "--verbose", action="store_true", help="Show per-class counts and debug logs")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without generating")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "generate":
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = preflight_validate(root=args.root, config_path=args.config, input_path=args.input)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = _apply_overrides(load_config(args.root, args.config), args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        result = parse_spotbugs_xml(args.input)
        tool_version = args.tool_version if args.tool_version is not None else result.tool_version
        with atomic_output(args.output, temp_prefix=REPORT_TEMP_PREFIX, temp_suffix=REPORT_TEMP_SUFFIX) as sink:
            report = generate_report(result, config, tool_version=tool_version, sink=sink)
    except SpotdocsError as exc:
        print(f"Report error: {exc}", file=sys.stderr)
        return 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Report %s sha256=%s", args.output, file_sha256(args.output))

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = SummaryReporter(report, output_path=args.output, color=use_color, verbose=verbose)
        print(reporter.render())

    return 0


def _apply_overrides(config: ReportConfig, args: argparse.Namespace) -> ReportConfig:
    """Layer command-line values over the loaded config."""
    overrides: dict[str, object] = {}
    if args.threshold is not None:
        overrides["threshold"] = args.threshold.strip()
    if args.effort is not None:
        overrides["effort"] = args.effort.strip()
    if args.encoding is not None:
        overrides["output_encoding"] = normalize_encoding(args.encoding)
    if args.source_root is not None:
        overrides["source_roots"] = tuple(args.source_root)
    if args.test_source_root is not None:
        overrides["test_source_roots"] = tuple(args.test_source_root)
    return dataclasses.replace(config, **overrides) if overrides else config


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
