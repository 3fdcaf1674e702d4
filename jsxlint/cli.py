"""Command-line entry point for the jsxlint linter."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable, List

from .config import ConfigError, load_config
from .engine import Linter
from .log import configure_logging
from .result import LintResult, format_summary_table, render_diagnostic

DEFAULT_PATHS = (".",)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Static analysis of JSX/TSX sources for props that defeat memoization",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to lint (defaults to the current directory).",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to a YAML configuration file (defaults to .jsxlint.yaml if present).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (defaults to text).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/lint.json).",
    )
    parser.add_argument(
        "--deny-warnings",
        action="store_true",
        help="Exit with a failure status when any warning is reported.",
    )
    parser.add_argument(
        "--max-warnings",
        type=int,
        default=None,
        help="Exit with a failure status when more than this many warnings are reported.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr.",
    )
    return parser


def run_lint(paths: Iterable[str], config_path: str | None = None) -> LintResult:
    try:
        linter = Linter(load_config(config_path))
    except ConfigError as exc:
        raise SystemExit(f"Failed to load configuration: {exc}")
    return linter.lint_paths(paths)


def write_output(result: LintResult, output_path: str | None, report_format: str) -> None:
    for diagnostic in result.sorted_diagnostics():
        print(render_diagnostic(diagnostic))
        print()
    print(format_summary_table(result))

    if report_format == "json" or output_path:
        payload = json.dumps(result.to_dict(), indent=2)
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload, encoding="utf-8")
            print(f"\nReport written to {output_path}")
        else:
            print("\nJSON Report")
            print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    paths = args.paths or list(DEFAULT_PATHS)
    result = run_lint(paths, config_path=args.config)
    write_output(result, args.output_path, args.format)
    return result.exit_code(deny_warnings=args.deny_warnings, max_warnings=args.max_warnings)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
