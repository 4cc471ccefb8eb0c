"""CLI entrypoint for suitedoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import SuiteDocError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suitedoc",
        description="Generate chapter-organised markdown docs from annotated test files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for suitedoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        outcome = Orchestrator().generate(args.path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except SuiteDocError as exc:
        parser.exit(1, f"suitedoc failed: {exc}\nRun with --verbose for more details.\n")

    if not outcome.generated:
        print("No test files found; nothing to generate")
        return

    print(f"Generated {len(outcome.written)} file(s) from {len(outcome.source_files)} test file(s):")
    for path in outcome.written:
        print(f"  - {_relativize(path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
