"""Extract documentation metadata from annotated stylesheet sources.

Walks a directory of ``.scss`` files, parses the documentation comments that
precede function, mixin and variable declarations, links aliases and
requirements across the corpus and writes the result as JSON or YAML for a
renderer to consume.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from scssdoc.compute_config_hash import compute_config_hash
from scssdoc.extract_documentation import extract_documentation
from scssdoc.extraction_report import ExtractionReport
from scssdoc.load_config import load_config
from scssdoc.write_output import OUTPUT_FORMATS, write_output

logger = logging.getLogger(__name__)


def run_extraction(args: argparse.Namespace) -> int:
    """Execute the full extraction pipeline."""
    if not args.src_dir.is_dir():
        msg = f"Source directory not found: {args.src_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.no_warnings:
        config["warnings"] = False
    if args.concurrency is not None:
        config["concurrency"] = args.concurrency
    if args.format:
        config["output"]["format"] = args.format

    result = extract_documentation(args.src_dir, config)

    if args.report:
        report = ExtractionReport(compute_config_hash(config))
        report.add_outcomes(result.outcomes)
        report.add_diagnostics(result.diagnostics)
        report.category_counts = {k: len(v) for k, v in result.data.items()}
        report.write(args.report)
        logger.info("Report written to %s", args.report)

    write_output(
        result.data,
        args.out_file,
        fmt=config["output"]["format"],
        indent=int(config["output"].get("indent", 2)),
    )

    counts = ", ".join(f"{len(v)} {k}" for k, v in result.data.items())
    print(f"Extracted {counts} into: {args.out_file}")
    if result.failed:
        print(f"{len(result.failed)} file(s) could not be parsed.")
        if args.strict:
            return 1
    return 0


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Set up root logging for the command line."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """Run the extraction process."""
    ap = argparse.ArgumentParser(
        description="Extract documentation metadata from annotated .scss files.",
    )
    ap.add_argument(
        "src_dir",
        type=Path,
        help="Directory scanned recursively for stylesheet sources",
    )
    ap.add_argument(
        "out_file",
        type=Path,
        help="Output file receiving the functions/mixins/variables mapping",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default from config: json)",
    )
    ap.add_argument("--report", type=Path, help="Write a JSON run report here")
    ap.add_argument(
        "--no-warnings",
        action="store_true",
        help="Skip type tag and link URL validation warnings",
    )
    ap.add_argument(
        "--concurrency",
        type=int,
        help="Number of files parsed in parallel",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any file fails to parse",
    )
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    args = ap.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet)
    return run_extraction(args)


if __name__ == "__main__":
    raise SystemExit(main())
