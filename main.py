"""Main orchestration script for extracting stylesheet documentation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the documentation extraction pipeline."""
    parser = argparse.ArgumentParser(
        description="Extract documentation metadata from a stylesheet tree."
    )
    parser.add_argument(
        "src_dir",
        nargs="?",
        default="scss",
        help="Directory holding the .scss sources (default: scss)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run the test suite before extracting documentation",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    python_exe = sys.executable

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([python_exe, "-m", "pytest", "-q"], cwd=root_dir)
        print("\nDevelopment checks passed. Proceeding with extraction.\n")

    out_dir = root_dir / "docs_out"
    out_file = out_dir / f"data.{args.format}"

    cmd = [
        python_exe,
        "-m",
        "scssdoc.scss_to_docs",
        str(args.src_dir),
        str(out_file),
        "--format",
        args.format,
        "--report",
        str(out_dir / "extraction_report.json"),
    ]
    if args.config:
        cmd.extend(["--config", args.config])

    out_dir.mkdir(parents=True, exist_ok=True)
    run_command(cmd)

    print(f"\nSUCCESS: Documentation data generated in {out_file}")


if __name__ == "__main__":
    main()
