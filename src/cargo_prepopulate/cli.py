"""cargo-prepopulate CLI: scaffold a Cargo project from its Cargo.lock."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional

from cargo_prepopulate.codes import NoticeCode


# Cargo runs `cargo-prepopulate prepopulate <args>` for `cargo prepopulate <args>`
CARGO_SUBCOMMAND = "prepopulate"


def build_parser(prog_version: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cargo-prepopulate",
        description="Recreate the manifests and source stubs of a Cargo project from its Cargo.lock"
    )
    parser.add_argument("--version", action="version", version=f"cargo-prepopulate {prog_version}")
    parser.add_argument(
        "path",
        metavar="PATH",
        type=Path,
        help="Path to the project's Cargo.lock"
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Directory to scaffold into (defaults to the directory holding Cargo.lock)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the files that would be written without touching the filesystem."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if a destination already exists or the lock file has no first-party packages."
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a JSON report of the run to this file"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    return parser


def _print_notices(notices, quiet: bool) -> None:
    if quiet:
        return
    for notice in notices:
        if notice.is_warning:
            print(f"WARN: {notice.message}", file=sys.stderr)
        elif notice.code == NoticeCode.DIRECTORY_CREATED:
            print(notice.message, file=sys.stderr)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point for cargo-prepopulate."""
    try:
        prog_version = get_version("cargo-prepopulate")
    except PackageNotFoundError:
        prog_version = "dev"

    args_list = list(sys.argv[1:] if argv is None else argv)
    if args_list and args_list[0] == CARGO_SUBCOMMAND:
        args_list = args_list[1:]

    parser = build_parser(prog_version)
    args = parser.parse_args(args_list)

    # Lazy import: keep --help and --version free of pydantic model setup
    from cargo_prepopulate.api import prepopulate
    from cargo_prepopulate.config import ScaffoldConfig
    from cargo_prepopulate.errors import PathError, PrepopulateError
    from cargo_prepopulate._internal.canonical_json import canonical_dumps

    try:
        if args.strict:
            config = ScaffoldConfig.strict(dry_run=args.dry_run)
        else:
            config = ScaffoldConfig(dry_run=args.dry_run)

        report = prepopulate(args.path, out_dir=args.out, config=config)
        _print_notices(report.notices, args.quiet)

        if args.report is not None:
            try:
                args.report.parent.mkdir(parents=True, exist_ok=True)
                args.report.write_text(canonical_dumps(report.model_dump(mode="json")) + "\n", encoding="utf-8")
            except OSError as e:
                raise PathError(f"Could not write report: {e}", context={"path": str(args.report)}) from e

        if not args.quiet:
            if report.dry_run:
                print("[DRY RUN] Nothing written")
                for planned in report.planned_files:
                    print(f"  would write: {planned}")
            else:
                print("[OK] Scaffold complete")
                print(f"  Directory: {report.base_dir}")
                print(f"  Files: {len(report.written_files)}")
            if report.shape == "workspace":
                print(f"  Shape: workspace ({len(report.members)} members)")
            else:
                print(f"  Shape: project ({report.members[0]})")
            print(f"  Warnings: {len(report.warnings)}")
            if args.report is not None:
                print(f"  Report: {args.report}")
    except PrepopulateError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
