#!/usr/bin/env python3
"""
DupeFinder CLI — Command line interface for duplicate file detection.
Reports duplicate groups only; files are never deleted, moved or linked.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
import logging
from pathlib import Path
from typing import Dict, List, Optional, NoReturn

from dupefinder.core.models import DuplicateGroup, ScanParams
from dupefinder.core.finder import DupeFinder
from dupefinder.utils.convert_utils import ConvertUtils

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

EPILOG_TEXT = """
Examples:
  Find duplicates directly inside Downloads
  %(prog)s -i ~/Downloads

  Find duplicates across two trees, including all subdirectories
  %(prog)s -i ~/Photos /mnt/backup/Photos -r

  Find every copy of one file
  %(prog)s -i ~/Photos /mnt/backup -r -f ~/Photos/IMG_0001.jpg
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupefinder",
            description="DupeFinder — find duplicate files by content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            nargs="+",
            type=str,
            metavar="DIR",
            help="Directories (space separated) to search for duplicates"
        )
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Also search all subdirectories"
        )
        parser.add_argument(
            "--file", "-f",
            type=str,
            default=None,
            metavar="FILE",
            help="Only search for duplicates of this file"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output and warnings"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress, statistics and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        existing = 0
        for directory in args.input:
            path = Path(directory)
            if not path.exists():
                self.warning(f"Directory not found: {directory}")
            elif not path.is_dir():
                self.warning(f"Path is not a directory: {directory}")
            else:
                existing += 1
        if existing == 0:
            self.error_exit("None of the input directories exist")

        if args.file is not None and not Path(args.file).is_file():
            self.error_exit(f"File not found: {args.file}")

    def configure_logging(self) -> None:
        if self.verbose:
            level = logging.DEBUG
        elif self.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.basicConfig(level=level, format=LOG_FORMAT)

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(roots=args.input, recursive=args.recursive)
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} directories processed...")
        sys.stderr.flush()

    def run_scan(self, finder: DupeFinder) -> List[DuplicateGroup]:
        """Execute a full scan and return groups, largest files first."""
        groups = finder.run(progress_callback=self.progress_callback if self.verbose else None)
        self.print_stats(finder)
        return self.sort_groups(groups)

    def run_single(self, finder: DupeFinder, path: str) -> Optional[DuplicateGroup]:
        """Execute a single-file search."""
        try:
            group = finder.run_for_file(
                path,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except OSError as e:
            self.error_exit(f"Cannot read {path}: {e}")
        self.print_stats(finder)
        return group

    def print_stats(self, finder: DupeFinder) -> None:
        if self.verbose:
            sys.stderr.write("\n")
            print(finder.stats.print_summary())

    @staticmethod
    def sort_groups(groups: Dict[str, DuplicateGroup]) -> List[DuplicateGroup]:
        return sorted(groups.values(), key=lambda g: (-g.size, g.files[0]))

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        """Output duplicate groups as plain text."""
        if not groups:
            print("No duplicate groups found.")
            return

        total_files = sum(g.duplicate_count for g in groups)
        if not self.quiet:
            print(f"\nFound {len(groups)} duplicate groups ({total_files} files)")

        for idx, group in enumerate(groups, 1):
            self.output_group(group, idx)

    def output_group(self, group: DuplicateGroup, idx: int = 1) -> None:
        size_str = ConvertUtils.bytes_to_human(group.size)
        digest = ConvertUtils.shorten_digest(group.digest)
        print(f"\n📁 Group {idx} | Size: {size_str} | Hash: {digest} | Files: {group.duplicate_count}")
        for path in group.files:
            print(f"   {path}")

    def output_single(self, group: Optional[DuplicateGroup], path: str) -> None:
        if group is None:
            print(f"No duplicates found for {path}")
            return
        if not self.quiet:
            print(f"\nFound {group.duplicate_count - 1} duplicate(s) of {path}")
        self.output_group(group)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        self.configure_logging()
        params = self.create_params(args)
        finder = DupeFinder.from_params(params)

        if not self.quiet:
            mode = "recursive" if params.recursive else "top level only"
            print(f"Scanning {len(params.roots)} director{'y' if len(params.roots) == 1 else 'ies'} ({mode})")

        if args.file is not None:
            self.output_single(self.run_single(finder, args.file), args.file)
        else:
            self.output_results(self.run_scan(finder))

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
