#!/usr/bin/env python3
"""
hashpurge CLI — delete files whose content hash matches a given digest.
Wraps the core engine with argument parsing, validation and console output.
Deletion is permanent.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from hashpurge.core.models import ScanConfig
from hashpurge.commands import HashPurgeCommand
from hashpurge.services.file_service import FileService
from hashpurge.aliases import (
    HASH_TYPE_ALIASES, HASH_TYPE_CHOICES, HASH_TYPE_HELP_TEXT, EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="hashpurge",
            description="hashpurge — delete files based on their content hash",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "path",
            type=str,
            help="The directory to search in"
        )
        parser.add_argument(
            "--hash", "-H",
            required=True,
            nargs="+",
            action="extend",
            type=str,
            metavar="HASH",
            dest="hashes",
            help="The hash(es) to search for (space separated, option may be repeated)"
        )
        parser.add_argument(
            "--algorithm", "-a",
            choices=HASH_TYPE_CHOICES,
            default=None,
            type=str.lower,
            help=HASH_TYPE_HELP_TEXT
        )

        parser.add_argument(
            "--ignore-symlinks", "-s",
            action="store_true",
            help="Ignore symlinks"
        )
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Scan subdirectories"
        )
        parser.add_argument(
            "--interactive", "-i",
            action="store_true",
            help="Ask for confirmation before deleting each file"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Output more information"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any traversal."""
        root_path = Path(args.path)
        if not root_path.exists() or not root_path.is_dir():
            self.error_exit(f"Directory does not exist: {args.path}")

    def create_config(self, args: argparse.Namespace) -> ScanConfig:
        """Create ScanConfig from CLI arguments."""
        algorithm = HASH_TYPE_ALIASES.get(args.algorithm) if args.algorithm else None
        try:
            return ScanConfig.from_user_input(
                root_dir=args.path,
                hashes=args.hashes,
                algorithm=algorithm,
                ignore_symlinks=args.ignore_symlinks,
                recursive=args.recursive,
                interactive=args.interactive,
                verbose=args.verbose,
            )
        except ValueError as e:
            self.error_exit(str(e))

    def run_scan(self, config: ScanConfig) -> int:
        """Execute the scan and return the number of deleted files."""
        command = HashPurgeCommand()
        try:
            return command.execute(config, confirm=FileService.ask_confirmation)
        except (RuntimeError, OSError) as e:
            self.error_exit(f"Scan failed: {e}")

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the number of deleted files."""
        args = self.parse_args(argv)
        if args.verbose:
            logging.getLogger().setLevel(logging.INFO)

        self.validate_args(args)
        config = self.create_config(args)

        deleted = self.run_scan(config)
        print(f"Deleted {deleted} file(s)")
        return deleted


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
