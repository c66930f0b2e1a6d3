"""
Command orchestrator for hash-based deletion.
This is the single entry point into the engine, used by the CLI and by library callers.
"""
import logging
from pathlib import Path
from typing import Optional

from hashpurge.core.interfaces import Confirmer
from hashpurge.core.models import ScanConfig
from hashpurge.core.hasher import HasherImpl, get_algorithm
from hashpurge.core.matcher import FileMatcherImpl
from hashpurge.core.scanner import DirectoryScannerImpl

logger = logging.getLogger(__name__)


class HashPurgeCommand:
    """
    Orchestrates one scan:
    1. Validate the root directory
    2. Build hasher, matcher and scanner for the configured algorithm
    3. Scan and return the number of deleted files

    Usage:
        config = ScanConfig.from_user_input("~/Downloads", ["d41d8cd98f00b204e9800998ecf8427e"])
        deleted = HashPurgeCommand().execute(config)

        # Scripted confirmation (e.g. in tests or a GUI):
        deleted = HashPurgeCommand().execute(config, confirm=lambda path: path.endswith(".tmp"))
    """

    def execute(
            self,
            config: ScanConfig,
            confirm: Optional[Confirmer] = None
    ) -> int:
        """
        Args:
            config: Validated scan configuration
            confirm: (path: str) -> bool, asked before each deletion in interactive mode

        Returns:
            Number of deleted files

        Raises:
            RuntimeError: If the root directory is missing or not a directory
            OSError: If the root directory cannot be listed
        """
        root_path = Path(config.root_dir)
        if not root_path.exists():
            raise RuntimeError(f"Directory does not exist: {config.root_dir}")
        if not root_path.is_dir():
            raise RuntimeError(f"Not a directory: {config.root_dir}")

        if config.verbose:
            logger.info(f"Hash type: {config.hash_type.display_name}")

        hasher = HasherImpl(get_algorithm(config.hash_type))
        matcher = FileMatcherImpl(config, hasher, confirm=confirm)
        scanner = DirectoryScannerImpl(config, matcher)

        deleted = scanner.scan(config.root_dir)
        logger.debug(f"Scan of {config.root_dir} finished, {deleted} file(s) deleted")
        return deleted
