"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/matcher.py
Per-file decision: hash the content, compare with the target digests,
optionally confirm, then delete.
"""

import logging
from typing import Optional

from hashpurge.core.models import ScanConfig
from hashpurge.core.interfaces import Confirmer, FileMatcher, Hasher
from hashpurge.services.file_service import FileService

logger = logging.getLogger(__name__)


class FileMatcherImpl(FileMatcher):
    """
    Deletes a file when its digest is one of the configured target hashes.

    Attributes:
        config: Scan configuration (targets, interactive and verbose flags)
        hasher: Computes the digest under the configured algorithm
        confirm: Yes/no callback asked before each deletion in interactive mode
    """

    def __init__(
        self,
        config: ScanConfig,
        hasher: Hasher,
        confirm: Optional[Confirmer] = None
    ):
        self.config = config
        self.hasher = hasher
        self.confirm = confirm or FileService.ask_confirmation

    def consider(self, path: str) -> bool:
        """
        Returns True if the file matched and was deleted.
        Read and delete failures are logged and reported as "not deleted".
        """
        try:
            digest = self.hasher.compute_digest(path)
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            return False

        if self.config.verbose:
            logger.info(f"{path}: {digest}")

        if not self._matches(digest):
            return False

        if self.config.interactive and not self.confirm(path):
            logger.debug(f"Deletion declined: {path}")
            return False

        try:
            FileService.delete_file(path)
        except RuntimeError as e:
            logger.warning(f"Failed to delete {path}: {e}")
            return False

        if self.config.verbose:
            logger.info(f"Deleted file: {path}")
        return True

    def _matches(self, digest: str) -> bool:
        return digest in self.config.target_hashes
