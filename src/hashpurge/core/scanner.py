"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the depth-first directory traversal.
Features:
- Optionally recursive, siblings processed in name order
- Symbolic links are either ignored or followed exactly one level,
  a matched file link deletes its target
- Every identity (entry or one-level link target under its physical
  parent directory) is handled at most once per scan,
  which also breaks symlink cycles
- Per-entry failures are logged and skipped, the scan goes on
"""

import errno
import logging
import os
from typing import List, Optional

from hashpurge.core.models import ScanConfig, VisitedPaths
from hashpurge.core.interfaces import DirectoryScanner, FileMatcher

logger = logging.getLogger(__name__)


class DirectoryScannerImpl(DirectoryScanner):
    """
    Walks a directory tree and hands every non-directory entry to a FileMatcher.

    Attributes:
        config: Scan configuration (symlink, recursion and verbose flags)
        matcher: Decides per file whether it is deleted
    """

    def __init__(self, config: ScanConfig, matcher: FileMatcher):
        self.config = config
        self.matcher = matcher

    def scan(self, path: str, visited: Optional[VisitedPaths] = None) -> int:
        """
        Scans `path` and returns the number of files deleted beneath it.

        Raises:
            OSError: If `path` itself cannot be listed. Failures below `path`
                are contained and logged.
        """
        if visited is None:
            visited = VisitedPaths()

        if self.config.verbose:
            logger.info(f"Scanning directory: {path}")

        visited.add(path)
        visited.add(os.path.realpath(path))
        entries = self._list_entries(path)

        count = 0
        for entry in entries:
            try:
                count += self._process_entry(entry, visited)
            except OSError as e:
                logger.warning(f"Skipping {entry.path}: {e}")
        return count

    @staticmethod
    def _list_entries(path: str) -> List[os.DirEntry]:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)

    def _process_entry(self, entry: os.DirEntry, visited: VisitedPaths) -> int:
        entry_path = entry.path
        is_link = entry.is_symlink()

        if is_link and self.config.ignore_symlinks:
            if self.config.verbose:
                logger.info(f"Ignoring symlink: {entry_path}")
            return 0

        if is_link:
            identity = self._resolve_symlink(entry_path)
        else:
            identity = os.path.join(self._physical_parent(entry_path), entry.name)

        if identity in visited:
            if self.config.verbose:
                logger.info(f"Ignoring duplicate: {identity}")
            return 0

        if is_link and not os.path.exists(identity):
            raise FileNotFoundError(errno.ENOENT, "Symlink target does not exist", identity)
        visited.add(identity)

        if os.path.isdir(identity):
            if not self.config.recursive:
                if self.config.verbose:
                    logger.info(f"Skipping directory (not recursive): {entry_path}")
                return 0
            return self.scan(entry_path, visited)

        # A file link claims its target's identity, so the target itself is the file considered
        file_path = identity if is_link else entry_path
        return 1 if self.matcher.consider(file_path) else 0

    @staticmethod
    def _physical_parent(path: str) -> str:
        """Directory holding `path`, with every symlink in it resolved."""
        return os.path.realpath(os.path.dirname(path))

    def _resolve_symlink(self, link_path: str) -> str:
        """
        Follows a symbolic link exactly one level.
        Relative targets are taken relative to the physical directory holding the link.
        """
        target = os.readlink(link_path)
        resolved = os.path.normpath(os.path.join(self._physical_parent(link_path), target))

        if self.config.verbose:
            logger.info(f"Resolving symlink: {link_path} -> {resolved}")
        return resolved
