"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the scan-and-delete engine.
These protocols enforce structural typing using Python's `typing.Protocol` so that
hashing, matching and confirmation can be swapped out (e.g. scripted in tests).

Key Components:
---------------
- HashAlgorithm: Uniform digest function for one algorithm (MD5, SHA1, SHA256, xxHash64).
- Hasher: Interface for computing the full-content digest of a file.
- Confirmer: Yes/no question asked before a matched file is deleted.
- FileMatcher: Hash-compare-delete decision for a single file.
- DirectoryScanner: Recursive traversal that feeds files to a FileMatcher.
"""

from typing import Protocol, Optional
from hashpurge.core.models import VisitedPaths


# ===== Interfaces =====

class HashAlgorithm(Protocol):
    """
    Interface for the supported hash algorithms.

    Every implementation returns a lowercase, zero-padded hex string
    of the algorithm's fixed digest length.
    """

    @staticmethod
    def hexdigest(data: bytes) -> str:
        """Computes the hex digest of the provided byte data."""
        ...


class Hasher(Protocol):
    """Interface for hashing the whole content of a file."""
    def compute_digest(self, path: str) -> str: ...


class Confirmer(Protocol):
    """Returns True only if deletion of `path` was explicitly approved."""
    def __call__(self, path: str) -> bool: ...


class FileMatcher(Protocol):
    """
    Interface for the per-file decision.

    Methods:
        consider: Hashes the file, compares against the targets, deletes on match.
    """
    def consider(self, path: str) -> bool:
        """
        Args:
            path: Path of a non-directory entry.

        Returns:
            True if the file matched and was deleted.
        """
        ...


class DirectoryScanner(Protocol):
    """
    Interface for walking a directory tree.
    """
    def scan(self, path: str, visited: Optional[VisitedPaths] = None) -> int:
        """
        Scan `path` and return the number of deleted files beneath it.

        Args:
            path: Directory to list.
            visited: Identities already handled in this scan, shared with recursive calls.
        """
        ...
