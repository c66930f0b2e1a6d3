"""
Core scan-and-delete engine: models, hashing, matcher and directory scanner.

- DirectoryScannerImpl: depth-first traversal with symlink policy and identity dedup
- FileMatcherImpl: digest comparison, optional confirmation, deletion
- HasherImpl + algorithm table: MD5, SHA1, SHA256 (hashlib) and xxHash64 (xxhash)
- Models: HashType, ScanConfig, VisitedPaths

No terminal I/O besides logging, suitable for use as a library.
"""

from .models import HashType, ScanConfig, VisitedPaths
from .hasher import (
    ALGORITHMS, HasherImpl, get_algorithm,
    MD5AlgorithmImpl, SHA1AlgorithmImpl, SHA256AlgorithmImpl, XXHashAlgorithmImpl)
from .matcher import FileMatcherImpl
from .scanner import DirectoryScannerImpl

__all__ = [
    "HashType",
    "ScanConfig",
    "VisitedPaths",
    "ALGORITHMS",
    "HasherImpl",
    "get_algorithm",
    "MD5AlgorithmImpl",
    "SHA1AlgorithmImpl",
    "SHA256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "FileMatcherImpl",
    "DirectoryScannerImpl",
]
