"""
hashpurge — find files by content hash and delete them.

Core features:
- MD5, SHA1 and SHA256 targets (algorithm guessed from digest length), xxHash64 on request
- Optional recursion, symlinks ignored or followed one level
- Each physical path handled once per scan, symlink cycles are safe
- Interactive confirmation before each deletion
- CLI interface (`hashpurge`)
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("hashpurge")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from hashpurge.commands import HashPurgeCommand
from hashpurge.core import HashType, ScanConfig, VisitedPaths, DirectoryScannerImpl, FileMatcherImpl, HasherImpl
from hashpurge.services.file_service import FileService

__all__ = [
    "HashPurgeCommand",
    "HashType",
    "ScanConfig",
    "VisitedPaths",
    "DirectoryScannerImpl",
    "FileMatcherImpl",
    "HasherImpl",
    "FileService",
    "__version__",
]
