"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for hash-based file scanning and deletion.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional
import string


# =============================
# Enums
# =============================

class HashType(Enum):
    """
    Supported digest algorithms.
    MD5, SHA1 and SHA256 can be inferred from the length of a target digest,
    XXH64 must be selected explicitly.
    """
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    XXH64 = "xxh64"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            HashType.MD5: "MD5",
            HashType.SHA1: "SHA1",
            HashType.SHA256: "SHA256",
            HashType.XXH64: "XXH64",
        }
        return mapping.get(self, self.value)

    @property
    def digest_length(self) -> int:
        """Number of hex characters in a digest of this type."""
        mapping = {
            HashType.MD5: 32,
            HashType.SHA1: 40,
            HashType.SHA256: 64,
            HashType.XXH64: 16,
        }
        return mapping[self]

    @classmethod
    def inferable(cls) -> List["HashType"]:
        return [cls.MD5, cls.SHA1, cls.SHA256]

    @classmethod
    def detect(cls, value: str) -> Optional["HashType"]:
        """
        Classify a hex digest by its length.
        Returns None if the string is not hex or has no known length.
        """
        if not is_hex(value):
            return None
        for hash_type in cls.inferable():
            if len(value) == hash_type.digest_length:
                return hash_type
        return None

    def __repr__(self) -> str:
        return self.value


def is_hex(value: str) -> bool:
    return bool(value) and all(c in string.hexdigits for c in value)


# ======================
#  Core Data Models
# ======================

@dataclass
class VisitedPaths:
    """
    Identity paths already handled during one scan, in insertion order.
    Shared by reference between a directory and all of its descendants.
    """
    _paths: Dict[str, None] = field(default_factory=dict)

    def add(self, path: str) -> None:
        self._paths[path] = None

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __repr__(self):
        return f"<VisitedPaths count={len(self._paths)}>"


@dataclass(frozen=True)
class ScanConfig:
    """Immutable parameters of a single scan, validated on creation."""
    root_dir: str
    target_hashes: FrozenSet[str]
    hash_type: HashType
    ignore_symlinks: bool = False
    recursive: bool = False
    interactive: bool = False
    verbose: bool = False

    def __post_init__(self):
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if not self.target_hashes:
            raise ValueError("At least one target hash is required")

        for target in self.target_hashes:
            if not is_hex(target) or target != target.lower():
                raise ValueError(f"Invalid hash: {target}")
            if len(target) != self.hash_type.digest_length:
                raise ValueError(
                    f"Invalid hash: {target} "
                    f"(expected {self.hash_type.digest_length} hex characters for {self.hash_type.display_name})"
                )

    @staticmethod
    def from_user_input(
            root_dir: str,
            hashes: Iterable[str],
            algorithm: Optional[HashType] = None,
            ignore_symlinks: bool = False,
            recursive: bool = False,
            interactive: bool = False,
            verbose: bool = False,
    ) -> 'ScanConfig':
        """
        Factory method to create a config from raw CLI input.
        Normalizes the targets and infers the algorithm when it is not given.

        Raises:
            ValueError: If a target is not a valid digest or targets disagree on the algorithm
        """
        targets = []
        for value in hashes:
            value = value.strip().lower()
            if value and value not in targets:
                targets.append(value)

        if not targets:
            raise ValueError("At least one target hash is required")

        hash_type = algorithm
        if hash_type is None:
            detected = set()
            for target in targets:
                target_type = HashType.detect(target)
                if target_type is None:
                    raise ValueError(f"Invalid hash: {target}")
                detected.add(target_type)
            if len(detected) > 1:
                names = ", ".join(sorted(t.display_name for t in detected))
                raise ValueError(f"Target hashes use different algorithms: {names}")
            hash_type = detected.pop()

        return ScanConfig(
            root_dir=str(Path(root_dir).resolve()) if root_dir else root_dir,
            target_hashes=frozenset(targets),
            hash_type=hash_type,
            ignore_symlinks=ignore_symlinks,
            recursive=recursive,
            interactive=interactive,
            verbose=verbose,
        )
