"""
Shared fixtures for hashpurge tests.
Creates isolated temporary directory trees with known file contents.
"""
import hashlib
import pytest
import tempfile
from pathlib import Path
from typing import Callable, Dict
import sys

# Add src/ to sys.path so 'hashpurge' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from hashpurge.core.models import HashType, ScanConfig

CONTENT_D1 = b"delete me " * 100
CONTENT_D2 = b"keep me " * 100


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def digest_d1() -> str:
    return hashlib.md5(CONTENT_D1).hexdigest()


@pytest.fixture
def digest_d2() -> str:
    return hashlib.md5(CONTENT_D2).hexdigest()


@pytest.fixture
def test_tree(temp_dir) -> Dict[str, Path]:
    """
    Creates the reference tree:
    - a.txt       content hashing to D1
    - b.txt       content hashing to D2
    - sub/c.txt   content hashing to D1
    """
    files = {"root": temp_dir}

    files["a"] = temp_dir / "a.txt"
    files["a"].write_bytes(CONTENT_D1)
    files["b"] = temp_dir / "b.txt"
    files["b"].write_bytes(CONTENT_D2)

    files["sub"] = temp_dir / "sub"
    files["sub"].mkdir()
    files["c"] = files["sub"] / "c.txt"
    files["c"].write_bytes(CONTENT_D1)

    return files


@pytest.fixture
def make_config(temp_dir) -> Callable[..., ScanConfig]:
    """Builds an MD5 ScanConfig rooted at temp_dir, flags overridable."""
    def _make(*hashes: str, **flags) -> ScanConfig:
        root = flags.pop("root_dir", str(temp_dir))
        return ScanConfig(
            root_dir=str(root),
            target_hashes=frozenset(hashes),
            hash_type=flags.pop("hash_type", HashType.MD5),
            **flags
        )
    return _make


@pytest.fixture
def symlink(temp_dir):
    """
    Creates a symbolic link or skips the test if the OS does not allow it
    (e.g. Windows without admin rights).
    """
    def _symlink(link: Path, target, target_is_directory: bool = False) -> Path:
        try:
            link.symlink_to(target, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError):
            pytest.skip("Symbolic links are not supported here")
        return link
    return _symlink
