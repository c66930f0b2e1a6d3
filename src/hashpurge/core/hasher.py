"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file hashing with a closed set of pluggable hash algorithms.

HasherImpl reads a file completely and renders its digest as lowercase hex.
"""

import hashlib
from typing import Dict

import xxhash

from hashpurge.core.models import HashType
from hashpurge.core.interfaces import Hasher, HashAlgorithm


class MD5AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hexdigest(data: bytes) -> str:
        return hashlib.md5(data).hexdigest()


class SHA1AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hexdigest(data: bytes) -> str:
        return hashlib.sha1(data).hexdigest()


class SHA256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hexdigest(data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()


class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hexdigest(data: bytes) -> str:
        return xxhash.xxh64(data).hexdigest()


ALGORITHMS: Dict[HashType, HashAlgorithm] = {
    HashType.MD5: MD5AlgorithmImpl(),
    HashType.SHA1: SHA1AlgorithmImpl(),
    HashType.SHA256: SHA256AlgorithmImpl(),
    HashType.XXH64: XXHashAlgorithmImpl(),
}


def get_algorithm(hash_type: HashType) -> HashAlgorithm:
    """Returns the algorithm implementation for a hash type."""
    return ALGORITHMS[hash_type]


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    The file is opened, read fully and closed before the digest is returned.
    """

    def __init__(self, algorithm: HashAlgorithm):
        self.algorithm = algorithm

    def compute_digest(self, path: str) -> str:
        """
        Raises:
            OSError: If the file cannot be opened or read
        """
        with open(path, 'rb') as f:
            data = f.read()
        return self.algorithm.hexdigest(data)
