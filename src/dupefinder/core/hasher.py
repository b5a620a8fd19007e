"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Content fingerprinting using pluggable hash algorithms.

Files are streamed in fixed-size chunks so memory use stays bounded regardless
of file size. The default algorithm is xxHash128: fast, but not collision
resistant against deliberately crafted inputs.
"""

from typing import Callable

import xxhash

from dupefinder.core.interfaces import Fingerprinter


class FingerprintConfig:
    CHUNK_SIZE = 64 * 1024  # bytes read per iteration


# Use the same way to plug in any other streaming hash (e.g. hashlib.sha256)
class XXHashFingerprinterImpl(Fingerprinter):
    """
    Computes a 128-bit xxHash digest of a file's full content.
    Returns the 32-character lowercase hex representation.
    """

    def __init__(self, chunk_size: int = FingerprintConfig.CHUNK_SIZE,
                 algorithm: Callable[[], object] = xxhash.xxh128):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size
        self.algorithm = algorithm

    def fingerprint(self, path: str) -> str:
        """
        Raises:
            OSError: If the file cannot be opened or read.
        """
        hasher = self.algorithm()
        with open(path, 'rb') as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                hasher.update(chunk)
        return hasher.hexdigest()
