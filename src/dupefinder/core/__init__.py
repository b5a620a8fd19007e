"""
Core duplicate detection engine — walker, size index, resolver, and orchestrator.

This package contains the whole detection pipeline:
- LocalFileSystemImpl: metadata lookup and directory listing (symlinks not followed)
- XXHashFingerprinterImpl: streaming xxHash128 content digests
- SizeIndex: byte size -> files, with candidate sizes (2+ files)
- DirectoryWalkerImpl: breadth-first traversal, each directory visited once
- DuplicateResolverImpl: per-size content confirmation
- DupeFinder: full scan and single-file search entry points

All components are pure Python with no UI dependencies.
"""

from .models import FileRecord, DuplicateGroup, TargetFile, ScanParams, ScanStats
from .size_index import SizeIndex
from .filesystem import LocalFileSystemImpl
from .hasher import XXHashFingerprinterImpl, FingerprintConfig
from .walker import DirectoryWalkerImpl
from .resolver import DuplicateResolverImpl
from .finder import DupeFinder

__all__ = [
    "FileRecord",
    "DuplicateGroup",
    "TargetFile",
    "ScanParams",
    "ScanStats",
    "SizeIndex",
    "LocalFileSystemImpl",
    "XXHashFingerprinterImpl",
    "FingerprintConfig",
    "DirectoryWalkerImpl",
    "DuplicateResolverImpl",
    "DupeFinder",
]
