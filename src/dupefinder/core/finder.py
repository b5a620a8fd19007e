"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/finder.py
Duplicate detection engine: directory walk -> size index -> content resolution.

Usage:
    finder = DupeFinder(["/photos", "/backup"], recursive=True)
    groups = finder.run()                       # digest -> DuplicateGroup
    group = finder.run_for_file("/photos/a.jpg")  # DuplicateGroup or None

Every call to run() / run_for_file() starts from a clean state, so the same
instance can be reused after files have changed on disk. Instances are not
safe to share between threads; use one finder per concurrent scan.
"""

import os
import time
import logging
from dataclasses import replace
from typing import List, Dict, Optional, Callable, Set

from dupefinder.core.interfaces import FileSystem, Fingerprinter
from dupefinder.core.models import FileRecord, DuplicateGroup, TargetFile, ScanParams, ScanStats
from dupefinder.core.size_index import SizeIndex
from dupefinder.core.filesystem import LocalFileSystemImpl
from dupefinder.core.hasher import XXHashFingerprinterImpl
from dupefinder.core.walker import DirectoryWalkerImpl
from dupefinder.core.resolver import DuplicateResolverImpl

logger = logging.getLogger(__name__)


class DupeFinder:
    """
    Searches for duplicate files across the configured root directories.

    Attributes:
        directories: Root directories, made absolute
        recursive: Whether subdirectories are searched
    """

    def __init__(
        self,
        directories: List[str],
        recursive: bool = False,
        filesystem: Optional[FileSystem] = None,
        fingerprinter: Optional[Fingerprinter] = None
    ):
        params = ScanParams(roots=list(directories), recursive=recursive)
        self.directories = [os.path.abspath(d) for d in params.roots]
        self.recursive = params.recursive
        self.filesystem = filesystem or LocalFileSystemImpl()
        self.fingerprinter = fingerprinter or XXHashFingerprinterImpl()
        self._walker = DirectoryWalkerImpl(self.filesystem, recursive=self.recursive)
        self._resolver = DuplicateResolverImpl(self.fingerprinter)

        self._checked_directories: Set[str] = set()
        self._index = SizeIndex()
        self._target: Optional[TargetFile] = None
        self._stats = ScanStats()

    @classmethod
    def from_params(cls, params: ScanParams, **kwargs) -> 'DupeFinder':
        return cls(params.roots, recursive=params.recursive, **kwargs)

    @classmethod
    def new_recursive(cls, directories: List[str], **kwargs) -> 'DupeFinder':
        """Finder set to traverse all subdirectories."""
        return cls(directories, recursive=True, **kwargs)

    @property
    def stats(self) -> ScanStats:
        """Statistics of the most recent run."""
        return self._stats

    # ---------------------------------------------------------------
    # Public entry points
    # ---------------------------------------------------------------

    def run(
        self,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Dict[str, DuplicateGroup]:
        """
        Full scan of all root directories.

        Returns:
            Mapping of content digest -> DuplicateGroup
        """
        self._reset()
        start_time = time.time()
        logger.debug(f"Starting scan of {len(self.directories)} root(s), recursive={self.recursive}")

        self._build_index(stopped_flag, progress_callback)
        dupes = self._check_duplicates(stopped_flag, progress_callback)

        self._finish_stats(dupes, start_time)
        logger.debug(f"Scan completed. Found {len(dupes)} duplicate groups.")
        return dupes

    def run_for_file(
        self,
        path: str,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Optional[DuplicateGroup]:
        """
        Search for duplicates of a single file.

        Returns:
            The DuplicateGroup containing `path` and its copies, or None.

        Raises:
            OSError: If the file cannot be stat'ed or read, or is not a regular file.
        """
        self._reset()
        start_time = time.time()

        try:
            self._target = self._load_target(path)
        except OSError as e:
            logger.error(f"Cannot read search file {path}: {e}")
            raise

        logger.debug(f"Searching for duplicates of {self._target.path} ({self._target.size} bytes)")
        # empty files are never indexed, so an empty search file can match nothing
        if self._target.size > 0:
            self._index.seed(self._target.record)
        self._build_index(stopped_flag, progress_callback)
        dupes = self._check_duplicates(stopped_flag, progress_callback)

        self._finish_stats(dupes, start_time)
        return dupes.get(self._target.digest)

    # ---------------------------------------------------------------
    # Internals
    # ---------------------------------------------------------------

    def _reset(self) -> None:
        """
        Drop everything gathered by a previous run. File contents may have
        changed since then, so nothing is carried over.
        """
        if self._checked_directories:
            logger.debug("Resetting state from previous run")
        self._checked_directories.clear()
        self._index.clear()
        self._target = None
        self._stats = ScanStats()

    def _load_target(self, path: str) -> TargetFile:
        abs_path = os.path.abspath(path)
        real_path = os.path.realpath(abs_path)
        # the search file may be a link; stat what it points to, display the given path
        record = replace(self.filesystem.metadata(real_path), path=abs_path)
        if record.is_dir:
            raise IsADirectoryError(f"Is a directory: {abs_path}")
        if not record.is_file:
            raise OSError(f"Not a regular file: {abs_path}")
        digest = self.fingerprinter.fingerprint(abs_path)
        return TargetFile(record=record, digest=digest, real_path=real_path)

    def _build_index(
        self,
        stopped_flag: Optional[Callable[[], bool]],
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]]
    ) -> None:
        for record in self._walker.walk(
            self.directories,
            self._checked_directories,
            stopped_flag=stopped_flag,
            progress_callback=progress_callback
        ):
            if self._should_insert(record):
                self._index.insert(record)
                self._stats.files_indexed += 1

        self._stats.directories_scanned = len(self._checked_directories)
        logger.debug(f"Indexed {len(self._index)} files in {self._stats.directories_scanned} directories")

    def _should_insert(self, record: FileRecord) -> bool:
        if not record.is_file:
            return False
        # skip empty files
        if record.size == 0:
            return False

        if self._target is not None:
            # only files of the same size as the search file matter
            if record.size != self._target.size:
                return False
            # skip the search file itself if it lives in a searched directory
            if os.path.realpath(record.path) == self._target.real_path:
                return False
        return True

    def _check_duplicates(
        self,
        stopped_flag: Optional[Callable[[], bool]],
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]]
    ) -> Dict[str, DuplicateGroup]:
        self._stats.candidate_sizes = len(self._index.candidate_sizes)
        dupes = self._resolver.resolve(
            self._index,
            target=self._target,
            stopped_flag=stopped_flag,
            progress_callback=progress_callback
        )
        self._stats.files_hashed = self._resolver.files_hashed
        return dupes

    def _finish_stats(self, dupes: Dict[str, DuplicateGroup], start_time: float) -> None:
        self._stats.groups_found = len(dupes)
        self._stats.total_time = time.time() - start_time
