"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Breadth-first directory traversal.
Features:
- Visits each directory at most once per run, keyed by its real path
- Optionally descends into subdirectories, one wave of directories at a time
- Unreadable directories and entries are logged and skipped, never fatal
- Yields a FileRecord for every regular file found
"""

import os
import logging
from typing import List, Iterator, Optional, Callable, Set

from dupefinder.core.interfaces import DirectoryWalker, FileSystem
from dupefinder.core.models import FileRecord

logger = logging.getLogger(__name__)


class DirectoryWalkerImpl(DirectoryWalker):
    """
    Attributes:
        filesystem: Metadata/listing provider
        recursive: Whether subdirectories are queued for the next wave
    """

    def __init__(self, filesystem: FileSystem, recursive: bool = False):
        self.filesystem = filesystem
        self.recursive = recursive

    def walk(
        self,
        roots: List[str],
        visited: Set[str],
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Iterator[FileRecord]:
        pending = list(roots)
        scanned = 0

        while pending:
            next_wave: List[str] = []
            for directory in pending:
                if stopped_flag and stopped_flag():
                    logger.warning("Scan stopped; skipping remaining directories")
                    return

                key = os.path.realpath(directory)
                if key in visited:
                    logger.debug(f"Already visited: {directory}")
                    continue
                visited.add(key)

                try:
                    entries = self.filesystem.list_dir(directory)
                except OSError as e:
                    logger.warning(f"Could not read directory {directory}: {e}; skipped.")
                    continue

                for entry in entries:
                    try:
                        record = self.filesystem.metadata(entry)
                    except OSError as e:
                        logger.warning(f"Could not get metadata for {entry}: {e}; skipped.")
                        continue

                    if record.is_file:
                        yield record
                    elif record.is_dir and self.recursive:
                        next_wave.append(record.path)

                scanned += 1
                if progress_callback:
                    progress_callback('scanning', scanned, None)

            pending = next_wave

        logger.debug(f"Traversal finished: {scanned} directories scanned")
