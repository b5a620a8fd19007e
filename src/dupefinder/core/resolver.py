"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Confirms true duplicates inside each candidate size bucket by content digest.

Every bucket is resolved independently: files of different sizes are never
compared. Within a bucket the first path seen for a digest leads its group and
later matches are appended in discovery order. In target-file mode the target's
digest is already known, so its own record (always first in its bucket) is not
re-read.
"""

import logging
from typing import List, Dict, Optional, Callable

from dupefinder.core.interfaces import DuplicateResolver, Fingerprinter
from dupefinder.core.models import FileRecord, DuplicateGroup, TargetFile
from dupefinder.core.size_index import SizeIndex

logger = logging.getLogger(__name__)


class DuplicateResolverImpl(DuplicateResolver):
    """
    Uses an injected Fingerprinter so hashing can be swapped out in tests.
    """

    def __init__(self, fingerprinter: Fingerprinter):
        self.fingerprinter = fingerprinter
        self.files_hashed = 0

    def resolve(
        self,
        index: SizeIndex,
        target: Optional[TargetFile] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Dict[str, DuplicateGroup]:
        results: Dict[str, DuplicateGroup] = {}
        self.files_hashed = 0
        total = len(index.candidate_sizes)

        for processed, (size, records) in enumerate(index.candidates(), 1):
            if stopped_flag and stopped_flag():
                logger.warning("Resolution stopped; remaining size groups were not hashed")
                break

            self._resolve_bucket(size, records, results, target)

            if progress_callback:
                progress_callback('hashing', processed, total)

        return results

    def _resolve_bucket(
        self,
        size: int,
        records: List[FileRecord],
        results: Dict[str, DuplicateGroup],
        target: Optional[TargetFile] = None
    ) -> None:
        # digest -> first path seen with that digest in this bucket
        known_hashes: Dict[str, str] = {}

        if target is not None and target.size == size:
            known_hashes[target.digest] = target.path
            records = records[1:]

        for record in records:
            try:
                digest = self.fingerprinter.fingerprint(record.path)
            except OSError as e:
                logger.warning(f"Error generating file hash for file: {record.path}; error: {e}")
                continue
            self.files_hashed += 1

            existing = known_hashes.get(digest)
            if existing is None:
                known_hashes[digest] = record.path
                continue

            group = results.get(digest)
            if group is None:
                results[digest] = DuplicateGroup(digest=digest, size=size, files=[existing, record.path])
            else:
                group.add_file(record.path)
