"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/size_index.py
In-memory mapping from byte size to the files observed with that size.
"""

from typing import List, Dict, Iterator, Tuple
from dupefinder.core.models import FileRecord


class SizeIndex:
    """
    Groups file records by exact byte size, in discovery order.
    Sizes holding two or more records are tracked as candidate sizes.
    """

    def __init__(self):
        self._buckets: Dict[int, List[FileRecord]] = {}
        # dict used as an insertion-ordered set
        self._candidates: Dict[int, None] = {}

    def insert(self, record: FileRecord) -> None:
        bucket = self._buckets.get(record.size)
        if bucket is None:
            self._buckets[record.size] = [record]
            return
        bucket.append(record)
        if len(bucket) >= 2:
            self._candidates[record.size] = None

    def seed(self, record: FileRecord) -> None:
        """Replace the bucket for `record.size` with a singleton holding `record`."""
        self._buckets[record.size] = [record]
        self._candidates.pop(record.size, None)

    @property
    def candidate_sizes(self) -> List[int]:
        return list(self._candidates)

    def candidates(self) -> Iterator[Tuple[int, List[FileRecord]]]:
        """Yields (size, records) for every candidate size."""
        for size in self._candidates:
            yield size, self._buckets[size]

    def clear(self) -> None:
        self._buckets.clear()
        self._candidates.clear()

    def __len__(self) -> int:
        """Total number of indexed records."""
        return sum(len(bucket) for bucket in self._buckets.values())

    def __repr__(self):
        return f"<SizeIndex sizes={len(self._buckets)}, candidates={len(self._candidates)}>"
