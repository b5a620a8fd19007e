"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection engine.
These protocols enforce structural typing using Python's `typing.Protocol` so that
filesystem access and content hashing can be swapped out (e.g. with fakes in tests).

Key Components:
---------------
- FileSystem: metadata lookup and directory listing.
- Fingerprinter: streams a file and returns a fixed-format digest string.
- DirectoryWalker: breadth-first traversal yielding file records.
- DuplicateResolver: turns same-size buckets into verified duplicate groups.
"""

from typing import Protocol, List, Dict, Iterator, Optional, Callable, Set
from dupefinder.core.models import FileRecord, DuplicateGroup, TargetFile
from dupefinder.core.size_index import SizeIndex


# ===== Interfaces =====

class FileSystem(Protocol):
    """Interface for raw filesystem access."""

    def metadata(self, path: str) -> FileRecord:
        """
        Resolve a path to its size and kind.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        ...

    def list_dir(self, path: str) -> List[str]:
        """
        List the entry paths of a directory. Order is filesystem-defined.

        Raises:
            OSError: If the directory cannot be listed.
        """
        ...


class Fingerprinter(Protocol):
    """
    Interface for content fingerprinting.

    Implementations must read the file in bounded chunks and return
    the same string for byte-identical content.
    """

    def fingerprint(self, path: str) -> str:
        ...


class DirectoryWalker(Protocol):
    def walk(
        self,
        roots: List[str],
        visited: Set[str],
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Iterator[FileRecord]:
        """
        Visit every directory in `roots` (and subdirectories, if enabled) once,
        yielding a record for each regular file found.
        """
        ...


class DuplicateResolver(Protocol):
    def resolve(
        self,
        index: SizeIndex,
        target: Optional[TargetFile] = None,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Dict[str, DuplicateGroup]:
        """Return digest -> DuplicateGroup for every candidate size in the index."""
        ...
