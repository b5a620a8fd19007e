"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List, Set
import sys

# Add src/ to sys.path so 'dupefinder' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from dupefinder.core.filesystem import LocalFileSystemImpl
from dupefinder.core.hasher import XXHashFingerprinterImpl
from dupefinder.core.models import FileRecord

CONTENT_100 = (b"duplicate content 0123456789 " * 4)[:100]
OTHER_100 = (b"different content abcdefghij " * 4)[:100]
CONTENT_200 = b"N" * 200


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - dupes/: 2 identical 100-byte files
    - base/: 1 file identical to the dupes/ pair
    - unique/: 1 file of 100 bytes with different content, 1 file of 50 bytes
    - empty/: 2 zero-byte files (never indexed)
    - nested/: no files at top level, sub/ holds 2 identical 200-byte files
    """
    files = {}

    dupes = temp_dir / "dupes"
    dupes.mkdir()
    files["dupes"] = dupes
    files["dupe_a"] = dupes / "a.txt"
    files["dupe_b"] = dupes / "b.txt"
    files["dupe_a"].write_bytes(CONTENT_100)
    files["dupe_b"].write_bytes(CONTENT_100)

    base = temp_dir / "base"
    base.mkdir()
    files["base"] = base
    files["base_a"] = base / "a.txt"
    files["base_a"].write_bytes(CONTENT_100)

    unique = temp_dir / "unique"
    unique.mkdir()
    files["unique"] = unique
    files["same_size_other"] = unique / "c.txt"
    files["same_size_other"].write_bytes(OTHER_100)
    files["small"] = unique / "d.txt"
    files["small"].write_bytes(b"S" * 50)

    empty = temp_dir / "empty"
    empty.mkdir()
    files["empty"] = empty
    files["empty_1"] = empty / "e1.txt"
    files["empty_2"] = empty / "e2.txt"
    files["empty_1"].write_bytes(b"")
    files["empty_2"].write_bytes(b"")

    nested = temp_dir / "nested"
    sub = nested / "sub"
    sub.mkdir(parents=True)
    files["nested"] = nested
    files["nested_x"] = sub / "x.bin"
    files["nested_y"] = sub / "y.bin"
    files["nested_x"].write_bytes(CONTENT_200)
    files["nested_y"].write_bytes(CONTENT_200)

    return files


class SpyFileSystem(LocalFileSystemImpl):
    """Local filesystem that records calls and can fail chosen paths."""

    def __init__(self, failing_dirs: Set[str] = None, failing_entries: Set[str] = None):
        self.listed: List[str] = []
        self.failing_dirs = failing_dirs or set()
        self.failing_entries = failing_entries or set()

    def list_dir(self, path: str) -> List[str]:
        self.listed.append(path)
        if path in self.failing_dirs:
            raise PermissionError(f"Permission denied: '{path}'")
        return sorted(super().list_dir(path))

    def metadata(self, path: str) -> FileRecord:
        if path in self.failing_entries:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        return super().metadata(path)


class SpyFingerprinter(XXHashFingerprinterImpl):
    """xxHash fingerprinter that records calls and can fail chosen paths."""

    def __init__(self, failing: Set[str] = None):
        super().__init__()
        self.calls: List[str] = []
        self.failing = failing or set()

    def fingerprint(self, path: str) -> str:
        self.calls.append(path)
        if path in self.failing:
            raise PermissionError(f"Permission denied: '{path}'")
        return super().fingerprint(path)


@pytest.fixture
def spy_fs():
    return SpyFileSystem()


@pytest.fixture
def spy_hasher():
    return SpyFingerprinter()
