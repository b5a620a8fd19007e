"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for directory scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single filesystem entry observed during a scan.
    Created once per visited entry and never modified afterwards.
    """
    path: str
    size: int  # in bytes
    is_file: bool = True
    is_dir: bool = False

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    Two or more files sharing both byte size and content digest.
    Paths are kept in discovery order; the first one is the first copy seen.
    """
    digest: str
    size: int
    files: List[str] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    def add_file(self, path: str) -> None:
        self.files.append(path)

    def __repr__(self):
        return f"<DuplicateGroup digest={self.digest}, size={self.size}, count={self.duplicate_count}>"


@dataclass(frozen=True)
class TargetFile:
    """Identity of the file searched for in target-file mode."""
    record: FileRecord
    digest: str
    real_path: str

    @property
    def size(self) -> int:
        return self.record.size

    @property
    def path(self) -> str:
        return self.record.path


@dataclass
class ScanStats:
    """
    Counters collected during a single run.
    """
    directories_scanned: int = 0
    files_indexed: int = 0
    candidate_sizes: int = 0
    files_hashed: int = 0
    groups_found: int = 0
    total_time: float = 0.0

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"📁 Directories scanned: {self.directories_scanned}",
            f"📄 Files indexed: {self.files_indexed}",
            f"🧮 Candidate sizes: {self.candidate_sizes}",
            f"🔍 Files hashed: {self.files_hashed}",
            f"👯 Duplicate groups: {self.groups_found}",
        ]
        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
"""

@dataclass
class ScanParams:
    """Parameters for a duplicate scan with validation."""
    roots: List[str]
    recursive: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.roots:
            raise ValueError("At least one root directory is required")

        normalized = []
        for root in self.roots:
            root = str(root).strip()
            if not root:
                raise ValueError("Root directory cannot be empty")
            normalized.append(root)
        self.roots = normalized
