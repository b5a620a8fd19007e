"""
DupeFinder — locate duplicate files by content across one or more directories.

Core features:
- Files are grouped by byte size first; only sizes shared by 2+ files are hashed
- Content confirmation with streaming xxHash128 digests
- Single-file mode: find every copy of one specific file
- Re-running a finder always performs a full fresh scan
- CLI interface for headless usage (reporting only, files are never modified)
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dupefinder")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

# Public API — only what users should import directly
from dupefinder.core import DupeFinder, DuplicateGroup, FileRecord, ScanParams, ScanStats
from dupefinder.utils.convert_utils import ConvertUtils

__all__ = [
    "DupeFinder",
    "DuplicateGroup",
    "FileRecord",
    "ScanParams",
    "ScanStats",
    "ConvertUtils",
    "__version__",
]
