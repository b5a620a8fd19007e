"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filesystem.py
Local filesystem access: metadata lookup and directory listing.
Symbolic links are never followed, so a link is classified as neither file nor directory.
"""

import os
import stat
from typing import List

from dupefinder.core.interfaces import FileSystem
from dupefinder.core.models import FileRecord


class LocalFileSystemImpl(FileSystem):
    """FileSystem backed by `os.stat` and `os.scandir`."""

    def metadata(self, path: str) -> FileRecord:
        st = os.stat(path, follow_symlinks=False)
        return FileRecord(
            path=path,
            size=st.st_size,
            is_file=stat.S_ISREG(st.st_mode),
            is_dir=stat.S_ISDIR(st.st_mode),
        )

    def list_dir(self, path: str) -> List[str]:
        with os.scandir(path) as entries:
            return [os.path.join(path, entry.name) for entry in entries]
