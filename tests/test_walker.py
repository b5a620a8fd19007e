"""
Unit tests for DirectoryWalkerImpl.
Verifies breadth-first traversal, visited-once bookkeeping and error skipping.
"""
import logging
import os
from pathlib import Path

from dupefinder.core.walker import DirectoryWalkerImpl
from conftest import SpyFileSystem


class TestDirectoryWalkerImpl:

    def test_yields_only_files_without_recursion(self, test_files, spy_fs):
        walker = DirectoryWalkerImpl(spy_fs, recursive=False)
        records = list(walker.walk([str(test_files["nested"])], set()))

        assert records == []
        assert spy_fs.listed == [str(test_files["nested"])]

    def test_recursion_descends_into_subdirectories(self, test_files, spy_fs):
        walker = DirectoryWalkerImpl(spy_fs, recursive=True)
        records = list(walker.walk([str(test_files["nested"])], set()))

        assert {Path(r.path) for r in records} == {test_files["nested_x"], test_files["nested_y"]}
        assert all(r.is_file and not r.is_dir for r in records)

    def test_breadth_first_waves(self, temp_dir, spy_fs):
        """All directories of one depth are listed before any deeper one."""
        (temp_dir / "a" / "deep").mkdir(parents=True)
        (temp_dir / "b").mkdir()

        walker = DirectoryWalkerImpl(spy_fs, recursive=True)
        list(walker.walk([str(temp_dir)], set()))

        names = [os.path.relpath(p, temp_dir) for p in spy_fs.listed]
        assert names == [".", "a", "b", os.path.join("a", "deep")]

    def test_zero_byte_files_still_yielded(self, test_files, spy_fs):
        """Filtering empty files is the caller's job; the walker reports every file."""
        walker = DirectoryWalkerImpl(spy_fs)
        records = list(walker.walk([str(test_files["empty"])], set()))

        assert len(records) == 2
        assert all(r.size == 0 for r in records)

    def test_visited_set_is_updated_and_honoured(self, test_files, spy_fs):
        visited = set()
        walker = DirectoryWalkerImpl(spy_fs)
        dupes = str(test_files["dupes"])

        first = list(walker.walk([dupes], visited))
        second = list(walker.walk([dupes], visited))

        assert len(first) == 2
        assert second == []
        assert os.path.realpath(dupes) in visited
        assert spy_fs.listed == [dupes]

    def test_unlistable_directory_skipped(self, test_files, caplog):
        fs = SpyFileSystem(failing_dirs={str(test_files["dupes"])})
        walker = DirectoryWalkerImpl(fs)

        with caplog.at_level(logging.WARNING):
            records = list(walker.walk([str(test_files["dupes"]), str(test_files["base"])], set()))

        assert [Path(r.path) for r in records] == [test_files["base_a"]]
        assert "Could not read directory" in caplog.text

    def test_entry_metadata_failure_skipped(self, test_files, caplog):
        fs = SpyFileSystem(failing_entries={str(test_files["dupe_a"])})
        walker = DirectoryWalkerImpl(fs)

        with caplog.at_level(logging.WARNING):
            records = list(walker.walk([str(test_files["dupes"])], set()))

        assert [Path(r.path) for r in records] == [test_files["dupe_b"]]
        assert "Could not get metadata" in caplog.text

    def test_file_given_as_root_is_skipped(self, test_files, spy_fs, caplog):
        walker = DirectoryWalkerImpl(spy_fs)
        with caplog.at_level(logging.WARNING):
            records = list(walker.walk([str(test_files["dupe_a"])], set()))
        assert records == []

    def test_symlinks_not_followed(self, test_files, temp_dir, spy_fs):
        try:
            (temp_dir / "link_dir").symlink_to(test_files["dupes"], target_is_directory=True)
            (test_files["base"] / "link.txt").symlink_to(test_files["base_a"])
        except (OSError, NotImplementedError):
            return  # symlinks not supported here

        walker = DirectoryWalkerImpl(spy_fs, recursive=True)
        records = list(walker.walk([str(temp_dir)], set()))

        paths = {Path(r.path) for r in records}
        assert not any("link" in p.name or "link_dir" in p.parts for p in paths)

    def test_stopped_flag_halts_traversal(self, test_files, spy_fs):
        calls = {"n": 0}

        def stopped():
            calls["n"] += 1
            return calls["n"] > 1

        walker = DirectoryWalkerImpl(spy_fs)
        records = list(walker.walk([str(test_files["dupes"]), str(test_files["base"])], set(), stopped_flag=stopped))

        assert spy_fs.listed == [str(test_files["dupes"])]
        assert len(records) == 2

    def test_progress_callback_counts_directories(self, test_files, spy_fs):
        events = []
        walker = DirectoryWalkerImpl(spy_fs, recursive=True)
        list(walker.walk([str(test_files["nested"])], set(),
                         progress_callback=lambda s, c, t: events.append((s, c, t))))

        assert events == [("scanning", 1, None), ("scanning", 2, None)]
