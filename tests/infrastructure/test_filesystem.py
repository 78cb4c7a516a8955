"""Tests for generated file writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from borshgen.infrastructure.filesystem import write_generated_file


class TestWriteGeneratedFile:
    def test_creates_nested_directories(self, tmp_path: Path) -> None:
        path = write_generated_file(tmp_path / "a" / "b", "schema.ts", "x\n")
        assert path == tmp_path / "a" / "b" / "schema.ts"
        assert path.read_text(encoding="utf-8") == "x\n"

    def test_overwrites(self, tmp_path: Path) -> None:
        write_generated_file(tmp_path, "schema.ts", "first version, longer\n")
        path = write_generated_file(tmp_path, "schema.ts", "second\n")
        assert path.read_text(encoding="utf-8") == "second\n"

    def test_unix_line_endings(self, tmp_path: Path) -> None:
        path = write_generated_file(tmp_path, "schema.ts", "a\nb\n")
        assert path.read_bytes() == b"a\nb\n"

    def test_directory_blocked_by_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "out"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(OSError):
            write_generated_file(blocker, "schema.ts", "x\n")
