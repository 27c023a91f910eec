"""Tests for the source provider helpers."""

import os
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.sources import SourceUnavailableError, display_name, is_quit, resolve_path


class TestResolvePath:
    """Test filename resolution."""

    def test_existing_file(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("x")
        assert resolve_path(path) == path

    def test_parent_directory_fallback(self, tmp_path, monkeypatch):
        """A name missing from cwd is looked up one directory up."""
        (tmp_path / "notes.txt").write_text("x")
        build_dir = tmp_path / "build"
        build_dir.mkdir()
        monkeypatch.chdir(build_dir)

        resolved = resolve_path("notes.txt")
        assert resolved == Path("..") / "notes.txt"
        assert resolved.is_file()

        with pytest.raises(SourceUnavailableError):
            resolve_path("notes.txt", search_parent=False)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceUnavailableError) as exc:
            resolve_path(tmp_path / "nope.txt")
        assert "File does not exist" in str(exc.value)
        assert isinstance(exc.value, FileNotFoundError)

    def test_directory_is_not_a_source(self, tmp_path):
        with pytest.raises(SourceUnavailableError):
            resolve_path(tmp_path, search_parent=False)


class TestHelpers:
    """Test display and quit helpers."""

    def test_display_name(self):
        assert display_name("../notes.txt") == "notes.txt"
        assert display_name("data/a/b.txt") == "a/b.txt"
        assert display_name("data\\b.txt") == "b.txt"
        assert display_name("plain.txt") == "plain.txt"

    def test_is_quit(self):
        assert is_quit("q")
        assert is_quit(" Q ")
        assert not is_quit("quit")
        assert not is_quit("x")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
