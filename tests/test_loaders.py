"""
Tests for text loaders.
"""

from pathlib import Path

import pytest

from infospectra import load_text
from infospectra.loaders import LoaderRegistry
from infospectra.loaders.base import LoaderError
from infospectra.loaders.text import TextLoader


class TestLoaderRegistry:
    """Tests for LoaderRegistry."""

    def test_supported_extensions(self):
        """Test getting supported extensions."""
        extensions = LoaderRegistry.supported_extensions()

        assert ".txt" in extensions
        assert ".text" in extensions

    def test_get_loader_for_text(self):
        """Test getting loader for text."""
        loader = LoaderRegistry.get_loader(Path("corpus.TXT"))
        assert isinstance(loader, TextLoader)

    def test_get_loader_for_unknown(self):
        """Test getting loader for unknown extension."""
        with pytest.raises(LoaderError) as exc_info:
            LoaderRegistry.get_loader(Path("document.pdf"))

        assert ".pdf" in str(exc_info.value)
        assert exc_info.value.to_dict()["source_path"] == "document.pdf"

    def test_load_missing_file(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(LoaderError, match="not found"):
            LoaderRegistry.load_text(tmp_path / "missing.txt")


class TestTextLoader:
    """Tests for TextLoader."""

    def test_load_utf8(self, text_file, sample_text):
        """Test loading a UTF-8 file."""
        loader = TextLoader()
        assert loader.load(text_file) == sample_text
        assert loader.warnings == []

    def test_load_utf8_with_bom(self, tmp_path):
        """Test that a byte order mark is stripped."""
        path = tmp_path / "bom.txt"
        path.write_bytes("\ufeffhello".encode("utf-8"))

        assert TextLoader().load(path) == "hello"

    def test_cp1251_fallback(self, tmp_path):
        """Test Cyrillic text saved in Windows-1251."""
        path = tmp_path / "russian.txt"
        path.write_bytes("Привет, мир".encode("cp1251"))

        loader = TextLoader()
        assert loader.load(path) == "Привет, мир"
        assert loader.warnings == ["Used fallback encoding: cp1251"]

    def test_cp1252_fallback(self):
        """Test bytes undefined in cp1251 but valid in cp1252."""
        loader = TextLoader()
        assert loader.decode(b"\x98abc\xff") == "\u02dcabc\xff"
        assert loader.warnings == ["Used fallback encoding: cp1252"]

    def test_latin1_fallback(self):
        """Test bytes undefined in both Windows code pages."""
        loader = TextLoader()
        assert loader.decode(b"\x98\x81") == "\x98\x81"
        assert loader.warnings == ["Used fallback encoding: latin-1"]

    def test_warnings_reset_between_loads(self, tmp_path, text_file):
        """Test that warnings do not leak into the next load."""
        loader = TextLoader()
        loader.decode("Привет".encode("cp1251"))
        assert loader.warnings

        loader.load(text_file)
        assert loader.warnings == []

    def test_unreadable_path(self, tmp_path):
        """Test that OS errors become LoaderError."""
        directory = tmp_path / "folder.txt"
        directory.mkdir()

        with pytest.raises(LoaderError) as exc_info:
            TextLoader().load(directory)
        assert exc_info.value.source_path == directory


class TestLoadText:
    """Tests for the load_text convenience function."""

    def test_load_text_accepts_str(self, text_file, sample_text):
        """Test loading from a string path."""
        assert load_text(str(text_file)) == sample_text

    def test_load_text_unsupported(self, tmp_path):
        """Test loading an unsupported file type."""
        path = tmp_path / "data.csv"
        path.write_text("a,b")

        with pytest.raises(LoaderError, match="not allowed"):
            load_text(path)

    def test_load_text_rejects_traversal(self, text_file):
        """Test that parent-directory sequences are refused."""
        sneaky = f"{text_file.parent}/../{text_file.parent.name}/{text_file.name}"

        with pytest.raises(LoaderError, match="traversal") as exc_info:
            load_text(sneaky)
        assert exc_info.value.source_path is not None

    def test_load_text_missing(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(LoaderError, match="does not exist"):
            load_text(tmp_path / "missing.txt")

    def test_load_text_inside_base_directory(self, text_file, sample_text):
        """Test confining reads to a base directory."""
        assert load_text(text_file, base_directory=text_file.parent) == sample_text

    def test_load_text_outside_base_directory(self, text_file, tmp_path):
        """Test that files outside the base directory are refused."""
        jail = tmp_path / "jail"
        jail.mkdir()

        with pytest.raises(LoaderError, match="outside"):
            load_text(text_file, base_directory=jail)
