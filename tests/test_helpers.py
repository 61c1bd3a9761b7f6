from __future__ import annotations

from pathlib import Path

import pytest

from stylex_fold.exceptions import LocateFileError
from stylex_fold.filesystem import (
    enforce_file_size,
    get_max_file_size,
    normalize_filepath,
    safe_read,
)
from stylex_fold.config import FoldConfig
from stylex_fold.locator import read_document


def test_get_max_file_size_uses_default(monkeypatch):
    monkeypatch.delenv("STYLEX_FOLD_MAX_FILE_SIZE", raising=False)

    assert get_max_file_size(default=123) == 123


def test_get_max_file_size_reads_environment(monkeypatch):
    monkeypatch.setenv("STYLEX_FOLD_MAX_FILE_SIZE", "2048")

    assert get_max_file_size() == 2048


def test_get_max_file_size_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("STYLEX_FOLD_MAX_FILE_SIZE", "invalid")
    with pytest.raises(ValueError):
        get_max_file_size()


def test_get_max_file_size_rejects_non_positive(monkeypatch):
    monkeypatch.setenv("STYLEX_FOLD_MAX_FILE_SIZE", "0")
    with pytest.raises(ValueError):
        get_max_file_size()


def test_normalize_filepath_missing_file(tmp_path: Path):
    with pytest.raises(ValueError, match="does not exist"):
        normalize_filepath(str(tmp_path / "missing.tsx"))


def test_normalize_filepath_rejects_directory(tmp_path: Path):
    directory = tmp_path / "styles.ts"
    directory.mkdir()

    with pytest.raises(ValueError, match="not a regular file"):
        normalize_filepath(str(directory))


def test_normalize_filepath_rejects_unsupported_extension(tmp_path: Path):
    target = tmp_path / "styles.css"
    target.write_text("a {}\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Supported extensions"):
        normalize_filepath(str(target))


def test_normalize_filepath_accepts_uppercase_suffix(tmp_path: Path):
    target = tmp_path / "Button.TSX"
    target.write_text("", encoding="utf-8")

    assert normalize_filepath(str(target)) == target.resolve()


def test_normalize_filepath_custom_extensions(tmp_path: Path):
    target = tmp_path / "styles.vue"
    target.write_text("", encoding="utf-8")

    assert normalize_filepath(str(target), (".vue",)) == target.resolve()


def test_enforce_file_size(tmp_path: Path):
    target = tmp_path / "big.ts"
    target.write_text("x" * 10, encoding="utf-8")

    enforce_file_size(target, 10)
    with pytest.raises(IOError, match="maximum allowed size"):
        enforce_file_size(target, 9)


def test_enforce_file_size_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        enforce_file_size(tmp_path / "missing.ts", 10)


def test_safe_read_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        safe_read(tmp_path / "missing.ts")


def test_read_document(tmp_path: Path):
    target = tmp_path / "styles.ts"
    target.write_text("const s = stylex.create({\r\n  a: {\r\n  },\r\n});\r\n", encoding="utf-8")

    document = read_document(target)

    assert document.lines == ("const s = stylex.create({", "  a: {", "  },", "});")


def test_read_document_rejects_long_lines(tmp_path: Path):
    target = tmp_path / "styles.ts"
    target.write_text("short\n" + "x" * 50 + "\n", encoding="utf-8")

    with pytest.raises(LocateFileError, match="line 2"):
        read_document(target, FoldConfig(max_line_length=20))


def test_read_document_rejects_non_positive_override(tmp_path: Path):
    target = tmp_path / "styles.ts"
    target.write_text("", encoding="utf-8")

    with pytest.raises(LocateFileError):
        read_document(target, max_line_length=0)


def test_read_document_rejects_invalid_utf8(tmp_path: Path):
    target = tmp_path / "styles.ts"
    target.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(LocateFileError, match="Invalid UTF-8"):
        read_document(target)


def test_read_document_rejects_invalid_config(tmp_path: Path):
    target = tmp_path / "styles.ts"
    target.write_text("", encoding="utf-8")

    with pytest.raises(LocateFileError):
        read_document(target, FoldConfig(marker_tokens=()))
