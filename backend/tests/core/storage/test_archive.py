"""Tests for ZIP helpers."""

import io
import zipfile

import pytest

from vipudev.core.storage.archive import (
    ArchiveError,
    archive_entry_name,
    build_code_zip,
    sample_zip_files,
)


def make_zip(entries):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in entries:
            archive.writestr(name, data)
    buffer.seek(0)
    return buffer


@pytest.mark.unit
class TestArchiveEntryName:
    @pytest.mark.parametrize(
        "language,filename,expected",
        [
            ("python", None, "main.py"),
            ("javascript", None, "main.js"),
            (None, None, "main.js"),
            ("python", "app.py", "app.py"),
            (None, "my script.ts", "myscript.ts"),
            (None, "!!!.rb", ".rb"),
        ],
    )
    def test_names(self, language, filename, expected):
        assert archive_entry_name(language, filename) == expected


@pytest.mark.unit
class TestBuildCodeZip:
    def test_single_entry(self):
        content = build_code_zip("print('hi')", "main.py")

        with zipfile.ZipFile(io.BytesIO(content)) as archive:
            assert archive.namelist() == ["main.py"]
            assert archive.read("main.py").decode() == "print('hi')"

    def test_unicode_content(self):
        content = build_code_zip("print('héllo')", "main.py")

        with zipfile.ZipFile(io.BytesIO(content)) as archive:
            assert archive.read("main.py").decode("utf-8") == "print('héllo')"


@pytest.mark.unit
class TestSampleZipFiles:
    """Test cases for sample_zip_files."""

    def test_skips_binaries_directories_and_empty_files(self):
        source = make_zip(
            [
                ("src/", b""),
                ("src/app.py", b"print(1)"),
                ("assets/Logo.PNG", b"\x89PNG"),
                ("empty.txt", b""),
            ]
        )

        samples = sample_zip_files(source, max_files=30, max_bytes=20000)

        assert samples == ["--- FILE: src/app.py ---\nprint(1)"]

    def test_max_files(self):
        source = make_zip([(f"f{i}.txt", b"x") for i in range(10)])

        assert len(sample_zip_files(source, max_files=3, max_bytes=100)) == 3

    def test_truncates_content(self):
        source = make_zip([("big.txt", b"a" * 500)])

        samples = sample_zip_files(source, max_files=30, max_bytes=10)

        assert samples == ["--- FILE: big.txt ---\n" + "a" * 10]

    def test_invalid_utf8_replaced(self):
        source = make_zip([("data.txt", b"ok \xff")])

        samples = sample_zip_files(source, max_files=30, max_bytes=100)

        assert samples[0].endswith("ok �")

    def test_not_a_zip(self):
        with pytest.raises(ArchiveError):
            sample_zip_files(io.BytesIO(b"not a zip"), max_files=30, max_bytes=100)
