"""ZIP helpers for packaging and sampling code."""

import io
import re
import zipfile
from typing import BinaryIO, Optional

ZIP_DOWNLOAD_NAME = "vipudevai-project.zip"

BINARY_EXTENSIONS = re.compile(r"\.(png|jpg|jpeg|gif|ico|pdf|mp4|mp3|zip|gz|tar|exe|dll)$", re.I)
_UNSAFE_NAME_CHARS = re.compile(r"[^\w.\-]")


class ArchiveError(ValueError):
    """The uploaded file is not a readable ZIP archive."""


def archive_entry_name(language: Optional[str], filename: Optional[str]) -> str:
    """Pick the name a single code file gets inside the download archive."""
    ext = filename.rsplit(".", 1)[-1] if filename else ("py" if language == "python" else "js")
    safe = _UNSAFE_NAME_CHARS.sub("", filename) if filename else ""
    return safe or f"main.{ext}"


def build_code_zip(code: str, entry_name: str) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(entry_name, code.encode("utf-8"))
    return buffer.getvalue()


def sample_zip_files(source: BinaryIO, max_files: int, max_bytes: int) -> list[str]:
    """
    Read text files out of a ZIP for LLM analysis.

    Directories, known binary extensions and empty entries are skipped. At
    most `max_files` entries are returned, each truncated to `max_bytes`
    before decoding.

    Returns:
        One ``--- FILE: <name> ---`` block per sampled file
    """
    try:
        archive = zipfile.ZipFile(source)
    except zipfile.BadZipFile as e:
        raise ArchiveError("Uploaded file is not a valid ZIP archive") from e

    samples: list[str] = []
    with archive:
        for entry in archive.infolist():
            if len(samples) >= max_files:
                break
            if entry.is_dir() or BINARY_EXTENSIONS.search(entry.filename):
                continue

            with archive.open(entry) as handle:
                data = handle.read(max_bytes)
            if not data:
                continue

            content = data.decode("utf-8", errors="replace")
            samples.append(f"--- FILE: {entry.filename} ---\n{content}")

    return samples
