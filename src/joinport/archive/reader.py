# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Access to ZIP archives and loose files for the import pipeline.

Reads are exposed as coroutines so the merge engine can await each file in
turn; entries are sized and read one at a time, in archive order.
"""

from __future__ import annotations

import json
import zipfile
import zlib
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from joinport.archive.classifier import RawEntry
from joinport.logging import get_logger
from joinport.model.entities import ArchiveEntry

# ###############
# Public Interface
# ###############

# Reads one file by path and returns its text.
FileReader = Callable[[str], Awaitable[str]]

PROJECT_FILE_EXTENSIONS: frozenset[str] = frozenset({"crestron", "crestron-template", "json"})


class ArchiveError(Exception):
    """Raised when an archive or one of its entries cannot be read."""


@dataclass(frozen=True)
class ProjectCandidate:
    """A project or template file detected inside an archive.

    Attributes:
        path: Archive path of the file.
        name: The ``name`` stored in the file, or the file name.
        kind: ``"project"`` for ``.crestron`` files, otherwise ``"template"``.
        page_count: Number of pages.
        element_count: Total number of elements over all pages.
    """

    path: str
    name: str
    kind: str
    page_count: int
    element_count: int


class Archive:
    """An opened ZIP archive.

    Use as a context manager, or call :meth:`close` when done.
    """

    def __init__(self, path: Path, zip_file: zipfile.ZipFile) -> None:
        self.path = path
        self._zip = zip_file

    @property
    def stem(self) -> str:
        """Archive file name without the ``.zip`` suffix."""
        return self.path.name.removesuffix(".zip")

    def raw_entries(self) -> list[RawEntry]:
        """Enumerate file entries in archive order; directories are skipped."""
        entries: list[RawEntry] = []
        for info in self._zip.infolist():
            if info.is_dir():
                continue
            entries.append(RawEntry.from_path(info.filename, size_bytes=info.file_size))
        _logger.debug("Enumerated %d file entries in %s", len(entries), self.path)
        return entries

    async def read_bytes(self, path: str) -> bytes:
        """Decompress one entry.

        Raises:
            ArchiveError: If the entry is missing or cannot be decompressed.
        """
        try:
            return self._zip.read(path)
        except KeyError:
            raise ArchiveError(f"No entry '{path}' in archive {self.path}") from None
        except (zipfile.BadZipFile, zlib.error, OSError, RuntimeError, EOFError) as exc:
            raise ArchiveError(f"Cannot decompress '{path}': {exc}") from exc

    async def read_text(self, path: str) -> str:
        """Decompress one entry and decode it as UTF-8.

        Raises:
            ArchiveError: If the entry cannot be read or is not valid UTF-8.
        """
        data = await self.read_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ArchiveError(f"'{path}' is not a UTF-8 text file: {exc}") from exc

    @property
    def reader(self) -> FileReader:
        """The text reader to hand to the merge engine."""
        return self.read_text

    def close(self) -> None:
        """Release the underlying file."""
        self._zip.close()

    def __enter__(self) -> Archive:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_archive(path: Path) -> Archive:
    """Open a ZIP archive for classification and import.

    Raises:
        ArchiveError: If the file does not exist or is not a ZIP archive.
    """
    try:
        zip_file = zipfile.ZipFile(path)
    except FileNotFoundError:
        raise ArchiveError(f"Archive not found: {path}") from None
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveError(f"Cannot open archive {path}: {exc}") from exc
    return Archive(path, zip_file)


async def read_file_text(path: str) -> str:
    """Read an already-available loose file as UTF-8 text.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid UTF-8.
    """
    return Path(path).read_text(encoding="utf-8")


async def detect_project_files(archive: Archive, entries: list[ArchiveEntry]) -> list[ProjectCandidate]:
    """Find project and template files among *entries*.

    A candidate is a ``.crestron``, ``.crestron-template`` or ``.json`` entry
    whose JSON content holds a ``pages`` list. Unreadable or invalid files are
    skipped.
    """
    candidates: list[ProjectCandidate] = []
    for entry in entries:
        if entry.extension not in PROJECT_FILE_EXTENSIONS:
            continue
        try:
            parsed = json.loads(await archive.read_text(entry.path))
        except (ArchiveError, ValueError) as exc:
            _logger.debug("Skipping %s while detecting project files: %s", entry.path, exc)
            continue
        if not isinstance(parsed, dict) or not isinstance(parsed.get("pages"), list):
            continue
        pages = parsed["pages"]
        candidates.append(
            ProjectCandidate(
                path=entry.path,
                name=parsed.get("name") or entry.name,
                kind="project" if entry.extension == "crestron" else "template",
                page_count=len(pages),
                element_count=sum(page_element_count(page) for page in pages),
            )
        )
    return candidates


def page_element_count(page: object) -> int:
    """Number of elements on a page record; 0 for malformed pages."""
    if isinstance(page, dict) and isinstance(page.get("elements"), list):
        return len(page["elements"])
    return 0


def format_size(size_bytes: int) -> str:
    """Format a byte count for display (B, KB, MB)."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


# ################
# Implementation
# ################

_logger = get_logger("archive")
