from __future__ import annotations

import logging
import zipfile
import zlib
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .models import LanguageFile

LOGGER = logging.getLogger(__name__)

DEFAULT_LANGUAGE_SUFFIXES = (".lang",)
UTF8_BOM = "\ufeff"


class ArchiveReadError(RuntimeError):
    """Raised when a world archive cannot be opened."""


class NoLanguageFilesError(RuntimeError):
    """Raised when an archive (or file list) holds no `.lang` entries."""

    def __init__(self, message: str = "No language files found in the archive") -> None:
        super().__init__(message)


def is_language_file(name: str, suffixes: Sequence[str] = DEFAULT_LANGUAGE_SUFFIXES) -> bool:
    lowered = name.lower()
    return any(lowered.endswith(suffix.lower()) for suffix in suffixes)


def read_language_files(
    archive_path: Path,
    suffixes: Sequence[str] = DEFAULT_LANGUAGE_SUFFIXES,
    encoding: str = "utf-8",
) -> List[LanguageFile]:
    """Return every `.lang` entry of a `.mcworld`/`.mctemplate` archive in archive order."""
    if not archive_path.exists():
        raise ArchiveReadError(f"World archive not found: {archive_path}")

    try:
        with zipfile.ZipFile(archive_path, "r") as zf:
            files: list[LanguageFile] = []
            for info in zf.infolist():
                if info.is_dir() or not is_language_file(info.filename, suffixes):
                    continue
                content = zf.read(info).decode(encoding, errors="replace")
                files.append(LanguageFile(path=info.filename, content=_strip_bom(content)))
    except zipfile.BadZipFile as exc:
        raise ArchiveReadError(f"Invalid world archive: {archive_path}") from exc
    except (zlib.error, EOFError, RuntimeError, NotImplementedError) as exc:
        # Damaged or truncated deflate data, encrypted entries, unknown compression.
        raise ArchiveReadError(
            f"Unable to read language file from {archive_path}: {exc}"
        ) from exc

    LOGGER.info("Found %d language files in %s", len(files), archive_path)
    return files


def language_files_from_pairs(pairs: Iterable[Tuple[str, str]]) -> List[LanguageFile]:
    """Wrap ``(path, content)`` pairs from another unpacker as LanguageFile values."""
    return [LanguageFile(path=path, content=content) for path, content in pairs]


def select_largest_language_file(files: Sequence[LanguageFile]) -> LanguageFile:
    """Pick the file with the most characters; the first one wins a tie."""
    if not files:
        raise NoLanguageFilesError()
    largest = files[0]
    for candidate in files[1:]:
        if candidate.size > largest.size:
            largest = candidate
    LOGGER.info("Largest language file: %s (%d characters)", largest.path, largest.size)
    return largest


def _strip_bom(content: str) -> str:
    if content.startswith(UTF8_BOM):
        return content[len(UTF8_BOM) :]
    return content
