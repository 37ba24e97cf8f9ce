"""Discovery of source files directly inside a directory."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .errors import DirectoryUnreadable, NoSourceFiles
from .models import Directory, SourceFile


def list_source_files(directory: str | Path, suffix: str = ".go") -> Directory:
    """Return the non-hidden files in ``directory`` ending with ``suffix``.

    Sub-directories are not descended into. Entries are sorted by name.
    """
    root = Path(directory)
    try:
        entries = sorted(root.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise DirectoryUnreadable(
            f"error reading directory {directory}: {exc.strerror or exc}", path=directory
        ) from exc

    files: List[SourceFile] = []
    for entry in entries:
        if entry.name.startswith("."):
            continue  # hidden file
        if entry.is_dir():
            continue
        if entry.suffix == suffix:
            files.append(SourceFile(entry))

    if not files:
        raise NoSourceFiles(f"no {suffix} files in {directory}", path=directory)
    return Directory(path=root, files=tuple(files))


__all__ = ["list_source_files"]
