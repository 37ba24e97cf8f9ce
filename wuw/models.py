"""Data models shared across the scanner components."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple

from .errors import ScanError
from .lines import LineScanner


@dataclass(frozen=True)
class SourceFile:
    """A single source file inside a scanned directory."""

    path: Path

    @contextmanager
    def open(self) -> Iterator[LineScanner]:
        """Yield a line scanner over the file, closing it on exit."""
        with self.path.open("r", encoding="utf-8") as handle:
            yield LineScanner(handle)


@dataclass(frozen=True)
class Directory:
    """A directory and the source files found directly inside it."""

    path: Path
    files: Tuple[SourceFile, ...]


@dataclass(frozen=True)
class Package:
    """Resolved package name and imports for one directory."""

    directory: str
    name: str
    dependencies: Tuple[str, ...]


@dataclass
class ScanReport:
    """Outcome of scanning a batch of directories."""

    packages: List[Package] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
