"""Error kinds raised while scanning source directories."""

from __future__ import annotations

from pathlib import Path


class ScanError(RuntimeError):
    """Base class for failures scoped to a single file or directory."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class DirectoryUnreadable(ScanError):
    """Raised when a requested directory cannot be listed."""


class NoSourceFiles(ScanError):
    """Raised when a directory holds no recognised source files."""


class FileOpenFailed(ScanError):
    """Raised when a source file cannot be opened or read."""


class MalformedDeclaration(ScanError):
    """Raised when a file does not start with a `package <name>` line."""


class NoPackageFound(ScanError):
    """Raised when package resolution receives no files."""


class ConflictingPackages(ScanError):
    """Raised when files in one directory declare different packages."""


class ImportReadFailed(ScanError):
    """Raised when the line source fails while imports are being read."""


class MalformedImportLine(ScanError):
    """Raised when an import line cannot be split into a quoted path."""


__all__ = [
    "ScanError",
    "DirectoryUnreadable",
    "NoSourceFiles",
    "FileOpenFailed",
    "MalformedDeclaration",
    "NoPackageFound",
    "ConflictingPackages",
    "ImportReadFailed",
    "MalformedImportLine",
]
