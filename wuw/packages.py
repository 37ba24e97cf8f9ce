"""Package declaration resolution for a directory of source files."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Set, Tuple

from .errors import ConflictingPackages, FileOpenFailed, MalformedDeclaration, NoPackageFound
from .lines import LineScanner

_PACKAGE_KEYWORD = "package"


def parse_package_line(line: str, path: str | Path) -> str:
    """Return the identifier from a ``package <name>`` line."""
    fields = line.split()
    if len(fields) != 2 or fields[0] != _PACKAGE_KEYWORD:
        raise MalformedDeclaration(
            f"malformed package line {line.strip()!r} in file {path}", path=path
        )
    return fields[1]


def read_package_name(scanner: LineScanner, path: str | Path) -> str:
    """Consume leading blank lines and the package declaration from ``scanner``."""
    while True:
        try:
            line = scanner.read_line()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileOpenFailed(f"error reading {path}: {exc}", path=path) from exc
        if line is None:
            raise MalformedDeclaration(f"no package line in file {path}", path=path)
        if line.strip():
            return parse_package_line(line, path)


def resolve_package_name(
    directory: str | Path, files: Sequence[Tuple[str | Path, LineScanner]]
) -> str:
    """Return the package name shared by every file in ``directory``.

    Each entry pairs a file path with an open scanner positioned at the start
    of the file. The package line is consumed from every scanner, leaving it
    ready for import extraction.
    """
    seen: Set[str] = set()
    for path, scanner in files:
        seen.add(read_package_name(scanner, path))

    if not seen:
        raise NoPackageFound(f"could not find a package in dir {directory}", path=directory)
    if len(seen) != 1:
        names = ", ".join(sorted(seen))
        raise ConflictingPackages(
            f"more than one package declaration in folder {directory}: {names}",
            path=directory,
        )
    return next(iter(seen))


__all__ = ["parse_package_line", "read_package_name", "resolve_package_name"]
