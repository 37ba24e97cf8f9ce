"""Heuristic import extraction for gofmt-formatted Go source.

The scanner never parses Go. It relies on the canonical layout produced by
gofmt: imports sit near the top of a file, either as single ``import "path"``
lines or inside an ``import ( ... )`` block with one path per line. Scanning
stops once enough uninformative lines have been seen, so large files are not
read past their import section.
"""

from __future__ import annotations

import re
from typing import List

from .errors import ImportReadFailed, MalformedImportLine
from .lines import LineScanner
from .logging import get_logger

DEFAULT_STOP_AFTER = 5

_SINGLE_IMPORT = re.compile(r"\bimport\s+(?:[\w.]+\s+)?\"")
_BLOCK_IMPORT = re.compile(r"\bimport\s*\(")
_COMMENT_TOKEN = "//"

_LOGGER = get_logger("imports")


def extract_imports(
    scanner: LineScanner,
    *,
    path: str = "<input>",
    stop_after: int = DEFAULT_STOP_AFTER,
) -> List[str]:
    """Return import paths declared in the remaining lines of ``scanner``.

    Extraction ends successfully at end of input or once ``stop_after``
    uninformative lines (blank, or content that is not an import) have been
    read. Import lines never count towards the limit and the counter is not
    reset by them.
    """
    imports: List[str] = []
    uninformative = 0

    while True:
        line = _read(scanner, path)
        if line is None:
            _LOGGER.debug("%s: end of input after line %d", path, scanner.line_number)
            return imports

        if not line.strip():
            uninformative += 1
        else:
            single = _SINGLE_IMPORT.search(line)
            if single is not None:
                imports.append(_quoted_path(line, single.end() - 1, path))
            elif _BLOCK_IMPORT.search(line):
                finished = _read_block(scanner, path, imports)
                if not finished:
                    _LOGGER.debug("%s: end of input inside import block", path)
                    return imports
            else:
                uninformative += 1

        if uninformative >= stop_after:
            _LOGGER.debug(
                "%s: stopped after %d uninformative lines (line %d)",
                path,
                uninformative,
                scanner.line_number,
            )
            return imports


def _read_block(scanner: LineScanner, path: str, imports: List[str]) -> bool:
    """Consume an import block, returning False if input ends before ``)``."""
    while True:
        line = _read(scanner, path)
        if line is None:
            return False
        stripped = line.strip()
        if stripped == ")":
            return True
        if not stripped:
            continue

        fields = _strip_comment(line).split()
        if not fields:
            continue

        token = fields[1] if len(fields) == 2 else fields[0]
        imports.append(_unquote(token, line, path))


def _strip_comment(line: str) -> str:
    """Drop a trailing `//` comment that starts outside a quoted path."""
    in_quote = False
    for index, char in enumerate(line):
        if char == '"':
            in_quote = not in_quote
        elif not in_quote and line.startswith(_COMMENT_TOKEN, index):
            return line[:index]
    return line


def _read(scanner: LineScanner, path: str) -> str | None:
    try:
        return scanner.read_line()
    except (OSError, UnicodeDecodeError) as exc:
        raise ImportReadFailed(
            f"error reading imports from {path}: {exc}", path=path
        ) from exc


def _quoted_path(line: str, start: int, path: str) -> str:
    end = line.find('"', start + 1)
    if end == -1:
        raise MalformedImportLine(
            f"malformed import line in {path}: {line.strip()!r}", path=path
        )
    value = line[start + 1 : end]
    if not value:
        raise MalformedImportLine(
            f"empty import path in {path}: {line.strip()!r}", path=path
        )
    return value


def _unquote(token: str, line: str, path: str) -> str:
    if len(token) < 3 or not (token.startswith('"') and token.endswith('"')):
        raise MalformedImportLine(
            f"malformed import line in {path}: {line.strip()!r}", path=path
        )
    return token[1:-1]


__all__ = ["DEFAULT_STOP_AFTER", "extract_imports"]
