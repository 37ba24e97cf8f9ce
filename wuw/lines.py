"""Line-at-a-time reader used by the package and import scanners."""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO


class LineScanner:
    """Yields lines from a text stream, reporting clean end of input as ``None``.

    Read failures (``OSError``, ``UnicodeDecodeError``) are not caught here so
    callers can map them onto the error kind that fits their step.
    """

    def __init__(self, stream: TextIO | Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(stream)
        self.line_number = 0

    def read_line(self) -> str | None:
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        self.line_number += 1
        return line

    @classmethod
    def from_text(cls, text: str) -> "LineScanner":
        return cls(text.splitlines(keepends=True))
