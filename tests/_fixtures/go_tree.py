"""Helper utilities for constructing temporary Go source trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class GoTreeBuilder:
    """Utility for writing Go files into a throwaway tree."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "tree"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries relative to the tree root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def dir(self, relative: str = "") -> str:
        """Return the string path of a directory inside the tree."""
        path = self.root / relative if relative else self.root
        path.mkdir(parents=True, exist_ok=True)
        return str(path)


__all__ = ["GoTreeBuilder"]
