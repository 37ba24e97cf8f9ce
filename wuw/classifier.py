"""Classification of import paths as standard-distribution or third-party."""

from __future__ import annotations

import subprocess
from typing import Callable, Dict, Iterable, List, NamedTuple, Protocol, Sequence

from .logging import get_logger

DEFAULT_STD_PREFIXES: Sequence[str] = ("golang.org/x/",)

_LOGGER = get_logger("classifier")


class LookupResult(NamedTuple):
    """Answer from a standard-package lookup."""

    standard: bool
    resolved: bool


UNRESOLVED = LookupResult(standard=False, resolved=False)


class StandardLookup(Protocol):
    def __call__(self, path: str) -> LookupResult:
        ...


class ToolchainLookup:
    """Asks the local Go toolchain whether a path lives in GOROOT."""

    def __init__(
        self,
        go_binary: str = "go",
        runner: Callable[[Sequence[str]], str] | None = None,
    ) -> None:
        self._go_binary = go_binary
        self._runner = runner or self._default_runner
        self._cache: Dict[str, LookupResult] = {}

    def __call__(self, path: str) -> LookupResult:
        cached = self._cache.get(path)
        if cached is not None:
            return cached
        result = self._lookup(path)
        self._cache[path] = result
        return result

    def _lookup(self, path: str) -> LookupResult:
        args = [self._go_binary, "list", "-find", "-f", "{{.Goroot}}", path]
        try:
            output = self._runner(args)
        except (OSError, subprocess.CalledProcessError) as exc:
            _LOGGER.debug("Toolchain lookup failed for %s: %s", path, exc)
            return UNRESOLVED

        answer = output.strip().lower()
        if answer == "true":
            return LookupResult(standard=True, resolved=True)
        if answer == "false":
            return LookupResult(standard=False, resolved=True)
        _LOGGER.debug("Unexpected toolchain output for %s: %r", path, output)
        return UNRESOLVED

    @staticmethod
    def _default_runner(args: Sequence[str]) -> str:
        completed = subprocess.run(
            list(args),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


class PathHeuristicLookup:
    """Treats paths whose first element has no dot as standard library."""

    def __call__(self, path: str) -> LookupResult:
        first = path.split("/", 1)[0]
        return LookupResult(standard="." not in first, resolved=True)


class DependencyClassifier:
    """Filters import paths, optionally dropping standard-distribution ones."""

    def __init__(
        self,
        *,
        exclude_standard: bool = False,
        lookup: StandardLookup | None = None,
        std_prefixes: Sequence[str] = DEFAULT_STD_PREFIXES,
    ) -> None:
        self.exclude_standard = exclude_standard
        self._lookup = lookup or ToolchainLookup()
        self._std_prefixes = tuple(std_prefixes)

    def is_standard(self, path: str) -> bool:
        if path.startswith(self._std_prefixes):
            return True
        result = self._lookup(path)
        # An unresolved lookup keeps the path.
        return result.resolved and result.standard

    def include(self, path: str) -> bool:
        if not self.exclude_standard:
            return True
        return not self.is_standard(path)

    def filter(self, paths: Iterable[str]) -> List[str]:
        """Return the paths to report, preserving input order."""
        return [path for path in paths if self.include(path)]


LOOKUP_NAMES: Sequence[str] = ("toolchain", "heuristic")


def build_lookup(name: str, *, go_binary: str = "go") -> StandardLookup:
    """Instantiate the named lookup strategy."""
    key = name.lower()
    if key == "toolchain":
        return ToolchainLookup(go_binary=go_binary)
    if key == "heuristic":
        return PathHeuristicLookup()
    raise ValueError(f"Unknown standard lookup: {name}")


__all__ = [
    "DEFAULT_STD_PREFIXES",
    "DependencyClassifier",
    "LOOKUP_NAMES",
    "LookupResult",
    "PathHeuristicLookup",
    "StandardLookup",
    "ToolchainLookup",
    "build_lookup",
]
