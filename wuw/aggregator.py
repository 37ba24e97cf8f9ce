"""Per-directory orchestration of discovery, resolution, extraction and classification."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from .classifier import DependencyClassifier
from .discovery import list_source_files
from .errors import FileOpenFailed, ScanError
from .imports import DEFAULT_STOP_AFTER, extract_imports
from .lines import LineScanner
from .logging import get_logger
from .models import Directory, Package, ScanReport
from .packages import resolve_package_name


class DirectoryAggregator:
    """Produces one Package per requested directory.

    Directories are processed in order. A failure while scanning one directory
    is recorded on the report and scanning continues with the next.
    """

    def __init__(
        self,
        classifier: DependencyClassifier | None = None,
        *,
        source_suffix: str = ".go",
        stop_after: int = DEFAULT_STOP_AFTER,
    ) -> None:
        self.classifier = classifier or DependencyClassifier()
        self.source_suffix = source_suffix
        self.stop_after = stop_after
        self.logger = get_logger("aggregator")

    def scan(self, directories: Iterable[str]) -> ScanReport:
        report = ScanReport()
        for directory in directories:
            try:
                package = self.scan_directory(directory)
            except ScanError as exc:
                self.logger.debug("Skipping %s: %s", directory, exc)
                report.errors.append(exc)
                continue
            report.packages.append(package)

        self.logger.debug(
            "Scanned %d packages with %d errors", len(report.packages), len(report.errors)
        )
        return report

    def scan_directory(self, directory: str) -> Package:
        """Scan a single directory, raising ScanError on the first failure."""
        listing = list_source_files(directory, self.source_suffix)
        self.logger.debug("Found %d source files in %s", len(listing.files), directory)

        with ExitStack() as stack:
            opened = self._open_files(listing, stack)
            name = resolve_package_name(directory, opened)

            imports: Dict[str, None] = {}
            for path, scanner in opened:
                for import_path in extract_imports(
                    scanner, path=str(path), stop_after=self.stop_after
                ):
                    imports.setdefault(import_path, None)

        dependencies = self.classifier.filter(imports)
        return Package(directory=directory, name=name, dependencies=tuple(dependencies))

    def _open_files(
        self, listing: Directory, stack: ExitStack
    ) -> List[Tuple[Path, LineScanner]]:
        opened: List[Tuple[Path, LineScanner]] = []
        for source in listing.files:
            try:
                scanner = stack.enter_context(source.open())
            except OSError as exc:
                raise FileOpenFailed(
                    f"error opening {source.path}: {exc.strerror or exc}", path=source.path
                ) from exc
            opened.append((source.path, scanner))
        return opened


__all__ = ["DirectoryAggregator"]
