"""Plain-text rendering of scan results."""

from __future__ import annotations

from typing import List, TextIO

from .models import Package, ScanReport


def format_package(package: Package) -> str:
    line = f"{package.directory} {package.name}:"
    if package.dependencies:
        line += " " + " ".join(package.dependencies)
    return line


def render_packages(report: ScanReport) -> List[str]:
    return [format_package(package) for package in report.packages]


def render_errors(report: ScanReport) -> List[str]:
    if not report.errors:
        return []
    return ["errors:"] + [str(error) for error in report.errors]


def write_report(report: ScanReport, out: TextIO, err: TextIO) -> None:
    """Write package lines to ``out`` and, afterwards, the error list to ``err``."""
    for line in render_packages(report):
        print(line, file=out)
    out.flush()
    for line in render_errors(report):
        print(line, file=err)


__all__ = ["format_package", "render_errors", "render_packages", "write_report"]
