"""Console reporting for validation runs."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from catalog_validator.models import RunResult
from catalog_validator.utils import (
    FAIL_MARKER,
    PASS_MARKER,
    SCAN_MARKER,
    print_error,
    print_line,
    print_success,
    print_warning,
)


def summary_line(result: RunResult) -> str:
    """``Summary: <passed>/<total> passed`` plus the failure count, if any."""
    line = f"Summary: {result.passed}/{result.total} passed"
    if result.failed:
        line += f", {result.failed} failed"
    return line


def report_run(result: RunResult, target: Console | None = None) -> int:
    """Print one line per item followed by the summary.

    Returns:
        The process exit code for *result*.
    """
    print_line(f"{SCAN_MARKER} Validating {result.total} {result.label}...", target=target)
    if not result.items:
        print_warning(f"No {result.label} found in {result.root}", target)

    for item in result.items:
        if item.passed:
            print_line(f"{PASS_MARKER} {item.message}", target=target)
        else:
            print_line(f"{FAIL_MARKER} {item.message}", "red", target)

    line = summary_line(result)
    if result.all_passed:
        print_success(f"{PASS_MARKER} {line}", target)
    else:
        print_error(f"{FAIL_MARKER} {line}", target)
    return result.exit_code


def report_root_not_found(label: str, root: Path, target: Console | None = None) -> int:
    """Print the single line emitted when a catalog root is missing."""
    print_error(f"{FAIL_MARKER} {label} directory not found: {root}", target)
    return 1
