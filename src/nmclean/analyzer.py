"""Read-only reports over discovered node_modules folders."""

from pathlib import Path
from typing import Callable

from nmclean.models import CountReport, CountResult, SizeReport, SizeResult
from nmclean.scanner import count_subdirectories, get_directory_size


def measure_matches(
    paths: list[Path],
    progress_callback: Callable[[SizeResult], None] | None = None,
) -> SizeReport:
    """
    Measure the disk usage of each match.

    Args:
        paths: Discovered node_modules folders
        progress_callback: Optional callback(result) invoked after each folder

    Returns:
        SizeReport with one result per path, in order
    """
    results = []

    for path in paths:
        result = SizeResult(path=str(path), size_bytes=get_directory_size(path))
        results.append(result)

        if progress_callback:
            progress_callback(result)

    return SizeReport(results=results)


def count_matches(
    paths: list[Path],
    progress_callback: Callable[[CountResult], None] | None = None,
) -> CountReport:
    """
    Count the immediate subfolders of each match.

    A folder that cannot be listed is reported with a count of 0.

    Args:
        paths: Discovered node_modules folders
        progress_callback: Optional callback(result) invoked after each folder

    Returns:
        CountReport with one result per path, in order
    """
    results = []

    for path in paths:
        count, error = count_subdirectories(path)
        result = CountResult(path=str(path), subfolder_count=count, error=error)
        results.append(result)

        if progress_callback:
            progress_callback(result)

    return CountReport(results=results)
