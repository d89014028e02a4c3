"""Deletion of discovered node_modules folders."""

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Callable

from nmclean.models import DeleteReport, DeleteResult

logger = logging.getLogger(__name__)


def _skip_missing(function, path, error) -> None:
    """rmtree error hook: skip entries that vanished, re-raise anything else."""
    if isinstance(error, tuple):
        # onerror passes sys.exc_info()
        error = error[1]
    if isinstance(error, FileNotFoundError):
        logger.debug("Already gone: %s", path)
        return
    raise error


def delete_path(path: Path) -> str | None:
    """
    Recursively and forcefully remove a directory.

    Entries that disappear while removal is in progress, including the
    directory itself, are treated as already removed.

    Args:
        path: Directory to delete

    Returns:
        Error message, or None on success
    """
    try:
        if sys.version_info >= (3, 12):
            shutil.rmtree(path, onexc=_skip_missing)
        else:
            shutil.rmtree(path, onerror=_skip_missing)
    except PermissionError as e:
        return f"Permission denied: {e}"
    except OSError as e:
        return f"OS error: {e}"

    if os.path.lexists(path):
        return f"OS error: {path} still exists after removal"

    return None


def delete_matches(
    paths: list[Path],
    progress_callback: Callable[[DeleteResult], None] | None = None,
) -> DeleteReport:
    """
    Delete every match, continuing past individual failures.

    Args:
        paths: Discovered node_modules folders
        progress_callback: Optional callback(result) invoked after each attempt

    Returns:
        DeleteReport with one result per attempted path
    """
    results = []

    for path in paths:
        error = delete_path(path)
        if error:
            logger.debug("Failed to delete %s: %s", path, error)

        result = DeleteResult(path=str(path), success=error is None, error=error)
        results.append(result)

        if progress_callback:
            progress_callback(result)

    return DeleteReport(results=results)
