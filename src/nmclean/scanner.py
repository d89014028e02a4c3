"""Directory listing and size accumulation for nmclean."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def list_entries(path: Path) -> tuple[list[os.DirEntry], str | None]:
    """
    List a directory without raising.

    This is the single place where listing failures are recovered: an
    unreadable, vanished or non-directory path is reported as empty.

    Args:
        path: Directory to list

    Returns:
        Tuple of (entries, error_message)
    """
    try:
        with os.scandir(path) as entries:
            return list(entries), None
    except PermissionError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return [], f"Permission denied: {e}"
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return [], f"OS error: {e}"


def is_directory(entry: os.DirEntry) -> bool:
    """Whether an entry is a real directory (symlinks are not followed)."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def get_directory_size(path: Path) -> int:
    """
    Calculate the total size of all files beneath a directory.

    Walks with unbounded depth using an explicit stack. Unreadable
    subdirectories and files that cannot be stat'ed contribute zero instead
    of aborting the walk.

    Args:
        path: Directory to measure

    Returns:
        Total size in bytes
    """
    total = 0
    pending = [path]

    while pending:
        entries, _ = list_entries(pending.pop())

        for entry in entries:
            if is_directory(entry):
                pending.append(Path(entry.path))
                continue

            try:
                total += entry.stat().st_size
            except OSError as e:
                # Dangling symlink or file removed mid-scan
                logger.debug("Cannot stat %s: %s", entry.path, e)

    return total


def count_subdirectories(path: Path) -> tuple[int, str | None]:
    """
    Count the immediate subdirectories of a directory.

    Returns:
        Tuple of (subfolder_count, error_message); the count is 0 when the
        directory cannot be listed.
    """
    entries, error = list_entries(path)
    return sum(1 for entry in entries if is_directory(entry)), error
