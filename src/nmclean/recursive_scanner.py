"""Recursive discovery of node_modules folders.

The walk is depth-first and pre-order. A matched directory is collected but
never entered, so nested dependency trees (``node_modules/pkg/node_modules``)
are not reported on their own.
"""

import logging
from pathlib import Path
from typing import Generator

from nmclean.scanner import is_directory, list_entries

logger = logging.getLogger(__name__)

NODE_MODULES = "node_modules"


def find_matching_directories(
    root: Path,
    pattern: str = NODE_MODULES,
) -> Generator[Path, None, None]:
    """
    Find directories named exactly ``pattern`` beneath ``root``.

    Uses os.scandir; entries are visited in the order the filesystem lists
    them, without sorting.

    Args:
        root: Root directory to start searching from
        pattern: Directory name to match

    Yields:
        Paths to matching directories, parents before children
    """
    # (path, is_match) pairs; children are pushed in reverse so they pop in listing order
    pending: list[tuple[Path, bool]] = [(Path(root), False)]

    while pending:
        path, is_match = pending.pop()
        if is_match:
            yield path
            continue

        entries, _ = list_entries(path)
        children = []
        for entry in entries:
            # Skip non-directories and symlinks
            if not is_directory(entry):
                continue
            children.append((path / entry.name, entry.name == pattern))

        pending.extend(reversed(children))


def find_node_modules(root: Path) -> list[Path]:
    """Collect every node_modules folder under ``root`` in traversal order."""
    matches = list(find_matching_directories(root, NODE_MODULES))
    logger.debug("Discovered %d %s folder(s) under %s", len(matches), NODE_MODULES, root)
    return matches
