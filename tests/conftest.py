"""Shared fixtures."""

import pytest

DEEP_LEVELS = 1100


@pytest.fixture
def deep_tree(tmp_path):
    """A node_modules folder nested deeper than the interpreter's recursion limit."""
    root = tmp_path / "deep"
    root.mkdir()
    levels = [root]
    for _ in range(DEEP_LEVELS):
        levels.append(levels[-1] / "d")
        levels[-1].mkdir()

    node_modules = levels[-1] / "node_modules"
    node_modules.mkdir()
    (node_modules / "index.js").write_bytes(b"x" * 10)

    yield root, node_modules

    # Remove bottom-up; recursive removal of this tree may itself hit the limit
    if node_modules.exists():
        (node_modules / "index.js").unlink()
        node_modules.rmdir()
    for level in reversed(levels):
        level.rmdir()
