"""Tests for recursive node_modules discovery."""

import os
from pathlib import Path
from unittest.mock import patch

from nmclean.recursive_scanner import find_matching_directories, find_node_modules
from nmclean.scanner import list_entries


class TestFindMatchingDirectories:
    def test_finds_matching_directory(self, tmp_path):
        """Find a single matching directory."""
        node_modules = tmp_path / "project" / "node_modules"
        node_modules.mkdir(parents=True)
        (node_modules / "package.json").write_text("{}")

        results = list(find_matching_directories(tmp_path, "node_modules"))
        assert results == [node_modules]

    def test_finds_multiple_projects(self, tmp_path):
        for project in ["project1", "project2", "project3"]:
            (tmp_path / project / "node_modules").mkdir(parents=True)

        results = list(find_matching_directories(tmp_path))
        assert len(results) == 3
        assert {p.parent.name for p in results} == {"project1", "project2", "project3"}

    def test_skips_nested_node_modules(self, tmp_path):
        """Don't descend into a match."""
        outer = tmp_path / "project" / "node_modules"
        inner = outer / "some-package" / "node_modules"
        inner.mkdir(parents=True)

        results = list(find_matching_directories(tmp_path))
        assert results == [outer]

    def test_root_itself_is_not_a_match(self, tmp_path):
        root = tmp_path / "node_modules"
        (root / "pkg").mkdir(parents=True)

        assert list(find_matching_directories(root)) == []

    def test_no_depth_limit(self, tmp_path):
        deep = tmp_path
        for i in range(40):
            deep = deep / f"level{i}"
        node_modules = deep / "node_modules"
        node_modules.mkdir(parents=True)

        assert list(find_matching_directories(tmp_path)) == [node_modules]

    def test_includes_hidden_directories(self, tmp_path):
        node_modules = tmp_path / ".cache" / "node_modules"
        node_modules.mkdir(parents=True)

        assert list(find_matching_directories(tmp_path)) == [node_modules]

    def test_ignores_files_named_node_modules(self, tmp_path):
        (tmp_path / "node_modules").write_text("not a directory")

        assert list(find_matching_directories(tmp_path)) == []

    def test_ignores_symlinked_directories(self, tmp_path):
        real = tmp_path / "real" / "node_modules"
        real.mkdir(parents=True)
        os.symlink(tmp_path / "real", tmp_path / "alias")
        os.symlink(real, tmp_path / "real" / "linked_modules")

        assert list(find_matching_directories(tmp_path)) == [real]

    def test_handles_permission_error(self, tmp_path):
        (tmp_path / "accessible" / "node_modules").mkdir(parents=True)

        with patch("os.scandir", side_effect=PermissionError("Access denied")):
            results = list(find_matching_directories(tmp_path))

        assert results == []

    def test_unlistable_directory_does_not_stop_siblings(self, tmp_path):
        blocked = tmp_path / "blocked"
        (blocked / "node_modules").mkdir(parents=True)
        visible = tmp_path / "visible" / "node_modules"
        visible.mkdir(parents=True)

        real_scandir = os.scandir

        def scandir(path):
            if Path(path) == blocked:
                raise PermissionError("Access denied")
            return real_scandir(path)

        with patch("os.scandir", new=scandir):
            results = list(find_matching_directories(tmp_path))

        assert results == [visible]

    def test_custom_pattern(self, tmp_path):
        venv = tmp_path / "project" / ".venv"
        venv.mkdir(parents=True)

        assert list(find_matching_directories(tmp_path, ".venv")) == [venv]


class TestFindNodeModules:
    def test_deeper_than_recursion_limit(self, deep_tree):
        root, node_modules = deep_tree

        assert find_node_modules(root) == [node_modules]

    def test_pre_order_traversal(self, tmp_path):
        """Matches come out parent first, siblings in listing order."""
        for rel in ["a/x/node_modules", "a/node_modules/y", "b/node_modules", "c/d/e/node_modules"]:
            (tmp_path / rel).mkdir(parents=True)

        def sorted_entries(path):
            entries, error = list_entries(path)
            return sorted(entries, key=lambda e: e.name), error

        with patch("nmclean.recursive_scanner.list_entries", new=sorted_entries):
            results = find_node_modules(tmp_path)

        assert results == [
            tmp_path / "a" / "node_modules",
            tmp_path / "a" / "x" / "node_modules",
            tmp_path / "b" / "node_modules",
            tmp_path / "c" / "d" / "e" / "node_modules",
        ]

    def test_missing_root_is_empty(self, tmp_path):
        assert find_node_modules(tmp_path / "missing") == []

    def test_no_match_nested_in_another(self, tmp_path):
        for rel in [
            "a/node_modules/x/node_modules",
            "a/b/node_modules",
            "c/node_modules/node_modules",
            "d/e/f/node_modules/g",
        ]:
            (tmp_path / rel).mkdir(parents=True)

        results = find_node_modules(tmp_path)
        assert len(results) == 4
        for match in results:
            for other in results:
                if other != match:
                    assert match not in other.parents

    def test_finds_matches_at_different_depths(self, tmp_path):
        (tmp_path / "only" / "node_modules").mkdir(parents=True)
        (tmp_path / "only" / "deeper" / "node_modules").mkdir(parents=True)

        results = find_node_modules(tmp_path)
        assert set(results) == {
            tmp_path / "only" / "node_modules",
            tmp_path / "only" / "deeper" / "node_modules",
        }

    def test_relative_root_gives_relative_paths(self, tmp_path, monkeypatch):
        (tmp_path / "pkg" / "node_modules").mkdir(parents=True)
        monkeypatch.chdir(tmp_path)

        assert find_node_modules(Path(".")) == [Path("pkg") / "node_modules"]
