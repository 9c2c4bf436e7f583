"""Tests for the directory walker."""

import os

import pytest

from adapters.fs_walker import walk_tree
from core.domain.models import EntryType


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "proj"
    (root / "src" / "sub").mkdir(parents=True)
    (root / "vendor").mkdir()
    (root / "src" / "a.c").write_text("a")
    (root / "src" / "sub" / "b.h").write_text("b")
    (root / "vendor" / "v.c").write_text("v")
    (root / "README").write_text("r")
    return root


def collect(root, descend=lambda path, kind: True):
    seen = []

    def callback(path, kind):
        seen.append((os.path.relpath(path, root), kind))
        return descend(path, kind)

    ok = walk_tree(str(root), callback)
    return ok, seen


class TestWalkTree:
    def test_visits_everything_in_name_order(self, tree):
        ok, seen = collect(tree)
        assert ok
        assert seen == [
            ("README", EntryType.FILE),
            ("src", EntryType.DIRECTORY),
            (os.path.join("src", "a.c"), EntryType.FILE),
            (os.path.join("src", "sub"), EntryType.DIRECTORY),
            (os.path.join("src", "sub", "b.h"), EntryType.FILE),
            ("vendor", EntryType.DIRECTORY),
            (os.path.join("vendor", "v.c"), EntryType.FILE),
        ]

    def test_callback_can_prune(self, tree):
        _, seen = collect(tree, descend=lambda path, kind: not path.endswith("vendor"))
        assert (os.path.join("vendor", "v.c"), EntryType.FILE) not in seen
        assert ("vendor", EntryType.DIRECTORY) in seen

    def test_paths_are_joined_onto_root(self, tree):
        paths = []
        walk_tree(str(tree), lambda path, kind: paths.append(path) or True)
        assert os.path.join(str(tree), "src", "a.c") in paths

    def test_file_root_is_not_walked(self, tree):
        calls = []
        assert walk_tree(str(tree / "README"), lambda p, k: calls.append(p) or True) is False
        assert calls == []

    def test_missing_root(self, tmp_path):
        assert walk_tree(str(tmp_path / "missing"), lambda p, k: True) is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_are_reported_not_followed(self, tree):
        os.symlink(tree / "src", tree / "link")
        _, seen = collect(tree)
        assert ("link", EntryType.SYMLINK) in seen
        assert not any(rel.startswith("link" + os.sep) for rel, _ in seen)
