"""Shared fixtures: throwaway git repositories built with pygit2, and logger state."""
from __future__ import annotations

import logging
from pathlib import Path

import pygit2
import pytest


class GitRepoBuilder:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.repo = pygit2.init_repository(str(root))
        self._signature = pygit2.Signature("imagediff tests", "tests@example.com")

    def write(self, relative_path: str, content: str) -> Path:
        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def commit(
        self,
        message: str,
        files: dict[str, str | None] | None = None,
    ) -> str:
        """Write (or delete, when the value is None) files, then commit everything."""
        index = self.repo.index
        for relative_path, content in (files or {}).items():
            if content is None:
                (self.root / relative_path).unlink()
                index.remove(relative_path)
            else:
                self.write(relative_path, content)
                index.add(relative_path)
        index.write()
        tree_id = index.write_tree()
        parents = [] if self.repo.head_is_unborn else [self.repo.head.target]
        oid = self.repo.create_commit(
            "HEAD", self._signature, self._signature, message, tree_id, parents
        )
        return str(oid)

    def tag(self, name: str, commit_id: str) -> None:
        self.repo.create_reference(f"refs/tags/{name}", pygit2.Oid(hex=commit_id))


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepoBuilder:
    root = tmp_path / "repo"
    root.mkdir()
    return GitRepoBuilder(root)


@pytest.fixture
def imagediff_logger():
    """Yield the package logger and put its handlers and level back afterwards."""
    logger = logging.getLogger("imagediff")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    handlers, level, propagate = saved
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
