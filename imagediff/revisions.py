from __future__ import annotations

import logging
from pathlib import Path

import pygit2
from pygit2.enums import RepositoryOpenFlag

from imagediff.errors import RepositoryOpenError, RevisionNotFound


logger = logging.getLogger(__name__)


def open_repository(path: Path | str) -> pygit2.Repository:
    """Open the repository rooted exactly at ``path``; parent directories are not searched."""
    try:
        return pygit2.Repository(str(path), flags=RepositoryOpenFlag.NO_SEARCH)
    except (pygit2.GitError, KeyError, ValueError) as exc:
        raise RepositoryOpenError(path) from exc


def resolve_tree(repo: pygit2.Repository, revision: str, *, label: str) -> pygit2.Tree:
    """Resolve a branch, tag or (abbreviated) commit id and peel it to its tree."""
    try:
        obj = repo.revparse_single(revision)
    except (KeyError, ValueError, pygit2.GitError) as exc:
        raise RevisionNotFound(revision, label=label) from exc
    logger.debug("%s_rev = %s", label, obj.id)

    try:
        return obj.peel(pygit2.Tree)
    except (KeyError, ValueError, pygit2.GitError) as exc:
        raise RevisionNotFound(
            revision, label=label, reason=f"{obj.id} does not point to a tree"
        ) from exc


def resolve_trees(
    repo: pygit2.Repository, old_rev: str, new_rev: str
) -> tuple[pygit2.Tree, pygit2.Tree]:
    return (
        resolve_tree(repo, old_rev, label="old"),
        resolve_tree(repo, new_rev, label="new"),
    )
