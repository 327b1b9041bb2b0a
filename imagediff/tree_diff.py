from __future__ import annotations

import logging

import pygit2

from imagediff.errors import DiffComputationError
from imagediff.models import Delta


logger = logging.getLogger(__name__)


def _delta_from_git(git_delta: pygit2.DiffDelta) -> Delta:
    # libgit2 reports the old path on the new side of a deletion as well.
    return Delta(new_path=git_delta.new_file.path or None, status=git_delta.status_char())


def diff_trees(repo: pygit2.Repository, old_tree: pygit2.Tree, new_tree: pygit2.Tree) -> list[Delta]:
    """List file-level changes between two trees.

    No rename detection is requested, so a move shows up as a deletion plus an
    addition. Order follows the diff engine and carries no meaning.
    """
    try:
        diff = repo.diff(old_tree, new_tree)
        deltas = [_delta_from_git(git_delta) for git_delta in diff.deltas]
    except pygit2.GitError as exc:
        raise DiffComputationError(
            f"Failed to diff tree {old_tree.id} against {new_tree.id}: {exc}"
        ) from exc

    logger.debug("diff produced %d delta(s)", len(deltas))
    return deltas
