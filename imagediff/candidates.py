from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable

from imagediff.errors import MissingParentError, PathResolutionError
from imagediff.models import Delta


logger = logging.getLogger(__name__)


def _changed_file_path(repo_root: Path, relative_path: str) -> Path:
    normalized = PurePosixPath(relative_path)
    parts = [part for part in normalized.parts if part not in {"/", "."}]
    if not parts:
        raise MissingParentError(relative_path)
    return repo_root.joinpath(*parts)


def candidate_directory(repo_root: Path, delta: Delta) -> Path | None:
    """Return the canonical directory holding the changed file, or None for deletions."""
    if delta.new_path is None:
        return None

    file_path = _changed_file_path(repo_root, delta.new_path)
    parent = file_path.parent
    try:
        resolved = parent.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loop on interpreters before 3.13.
        raise PathResolutionError(parent) from exc

    logger.debug("identified modified path: %s", resolved)
    return resolved


def extract_candidate_directories(repo_root: Path, deltas: Iterable[Delta]) -> set[Path]:
    candidates: set[Path] = set()
    for delta in deltas:
        directory = candidate_directory(repo_root, delta)
        if directory is not None:
            candidates.add(directory)
    return candidates
