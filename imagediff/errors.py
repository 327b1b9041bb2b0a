from __future__ import annotations

from pathlib import Path


class ImageDiffError(RuntimeError):
    """Base class for every fatal condition raised while discovering build specs."""


class RepositoryOpenError(ImageDiffError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Not a readable git repository: {path}")
        self.path = path


class RevisionNotFound(ImageDiffError):
    def __init__(self, revision: str, *, label: str, reason: str = "not found") -> None:
        super().__init__(f"Failed to find {label} revision {revision!r}: {reason}")
        self.revision = revision
        self.label = label


class DiffComputationError(ImageDiffError):
    pass


class MissingParentError(ImageDiffError):
    def __init__(self, relative_path: str) -> None:
        super().__init__(f"Changed path has no parent directory: {relative_path!r}")
        self.relative_path = relative_path


class PathResolutionError(ImageDiffError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to canonicalize directory (does it exist?): {path}")
        self.path = path


class MetadataReadError(ImageDiffError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to open {path}: {reason}")
        self.path = path


class MetadataParseError(ImageDiffError):
    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Invalid image metadata in {path}: {reason}")
        self.path = path
