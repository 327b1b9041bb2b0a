from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from imagediff.candidates import extract_candidate_directories
from imagediff.metadata import (
    MetadataReader,
    assemble_build_spec,
    load_image_metadata,
    read_metadata_file,
)
from imagediff.models import BuildSpec
from imagediff.revisions import open_repository, resolve_trees
from imagediff.tree_diff import diff_trees


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DiscoveryResult:
    build_specs: list[BuildSpec]
    delta_count: int
    candidate_count: int


def collect_build_specs(
    candidates: set[Path],
    *,
    read_file: MetadataReader = read_metadata_file,
) -> list[BuildSpec]:
    """Load metadata for each directory and return specs sorted by path."""
    specs: list[BuildSpec] = []
    for directory in sorted(candidates, key=str):
        metadata = load_image_metadata(directory, read_file=read_file)
        if metadata is None:
            continue
        specs.append(assemble_build_spec(directory, metadata))
    return specs


def discover_build_specs(
    repo_path: Path,
    old_rev: str,
    new_rev: str,
    *,
    read_file: MetadataReader = read_metadata_file,
) -> DiscoveryResult:
    repo = open_repository(repo_path)
    old_tree, new_tree = resolve_trees(repo, old_rev, new_rev)
    deltas = diff_trees(repo, old_tree, new_tree)
    candidates = extract_candidate_directories(repo_path, deltas)
    build_specs = collect_build_specs(candidates, read_file=read_file)

    logger.info(
        "%d delta(s), %d candidate directories, %d build spec(s)",
        len(deltas),
        len(candidates),
        len(build_specs),
    )
    return DiscoveryResult(
        build_specs=build_specs,
        delta_count=len(deltas),
        candidate_count=len(candidates),
    )
