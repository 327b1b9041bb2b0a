"""Loading of per-directory ``image.yaml`` files and assembly of build specs."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import yaml

from imagediff.config import METADATA_FILENAME
from imagediff.errors import MetadataParseError, MetadataReadError
from imagediff.models import BuildSpec, ImageMetadata


logger = logging.getLogger(__name__)

MetadataReader = Callable[[Path], str | None]

_LITERAL_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars such as `42` or `1.10` as written."""


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _LITERAL_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def read_metadata_file(path: Path) -> str | None:
    """Read a metadata file, returning None when it does not exist.

    Any other failure to open or read the file is fatal.
    """
    try:
        with path.open("rb") as fh:
            raw = fh.read()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise MetadataReadError(path, exc.strerror or str(exc)) from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MetadataParseError(path, f"not valid UTF-8 ({exc.reason})") from exc


def _checked_string(value: Any, key: str, source: Path | str) -> str:
    if not isinstance(value, str):
        raise MetadataParseError(
            source, f"field `{key}` must be a string, got {type(value).__name__}"
        )
    return value


def _required_string(data: dict[Any, Any], key: str, source: Path | str) -> str:
    if key not in data:
        raise MetadataParseError(source, f"missing field `{key}`")
    return _checked_string(data[key], key, source)


def _optional_string(data: dict[Any, Any], key: str, source: Path | str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return _checked_string(value, key, source)


def parse_image_metadata(text: str, *, source: Path | str = METADATA_FILENAME) -> ImageMetadata:
    try:
        data = yaml.load(text, Loader=TextScalarLoader)
    except yaml.YAMLError as exc:
        raise MetadataParseError(source, str(exc)) from exc

    if not isinstance(data, dict):
        kind = "empty document" if data is None else type(data).__name__
        raise MetadataParseError(source, f"expected a mapping, got {kind}")

    return ImageMetadata(
        image=_required_string(data, "image", source),
        tag=_required_string(data, "tag", source),
        build_num=_optional_string(data, "build_num", source),
    )


def load_image_metadata(
    directory: Path,
    *,
    read_file: MetadataReader = read_metadata_file,
) -> ImageMetadata | None:
    meta_path = directory / METADATA_FILENAME
    logger.debug("checking path: %s", meta_path)
    text = read_file(meta_path)
    if text is None:
        return None
    return parse_image_metadata(text, source=meta_path)


def assemble_build_spec(directory: Path, metadata: ImageMetadata) -> BuildSpec:
    return BuildSpec(
        image=metadata.image,
        tag=metadata.tag,
        path=directory,
        build_num=metadata.build_num,
    )
