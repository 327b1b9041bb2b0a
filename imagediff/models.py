from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class Delta:
    new_path: str | None
    status: str = "M"


@dataclass(slots=True, frozen=True)
class ImageMetadata:
    image: str
    tag: str
    build_num: str | None = None


@dataclass(slots=True, frozen=True)
class BuildSpec:
    image: str
    tag: str
    path: Path
    build_num: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "image": self.image,
            "tag": self.tag,
            "path": str(self.path),
            "build_num": self.build_num,
        }
