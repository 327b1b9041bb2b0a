from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


METADATA_FILENAME = "image.yaml"
LOG_LEVEL_ENV = "IMAGEDIFF_LOG"
DEFAULT_LOG_LEVEL = "warning"
PACKAGE_NAME = "imagediff"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


@dataclass(slots=True)
class DiscoveryConfig:
    repo: str
    old_rev: str
    new_rev: str

    @property
    def repo_path(self) -> Path:
        return Path(self.repo).expanduser()


def log_level_name() -> str:
    value = os.getenv(LOG_LEVEL_ENV, "").strip().lower()
    return value if value in _LOG_LEVELS else DEFAULT_LOG_LEVEL


def default_log_level() -> int:
    return _LOG_LEVELS[log_level_name()]


def tool_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "0+unknown"
