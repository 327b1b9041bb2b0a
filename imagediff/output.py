from __future__ import annotations

import json
import sys
from typing import Iterable, TextIO

from imagediff.models import BuildSpec


def build_specs_payload(specs: Iterable[BuildSpec]) -> list[dict[str, str | None]]:
    return [spec.to_dict() for spec in specs]


def render_build_specs(specs: Iterable[BuildSpec]) -> str:
    return json.dumps(build_specs_payload(specs), separators=(",", ":"), ensure_ascii=False)


def write_build_specs(specs: Iterable[BuildSpec], stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    out.write(render_build_specs(specs))
    out.flush()
