"""Manifest loading."""

from __future__ import annotations

import json
from pathlib import Path

from depcheck.exceptions import ManifestError
from depcheck.models import Manifest


def load_manifest(path: Path) -> Manifest:
    """Read a manifest and keep every top-level group of string specs as a scope.

    Duplicate keys inside a scope resolve to the last declaration.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ManifestError(str(path), str(exc)) from exc
    if not isinstance(data, dict):
        raise ManifestError(str(path), "top-level value is not an object")

    scopes: dict[str, dict[str, str]] = {}
    for key, value in data.items():
        if not isinstance(value, dict):
            continue
        deps = {name: spec for name, spec in value.items() if isinstance(spec, str)}
        if deps or not value:
            scopes[key] = deps
    return Manifest(path=path, scopes=scopes)
