"""Shared fixtures: build manifest + installed trees on disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# manifest file, installed dir, per-package metadata file
LAYOUTS = {
    "npm": ("package.json", "node_modules", "package.json"),
    "bower": ("bower.json", "bower_components", ".bower.json"),
}


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))


@pytest.fixture(params=sorted(LAYOUTS))
def package_manager(request) -> str:
    return request.param


@pytest.fixture
def layout(package_manager):
    return LAYOUTS[package_manager]


@pytest.fixture
def make_project(tmp_path, package_manager):
    """Return a factory writing a project for the current package manager.

    *installed* maps package name -> version (None writes metadata without
    a version).
    """
    manifest_name, dir_name, meta_name = LAYOUTS[package_manager]

    def _make(
        manifest: dict | None = None,
        installed: dict[str, str | None] | None = None,
        name: str = "project",
        installed_dir: str | None = None,
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True)
        if manifest is not None:
            write_json(root / manifest_name, manifest)
        for dep, version in (installed or {}).items():
            meta = {"name": dep}
            if version is not None:
                meta["version"] = version
            write_json(root / (installed_dir or dir_name) / dep / meta_name, meta)
        return root

    return _make
