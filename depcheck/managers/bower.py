"""Bower conventions: bower.json, .bower.json, directory from .bowerrc."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from depcheck.managers.base import PackageManager
from depcheck.managers.registry import register_manager

log = structlog.get_logger("depcheck.managers")

DEFAULT_DIRECTORY = "bower_components"


class BowerManager(PackageManager):
    name = "bower"
    manifest_file_name = "bower.json"
    metadata_file_name = ".bower.json"

    def installed_dir(self, package_dir: Path) -> Path:
        package_dir = Path(package_dir)
        return package_dir / self._configured_directory(package_dir)

    @staticmethod
    def _configured_directory(package_dir: Path) -> str:
        rc_path = package_dir / ".bowerrc"
        if not rc_path.is_file():
            return DEFAULT_DIRECTORY
        try:
            rc = json.loads(rc_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("bower.bowerrc_unreadable", path=str(rc_path), error=str(exc))
            return DEFAULT_DIRECTORY
        directory = rc.get("directory") if isinstance(rc, dict) else None
        if not isinstance(directory, str) or not directory:
            return DEFAULT_DIRECTORY
        return directory


register_manager(BowerManager())
