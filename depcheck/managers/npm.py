"""npm conventions: package.json, node_modules/."""

from __future__ import annotations

from pathlib import Path

from depcheck.managers.base import PackageManager
from depcheck.managers.registry import register_manager


class NpmManager(PackageManager):
    name = "npm"
    manifest_file_name = "package.json"
    metadata_file_name = "package.json"
    scope_names = ("dependencies", "devDependencies", "optionalDependencies")
    scoped_packages = True

    def installed_dir(self, package_dir: Path) -> Path:
        return Path(package_dir) / "node_modules"


register_manager(NpmManager())
