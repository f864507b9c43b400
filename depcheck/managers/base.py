"""Package-manager capability interface.

A manager knows its file conventions (manifest name, per-package metadata
name, installed directory) and how to run the install/prune delegates.
The consistency engine is written against this interface only.
"""

from __future__ import annotations

import asyncio
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from depcheck.exceptions import InstallError

log = structlog.get_logger("depcheck.managers")


class PackageManager(ABC):
    """Base class for one package-manager family."""

    name: str
    manifest_file_name: str
    metadata_file_name: str
    # top-level manifest keys checked when no scope list is given
    scope_names: tuple[str, ...] = ("dependencies", "devDependencies")
    # whether "@scope/name" directories nest packages one level deeper
    scoped_packages: bool = False

    def locate_manifest(self, package_dir: Path | None) -> Path | None:
        """Find the manifest file.

        With an explicit *package_dir* only that directory is checked;
        otherwise the search walks up from the working directory.
        """
        if package_dir is not None:
            candidate = Path(package_dir) / self.manifest_file_name
            return candidate if candidate.is_file() else None

        start = Path.cwd().resolve()
        for directory in (start, *start.parents):
            candidate = directory / self.manifest_file_name
            if candidate.is_file():
                return candidate
        return None

    @abstractmethod
    def installed_dir(self, package_dir: Path) -> Path:
        """Directory holding the installed packages for *package_dir*."""

    async def install(self, package_dir: Path) -> str:
        return await self._run([self.name, "install"], package_dir)

    async def prune(self, package_dir: Path) -> str:
        return await self._run([self.name, "prune"], package_dir)

    async def _run(self, cmd: list[str], cwd: Path) -> str:
        """Run a delegate command in *cwd*, raising InstallError on failure."""
        executable = shutil.which(cmd[0]) or cmd[0]
        log.info("installer.run", cmd=" ".join(cmd), cwd=str(cwd))
        try:
            proc = await asyncio.create_subprocess_exec(
                executable,
                *cmd[1:],
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise InstallError(cmd, None, str(exc)) from exc

        stdout, stderr = await proc.communicate()
        out = stdout.decode(errors="replace").strip()
        err = stderr.decode(errors="replace").strip()
        if out:
            log.debug("installer.stdout", cmd=" ".join(cmd), output=out)
        if proc.returncode != 0:
            raise InstallError(cmd, proc.returncode, err)
        return out
