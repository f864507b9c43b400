"""Consistency engine — compare declared scopes with the installed tree."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

import structlog

from depcheck.managers.base import PackageManager
from depcheck.manifest import load_manifest
from depcheck.models import (
    Excessive,
    Finding,
    InstalledEntry,
    Manifest,
    ManifestNotFound,
)
from depcheck.resolver import resolve
from depcheck.scanner import scan_installed
from depcheck.version_spec import parse_version_spec

log = structlog.get_logger("depcheck.engine")


@dataclass(frozen=True)
class Inspection:
    """Findings for one package directory.

    ``package_dir`` is the directory holding the manifest, or None when the
    manifest was not found.
    """

    package_dir: Path | None
    findings: tuple[Finding, ...]

    @property
    def manifest_missing(self) -> bool:
        return any(isinstance(f, ManifestNotFound) for f in self.findings)


class ConsistencyEngine:
    def __init__(
        self,
        manager: PackageManager,
        *,
        scope_list: list[str] | None = None,
        optional_scope_list: list[str] | None = None,
        only_specified: bool = False,
        check_git_urls: bool = False,
    ) -> None:
        self._manager = manager
        self._scope_list = list(scope_list) if scope_list is not None else None
        self._optional_scope_list = list(optional_scope_list or [])
        self._only_specified = only_specified
        self._check_git_urls = check_git_urls

    async def inspect(self, package_dir: Path | None) -> Inspection:
        """Locate the manifest, scan the installed tree and compare them."""
        manifest_path = self._manager.locate_manifest(package_dir)
        if manifest_path is None:
            log.debug(
                "engine.manifest_missing",
                manifest=self._manager.manifest_file_name,
                package_dir=str(package_dir) if package_dir is not None else None,
            )
            return Inspection(None, (ManifestNotFound(self._manager.manifest_file_name),))

        manifest = await asyncio.to_thread(load_manifest, manifest_path)
        root = manifest_path.parent
        entries = await scan_installed(
            self._manager.installed_dir(root),
            self._manager.metadata_file_name,
            scoped_packages=self._manager.scoped_packages,
        )
        findings = self.compare(manifest, entries)
        log.debug(
            "engine.inspected",
            manifest=str(manifest_path),
            installed=len(entries),
            findings=len(findings),
        )
        return Inspection(root, tuple(findings))

    def relevant_scopes(self, manifest: Manifest) -> list[str]:
        if self._scope_list is not None:
            return self._scope_list
        return [scope for scope in manifest.scopes if scope in self._manager.scope_names]

    def compare(self, manifest: Manifest, entries: list[InstalledEntry]) -> list[Finding]:
        """Pure comparison: missing/mismatch in manifest order, then excessive in scan order."""
        installed = {entry.name: entry for entry in entries}
        scopes = self.relevant_scopes(manifest)

        findings: list[Finding] = []
        for deps in manifest.declared(scopes).values():
            for name, raw in deps.items():
                finding = resolve(
                    name,
                    parse_version_spec(raw),
                    installed.get(name),
                    check_git_urls=self._check_git_urls,
                )
                if finding is not None:
                    findings.append(finding)

        if self._only_specified:
            allowed = manifest.names_in([*scopes, *self._optional_scope_list])
            findings.extend(Excessive(e.name) for e in entries if e.name not in allowed)

        return findings
