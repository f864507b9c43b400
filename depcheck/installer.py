"""Installer trigger — delegate install/prune and override the status."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Sequence

import structlog

from depcheck.managers.base import PackageManager
from depcheck.models import CheckResult, Excessive, Finding
from depcheck.reporter import Reporter

log = structlog.get_logger("depcheck.installer")


async def remediate(
    manager: PackageManager,
    package_dir: Path,
    findings: Sequence[Finding],
    result: CheckResult,
    reporter: Reporter,
) -> CheckResult:
    """Prune (if anything is excessive) and install, then report status 0.

    ``errors`` and ``deps_were_ok`` are delivered exactly as in *result*.
    Raises InstallError if a delegate fails.
    """
    prune = any(isinstance(f, Excessive) for f in findings)
    log.info("installer.start", manager=manager.name, package_dir=str(package_dir), prune=prune)

    if prune:
        reporter.log(f"Invoking {manager.name} prune...")
        await manager.prune(package_dir)
    reporter.log(f"Invoking {manager.name} install...")
    await manager.install(package_dir)

    log.info("installer.done", manager=manager.name)
    return replace(result, status=0, logs=tuple(reporter.logs))
