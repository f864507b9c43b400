"""Installed-tree scanner — list direct children of the installed directory."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Iterator

import structlog

from depcheck.models import InstalledEntry

log = structlog.get_logger("depcheck.scanner")


async def scan_installed(
    installed_dir: Path,
    metadata_file_name: str,
    *,
    scoped_packages: bool = False,
) -> list[InstalledEntry]:
    """Return an entry for every package directory with readable metadata.

    Entries come back in sorted directory order.  Metadata files are read
    concurrently; ordering does not depend on read completion.
    """
    if not installed_dir.is_dir():
        log.debug("scanner.no_installed_dir", path=str(installed_dir))
        return []

    candidates = list(_package_dirs(installed_dir, scoped_packages))
    entries = await asyncio.gather(
        *(
            asyncio.to_thread(read_entry, name, path, metadata_file_name)
            for name, path in candidates
        )
    )
    return [entry for entry in entries if entry is not None]


def read_entry(name: str, path: Path, metadata_file_name: str) -> InstalledEntry | None:
    """Read ``name``/``version`` from one package's metadata file.

    Returns None when the metadata is missing or unreadable.
    """
    meta_path = path / metadata_file_name
    try:
        data = json.loads(meta_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as exc:
        log.debug("scanner.entry_skipped", name=name, path=str(meta_path), error=str(exc))
        return None
    if not isinstance(data, dict):
        log.debug("scanner.entry_skipped", name=name, path=str(meta_path), error="not an object")
        return None

    version = data.get("version")
    return InstalledEntry(
        name=name,
        installed_version=version if isinstance(version, str) else None,
        source_path=path,
    )


def _package_dirs(installed_dir: Path, scoped_packages: bool) -> Iterator[tuple[str, Path]]:
    for child in sorted(installed_dir.iterdir(), key=lambda p: p.name):
        if not child.is_dir():
            continue
        if scoped_packages and child.name.startswith("@"):
            for sub in sorted(child.iterdir(), key=lambda p: p.name):
                if sub.is_dir():
                    yield f"{child.name}/{sub.name}", sub
            continue
        yield child.name, child
