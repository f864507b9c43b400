"""Compliance resolver — one declared spec against one installed entry."""

from __future__ import annotations

import structlog

from depcheck import semver_range
from depcheck.models import Finding, InstalledEntry, Mismatch, Missing
from depcheck.version_spec import GitUrl, Latest, Location, VersionSpec

log = structlog.get_logger("depcheck.resolver")


def resolve(
    name: str,
    spec: VersionSpec,
    entry: InstalledEntry | None,
    *,
    check_git_urls: bool = False,
) -> Finding | None:
    """Return the finding for *name*, or None if it is satisfied.

    Git dependencies are skipped entirely unless *check_git_urls* is set.
    When checked, a git ref that is not a semver tag can only be judged on
    presence.  Tarball URLs and local paths are always judged on presence.
    """
    if isinstance(spec, GitUrl):
        if not check_git_urls:
            return None
        if entry is None:
            return Missing(name)
        expected = spec.semver_ref
        if expected is None:
            return None
        return _check_range(name, entry, expected)

    if entry is None:
        return Missing(name)
    if isinstance(spec, (Latest, Location)):
        return None
    return _check_range(name, entry, spec.text)


def _check_range(name: str, entry: InstalledEntry, expected: str) -> Finding | None:
    installed = entry.installed_version
    if installed is not None and semver_range.satisfies(installed, expected):
        return None
    if not semver_range.valid_range(expected):
        log.debug("resolver.invalid_range", name=name, expected=expected)
    return Mismatch(name, installed, expected)
