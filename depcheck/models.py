"""Data models for the dependency consistency check."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class Manifest:
    """A parsed manifest: scope name -> {dependency name -> raw version spec}.

    Scopes keep the order they appear in the file, dependencies keep
    manifest order within a scope.
    """

    path: Path
    scopes: dict[str, dict[str, str]]

    def declared(self, scope_names: list[str]) -> dict[str, dict[str, str]]:
        """Return the listed scopes that exist in the manifest, in the given order."""
        return {name: self.scopes[name] for name in scope_names if name in self.scopes}

    def names_in(self, scope_names: list[str]) -> set[str]:
        names: set[str] = set()
        for deps in self.declared(scope_names).values():
            names.update(deps)
        return names


@dataclass
class InstalledEntry:
    """A direct child of the installed-dependency directory with readable metadata."""

    name: str
    installed_version: str | None
    source_path: Path


# ── findings ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Missing:
    name: str


@dataclass(frozen=True)
class Mismatch:
    name: str
    installed_version: str | None
    expected: str


@dataclass(frozen=True)
class Excessive:
    name: str


@dataclass(frozen=True)
class ManifestNotFound:
    """The manifest could not be located; no other findings accompany it."""

    file_name: str


Finding = Union[Missing, Mismatch, Excessive, ManifestNotFound]


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check invocation. Built once, never mutated."""

    status: int
    deps_were_ok: bool
    errors: tuple[str, ...] = ()
    logs: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Completion value in the ``{status, depsWereOk, error, log}`` shape."""
        return {
            "status": self.status,
            "depsWereOk": self.deps_were_ok,
            "error": list(self.errors),
            "log": list(self.logs),
        }
