"""Render findings into the messages and status of a CheckResult."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from depcheck.models import (
    CheckResult,
    Excessive,
    Finding,
    ManifestNotFound,
    Mismatch,
    Missing,
)

Sink = Callable[[str], Any]


def render_finding(finding: Finding) -> str:
    if isinstance(finding, Missing):
        return f"{finding.name}: not installed!"
    if isinstance(finding, Mismatch):
        installed = finding.installed_version if finding.installed_version is not None else "unknown"
        return f"{finding.name}: installed: {installed}, expected: {finding.expected}"
    if isinstance(finding, Excessive):
        return f"Package {finding.name} installed, though it shouldn't be"
    if isinstance(finding, ManifestNotFound):
        return f"Missing {finding.file_name}!"
    raise TypeError(f"unknown finding: {finding!r}")


def summary_line(findings: Sequence[Finding], package_manager: str) -> str | None:
    """The single action hint closing the message list, if any.

    Excessive packages take priority over missing/mismatched ones.
    """
    if any(isinstance(f, Excessive) for f in findings):
        return (
            f"Invoke {package_manager} prune and {package_manager} install "
            "to install missing packages and remove excessive ones"
        )
    if any(isinstance(f, (Missing, Mismatch)) for f in findings):
        return f"Invoke {package_manager} install to install missing packages"
    return None


class Reporter:
    """Collects messages for one invocation.

    ``errors`` always receives every message.  With *verbose* each message
    is duplicated into ``logs`` and passed to the sinks.
    """

    def __init__(self, *, verbose: bool = False, log: Sink | None = None, error: Sink | None = None):
        self.verbose = verbose
        self._log_sink = log
        self._error_sink = error
        self.errors: list[str] = []
        self.logs: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)
        if self.verbose:
            if self._error_sink is not None:
                self._error_sink(message)
            self.log(message)

    def log(self, message: str) -> None:
        if not self.verbose:
            return
        self.logs.append(message)
        if self._log_sink is not None:
            self._log_sink(message)

    def report(
        self,
        findings: Sequence[Finding],
        package_manager: str,
        *,
        with_summary: bool = True,
    ) -> CheckResult:
        for finding in findings:
            self.error(render_finding(finding))
        if with_summary:
            summary = summary_line(findings, package_manager)
            if summary is not None:
                self.error(summary)
        return self.result(deps_were_ok=not findings)

    def result(self, *, deps_were_ok: bool, status: int | None = None) -> CheckResult:
        if status is None:
            status = 1 if self.errors else 0
        return CheckResult(
            status=status,
            deps_were_ok=deps_were_ok,
            errors=tuple(self.errors),
            logs=tuple(self.logs),
        )
