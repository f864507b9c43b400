"""Entry points: async check, sync wrapper and callback form."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import structlog

from depcheck.config import CheckConfig
from depcheck.engine import ConsistencyEngine
from depcheck.exceptions import UsageError
from depcheck.installer import remediate
from depcheck.managers import get_manager
from depcheck.models import CheckResult
from depcheck.reporter import Reporter

log = structlog.get_logger("depcheck.checker")


def _coerce_config(config: CheckConfig | dict | None, options: dict[str, Any]) -> CheckConfig:
    """Build the config, letting keyword options override it.

    Overrides are validated on their own and merged by field name, so
    camelCase and snake_case keys can be mixed freely.
    """
    base = config if isinstance(config, CheckConfig) else CheckConfig.model_validate(config or {})
    if not options:
        return base
    overrides = CheckConfig.model_validate(options).model_dump(exclude_unset=True)
    return base.model_copy(update=overrides)


async def check_dependencies(config: CheckConfig | dict | None = None, **options: Any) -> CheckResult:
    """Check installed packages against the manifest.

    Findings are reported, never raised.  With ``install`` set and findings
    present, the package manager is asked to reconcile the tree and the
    result comes back with ``status=0`` but the errors found before installing.

    Raises:
        InstallError: the delegated install/prune failed.
        ManifestError: the manifest exists but is not a JSON object.
    """
    cfg = _coerce_config(config, options)
    manager = get_manager(cfg.package_manager)
    engine = ConsistencyEngine(
        manager,
        scope_list=cfg.scope_list,
        optional_scope_list=cfg.optional_scope_list,
        only_specified=cfg.only_specified,
        check_git_urls=cfg.check_git_urls,
    )

    inspection = await engine.inspect(cfg.package_dir)
    findings = inspection.findings
    remediable = cfg.install and bool(findings) and not inspection.manifest_missing

    reporter = Reporter(verbose=cfg.verbose, log=cfg.log, error=cfg.error)
    result = reporter.report(findings, manager.name, with_summary=not remediable)
    if inspection.manifest_missing:
        return result

    if remediable:
        result = await remediate(manager, inspection.package_dir, findings, result, reporter)

    log.debug(
        "checker.done",
        manager=manager.name,
        status=result.status,
        deps_were_ok=result.deps_were_ok,
        errors=len(result.errors),
    )
    return result


def check_dependencies_sync(config: CheckConfig | dict | None = None, **options: Any) -> CheckResult:
    return asyncio.run(check_dependencies(config, **options))


def run_check(
    config: CheckConfig | dict | Callable[[CheckResult], Any] | None = None,
    callback: Callable[[CheckResult], Any] | None = None,
) -> None:
    """Callback form: ``run_check(config, callback)`` or ``run_check(callback)``.

    The callback is required and is checked before any I/O happens.  This
    runs its own event loop, so it cannot be used from a coroutine; await
    :func:`check_dependencies` there instead.

    Raises:
        UsageError: no callback, or called while an event loop is running.
    """
    if callback is None and callable(config) and not isinstance(config, (dict, CheckConfig)):
        config, callback = None, config
    if not callable(callback):
        raise UsageError("run_check() requires a completion callback")
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise UsageError("run_check() cannot run inside an event loop; await check_dependencies()")

    callback(check_dependencies_sync(config))
