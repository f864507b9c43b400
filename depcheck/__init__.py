"""depcheck — verify installed packages against the versions a manifest declares."""

from depcheck.checker import check_dependencies, check_dependencies_sync, run_check
from depcheck.config import CheckConfig
from depcheck.exceptions import DepcheckError, InstallError, ManifestError, UsageError
from depcheck.models import CheckResult

__all__ = [
    "CheckConfig",
    "CheckResult",
    "DepcheckError",
    "InstallError",
    "ManifestError",
    "UsageError",
    "check_dependencies",
    "check_dependencies_sync",
    "run_check",
]
