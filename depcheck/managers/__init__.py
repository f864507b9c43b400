"""Package managers — auto-registered on import."""

from depcheck.managers import (
    bower,  # noqa: F401
    npm,  # noqa: F401
)
from depcheck.managers.base import PackageManager
from depcheck.managers.registry import MANAGER_REGISTRY, get_manager, register_manager

__all__ = ["MANAGER_REGISTRY", "PackageManager", "get_manager", "register_manager"]
