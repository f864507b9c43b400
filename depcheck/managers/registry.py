"""Package-manager registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depcheck.managers.base import PackageManager

MANAGER_REGISTRY: dict[str, PackageManager] = {}


def register_manager(manager: PackageManager) -> None:
    """Register a manager instance by its name."""
    MANAGER_REGISTRY[manager.name] = manager


def get_manager(name: str) -> PackageManager:
    try:
        return MANAGER_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(MANAGER_REGISTRY))
        raise ValueError(f"unknown package manager {name!r} (known: {known})") from None
