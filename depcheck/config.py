"""Check configuration — every option with its default, validated once."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from depcheck.managers import get_manager

_output = structlog.get_logger("depcheck.output")


def _default_log(message: str) -> None:
    _output.info(message)


def _default_error(message: str) -> None:
    _output.error(message)


class CheckConfig(BaseModel):
    """Options for one check invocation.

    camelCase names (``packageDir``, ``onlySpecified``, ...) are accepted
    alongside the snake_case field names.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
    )

    package_dir: Path | None = Field(default=None, alias="packageDir")
    scope_list: list[str] | None = Field(default=None, alias="scopeList")
    optional_scope_list: list[str] = Field(default_factory=list, alias="optionalScopeList")
    only_specified: bool = Field(default=False, alias="onlySpecified")
    check_git_urls: bool = Field(default=False, alias="checkGitUrls")
    install: bool = False
    verbose: bool = False
    log: Callable[[str], Any] = _default_log
    error: Callable[[str], Any] = _default_error
    package_manager: str = Field(default="npm", alias="packageManager")

    @field_validator("package_manager")
    @classmethod
    def _known_manager(cls, value: str) -> str:
        get_manager(value)
        return value
