"""Run configuration and project-level settings.

:class:`RunConfig` is the value the runner consumes. :class:`EzTestConfig`
holds project defaults read from ``[tool.eztest]`` in ``pyproject.toml``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from eztest.errors import ConfigurationError

logger = logging.getLogger(__name__)

PYPROJECT_NAME = "pyproject.toml"


def parse_skip_list(skip_list: str | None) -> frozenset[str]:
    """Split a comma-separated suite list into exact suite names.

    Whitespace around each entry is stripped and empty entries
    (``"A,,B"`` or a trailing comma) are ignored.
    """
    if not skip_list:
        return frozenset()
    return frozenset(entry.strip() for entry in skip_list.split(",") if entry.strip())


class RunConfig(BaseModel):
    """Options for a single run of the harness.

    Attributes:
    ----------
    no_color : bool
        Render without any terminal styling.
    show_timer : bool
        Append the elapsed time to each per-test line.
    quiet : bool
        Suppress all report output; the failure count is still returned.
    skip_enabled : bool
        Whether ``skip_list`` is honoured.
    skip_list : str | None
        Comma-separated suite names whose tests are reported as skipped.
    """

    no_color: bool = False
    show_timer: bool = False
    quiet: bool = False
    skip_enabled: bool = False
    skip_list: str | None = None

    @property
    def skip_suites(self) -> frozenset[str]:
        """Suites to skip, empty when skipping is disabled."""
        if not self.skip_enabled:
            return frozenset()
        return parse_skip_list(self.skip_list)

    def should_skip(self, suite: str) -> bool:
        return suite in self.skip_suites


class EzTestConfig(BaseModel):
    """Project defaults from ``[tool.eztest]``."""

    test_paths: list[str] = Field(default_factory=list)
    addopts: list[str] = Field(default_factory=list)
    log_level: str | None = None

    @field_validator("addopts", mode="before")
    @classmethod
    def _split_addopts(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level


DEFAULT_CONFIG = EzTestConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None) -> EzTestConfig:
    """Load ``[tool.eztest]`` from ``path`` or the nearest ``pyproject.toml``.

    Returns the defaults when no file or no ``[tool.eztest]`` table exists.

    Raises:
        ConfigurationError: If the file cannot be parsed or the table is invalid.
    """
    pyproject = path if path is not None else find_pyproject()
    if pyproject is None:
        return DEFAULT_CONFIG.model_copy(deep=True)

    try:
        with pyproject.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid {pyproject}: {exc}"
        raise ConfigurationError(msg) from exc

    table = data.get("tool", {}).get("eztest")
    if table is None:
        return DEFAULT_CONFIG.model_copy(deep=True)

    try:
        config = EzTestConfig.model_validate(table)
    except ValidationError as exc:
        msg = f"Invalid [tool.eztest] in {pyproject}: {exc}"
        raise ConfigurationError(msg) from exc

    logger.debug("Loaded configuration from %s", pyproject)
    return config


__all__ = [
    "DEFAULT_CONFIG",
    "EzTestConfig",
    "RunConfig",
    "find_pyproject",
    "load_config",
    "parse_skip_list",
]
