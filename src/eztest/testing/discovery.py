"""Test discovery: loading test modules and walking the registry."""

from __future__ import annotations

import importlib.util
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from types import ModuleType

from eztest.errors import EzTestError
from eztest.testing.registry import MARKER, TestDescriptor, get_registry

logger = logging.getLogger(__name__)

MODULE_PATTERN = "eztest_*.py"


def discover(registry: Sequence[TestDescriptor] | None = None) -> list[TestDescriptor]:
    """Return the runnable tests in registry order.

    The walk stops at the first entry whose marker does not match and
    leaves out base entries.

    Args:
        registry: Entries to walk. Defaults to the global registry.
    """
    entries = get_registry() if registry is None else registry
    found: list[TestDescriptor] = []

    for descriptor in entries:
        if descriptor.marker != MARKER:
            logger.debug("Discovery stopped at unmarked entry %r", descriptor)
            break
        if descriptor.is_base:
            continue
        found.append(descriptor)

    logger.debug("Discovered %d tests", len(found))
    return found


def _load_module(path: Path) -> ModuleType:
    """Import a test module from a file path so its decorators run."""
    module_name = path.stem
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot import test module: {path}"
        raise EzTestError(msg)

    parent = str(path.parent)
    if parent not in sys.path:
        sys.path.insert(0, parent)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    logger.debug("Loaded test module %s", path)
    return module


def load_modules(paths: Iterable[Path | str]) -> list[ModuleType]:
    """Import test modules from files or directories.

    Files are imported as given; directories are searched recursively
    for ``eztest_*.py``.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    modules: list[ModuleType] = []
    for raw in paths:
        path = Path(raw).resolve()
        if path.is_file():
            modules.append(_load_module(path))
        elif path.is_dir():
            for file_path in sorted(path.rglob(MODULE_PATTERN)):
                modules.append(_load_module(file_path))
        else:
            raise FileNotFoundError(f"No such test file or directory: {raw}")
    return modules


__all__ = ["MODULE_PATTERN", "discover", "load_modules"]
