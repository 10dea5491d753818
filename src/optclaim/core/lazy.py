"""Lazy export resolution for package ``__init__`` modules.

Keeps ``import optclaim`` cheap and lets subpackages re-export names from
modules that import the package root without creating import cycles.
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Callable, Mapping


def make_lazy_exports(
    module_name: str,
    mapping: Mapping[str, str],
) -> tuple[Callable[[str], object], Callable[[], list[str]]]:
    """
    Build ``__getattr__`` and ``__dir__`` functions for a module.

    Args:
        module_name: Name of the module installing the hooks.
        mapping: Export name -> dotted path of the module defining it.

    Returns:
        A ``(__getattr__, __dir__)`` pair. Resolved attributes are cached in the
        module namespace so each export is imported once.
    """
    exports = dict(mapping)

    def __getattr__(name: str) -> object:
        target = exports.get(name)
        if target is None:
            raise AttributeError(f"module {module_name!r} has no attribute {name!r}")
        value = getattr(importlib.import_module(target), name)
        setattr(sys.modules[module_name], name, value)
        return value

    def __dir__() -> list[str]:
        return sorted(set(vars(sys.modules[module_name])) | set(exports))

    return __getattr__, __dir__
