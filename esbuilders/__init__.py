"""Chainable Elasticsearch Query DSL builders.

Public builders are importable from the top level
(``from esbuilders import BoolQuery``); they are resolved on first access
so that importing the package alone does not load settings.
"""

from __future__ import annotations

from importlib import import_module

__version__ = "0.3.0"

_SUBPACKAGES = ("core", "utils")


def __getattr__(name: str):
    """Resolve subpackages and names exported by ``esbuilders.core.search``."""
    if name in _SUBPACKAGES:
        module = import_module(f"{__name__}.{name}")
    else:
        search = import_module(f"{__name__}.core.search")
        if name not in search.__all__:
            raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
        module = getattr(search, name)
    globals()[name] = module
    return module
