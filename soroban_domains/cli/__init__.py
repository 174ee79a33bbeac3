"""
soroban_domains.cli
===================

Command-line interface for the Soroban Domains SDK, exposed as the
`soroban-domains` console script. Typer is only imported when the CLI is
actually used.

Quick usage
-----------
    $ soroban-domains node example
    $ soroban-domains resolve example --sub pay
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, List

from ..version import __version__

__all__: List[str] = [
    "__version__",
    "app",      # Typer app (lazy)
]

_SUBMODULE = "soroban_domains.cli.main"
_EXPOSE = ("app",)


def __getattr__(name: str) -> Any:  # PEP 562 lazy attribute access
    if name in _EXPOSE:
        return getattr(import_module(_SUBMODULE), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
