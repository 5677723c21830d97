"""Public package surface for typp.

Exports ``main`` for programmatic CLI invocation and the product version.
Most implementation lives in submodules under ``typp``.
"""

from __future__ import annotations

PRODUCT_NAME = "TyPP"
__version__ = "1.0.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["PRODUCT_NAME", "__version__", "main"]
