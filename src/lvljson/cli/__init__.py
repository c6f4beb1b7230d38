"""lvljson CLI layer.

Expose ``cli`` and ``main`` lazily to avoid importing ``lvljson.cli.main``
at package import time, which would make ``python -m lvljson.cli.main``
warn about the module already being in ``sys.modules``.
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name in {"cli", "main"}:
        from .main import cli as _cli
        from .main import main as _main

        return _cli if name == "cli" else _main
    raise AttributeError(name)
