"""Public package surface for termselect.

Exports ``main`` for programmatic CLI invocation and ``run_selector`` for
embedding the interactive picker in other tools.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def run_selector(*args, **kwargs):
    """Lazily import the selector loop; see ``termselect.selector.run_selector``."""
    from .selector import run_selector as _run_selector

    return _run_selector(*args, **kwargs)


__all__ = ["main", "run_selector"]
