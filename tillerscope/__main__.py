"""Entry point for `python -m tillerscope`.

Usage:
    python -m tillerscope --storage secrets --since 3h
"""

from __future__ import annotations

from tillerscope.cli import cli

cli()
