"""tillerscope command-line interface.

Exposes:
    cli -- Click command entry point (registered as ``tillerscope`` script).
"""

from tillerscope.cli.main import cli

__all__ = ["cli"]
