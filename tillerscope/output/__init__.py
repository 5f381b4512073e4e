"""Output rendering for tillerscope."""

from tillerscope.output.table import render_table

__all__ = ["render_table"]
