"""Core data structures for tillerscope."""

from tillerscope.models.config import TillerScopeConfig
from tillerscope.models.release import (
    HEADERS,
    TIMESTAMP_LAYOUT,
    ColumnWidths,
    ReleaseStatus,
    ReleaseSummary,
)

__all__ = [
    "HEADERS",
    "TIMESTAMP_LAYOUT",
    "ColumnWidths",
    "ReleaseStatus",
    "ReleaseSummary",
    "TillerScopeConfig",
]
