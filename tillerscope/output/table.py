"""Plain-text rendering of the release table."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import tzinfo

from tillerscope.models.release import HEADERS, ColumnWidths, ReleaseSummary, format_updated

_ELLIPSIS = "..."

# Columns whose width depends on the data (indices into HEADERS).
_VARIABLE_COLUMNS = frozenset({0, 3, 4, 5})


def _truncate(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    if width <= len(_ELLIPSIS):
        return value[:width]
    return value[: width - len(_ELLIPSIS)] + _ELLIPSIS


def _format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "\t".join(f"{cell:<{width}}" for cell, width in zip(cells, widths, strict=True)) + "\n"


def render_table(
    releases: Sequence[ReleaseSummary],
    widths: ColumnWidths | None = None,
    *,
    max_column_width: int = 0,
    tz: tzinfo | None = None,
) -> str:
    """Render *releases* as a tab-separated, left-aligned table.

    Returns an empty string when there is nothing to list, header included.

    Args:
        releases:         Rows, already in display order.
        widths:           Precomputed widths (from the collector). Computed
                          from *releases* when omitted.
        max_column_width: When positive, variable-width columns are capped
                          at this many characters and longer values end in
                          ``...``. Zero keeps every value intact.
        tz:               Timezone for the UPDATED column; local time if None.
    """
    if not releases:
        return ""

    column_widths = list((widths or ColumnWidths.from_releases(releases)).as_tuple())
    if max_column_width > 0:
        column_widths = [
            min(width, max_column_width) if index in _VARIABLE_COLUMNS else width
            for index, width in enumerate(column_widths)
        ]

    def fit(cells: Sequence[str]) -> Sequence[str]:
        if max_column_width <= 0:
            return cells
        return [_truncate(cell, width) for cell, width in zip(cells, column_widths, strict=True)]

    lines = [_format_row(fit(HEADERS), column_widths)]
    for release in releases:
        cells = (
            release.name,
            str(release.revision),
            format_updated(release.deployed_at, tz),
            release.status,
            release.chart,
            release.namespace,
        )
        lines.append(_format_row(fit(cells), column_widths))
    return "".join(lines)
