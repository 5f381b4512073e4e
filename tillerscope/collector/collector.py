"""Release collection and ordering.

collect_releases() walks the raw records once, decoding and filtering each
one. Records that fail either step are skipped silently: a corrupt or
foreign record must never hide the rest of the listing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from tillerscope.codec import try_decode_release
from tillerscope.collector.filters import ReleaseFilter
from tillerscope.models.release import ColumnWidths, ReleaseSummary
from tillerscope.observability.logging import get_logger

RELEASE_KEY = "release"

_logger = get_logger("collector")


@dataclass
class CollectResult:
    """Surviving releases in arrival order plus the widths needed to print them."""

    releases: list[ReleaseSummary] = field(default_factory=list)
    widths: ColumnWidths = field(default_factory=ColumnWidths)
    scanned: int = 0


def collect_releases(
    records: Iterable[Mapping[str, str]],
    release_filter: ReleaseFilter | None = None,
) -> CollectResult:
    """Decode and filter every record, keeping the ones that survive both."""
    release_filter = release_filter or ReleaseFilter()
    result = CollectResult()

    for record in records:
        result.scanned += 1
        payload = record.get(RELEASE_KEY)
        if not payload:
            continue
        release = try_decode_release(payload)
        if release is None or not release_filter.accepts(release):
            continue
        result.releases.append(release)
        result.widths.widen(release)

    _logger.debug("releases collected", scanned=result.scanned, kept=len(result.releases))
    return result


def sort_releases(releases: Iterable[ReleaseSummary]) -> list[ReleaseSummary]:
    """Order releases by deployment time, oldest first.

    The sort is stable, so releases deployed in the same second keep their
    arrival order.
    """
    return sorted(releases, key=lambda release: release.deployed_at)
