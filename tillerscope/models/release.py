"""Release descriptor and table column bookkeeping."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from enum import IntEnum

# Reference layout of the UPDATED column; its length fixes the column width.
TIMESTAMP_LAYOUT = "Mon Jan _2 15:04:05 2006"

HEADERS = ("NAME", "REVISION", "UPDATED", "STATUS", "CHART", "NAMESPACE")


class ReleaseStatus(IntEnum):
    """Lifecycle codes of a Tiller release (``hapi.release.Status.Code``)."""

    UNKNOWN = 0
    DEPLOYED = 1
    DELETED = 2
    SUPERSEDED = 3
    FAILED = 4
    DELETING = 5
    PENDING_INSTALL = 6
    PENDING_UPGRADE = 7
    PENDING_ROLLBACK = 8

    @classmethod
    def label(cls, code: int) -> str:
        """Return the code name, or the bare number for codes newer than this table."""
        try:
            return cls(code).name
        except ValueError:
            return str(code)


def format_updated(moment: datetime, tz: tzinfo | None = None) -> str:
    """Render *moment* as ``Mon Jan  2 15:04:05 2006`` in *tz* (local time by default)."""
    local = moment.astimezone(tz)
    return f"{local:%a %b} {local.day:>2} {local:%H:%M:%S %Y}"


@dataclass(frozen=True)
class ReleaseSummary:
    """One decoded release record, reduced to the fields the listing shows.

    Produced by the decoder, consumed by the filter, sorter and formatter.
    """

    name: str
    revision: int
    deployed_at: datetime
    status: str
    chart: str
    namespace: str


@dataclass
class ColumnWidths:
    """Per-column widths of the release table.

    Variable columns start at their header label length and only grow.
    REVISION and UPDATED are fixed.
    """

    name: int = len("NAME")
    revision: int = field(default=len("REVISION"), init=False)
    updated: int = field(default=len(TIMESTAMP_LAYOUT), init=False)
    status: int = len("STATUS")
    chart: int = len("CHART")
    namespace: int = len("NAMESPACE")

    def widen(self, release: ReleaseSummary) -> None:
        """Fold one release's field lengths into the running maxima."""
        self.name = max(self.name, len(release.name))
        self.status = max(self.status, len(release.status))
        self.chart = max(self.chart, len(release.chart))
        self.namespace = max(self.namespace, len(release.namespace))

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """Widths in header order."""
        return (self.name, self.revision, self.updated, self.status, self.chart, self.namespace)

    @classmethod
    def from_releases(cls, releases: Iterable[ReleaseSummary]) -> ColumnWidths:
        widths = cls()
        for release in releases:
            widths.widen(release)
        return widths
