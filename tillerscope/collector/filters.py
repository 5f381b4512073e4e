"""Namespace and recency predicates over decoded releases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from tillerscope.models.release import ReleaseSummary

_EARLIEST = datetime.min.replace(tzinfo=UTC)


def cutoff_from(since: timedelta, now: datetime | None = None) -> datetime:
    """Return ``now - since``, clamped to the earliest representable instant."""
    now = now or datetime.now(tz=UTC)
    try:
        return now - since
    except OverflowError:
        return _EARLIEST


@dataclass(frozen=True)
class ReleaseFilter:
    """Decides which decoded releases make it into the listing.

    ``namespace`` empty means every namespace. ``cutoff`` None means no
    recency limit; otherwise releases deployed strictly before it are dropped.
    """

    namespace: str = ""
    cutoff: datetime | None = None

    @classmethod
    def build(cls, namespace: str, since: timedelta, now: datetime | None = None) -> ReleaseFilter:
        return cls(namespace=namespace, cutoff=cutoff_from(since, now))

    def accepts(self, release: ReleaseSummary) -> bool:
        if self.namespace and release.namespace != self.namespace:
            return False
        if self.cutoff is not None and release.deployed_at < self.cutoff:
            return False
        return True
