"""Tests for ReleaseFilter and cutoff_from()."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from tillerscope.collector.filters import ReleaseFilter, cutoff_from
from tillerscope.models.config import DEFAULT_SINCE
from tillerscope.models.release import ReleaseSummary

_NOW = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)


def _make_summary(namespace: str = "default", deployed_at: datetime = _NOW) -> ReleaseSummary:
    return ReleaseSummary(
        name="web",
        revision=1,
        deployed_at=deployed_at,
        status="DEPLOYED",
        chart="nginx-1.2.3",
        namespace=namespace,
    )


class TestCutoff:
    def test_subtracts_duration(self) -> None:
        assert cutoff_from(timedelta(hours=1), _NOW) == datetime(2026, 2, 18, 11, 0, 0, tzinfo=UTC)

    def test_default_since_is_far_in_the_past(self) -> None:
        assert cutoff_from(DEFAULT_SINCE, _NOW).year < 1915

    def test_overflow_clamps_to_earliest(self) -> None:
        assert cutoff_from(timedelta.max, _NOW) == datetime.min.replace(tzinfo=UTC)

    def test_uses_wall_clock_when_now_omitted(self) -> None:
        before = datetime.now(tz=UTC)
        cutoff = cutoff_from(timedelta(0))
        assert before <= cutoff <= datetime.now(tz=UTC)


class TestNamespaceFilter:
    def test_matching_namespace_included(self) -> None:
        assert ReleaseFilter(namespace="a").accepts(_make_summary(namespace="a")) is True

    def test_other_namespace_excluded(self) -> None:
        assert ReleaseFilter(namespace="a").accepts(_make_summary(namespace="b")) is False

    def test_empty_filter_includes_everything(self) -> None:
        release_filter = ReleaseFilter()
        assert release_filter.accepts(_make_summary(namespace="a")) is True
        assert release_filter.accepts(_make_summary(namespace="b")) is True

    def test_exact_match_only(self) -> None:
        assert ReleaseFilter(namespace="prod").accepts(_make_summary(namespace="production")) is False


class TestRecencyFilter:
    def test_older_than_threshold_excluded(self) -> None:
        release_filter = ReleaseFilter.build("", timedelta(hours=1), _NOW)
        assert release_filter.accepts(_make_summary(deployed_at=_NOW - timedelta(hours=2))) is False

    def test_newer_than_threshold_included(self) -> None:
        release_filter = ReleaseFilter.build("", timedelta(hours=1), _NOW)
        assert release_filter.accepts(_make_summary(deployed_at=_NOW - timedelta(minutes=30))) is True

    def test_exactly_at_cutoff_included(self) -> None:
        release_filter = ReleaseFilter.build("", timedelta(hours=1), _NOW)
        assert release_filter.accepts(_make_summary(deployed_at=_NOW - timedelta(hours=1))) is True

    def test_namespace_and_recency_combined(self) -> None:
        release_filter = ReleaseFilter.build("a", timedelta(hours=1), _NOW)
        assert release_filter.accepts(_make_summary(namespace="a", deployed_at=_NOW)) is True
        assert release_filter.accepts(_make_summary(namespace="b", deployed_at=_NOW)) is False
        assert release_filter.accepts(_make_summary(namespace="a", deployed_at=_NOW - timedelta(days=1))) is False
