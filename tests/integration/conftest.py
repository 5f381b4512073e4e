"""Shared fixtures for tillerscope integration tests.

Provides encoded Tiller release records and in-memory release sources so
the full list -> decode -> filter -> sort -> render pipeline can run without
touching a real Kubernetes cluster.
"""

from __future__ import annotations

import base64
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from tillerscope.codec import encode_release
from tillerscope.codec.schema import Release
from tillerscope.models.release import ReleaseStatus
from tillerscope.storage import ReleaseSource

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

_NOW = datetime.now(UTC).replace(microsecond=0)
_10_MIN_AGO = _NOW - timedelta(minutes=10)
_30_MIN_AGO = _NOW - timedelta(minutes=30)
_2H_AGO = _NOW - timedelta(hours=2)


# ---------------------------------------------------------------------------
# Record factory helpers
# ---------------------------------------------------------------------------


def make_release_record(
    name: str = "web",
    version: int = 1,
    namespace: str = "default",
    deployed_at: datetime | None = None,
    status: ReleaseStatus = ReleaseStatus.DEPLOYED,
    chart_name: str = "nginx",
    chart_version: str = "1.2.3",
    compress: bool = True,
) -> dict[str, str]:
    """Create a ConfigMap-style data map holding one encoded release."""
    release = Release(name=name, version=version, namespace=namespace)
    release.info.last_deployed.seconds = int((deployed_at or _NOW).timestamp())
    release.info.status.code = status
    release.chart.metadata.name = chart_name
    release.chart.metadata.version = chart_version
    return {"release": encode_release(release, compress=compress)}


def as_secret_data(record: dict[str, str]) -> dict[str, str]:
    """Wrap a record the way the API server transports Secret values."""
    return {key: base64.b64encode(value.encode("ascii")).decode("ascii") for key, value in record.items()}


class StaticReleaseSource(ReleaseSource):
    """ReleaseSource returning a fixed list of records."""

    def __init__(self, records: list[dict[str, str]]) -> None:
        self.records = records
        self.calls = 0

    async def list_records(self) -> list[dict[str, str]]:
        self.calls += 1
        return self.records


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mixed_records() -> list[dict[str, str]]:
    """A realistic Tiller store: several releases, revisions, a legacy record and junk."""
    return [
        make_release_record("web", 2, "prod", _10_MIN_AGO, ReleaseStatus.DEPLOYED),
        make_release_record("web", 1, "prod", _2H_AGO, ReleaseStatus.SUPERSEDED),
        make_release_record("api", 1, "staging", _30_MIN_AGO, ReleaseStatus.FAILED, "api-chart", "0.4.0"),
        make_release_record("legacy", 7, "prod", _30_MIN_AGO, compress=False),
        {"release": "definitely not a release"},
        {"unrelated": "value"},
    ]


@pytest.fixture()
def core_api(mixed_records: list[dict[str, str]]) -> MagicMock:
    """Mocked kubernetes_asyncio CoreV1Api serving *mixed_records* as ConfigMaps and Secrets."""
    api = MagicMock()
    api.list_namespaced_config_map = AsyncMock(
        return_value=SimpleNamespace(items=[SimpleNamespace(data=r) for r in mixed_records]),
    )
    api.list_namespaced_secret = AsyncMock(
        return_value=SimpleNamespace(items=[SimpleNamespace(data=as_secret_data(r)) for r in mixed_records]),
    )
    return api
