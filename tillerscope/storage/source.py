"""Raw release record sources.

Tiller persists releases either as ConfigMaps or as Secrets. Both expose
the encoded release under the same ``release`` data key; KubeReleaseSource
hides the difference so the collector only ever sees plain string maps.
"""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

from tillerscope.errors import ReleaseSourceError
from tillerscope.observability.logging import get_logger

_logger = get_logger("storage.source")


class StorageKind(StrEnum):
    """Resource kind Tiller stores releases in."""

    CONFIGMAPS = "cfgmaps"
    SECRETS = "secrets"


class ReleaseSource(ABC):
    """Anything that can list raw release records in one call."""

    @abstractmethod
    async def list_records(self) -> list[dict[str, str]]:
        """Return the ``data`` map of every matching resource.

        Raises ReleaseSourceError if the listing itself fails.
        """


def _decode_secret_data(data: dict[str, str]) -> dict[str, str]:
    """Strip the base64 layer the API server puts on every Secret value."""
    decoded: dict[str, str] = {}
    for key, value in data.items():
        try:
            decoded[key] = base64.b64decode(value, validate=True).decode("ascii")
        except ValueError:
            continue
    return decoded


class KubeReleaseSource(ReleaseSource):
    """Lists Tiller release records through a kubernetes_asyncio CoreV1Api.

    Args:
        core_api:       ``kubernetes_asyncio.client.CoreV1Api`` (or a stand-in).
        kind:           Which resource kind holds the records.
        namespace:      Namespace Tiller runs in.
        label_selector: Selector for Tiller-owned resources.
    """

    def __init__(
        self,
        core_api: Any,
        kind: StorageKind | str = StorageKind.CONFIGMAPS,
        namespace: str = "kube-system",
        label_selector: str = "OWNER=TILLER",
    ) -> None:
        self._api = core_api
        self._kind = StorageKind(kind)
        self._namespace = namespace
        self._label_selector = label_selector

    @property
    def kind(self) -> StorageKind:
        return self._kind

    async def list_records(self) -> list[dict[str, str]]:
        if self._kind is StorageKind.SECRETS:
            list_fn = self._api.list_namespaced_secret
        else:
            list_fn = self._api.list_namespaced_config_map

        try:
            response = await list_fn(self._namespace, label_selector=self._label_selector)
        except Exception as exc:
            raise ReleaseSourceError(self._kind.value, self._namespace, exc) from exc

        records: list[dict[str, str]] = []
        for item in response.items or []:
            data = dict(item.data or {})
            if self._kind is StorageKind.SECRETS:
                data = _decode_secret_data(data)
            records.append(data)

        _logger.debug(
            "release records listed",
            kind=self._kind.value,
            namespace=self._namespace,
            label_selector=self._label_selector,
            count=len(records),
        )
        return records
