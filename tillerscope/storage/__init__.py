"""Access to the release records Tiller keeps in the cluster.

Submodules:
    client  -- kubeconfig / in-cluster configuration discovery.
    source  -- ReleaseSource abstraction and its kubernetes_asyncio implementation.
"""

from tillerscope.storage.client import load_client_config, resolve_kubeconfig
from tillerscope.storage.source import KubeReleaseSource, ReleaseSource, StorageKind

__all__ = [
    "KubeReleaseSource",
    "ReleaseSource",
    "StorageKind",
    "load_client_config",
    "resolve_kubeconfig",
]
