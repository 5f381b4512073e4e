"""Kubernetes client configuration discovery.

Resolution order: explicit kubeconfig path, then ``$KUBECONFIG``, then
``~/.kube/config``. If the resolved file does not exist the in-cluster
service-account configuration is used instead.
"""

from __future__ import annotations

import os
from pathlib import Path

from tillerscope.errors import ClientConfigError
from tillerscope.observability.logging import get_logger

_logger = get_logger("storage.client")


def resolve_kubeconfig(explicit: str = "") -> Path:
    """Return the kubeconfig path that would be tried first."""
    if explicit:
        return Path(explicit).expanduser()
    if env_path := os.environ.get("KUBECONFIG", ""):
        return Path(env_path).expanduser()
    return Path.home() / ".kube" / "config"


async def load_client_config(kubeconfig: str = "", context: str = "") -> None:
    """Configure the default kubernetes_asyncio client.

    Raises ClientConfigError when neither the kubeconfig file nor the
    in-cluster configuration can be loaded.
    """
    # Imported lazily: kubernetes_asyncio probes the environment on import.
    import kubernetes_asyncio.config as k8s_config  # type: ignore[import-untyped]

    path = resolve_kubeconfig(kubeconfig)
    try:
        if path.is_file():
            await k8s_config.load_kube_config(config_file=str(path), context=context or None)
            _logger.info("k8s client configured from kubeconfig", path=str(path), context=context or None)
        else:
            # load_incluster_config() is synchronous in kubernetes-asyncio
            k8s_config.load_incluster_config()
            _logger.info("k8s client configured from in-cluster service account")
    except Exception as exc:
        raise ClientConfigError(f"Loading Kubernetes client configuration failed: {exc}") from exc
