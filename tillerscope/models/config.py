"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

# Effectively unbounded: every release is newer than this.
DEFAULT_SINCE = timedelta(hours=1_000_000)


@dataclass
class SourceConfig:
    """Where Tiller keeps its release records."""

    storage: str = "cfgmaps"
    tiller_namespace: str = "kube-system"
    label_selector: str = "OWNER=TILLER"


@dataclass
class FilterConfig:
    """Release filter configuration."""

    namespace: str = ""
    since: timedelta = DEFAULT_SINCE


@dataclass
class OutputConfig:
    """Table rendering configuration."""

    max_column_width: int = 0


@dataclass
class KubeConfig:
    """Kubernetes client configuration."""

    kubeconfig: str = ""
    context: str = ""


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"
    # Per-component overrides, e.g. {"collector": "debug"}.
    component_levels: dict[str, str] = field(default_factory=dict)


@dataclass
class TillerScopeConfig:
    """Top-level tillerscope configuration."""

    source: SourceConfig = field(default_factory=SourceConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    kube: KubeConfig = field(default_factory=KubeConfig)
    log: LogConfig = field(default_factory=LogConfig)
