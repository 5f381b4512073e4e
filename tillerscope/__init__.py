"""tillerscope: list Helm v2 releases stored by Tiller in a Kubernetes cluster."""

__version__ = "0.1.0"
