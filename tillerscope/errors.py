"""Exception hierarchy for tillerscope.

ClientConfigError and ReleaseSourceError are fatal and end the run with a
non-zero exit status. ReleaseDecodeError is absorbed by try_decode_release
and the collector drops the offending record instead.
"""

from __future__ import annotations


class TillerScopeError(Exception):
    """Base class for all tillerscope errors."""


class ClientConfigError(TillerScopeError):
    """Raised when no usable Kubernetes client configuration can be loaded."""


class ReleaseSourceError(TillerScopeError):
    """Raised when listing release records from the cluster fails."""

    def __init__(self, kind: str, namespace: str, cause: Exception) -> None:
        super().__init__(f"Listing {kind} in namespace '{namespace}' failed: {cause}")
        self.kind = kind
        self.namespace = namespace
        self.cause = cause


class ReleaseDecodeError(TillerScopeError):
    """Raised when a release payload cannot be decoded at a given stage."""

    def __init__(self, stage: str, detail: str) -> None:
        super().__init__(f"{stage}: {detail}")
        self.stage = stage
        self.detail = detail
