"""Decoding of Tiller release payloads.

A stored release is ``base64(gzip(protobuf))``. Records written before Tiller
started compressing are ``base64(protobuf)``; they are recognised by the
missing gzip signature and parsed directly.

``decode_release`` raises ReleaseDecodeError on any failure.
``try_decode_release`` is what the collector uses: a record that cannot be
decoded yields ``None`` and is dropped without a trace.
"""

from __future__ import annotations

import base64
import binascii
import gzip
import io
import zlib
from datetime import UTC, datetime
from typing import Any

from google.protobuf.message import DecodeError

from tillerscope.codec.schema import Release
from tillerscope.errors import ReleaseDecodeError
from tillerscope.models.release import ReleaseStatus, ReleaseSummary

# gzip magic number followed by the deflate compression method.
GZIP_SIGNATURE = b"\x1f\x8b\x08"


def _b64decode(data: str | bytes) -> bytes:
    if isinstance(data, str):
        try:
            data = data.encode("ascii")
        except UnicodeEncodeError as exc:
            raise ReleaseDecodeError("base64", "non-ascii payload") from exc
    # Line breaks are tolerated, every other character must be in the alphabet.
    data = data.replace(b"\r", b"").replace(b"\n", b"")
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ReleaseDecodeError("base64", str(exc)) from exc


def _gunzip(raw: bytes) -> bytes:
    try:
        with gzip.GzipFile(fileobj=io.BytesIO(raw), mode="rb") as stream:
            return stream.read()
    except (OSError, EOFError, zlib.error) as exc:
        raise ReleaseDecodeError("gzip", str(exc)) from exc


def decode_release(data: str | bytes) -> Any:
    """Decode one raw release record into a ``hapi.release.Release`` message."""
    raw = _b64decode(data)

    if len(raw) < len(GZIP_SIGNATURE):
        raise ReleaseDecodeError("gzip", f"payload too short ({len(raw)} bytes)")
    if raw[: len(GZIP_SIGNATURE)] == GZIP_SIGNATURE:
        raw = _gunzip(raw)

    release = Release()
    try:
        release.ParseFromString(raw)
    except (DecodeError, ValueError) as exc:
        raise ReleaseDecodeError("protobuf", str(exc)) from exc
    return release


def summarize_release(release: Any) -> ReleaseSummary:
    """Project a decoded release message onto the fields the listing shows."""
    if not release.name:
        raise ReleaseDecodeError("release", "missing name")
    if release.version <= 0:
        raise ReleaseDecodeError("release", f"invalid revision {release.version}")

    try:
        deployed_at = datetime.fromtimestamp(release.info.last_deployed.seconds, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise ReleaseDecodeError("release", f"invalid timestamp: {exc}") from exc

    metadata = release.chart.metadata
    return ReleaseSummary(
        name=release.name,
        revision=release.version,
        deployed_at=deployed_at,
        status=ReleaseStatus.label(release.info.status.code),
        chart=f"{metadata.name}-{metadata.version}",
        namespace=release.namespace,
    )


def try_decode_release(data: str | bytes) -> ReleaseSummary | None:
    """Decode and summarise *data*, or return None if it is not a readable release."""
    try:
        return summarize_release(decode_release(data))
    except ReleaseDecodeError:
        return None


def encode_release(release: Any, *, compress: bool = True) -> str:
    """Encode a release message the way Tiller stores it.

    With ``compress=False`` the legacy uncompressed layout is produced.
    """
    payload = release.SerializeToString()
    if compress:
        payload = gzip.compress(payload)
    return base64.b64encode(payload).decode("ascii")
