"""Configuration loading from environment variables and CLI overrides."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from fractions import Fraction

from tillerscope.models.config import (
    DEFAULT_SINCE,
    FilterConfig,
    KubeConfig,
    LogConfig,
    OutputConfig,
    SourceConfig,
    TillerScopeConfig,
)

_STORAGE_KINDS = ("cfgmaps", "secrets")

# Unit sizes in nanoseconds.
_DURATION_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

# Largest duration Go can represent (int64 nanoseconds, about 2562047h).
_MAX_DURATION_NS = 2**63 - 1

_RE_DURATION_PART = re.compile(r"([0-9]*\.?[0-9]+)(ns|us|µs|ms|s|m|h)")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"TILLERSCOPE_{key}", default)


def _pick(override: str | None, key: str, default: str) -> str:
    return override if override is not None else _env(key, default)


def parse_duration(value: str) -> timedelta:
    """Parse a Go-style duration such as ``5s``, ``2m``, ``3h`` or ``1h30m``.

    A bare ``0`` is accepted. Negative durations and durations beyond
    Go's int64 nanosecond range are rejected. Precision below one
    microsecond is truncated.
    """
    text = value.strip()
    if text == "0":
        return timedelta(0)
    if not text or text.startswith("-"):
        raise ValueError(f"Invalid duration: {value!r}")
    text = text.removeprefix("+")

    total_ns = 0
    pos = 0
    for match in _RE_DURATION_PART.finditer(text):
        if match.start() != pos:
            break
        number, unit = match.groups()
        total_ns += int(Fraction(number) * _DURATION_UNITS[unit])
        if total_ns > _MAX_DURATION_NS:
            raise ValueError(f"Invalid duration: {value!r}")
        pos = match.end()
    if pos != len(text) or pos == 0:
        raise ValueError(f"Invalid duration: {value!r}")

    try:
        return timedelta(microseconds=total_ns // 1000)
    except OverflowError as exc:
        raise ValueError(f"Invalid duration: {value!r}") from exc


def _validate_storage(value: str) -> str:
    if value not in _STORAGE_KINDS:
        raise ValueError(f"Invalid storage: {value}. Must be one of {', '.join(_STORAGE_KINDS)}")
    return value


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {sorted(valid)}")
    return value.lower()


def _parse_component_levels(value: str) -> dict[str, str]:
    """Parse ``collector=debug,storage=info`` into a component -> level map."""
    levels: dict[str, str] = {}
    for item in value.split(","):
        if not item.strip():
            continue
        component, sep, level = item.partition("=")
        if not sep or not component.strip():
            raise ValueError(f"Invalid component log level: {item!r}. Expected component=level")
        levels[component.strip()] = _validate_log_level(level.strip())
    return levels


def _validate_width(value: str | int) -> int:
    width = int(value)
    if width < 0:
        raise ValueError(f"Invalid max column width: {value}. Must be >= 0")
    return width


def load_config(
    *,
    namespace: str | None = None,
    storage: str | None = None,
    since: str | None = None,
    tiller_namespace: str | None = None,
    label: str | None = None,
    max_column_width: int | None = None,
    kubeconfig: str | None = None,
    context: str | None = None,
    log_level: str | None = None,
) -> TillerScopeConfig:
    """Load configuration from TILLERSCOPE_* environment variables.

    Keyword arguments that are not ``None`` (CLI flags) take precedence
    over the environment. Raises ValueError on invalid values.
    """
    since_raw = _pick(since, "SINCE", "")
    width_raw: str | int = max_column_width if max_column_width is not None else _env("MAX_COLUMN_WIDTH", "0")
    return TillerScopeConfig(
        source=SourceConfig(
            storage=_validate_storage(_pick(storage, "STORAGE", "cfgmaps")),
            tiller_namespace=_pick(tiller_namespace, "TILLER_NAMESPACE", "kube-system"),
            label_selector=_pick(label, "LABEL", "OWNER=TILLER"),
        ),
        filter=FilterConfig(
            namespace=_pick(namespace, "NAMESPACE", ""),
            since=parse_duration(since_raw) if since_raw else DEFAULT_SINCE,
        ),
        output=OutputConfig(
            max_column_width=_validate_width(width_raw),
        ),
        kube=KubeConfig(
            kubeconfig=_pick(kubeconfig, "KUBECONFIG", ""),
            context=_pick(context, "CONTEXT", ""),
        ),
        log=LogConfig(
            level=_validate_log_level(_pick(log_level, "LOG_LEVEL", "warning")),
            component_levels=_parse_component_levels(_env("LOG_COMPONENTS")),
        ),
    )
