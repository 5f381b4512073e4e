"""Structured logging configuration using structlog.

Events go to stderr as JSON lines; stdout is reserved for the release
table. A global level applies to every component, and individual
components can be raised or lowered with overrides such as
``{"collector": "debug"}``. An override for ``storage`` also covers
``storage.source`` and ``storage.client``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog

# Level each structlog method name logs at.
_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


def _to_level(name: str) -> int:
    return getattr(logging, name.upper(), logging.WARNING)


class ComponentLevelFilter:
    """Drop events below the threshold of the emitting component."""

    def __init__(self, default: int, overrides: Mapping[str, int]) -> None:
        self._default = default
        self._overrides = dict(overrides)

    def threshold(self, component: str | None) -> int:
        """Return the effective level for *component*, longest prefix first."""
        name = component or ""
        while name:
            if name in self._overrides:
                return self._overrides[name]
            name = name.rpartition(".")[0]
        return self._default

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        level = _METHOD_LEVELS.get(method_name, logging.INFO)
        if level < self.threshold(event_dict.get("component")):
            raise structlog.DropEvent
        return event_dict


def setup_logging(level: str = "warning", component_levels: Mapping[str, str] | None = None) -> None:
    """Configure structlog for JSON output to stderr.

    Unknown level names fall back to ``warning``.
    """
    log_level = _to_level(level)
    overrides = {component: _to_level(name) for component, name in (component_levels or {}).items()}
    # The bound logger pre-filters at the most verbose level in use.
    floor = min([log_level, *overrides.values()])

    structlog.configure(
        processors=[
            ComponentLevelFilter(log_level, overrides),
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(floor),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def reset_logging() -> None:
    """Restore structlog's defaults and drop bound context variables."""
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
