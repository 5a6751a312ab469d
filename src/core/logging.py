from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

_CONFIGURED = False

REDACTED = "[redacted]"
SENSITIVE_KEYS = frozenset({"password", "hashed_password", "token", "authorization"})


def redact_credentials(
    _: Any, __: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask passwords, hashes and tokens that slip into an event."""
    for key in event_dict.keys() & SENSITIVE_KEYS:
        event_dict[key] = REDACTED
    return event_dict


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str = logging.INFO, *, service: str | None = None) -> None:
    """Configure structlog to emit JSON logs with contextvars support.

    When ``service`` is given every event carries it under the ``service`` key.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level = _resolve_level(level)
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    processors: list[Any] = [structlog.contextvars.merge_contextvars]
    if service:
        processors.append(_static_fields(service=service))
    processors += [
        redact_credentials,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def _static_fields(**fields: str):
    def processor(
        _: Any, __: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor
