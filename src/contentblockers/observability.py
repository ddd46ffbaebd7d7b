"""Observability: structured logs (operation, rule_count, latency_ms) and a counter stub."""

from __future__ import annotations

import logging
import threading
from typing import Any

_LOGGER = logging.getLogger("contentblockers")

# Counter stub: operations[name] = count, errors[name] = count
METRICS: dict[str, dict[str, int]] = {"operations": {}, "errors": {}}
_METRICS_LOCK = threading.Lock()


def get_logger() -> logging.Logger:
    return _LOGGER


def log_operation(
    operation: str,
    rule_count: int,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Emit a structured log record and update the counters."""
    payload: dict[str, Any] = {
        "operation": operation,
        "rule_count": rule_count,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    log = logger or _LOGGER
    if error:
        log.warning("ruleset_operation", extra=payload)
    else:
        log.info("ruleset_operation", extra=payload)
    with _METRICS_LOCK:
        METRICS["operations"][operation] = METRICS["operations"].get(operation, 0) + 1
        if error:
            METRICS["errors"][operation] = METRICS["errors"].get(operation, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return a copy of the current counters."""
    with _METRICS_LOCK:
        return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    with _METRICS_LOCK:
        for counters in METRICS.values():
            counters.clear()
