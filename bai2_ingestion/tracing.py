"""
bai2_ingestion.tracing -- Stage invocation tracer emitting BAI2_STAGE_TRACE.

Responsibility:
    Provide a lightweight decorator (``@traced_stage``) that wraps pipeline
    stages with structured trace logging. The trace captures stage_name,
    stage_version, input_fingerprint (SHA-256 prefix of selected keyword
    arguments) and duration_ms.

Failure modes:
    - fingerprint_fields naming kwargs that were not passed are recorded
      as "null".
    - A dotted field ("context.record_count") fingerprints that attribute
      of the kwarg instead of the whole value; a missing attribute is "null".
    - A stage that raises emits no trace; the exception propagates
      unchanged.

Usage:
    from bai2_ingestion.tracing import traced_stage

    @traced_stage("resolve", "1.0", fingerprint_fields=("config",))
    def resolve_file(root, *, config):
        ...

While the stage runs, ``LogContext.stage`` is bound to the stage name so
every log line emitted inside it is tagged.
"""

from __future__ import annotations

import functools
import hashlib
import time
from collections.abc import Callable
from dataclasses import asdict, is_dataclass
from typing import Any

from bai2_kernel.logging_config import LogContext, get_logger

_logger = get_logger("ingestion.tracer")


def _canonicalize(value: Any) -> str:
    """Produce a stable string representation of a value for fingerprinting."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    if is_dataclass(value) and not isinstance(value, type):
        return _canonicalize(asdict(value))
    if isinstance(value, dict):
        items = sorted(value.items())
        return "{" + ",".join(f"{k}:{_canonicalize(v)}" for k, v in items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_canonicalize(v) for v in value) + "]"
    return str(value)


def _resolve_field(field: str, kwargs: dict[str, Any]) -> Any:
    """Look up a kwarg, following ``name.attr`` paths into its attributes."""
    name, *path = field.split(".")
    value = kwargs.get(name)
    for attr in path:
        value = getattr(value, attr, None)
    return value


def compute_input_fingerprint(
    fingerprint_fields: tuple[str, ...],
    kwargs: dict[str, Any],
) -> str:
    """Deterministic 16-hex-char SHA-256 prefix of the selected kwargs."""
    parts: list[str] = []
    for field in fingerprint_fields:
        val = _resolve_field(field, kwargs)
        parts.append(f"{field}={_canonicalize(val)}")
    canonical = "|".join(parts)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]


def traced_stage(
    stage_name: str,
    stage_version: str,
    fingerprint_fields: tuple[str, ...] = (),
) -> Callable:
    """Decorator that emits BAI2_STAGE_TRACE after a stage returns.

    Args:
        stage_name: Stage identifier (e.g., "scan").
        stage_version: Stage version (e.g., "1.0").
        fingerprint_fields: Keyword argument names to include in
            the input fingerprint hash.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            fp = ""
            if fingerprint_fields:
                fp = compute_input_fingerprint(fingerprint_fields, kwargs)

            with LogContext.bind(stage=stage_name):
                t0 = time.monotonic()
                result = func(*args, **kwargs)
                duration_ms = round((time.monotonic() - t0) * 1000, 2)

                _logger.debug(
                    "BAI2_STAGE_TRACE",
                    extra={
                        "trace_type": "BAI2_STAGE_TRACE",
                        "stage_name": stage_name,
                        "stage_version": stage_version,
                        "input_fingerprint": fp,
                        "duration_ms": duration_ms,
                        "function": func.__qualname__,
                    },
                )
            return result

        return wrapper

    return decorator
