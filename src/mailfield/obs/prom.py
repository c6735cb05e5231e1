"""Prometheus instrumentation for header parsing and rendering.

Metrics live on a private registry so embedding applications can decide whether
to expose them. Labels are fixed small sets (no header names or values).
"""
from __future__ import annotations
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

from ..config import metrics_enabled

REGISTRY = CollectorRegistry()

PARSE_COUNTER = Counter(
    "mailfield_parse_total",
    "Header lines parsed, by outcome.",
    ["result", "reason"],
    registry=REGISTRY,
)
RENDER_COUNTER = Counter(
    "mailfield_render_total",
    "Header fields serialized, by effective value encoding.",
    ["encoding"],
    registry=REGISTRY,
)
VALUE_HIST = Histogram(
    "mailfield_value_bytes",
    "UTF-8 size of parsed header values.",
    buckets=(0, 16, 32, 64, 128, 256, 512, 998, 2048, 8192),
    registry=REGISTRY,
)


def observe_parse(*, ok: bool, reason: str = "ok", value_bytes: int | None = None):
    if not metrics_enabled():
        return
    PARSE_COUNTER.labels(result="ok" if ok else "fail", reason=reason).inc()
    if value_bytes is not None:
        VALUE_HIST.observe(value_bytes)


def observe_render(encoding: str):
    if not metrics_enabled():
        return
    RENDER_COUNTER.labels(encoding=encoding).inc()


def prometheus_latest() -> tuple[bytes, str]:
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
