"""
===============================================================================
ARCHIVO: crosscutting/metrics.py
===============================================================================

CRC CARD (Módulo)
-------------------------------------------------------------------------------
Nombre:
    Métricas (Prometheus)

Responsabilidades:
    - Definir métricas HTTP y de práctica (textos, sesiones, líneas).
    - Proveer funciones pequeñas y estables para registrar eventos.
    - Cuidar cardinalidad (NO user_id, NO ids de texto/sesión en labels).
    - Exponer helpers para generar la respuesta /metrics.

Colaboradores:
    - crosscutting.middleware: registra latencia y conteo HTTP.
    - application/usecases: registra eventos de negocio.
    - api.main: expone /metrics.

Notas:
    - Registro propio (CollectorRegistry): evita colisiones con el registro
      global cuando la app se crea varias veces (tests).
===============================================================================
"""

from __future__ import annotations

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

# ------------------------
# HTTP
# ------------------------
_requests_total = Counter(
    "typeten_requests_total",
    "Total de requests HTTP",
    ["endpoint", "method", "status"],
    registry=_registry,
)

_request_latency = Histogram(
    "typeten_request_latency_seconds",
    "Latencia de requests HTTP (segundos)",
    ["endpoint", "method"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=_registry,
)

# ------------------------
# Práctica
# ------------------------
_texts_created_total = Counter(
    "typeten_texts_created_total",
    "Textos creados",
    registry=_registry,
)

_fragments_created_total = Counter(
    "typeten_fragments_created_total",
    "Fragmentos creados al procesar textos",
    registry=_registry,
)

_sessions_created_total = Counter(
    "typeten_sessions_created_total",
    "Sesiones de práctica iniciadas",
    registry=_registry,
)

_lines_recorded_total = Counter(
    "typeten_lines_recorded_total",
    "Líneas completadas registradas en sesiones",
    registry=_registry,
)

_sessions_completed_total = Counter(
    "typeten_sessions_completed_total",
    "Sesiones marcadas como completadas",
    registry=_registry,
)

_session_op_rejected_total = Counter(
    "typeten_session_op_rejected_total",
    "Operaciones de sesión rechazadas",
    ["reason"],
    registry=_registry,
)


def record_request_metrics(
    endpoint: str,
    method: str,
    status_code: int,
    latency_seconds: float,
) -> None:
    """Registra métricas HTTP.

    - endpoint se normaliza para no explotar cardinalidad.
    - status se agrupa por 2xx/4xx/5xx.
    """
    normalized = _normalize_endpoint(endpoint)
    _requests_total.labels(
        endpoint=normalized,
        method=method,
        status=_status_bucket(status_code),
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def record_text_created(fragment_count: int) -> None:
    _texts_created_total.inc()
    _fragments_created_total.inc(fragment_count)


def record_session_created() -> None:
    _sessions_created_total.inc()


def record_line_recorded() -> None:
    _lines_recorded_total.inc()


def record_session_completed() -> None:
    _sessions_completed_total.inc()


def record_session_op_rejected(reason: str) -> None:
    """reason: valor acotado (p.ej. "completed", "out_of_range")."""
    _session_op_rejected_total.labels(reason=reason).inc()


def _normalize_endpoint(path: str) -> str:
    """Normaliza paths para evitar cardinalidad alta.

    Reemplaza el segmento de id de /texts/... y /sessions/... por `{id}`.
    """
    return re.sub(r"/(texts|sessions)/[^/]+", r"/\1/{id}", path)


def _status_bucket(code: int) -> str:
    """Agrupa status code para baja cardinalidad."""
    if 200 <= code < 300:
        return "2xx"
    if 400 <= code < 500:
        return "4xx"
    if 500 <= code < 600:
        return "5xx"
    return "other"


def get_metrics_response() -> tuple[bytes, str]:
    """Genera el body y content-type para /metrics."""
    return generate_latest(_registry), CONTENT_TYPE_LATEST
