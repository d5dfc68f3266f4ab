# rag_sandbox/crosscutting/metrics.py
"""
===============================================================================
MÓDULO: Métricas Prometheus (HTTP + etapas del pipeline)
===============================================================================

Objetivo
--------
Exponer métricas de bajo costo y baja cardinalidad:
- Requests HTTP (endpoint normalizado, método, status agrupado)
- Latencia por etapa del pipeline simulado (chunk / embed / retrieve / compose)
- Retrievals por modo y cantidad de resultados devueltos

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  Registry propio + helpers record_* / observe_*

Responsabilidades:
  - Registrar métricas en un CollectorRegistry dedicado (tests aislados)
  - Normalizar endpoints para no explotar cardinalidad
  - Generar el payload de /metrics

Colaboradores:
  - crosscutting/middleware.py (record_request_metrics)
  - application/usecases/run_pipeline.py (stage + retrieval metrics)
  - api/main.py (/metrics)
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
    "rag_sandbox_requests_total",
    "Total de requests HTTP",
    ["endpoint", "method", "status"],
    registry=_registry,
)

_request_latency = Histogram(
    "rag_sandbox_request_latency_seconds",
    "Latencia de requests HTTP (segundos)",
    ["endpoint", "method"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=_registry,
)

# ------------------------
# Etapas del pipeline
# ------------------------
_stage_latency = Histogram(
    "rag_sandbox_stage_latency_seconds",
    "Latencia por etapa del pipeline simulado (segundos)",
    ["stage"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
    registry=_registry,
)

_retrievals_total = Counter(
    "rag_sandbox_retrievals_total",
    "Retrievals ejecutados por modo",
    ["mode"],
    registry=_registry,
)

_results_returned = Histogram(
    "rag_sandbox_results_returned",
    "Cantidad de chunks devueltos por retrieval",
    buckets=(0, 1, 2, 3, 5, 8, 13, 20),
    registry=_registry,
)


# -----------------------------------------------------------------------------
# API pública (helpers de registro)
# -----------------------------------------------------------------------------


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


def observe_stage_latency(stage: str, seconds: float) -> None:
    """Registra la duración de una etapa del pipeline."""
    _stage_latency.labels(stage=stage).observe(seconds)


def record_retrieval(mode: str, results_count: int) -> None:
    """Cuenta un retrieval por modo y observa cuántos chunks devolvió."""
    _retrievals_total.labels(mode=mode).inc()
    _results_returned.observe(results_count)


# -----------------------------------------------------------------------------
# Helpers internos
# -----------------------------------------------------------------------------


def _normalize_endpoint(path: str) -> str:
    """Normaliza paths: el id de dataset pasa a `{dataset_id}`."""
    return re.sub(r"/datasets/[^/]+", "/datasets/{dataset_id}", path)


def _status_bucket(code: int) -> str:
    """Agrupa status code para baja cardinalidad."""
    if 200 <= code < 300:
        return "2xx"
    if 400 <= code < 500:
        return "4xx"
    if 500 <= code < 600:
        return "5xx"
    return "other"


# -----------------------------------------------------------------------------
# Exposición del endpoint /metrics
# -----------------------------------------------------------------------------


def get_metrics_response() -> tuple[bytes, str]:
    """Genera el body y content-type para /metrics."""
    return generate_latest(_registry), CONTENT_TYPE_LATEST
