"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount router with sandbox endpoints under /v1 prefix
  - Expose health check and metrics endpoints

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - interfaces.api.http.router: datasets + pipeline endpoints

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - No authentication: the corpus is a public demo seed

Notes:
  - /v1 prefix allows API versioning
  - /healthz follows Kubernetes health check convention
  - /metrics exposes Prometheus metrics
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from ..container import get_dataset_repository
from ..crosscutting.config import get_settings
from ..crosscutting.exceptions import SeedDataError
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Loads (and validates) the seed corpus."""
    settings = get_settings()
    datasets = get_dataset_repository().list_datasets()
    dataset_ids = [dataset.id for dataset in datasets]

    # R: Un DEFAULT_DATASET_ID fuera del registro corta el arranque.
    if settings.default_dataset_id not in dataset_ids:
        raise SeedDataError(
            f"Dataset por defecto desconocido: '{settings.default_dataset_id}'"
        )

    logger.info(
        "RAG Sandbox API starting up",
        extra={
            "app_env": settings.app_env,
            "datasets": dataset_ids,
            "default_dataset_id": settings.default_dataset_id,
            "default_chunk_size": settings.default_chunk_size,
            "default_top_k": settings.default_top_k,
            "default_retriever_mode": settings.default_retriever_mode,
        },
    )
    try:
        yield
    finally:
        logger.info("RAG Sandbox API shutting down")


# R: Create FastAPI application instance with API metadata
app = FastAPI(
    title="RAG Sandbox API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "datasets", "description": "Sample corpora and chunk index"},
        {"name": "pipeline", "description": "Simulated retrieval and grounded answers"},
    ],
)

# R: Middleware order (bottom = first to execute):
# 1. CORSMiddleware - handles preflight
# 2. RequestContextMiddleware - sets request_id
app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().get_allowed_origins_list(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", REQUEST_ID_HEADER],
    expose_headers=[REQUEST_ID_HEADER],
)

# R: Register API routes under /v1 prefix for versioning
app.include_router(router, prefix="/v1")

# R: Register exception handlers for structured error responses
register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    R: Health check.

    Returns:
        ok: True when the dataset registry is loaded
        datasets: number of registered datasets
        request_id: Correlation ID for this request
    """
    datasets = get_dataset_repository().list_datasets()
    return {
        "ok": bool(datasets),
        "datasets": len(datasets),
        "request_id": getattr(request.state, "request_id", None),
    }


@app.get("/metrics")
def metrics():
    """R: Expose Prometheus metrics (text format)."""
    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)
