"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI (app.include_router).
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por feature (datasets / pipeline).

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.* (sub-routers por feature)

Notas:
  - Este router se incluye desde rag_sandbox/api/main.py con prefix="/v1".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from rag_sandbox.crosscutting.error_responses import OPENAPI_ERROR_RESPONSES

from .routers.datasets import router as datasets_router
from .routers.pipeline import router as pipeline_router


def build_router() -> APIRouter:
    """Construye el router raíz v1 (sin side effects al importar submódulos)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(datasets_router)
    api_router.include_router(pipeline_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
