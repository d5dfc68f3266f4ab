"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir PipelineError a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.

Colaboradores:
  - application.usecases.PipelineError / PipelineErrorCode
  - crosscutting.error_responses (validation_error, not_found)
===============================================================================
"""

from __future__ import annotations

from rag_sandbox.application.usecases import PipelineError, PipelineErrorCode
from rag_sandbox.crosscutting.error_responses import not_found, validation_error


def raise_pipeline_error(error: PipelineError, *, dataset_id: str) -> None:
    """
    Traduce PipelineErrorCode -> HTTP.

    Nota:
      - NOT_FOUND siempre refiere al dataset del path.
    """
    if error.code == PipelineErrorCode.NOT_FOUND:
        raise not_found(error.resource or "Dataset", dataset_id)
    if error.code == PipelineErrorCode.VALIDATION_ERROR:
        errors = None
        if error.resource:
            errors = [{"field": error.resource, "msg": error.message}]
        raise validation_error(error.message, errors)

    # Fallback: código nuevo sin mapeo explícito -> 422
    raise validation_error(error.message)
