"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Evitar imports profundos y acoplamientos innecesarios.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    Chunk,
    Citation,
    ContextSection,
    Dataset,
    GeneratedAnswer,
    PipelineStep,
    PromptParts,
    RetrievalResult,
    RetrieverMode,
    SourceDocument,
)
from .repositories import DatasetRepository
from .services import EmbeddingService, TextChunkerService

__all__ = [
    # Entities
    "Chunk",
    "Citation",
    "ContextSection",
    "Dataset",
    "GeneratedAnswer",
    "PipelineStep",
    "PromptParts",
    "RetrievalResult",
    "RetrieverMode",
    "SourceDocument",
    # Repository Interfaces (Ports)
    "DatasetRepository",
    # Service Interfaces (Ports)
    "EmbeddingService",
    "TextChunkerService",
]
