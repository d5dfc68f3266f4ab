"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios (Protocols)

Responsabilidades:
    - Definir contratos para embeddings y chunking.
    - Permitir sustituir el embedder simulado por otro (tests, proveedor real).

Colaboradores:
    - infrastructure/services/keyword_embedding_service.py
    - infrastructure/text/chunker.py
    - application: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from typing import Protocol

from .entities import Chunk, Dataset, SourceDocument


class EmbeddingService(Protocol):
    """Contrato para generar embeddings (deterministas, total)."""

    @property
    def dimension(self) -> int: ...

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embeddings batch (chunks)."""
        ...

    def embed_query(self, query: str) -> list[float]:
        """Embedding individual (query)."""
        ...


class TextChunkerService(Protocol):
    """Contrato para partir documentos en chunks embebidos."""

    def chunk_document(self, document: SourceDocument, chunk_size: int) -> list[Chunk]: ...

    def build_chunk_index(self, dataset: Dataset, chunk_size: int) -> list[Chunk]: ...
