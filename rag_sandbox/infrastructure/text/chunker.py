"""
===============================================================================
CRC CARD — infrastructure/text/chunker.py
===============================================================================

Componente:
  Chunking por ventanas de palabras (Strategy-friendly)

Responsabilidades:
  - Partir documentos en ventanas contiguas, sin overlap, de `chunk_size` palabras.
  - Enriquecer cada chunk con metadata (tags, fecha, keywords, word_count).
  - Embeber cada chunk al construirlo (el índice guarda vectores precalculados).
  - Exponer:
      * chunk_document(...) / build_chunk_index(...) (funciones puras)
      * WordWindowChunker (servicio, implementa TextChunkerService)

Colaboradores:
  - domain.entities (SourceDocument, Dataset, Chunk)
  - domain.services.EmbeddingService
  - infrastructure/services/keyword_embedding_service.py (default)
  - infrastructure/text/tokenizer.py

Decisiones:
  - chunk_size <= 0 se clampa a 1: nunca loop infinito, nunca excepción.
  - La última ventana parcial se incluye.
  - Sin cache entre llamadas: el corpus es chico y se reconstruye completo.
===============================================================================
"""

from __future__ import annotations

from typing import Final, List, Optional

from ...crosscutting.logger import logger
from ...domain.entities import Chunk, Dataset, SourceDocument
from ...domain.services import EmbeddingService
from ..services.keyword_embedding_service import generate_embedding
from .tokenizer import keyword_tokens

_MAX_KEYWORDS_PER_CHUNK: Final[int] = 8


def _clamp_chunk_size(chunk_size: int) -> int:
    return max(1, int(chunk_size))


def _chunk_keywords(text: str) -> List[str]:
    """Primeros 8 tokens únicos no stop-word (orden de aparición)."""
    unique = dict.fromkeys(keyword_tokens(text))
    return list(unique)[:_MAX_KEYWORDS_PER_CHUNK]


def _embed_all(
    texts: List[str], embedding_service: Optional[EmbeddingService]
) -> List[List[float]]:
    if embedding_service is None:
        return [generate_embedding(text) for text in texts]
    return embedding_service.embed_batch(texts)


def chunk_document(
    document: SourceDocument,
    chunk_size: int,
    *,
    embedding_service: Optional[EmbeddingService] = None,
) -> List[Chunk]:
    """
    Parte un documento en ventanas de `chunk_size` palabras.

    Ej: "alpha beta gamma delta epsilon" con chunk_size=2
        -> ["alpha beta", "gamma delta", "epsilon"]
    """
    size = _clamp_chunk_size(chunk_size)
    words = document.content.split()

    windows = [words[start : start + size] for start in range(0, len(words), size)]
    texts = [" ".join(window) for window in windows]
    embeddings = _embed_all(texts, embedding_service)

    return [
        Chunk(
            id=f"{document.id}-chunk-{index}",
            doc_id=document.id,
            doc_title=document.title,
            text=text,
            embedding=embedding,
            tags=list(document.tags),
            last_updated=document.last_updated,
            keywords=_chunk_keywords(text),
            word_count=len(window),
        )
        for index, (window, text, embedding) in enumerate(
            zip(windows, texts, embeddings), start=1
        )
    ]


def build_chunk_index(
    dataset: Dataset,
    chunk_size: int,
    *,
    embedding_service: Optional[EmbeddingService] = None,
) -> List[Chunk]:
    """Chunks de todos los documentos del dataset (orden: documento, ventana)."""
    chunks: List[Chunk] = []
    for document in dataset.documents:
        chunks.extend(
            chunk_document(
                document, chunk_size, embedding_service=embedding_service
            )
        )

    logger.debug(
        "Chunk index built",
        extra={
            "dataset_id": dataset.id,
            "chunk_size": _clamp_chunk_size(chunk_size),
            "documents": len(dataset.documents),
            "chunks": len(chunks),
        },
    )
    return chunks


class WordWindowChunker:
    """
    Servicio de chunking por palabras.

    Diseño:
      - Inyecta el EmbeddingService (el mismo que embebe las queries).
      - Delega en las funciones puras del módulo.
    """

    def __init__(self, embedding_service: Optional[EmbeddingService] = None):
        self._embeddings = embedding_service

    def chunk_document(self, document: SourceDocument, chunk_size: int) -> List[Chunk]:
        return chunk_document(
            document, chunk_size, embedding_service=self._embeddings
        )

    def build_chunk_index(self, dataset: Dataset, chunk_size: int) -> List[Chunk]:
        return build_chunk_index(
            dataset, chunk_size, embedding_service=self._embeddings
        )
