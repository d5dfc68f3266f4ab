"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Dataset, SourceDocument, Chunk, RetrievalResult,
    GeneratedAnswer)

Responsabilidades:
    - Definir estructuras centrales del sandbox RAG (sin infraestructura).
    - Mantener tipos claros para casos de uso, repositorios y schemas HTTP.

Colaboradores:
    - domain.repositories: recuperan datasets.
    - infrastructure.text.chunker: construye Chunk a partir de SourceDocument.
    - application: produce RetrievalResult y GeneratedAnswer.

Principios:
    - Sin dependencias a FastAPI/pydantic.
    - Datasets y documentos son inmutables (seed estático).
    - Chunks/resultados son derivados: se recalculan completos en cada corrida.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class RetrieverMode(str, Enum):
    """Modo de ranking: qué score se usa para ordenar."""

    SEMANTIC = "semantic"
    KEYWORD = "keyword"
    HYBRID = "hybrid"


# ---------------------------------------------------------------------------
# Corpus (seed estático)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SourceDocument:
    """
    Documento fuente del corpus.

    Nota:
      - last_updated es un string ISO (YYYY-MM-DD); se muestra tal cual.
    """

    id: str
    title: str
    content: str
    tags: Tuple[str, ...] = ()
    last_updated: str = ""


@dataclass(frozen=True)
class Dataset:
    """Colección de documentos + queries de ejemplo para el sandbox."""

    id: str
    name: str
    description: str
    documents: Tuple[SourceDocument, ...]
    color: str = ""
    sample_queries: Tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Chunk
# ---------------------------------------------------------------------------


@dataclass
class Chunk:
    """
    Ventana de palabras de un documento, con embedding precalculado.

    Invariantes:
      - id = "{doc_id}-chunk-{n}" (n 1-based)
      - len(embedding) == cantidad de buckets del embedder
      - keywords: primeros 8 tokens únicos no stop-word
    """

    id: str
    doc_id: str
    doc_title: str
    text: str
    embedding: List[float]
    tags: List[str] = field(default_factory=list)
    last_updated: str = ""
    keywords: List[str] = field(default_factory=list)
    word_count: int = 0


# ---------------------------------------------------------------------------
# Resultados
# ---------------------------------------------------------------------------


@dataclass
class RetrievalResult:
    """
    Chunk rankeado para una query.

    - similarity: coseno crudo en [-1, 1]
    - semantic_score / keyword_score / hybrid_score: en [0, 1]
    - score: el score del modo elegido (criterio de orden)
    """

    chunk: Chunk
    similarity: float
    semantic_score: float
    keyword_score: float
    hybrid_score: float
    score: float
    reasons: List[str] = field(default_factory=list)
    estimated_tokens: int = 0


@dataclass(frozen=True)
class ContextSection:
    """Bloque "Source N" del prompt."""

    text: str
    doc_title: str
    index: int


@dataclass
class PromptParts:
    """Prompt desarmado en sus piezas (para inspección en la UI)."""

    system_prompt: str
    context_sections: List[ContextSection]
    user_query: str


@dataclass(frozen=True)
class Citation:
    """Cita de un chunk usado en la respuesta."""

    title: str
    chunk_id: str
    doc_id: str
    snippet: str
    label: str


@dataclass
class GeneratedAnswer:
    """
    Respuesta "grounded" sintética.

    Importante:
      - No hay llamada a un modelo real: tokens, latencia y costo son estimados.
    """

    prompt: str
    prompt_tokens: int
    response_tokens: int
    estimated_latency_ms: float
    estimated_cost_usd: float
    answer: str
    citations: List[Citation] = field(default_factory=list)
    prompt_parts: Optional[PromptParts] = None


@dataclass(frozen=True)
class PipelineStep:
    """Paso descriptivo del pipeline (narrativa o etapa del sandbox)."""

    id: str
    title: str
    description: str
    label: Optional[str] = None
