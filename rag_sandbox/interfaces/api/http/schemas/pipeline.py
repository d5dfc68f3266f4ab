"""
===============================================================================
TARJETA CRC — schemas/pipeline.py
===============================================================================

Módulo:
    Schemas HTTP para Retrieve / Ask (sandbox RAG) y catálogo del pipeline

Responsabilidades:
    - DTO de request con límites desde Settings (chunk_size, top_k, query).
    - DTOs de resultados rankeados, respuesta grounded, etapas y tiempos.

Colaboradores:
    - crosscutting.config.get_settings (límites y defaults)
    - routers/pipeline.py
===============================================================================
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from rag_sandbox.crosscutting.config import get_settings
from rag_sandbox.domain.entities import RetrieverMode

from .datasets import ChunkRes

_settings = get_settings()


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class PipelineReq(BaseModel):
    """
    Request común para retrieve y ask.

    Nota:
      - query vacía es válida: devuelve cero resultados (la UI arranca así).
    """

    query: str = Field(default="", max_length=_settings.max_query_chars)
    chunk_size: int = Field(
        default=_settings.default_chunk_size, ge=1, le=_settings.max_chunk_size
    )
    top_k: int = Field(default=_settings.default_top_k, ge=1, le=_settings.max_top_k)
    mode: RetrieverMode = Field(
        default=RetrieverMode(_settings.default_retriever_mode)
    )


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class HighlightRes(BaseModel):
    text: str
    highlighted: bool


class RetrievalResultRes(BaseModel):
    chunk: ChunkRes
    similarity: float
    semantic_score: float
    keyword_score: float
    hybrid_score: float
    score: float
    reasons: list[str]
    estimated_tokens: int
    highlights: list[HighlightRes]


class RetrieveRes(BaseModel):
    dataset_id: str
    query: str
    mode: RetrieverMode
    chunk_size: int
    top_k: int
    chunks_indexed: int
    results: list[RetrievalResultRes]


class CitationRes(BaseModel):
    title: str
    chunk_id: str
    doc_id: str
    snippet: str
    label: str


class ContextSectionRes(BaseModel):
    text: str
    doc_title: str
    index: int


class PromptPartsRes(BaseModel):
    system_prompt: str
    context_sections: list[ContextSectionRes]
    user_query: str


class AnswerRes(BaseModel):
    prompt: str
    prompt_parts: PromptPartsRes | None = None
    prompt_tokens: int
    response_tokens: int
    estimated_latency_ms: float
    estimated_cost_usd: float
    answer: str
    citations: list[CitationRes]


class StageRes(BaseModel):
    id: str
    title: str
    description: str
    detail: dict[str, Any] = Field(default_factory=dict)


class AskRes(RetrieveRes):
    query_embedding: list[float]
    answer: AnswerRes | None = None
    stages: list[StageRes]
    timings: dict[str, float]


class PipelineStepRes(BaseModel):
    id: str
    label: str | None = None
    title: str
    description: str


class ModeLabelRes(BaseModel):
    mode: RetrieverMode
    title: str
    subtitle: str


class PipelineCatalogRes(BaseModel):
    narrative: list[PipelineStepRes]
    stages: list[PipelineStepRes]
    modes: list[ModeLabelRes]
