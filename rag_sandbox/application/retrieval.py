"""
===============================================================================
TARJETA CRC — application/retrieval.py
===============================================================================

Class:
    RetrievalService (+ simulate_retrieval, función pura)

Responsibilities:
    - Embeber la query con el mismo modelo que los chunks.
    - Puntuar cada chunk (semántico, keywords, híbrido) y elegir el score
      según el modo.
    - Ordenar por score descendente (estable) y recortar a top_k.

Collaborators:
    - application/scoring.py: señales individuales
    - domain.services.EmbeddingService: embedding de la query
    - infrastructure/text/tokenizer.py: estimación de tokens por chunk

Decisiones:
    - top_k <= 0 -> [] (nunca excepción).
    - Empates: se respeta el orden del índice (sorted es estable).
===============================================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..crosscutting.logger import logger
from ..domain.entities import Chunk, RetrievalResult, RetrieverMode
from ..domain.services import EmbeddingService
from ..infrastructure.services.keyword_embedding_service import generate_embedding
from ..infrastructure.text.tokenizer import estimate_token_count
from .scoring import (
    blend_hybrid_score,
    build_reasons,
    calculate_similarity,
    compute_keyword_score,
    normalize_similarity,
)


def _select_score(
    mode: RetrieverMode, semantic: float, keyword: float, hybrid: float
) -> float:
    if mode == RetrieverMode.KEYWORD:
        return keyword
    if mode == RetrieverMode.HYBRID:
        return hybrid
    return semantic


def score_chunk(
    query: str,
    query_embedding: Sequence[float],
    chunk: Chunk,
    mode: RetrieverMode,
) -> RetrievalResult:
    """R: Resultado completo (todas las señales) para un chunk."""
    similarity = calculate_similarity(query_embedding, chunk.embedding)
    semantic_score = normalize_similarity(similarity)
    keyword_score = compute_keyword_score(query, chunk.text)
    hybrid_score = blend_hybrid_score(semantic_score, keyword_score)

    return RetrievalResult(
        chunk=chunk,
        similarity=similarity,
        semantic_score=semantic_score,
        keyword_score=keyword_score,
        hybrid_score=hybrid_score,
        score=_select_score(mode, semantic_score, keyword_score, hybrid_score),
        reasons=build_reasons(chunk, query),
        estimated_tokens=estimate_token_count(chunk.text),
    )


def simulate_retrieval(
    query: str,
    chunks: Sequence[Chunk],
    top_k: int,
    mode: RetrieverMode | str = RetrieverMode.HYBRID,
    *,
    query_embedding: Optional[Sequence[float]] = None,
) -> List[RetrievalResult]:
    """
    Rankea `chunks` para `query` y devuelve como mucho `top_k` resultados.

    - query_embedding: vector precalculado (si el caller ya lo tiene).
    """
    # R: El modo se valida siempre, aunque no haya nada que rankear.
    mode = RetrieverMode(mode)
    if top_k <= 0 or not chunks:
        return []

    if query_embedding is None:
        query_embedding = generate_embedding(query)

    scored = [score_chunk(query, query_embedding, chunk, mode) for chunk in chunks]
    ranked = sorted(scored, key=lambda result: result.score, reverse=True)
    return ranked[:top_k]


class RetrievalService:
    """
    Servicio de retrieval simulado sobre un índice en memoria.

    Uso:
        service = RetrievalService(embedding_service)
        results = service.retrieve("sso failures", chunks, top_k=3)
    """

    def __init__(self, embedding_service: EmbeddingService):
        self._embeddings = embedding_service

    def embed_query(self, query: str) -> List[float]:
        return self._embeddings.embed_query(query)

    def retrieve(
        self,
        query: str,
        chunks: Sequence[Chunk],
        top_k: int,
        mode: RetrieverMode | str = RetrieverMode.HYBRID,
        *,
        query_embedding: Optional[Sequence[float]] = None,
    ) -> List[RetrievalResult]:
        mode = RetrieverMode(mode)
        if query_embedding is None:
            query_embedding = self.embed_query(query)

        results = simulate_retrieval(
            query, chunks, top_k, mode, query_embedding=query_embedding
        )
        logger.debug(
            "Retrieval done",
            extra={
                "mode": mode.value,
                "top_k": top_k,
                "candidates": len(chunks),
                "results": len(results),
            },
        )
        return results
