"""
===============================================================================
TARJETA CRC — application/scoring.py
===============================================================================

Módulo:
    Señales de ranking (coseno, overlap de keywords, blend híbrido, razones)

Responsabilidades:
    - Similitud coseno entre vectores (0 si alguno tiene magnitud 0).
    - Score de keywords: overlap de tokens de la query en el texto.
    - Blend híbrido fijo: 0.65 semántico + 0.35 keywords.
    - Razones legibles ("por qué este chunk") para la UI, máximo 3.

Colaboradores:
    - infrastructure/text/tokenizer.py (keyword_tokens)
    - application/retrieval.py (consumidor)

Principios:
    - Funciones puras: sin IO, sin estado, sin excepciones con input bien tipado.
===============================================================================
"""

from __future__ import annotations

import math
from typing import Final, List, Sequence

from ..domain.entities import Chunk
from ..infrastructure.text.tokenizer import keyword_tokens

SEMANTIC_WEIGHT: Final[float] = 0.65
KEYWORD_WEIGHT: Final[float] = 0.35

MAX_REASONS: Final[int] = 3
FALLBACK_REASON: Final[str] = "High semantic similarity to the question"
AUDIT_LOG_REASON: Final[str] = "Mentions audit logs for traceability"
ROTATION_REASON: Final[str] = "Details rotation cadence"


def calculate_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    Coseno entre dos vectores, en [-1, 1].

    Guard: magnitud 0 en cualquiera de los dos -> 0.0 (no divide).
    """
    dot = sum(a * b for a, b in zip(vec1, vec2))
    mag1 = math.sqrt(sum(a * a for a in vec1))
    mag2 = math.sqrt(sum(b * b for b in vec2))

    if mag1 == 0 or mag2 == 0:
        return 0.0
    return dot / (mag1 * mag2)


def normalize_similarity(similarity: float) -> float:
    """Coseno [-1, 1] -> score semántico [0, 1]."""
    return (similarity + 1) / 2


def compute_keyword_score(query: str, text: str) -> float:
    """
    Fracción de tokens del texto presentes en la query, sobre tokens únicos
    de la query, con tope 1.

    Nota: cuenta repeticiones del texto ("sso ... sso" suma 2).
    """
    query_tokens = set(keyword_tokens(query))
    if not query_tokens:
        return 0.0

    overlap = sum(1 for token in keyword_tokens(text) if token in query_tokens)
    return min(1.0, overlap / len(query_tokens))


def blend_hybrid_score(semantic_score: float, keyword_score: float) -> float:
    return semantic_score * SEMANTIC_WEIGHT + keyword_score * KEYWORD_WEIGHT


def build_reasons(chunk: Chunk, query: str) -> List[str]:
    """
    Razones (en orden de inserción, sin repetidos, máximo 3).

    Orden:
      1) keywords del chunk presentes en la query
      2) tags del chunk presentes en la query
      3) heurísticas de contenido (audit log, rotación)
      4) fallback semántico si no hubo nada
    """
    query_tokens = set(keyword_tokens(query))
    reasons: dict[str, None] = {}

    for keyword in chunk.keywords:
        if keyword in query_tokens:
            reasons[f'Matches keyword "{keyword}"'] = None

    for tag in chunk.tags:
        if tag in query_tokens:
            reasons[f'Tagged with "{tag}"'] = None

    lowered = chunk.text.lower()
    if "audit log" in lowered:
        reasons[AUDIT_LOG_REASON] = None
    if "rotate" in lowered or "rotation" in lowered:
        reasons[ROTATION_REASON] = None

    if not reasons:
        reasons[FALLBACK_REASON] = None

    return list(reasons)[:MAX_REASONS]
