"""
Name: Keyword Embedding Service (Deterministic Simulated Embedder)

Qué es
------
Implementación **determinista** de `EmbeddingService` para el sandbox.
No es un modelo real: proyecta el texto sobre 7 "buckets" temáticos
(SLA, integraciones, seguridad, runbooks, releases, políticas, clientes) y
suma un ruido pseudoaleatorio derivado de los códigos de caracteres.

Arquitectura
------------
- Capa: Infrastructure (adapter sin IO)
- Rol: producir vectores estables (misma entrada → mismo vector) y acotados
  para que la UI muestre similitudes plausibles sin llamar a una API.

CRC (Class-Responsibility-Collaboration)
----------------------------------------
Class: KeywordEmbeddingService
Responsibilities:
  - Generar embeddings deterministas para textos (query y batch)
  - Mantener dimensionalidad = cantidad de buckets
  - Exponer `model_id` estable para logs/respuestas
Collaborators:
  - domain.services.EmbeddingService (contrato)
  - infrastructure.text.tokenizer (keyword_tokens)
Constraints:
  - Sin IO / sin red
  - Total: texto vacío devuelve un vector de puro ruido
  - Rango por dimensión: [-0.15, 1.5]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, List, Sequence, Tuple

from ...crosscutting.logger import logger
from ...domain.services import EmbeddingService
from ..text.tokenizer import keyword_tokens, utf16_code_units


@dataclass(frozen=True)
class KeywordBucket:
    """Dimensión del embedding: keywords del dominio + peso."""

    keywords: Tuple[str, ...]
    weight: float


DIMENSION_KEYWORDS: Final[Tuple[KeywordBucket, ...]] = (
    KeywordBucket(
        (
            "sla",
            "uptime",
            "reliability",
            "guarantee",
            "response",
            "support",
            "escalation",
            "severity",
        ),
        1.0,
    ),
    KeywordBucket(
        ("sso", "scim", "api", "webhook", "integration", "provisioning", "token"),
        1.0,
    ),
    KeywordBucket(
        (
            "security",
            "compliance",
            "audit",
            "encryption",
            "kms",
            "credential",
            "rotation",
        ),
        1.0,
    ),
    KeywordBucket(
        ("runbook", "workflow", "pipeline", "automation", "incident", "playbook"),
        0.9,
    ),
    KeywordBucket(
        ("release", "feature", "migration", "upgrade", "deprecate", "version"),
        0.8,
    ),
    KeywordBucket(
        ("policy", "control", "evidence", "review", "approval", "audit"),
        0.85,
    ),
    KeywordBucket(
        ("customer", "impact", "notification", "status", "summary", "stakeholder"),
        0.75,
    ),
)

EMBEDDING_DIMENSION: Final[int] = len(DIMENSION_KEYWORDS)

# Constantes del hash de caracteres y del ruido.
_SEED_MULTIPLIER: Final[int] = 33
_SEED_MODULUS: Final[int] = 1_000_003
_NOISE_AMPLITUDE: Final[float] = 0.3
_NOISE_OFFSET: Final[float] = 0.15
_MAX_VALUE: Final[float] = 1.5
_WEIGHT_SCALE: Final[float] = 3.0


def _seed_from_text(text: str) -> int:
    """R: seed = (seed * 33 + code) mod 1000003, arrancando en la longitud."""
    units = utf16_code_units(text)
    seed = len(units)
    for code in units:
        seed = (seed * _SEED_MULTIPLIER + code) % _SEED_MODULUS
    return seed


def _bucket_weights(text: str) -> List[float]:
    """
    R: Acumula el peso de cada bucket por token que contenga alguna keyword.

    Ej: "rotations" suma en el bucket de seguridad (contiene "rotation").
    """
    weights = [0.0] * EMBEDDING_DIMENSION
    for token in keyword_tokens(text):
        for index, bucket in enumerate(DIMENSION_KEYWORDS):
            if any(keyword in token for keyword in bucket.keywords):
                weights[index] += bucket.weight
    return weights


def generate_embedding(text: str) -> List[float]:
    """R: Embedding determinista de `text` (ver docstring del módulo)."""
    text = text or ""
    seed = _seed_from_text(text)

    embedding: List[float] = []
    for index, raw in enumerate(_bucket_weights(text)):
        noise = ((seed * (index + 3)) % 1000) / 1000 * _NOISE_AMPLITUDE - _NOISE_OFFSET
        embedding.append(min(_MAX_VALUE, raw / _WEIGHT_SCALE + noise))
    return embedding


class KeywordEmbeddingService(EmbeddingService):
    """
    R: EmbeddingService simulado para el sandbox.

    Nota:
      - Esto NO pretende ser semántico; sólo estable, acotado y barato.
    """

    MODEL_ID = "keyword-buckets-v1"

    def __init__(self) -> None:
        logger.debug(
            "KeywordEmbeddingService initialized",
            extra={"dimension": EMBEDDING_DIMENSION, "model_id": self.MODEL_ID},
        )

    @property
    def dimension(self) -> int:
        return EMBEDDING_DIMENSION

    def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        """R: Embeddings para múltiples textos (orden 1:1 con el input)."""
        return [generate_embedding(text) for text in texts]

    def embed_query(self, query: str) -> List[float]:
        """R: Embedding de una query; vacía es válida (vector de ruido)."""
        return generate_embedding(query)

    @property
    def model_id(self) -> str:
        """R: Identificador estable del "modelo"."""
        return self.MODEL_ID
