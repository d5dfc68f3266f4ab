"""
===============================================================================
PIPELINE USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Business Goal:
    Tipos consistentes de resultados y errores para los casos de uso del
    sandbox (datasets, chunk index, corrida del pipeline).

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de propagar excepciones.
    - Facilita el mapeo uniforme a HTTP y el testeo por resultado.

-------------------------------------------------------------------------------
CRC CARD (Module-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Responsibilities:
    - PipelineErrorCode: categorías estables de error.
    - PipelineError: contrato mínimo de error (code, message, resource).
    - DTOs de resultado por caso de uso.

Collaborators:
    - domain.entities (Dataset, Chunk, RetrievalResult, GeneratedAnswer,
      PipelineStep)
    - application/dataset_insights.py (DatasetSummary)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from ...domain.entities import (
    Chunk,
    Dataset,
    GeneratedAnswer,
    PipelineStep,
    RetrievalResult,
    RetrieverMode,
)
from ..dataset_insights import DatasetSummary


class PipelineErrorCode(str, Enum):
    """
    Códigos:
      - VALIDATION_ERROR: parámetros fuera de rango (chunk_size, query, modo).
      - NOT_FOUND: dataset inexistente.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class PipelineError:
    code: PipelineErrorCode
    message: str
    resource: str | None = None


@dataclass
class ListDatasetsResult:
    datasets: List[Dataset]
    error: PipelineError | None = None


@dataclass
class GetDatasetResult:
    """
    Contrato:
      - Éxito: dataset y summary != None, error == None
      - Falla: dataset == None y error != None
    """

    dataset: Dataset | None = None
    summary: DatasetSummary | None = None
    error: PipelineError | None = None


@dataclass
class BuildChunkIndexResult:
    dataset: Dataset | None = None
    chunk_size: int = 0
    chunks: List[Chunk] = field(default_factory=list)
    error: PipelineError | None = None


@dataclass
class PipelineStageTrace:
    """Etapa del sandbox + lo que produjo (para el inspector de la UI)."""

    step: PipelineStep
    detail: Dict[str, object] = field(default_factory=dict)


@dataclass
class RunPipelineResult:
    """
    Resultado de una corrida completa del sandbox.

    Campos:
      - results: top-k rankeados (vacío si la query está en blanco).
      - answer: respuesta grounded, None si no hubo resultados.
      - stages: las cinco etapas, en orden.
      - timings: {stage}_ms + total_ms.
    """

    dataset: Dataset | None = None
    query: str = ""
    mode: RetrieverMode = RetrieverMode.HYBRID
    chunk_size: int = 0
    top_k: int = 0
    chunks_indexed: int = 0
    query_embedding: List[float] = field(default_factory=list)
    results: List[RetrievalResult] = field(default_factory=list)
    answer: GeneratedAnswer | None = None
    stages: List[PipelineStageTrace] = field(default_factory=list)
    timings: Dict[str, float] = field(default_factory=dict)
    error: PipelineError | None = None
