"""
===============================================================================
USE CASE: Run Pipeline (Sandbox RAG end-to-end)
===============================================================================

Business Goal:
    Ejecutar una corrida completa del sandbox RAG sobre un dataset:
      1) Validación de parámetros
      2) Chunking + embeddings del dataset (chunk_size)
      3) Embedding de la query
      4) Retrieval + rerank según modo (top_k)
      5) Respuesta grounded con citas (sólo si hubo resultados)

Why (Context / Intención):
    - La UI re-ejecuta el pipeline completo ante cada cambio de parámetros;
      no hay estado entre corridas.
    - Devuelve las cinco etapas del sandbox con lo que produjo cada una,
      más tiempos por etapa, para el inspector paso a paso.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    RunPipelineUseCase

Responsibilities:
    - Validar chunk_size, largo de query y modo.
    - Resolver dataset (NOT_FOUND tipado).
    - Orquestar chunker -> retrieval -> composer midiendo cada etapa.
    - Registrar métricas de etapa y de retrieval.

Collaborators:
    - DatasetRepository
    - TextChunkerService (WordWindowChunker)
    - RetrievalService
    - AnswerComposer
    - crosscutting.timing.StageTimings, crosscutting.metrics
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Final, List

from ...crosscutting.logger import logger
from ...crosscutting.metrics import observe_stage_latency, record_retrieval
from ...crosscutting.timing import StageTimings
from ...domain.entities import (
    Chunk,
    GeneratedAnswer,
    RetrievalResult,
    RetrieverMode,
)
from ...domain.repositories import DatasetRepository
from ...domain.services import TextChunkerService
from ...infrastructure.text.tokenizer import sanitize
from ..answer_composer import AnswerComposer
from ..pipeline_steps import SANDBOX_STAGES
from ..retrieval import RetrievalService
from .build_chunk_index import validate_chunk_size
from .get_dataset import dataset_not_found
from .pipeline_results import (
    PipelineError,
    PipelineErrorCode,
    PipelineStageTrace,
    RunPipelineResult,
)

_RESOURCE_QUERY: Final[str] = "query"
_RESOURCE_MODE: Final[str] = "mode"

# Nombres de etapa para timings/métricas (baja cardinalidad).
STAGE_CHUNK: Final[str] = "chunk"
STAGE_EMBED: Final[str] = "embed"
STAGE_RETRIEVE: Final[str] = "retrieve"
STAGE_COMPOSE: Final[str] = "compose"

_SCORE_DECIMALS: Final[int] = 4


@dataclass(frozen=True)
class RunPipelineInput:
    """
    DTO de entrada.

    Campos:
      - dataset_id: dataset sobre el que se corre
      - query: pregunta del usuario (en blanco => sin resultados)
      - chunk_size: palabras por chunk
      - top_k: cantidad de resultados (<= 0 => [])
      - mode: semantic | keyword | hybrid
      - compose_answer: False => sólo retrieval (sin respuesta)
    """

    dataset_id: str
    query: str
    chunk_size: int
    top_k: int
    mode: RetrieverMode | str = RetrieverMode.HYBRID
    compose_answer: bool = True


class RunPipelineUseCase:
    """
    Use Case (Application Service / Query):
        Corre el sandbox RAG completo y devuelve resultados + trazas.
    """

    def __init__(
        self,
        dataset_repository: DatasetRepository,
        chunker: TextChunkerService,
        retrieval_service: RetrievalService,
        answer_composer: AnswerComposer,
        *,
        max_chunk_size: int,
        max_top_k: int,
        max_query_chars: int,
    ) -> None:
        self._datasets = dataset_repository
        self._chunker = chunker
        self._retrieval = retrieval_service
        self._composer = answer_composer
        self._max_chunk_size = max_chunk_size
        self._max_top_k = max_top_k
        self._max_query_chars = max_query_chars

    def execute(self, input_data: RunPipelineInput) -> RunPipelineResult:
        # ---------------------------------------------------------------------
        # 1) Validación.
        # ---------------------------------------------------------------------
        validation_error = self._validate_input(input_data)
        if validation_error is not None:
            return RunPipelineResult(error=validation_error)

        mode = RetrieverMode(input_data.mode)
        top_k = self._sanitize_top_k(input_data.top_k)
        query = input_data.query or ""

        dataset = self._datasets.get_dataset(input_data.dataset_id)
        if dataset is None:
            return RunPipelineResult(error=dataset_not_found(input_data.dataset_id))

        timings = StageTimings()

        # ---------------------------------------------------------------------
        # 2) Chunking + embeddings del corpus.
        # ---------------------------------------------------------------------
        with timings.measure(STAGE_CHUNK):
            chunks = self._chunker.build_chunk_index(dataset, input_data.chunk_size)

        # ---------------------------------------------------------------------
        # 3..5) Query -> retrieval -> answer (blank query corta acá).
        # ---------------------------------------------------------------------
        query_embedding: List[float] = []
        results: List[RetrievalResult] = []
        answer: GeneratedAnswer | None = None

        if query.strip():
            with timings.measure(STAGE_EMBED):
                query_embedding = self._retrieval.embed_query(query)

            with timings.measure(STAGE_RETRIEVE):
                results = self._retrieval.retrieve(
                    query, chunks, top_k, mode, query_embedding=query_embedding
                )

            if results and input_data.compose_answer:
                with timings.measure(STAGE_COMPOSE):
                    answer = self._composer.compose(query, results, dataset)

        self._record_metrics(timings, mode, results)

        logger.info(
            "Pipeline run completed",
            extra={
                "dataset_id": dataset.id,
                "mode": mode.value,
                "chunk_size": input_data.chunk_size,
                "top_k": top_k,
                "chunks_indexed": len(chunks),
                "results": len(results),
                "answered": answer is not None,
            },
        )

        return RunPipelineResult(
            dataset=dataset,
            query=query,
            mode=mode,
            chunk_size=input_data.chunk_size,
            top_k=top_k,
            chunks_indexed=len(chunks),
            query_embedding=query_embedding,
            results=results,
            answer=answer,
            stages=self._build_stages(
                query=query,
                mode=mode,
                chunks=chunks,
                query_embedding=query_embedding,
                results=results,
                answer=answer,
            ),
            timings=timings.to_dict(),
        )

    # =========================================================================
    # Helpers privados.
    # =========================================================================

    def _validate_input(self, input_data: RunPipelineInput) -> PipelineError | None:
        """
        Reglas:
          - chunk_size en [1, max_chunk_size]
          - query con largo <= max_query_chars
          - mode válido
        """
        chunk_error = validate_chunk_size(input_data.chunk_size, self._max_chunk_size)
        if chunk_error is not None:
            return chunk_error

        if len(input_data.query or "") > self._max_query_chars:
            return PipelineError(
                code=PipelineErrorCode.VALIDATION_ERROR,
                message=f"query must be at most {self._max_query_chars} characters",
                resource=_RESOURCE_QUERY,
            )

        try:
            RetrieverMode(input_data.mode)
        except ValueError:
            return PipelineError(
                code=PipelineErrorCode.VALIDATION_ERROR,
                message=f"Unknown retriever mode: {input_data.mode!r}",
                resource=_RESOURCE_MODE,
            )

        return None

    def _sanitize_top_k(self, top_k: int) -> int:
        """
        Reglas:
          - top_k <= 0 => se respeta (devolverá [])
          - top_k > MAX => clamp a MAX
        """
        if top_k <= 0:
            return top_k
        return min(top_k, self._max_top_k)

    @staticmethod
    def _record_metrics(
        timings: StageTimings, mode: RetrieverMode, results: List[RetrievalResult]
    ) -> None:
        for stage, seconds in timings.seconds().items():
            observe_stage_latency(stage, seconds)
        record_retrieval(mode.value, len(results))

    @staticmethod
    def _build_stages(
        *,
        query: str,
        mode: RetrieverMode,
        chunks: List[Chunk],
        query_embedding: List[float],
        results: List[RetrievalResult],
        answer: GeneratedAnswer | None,
    ) -> List[PipelineStageTrace]:
        """R: Las cinco etapas del sandbox con lo que produjo cada una."""
        details: Dict[str, Dict[str, object]] = {
            "question": {
                "query": query,
                "normalized": " ".join(sanitize(query)),
            },
            "embedding": {
                "dimension": len(query_embedding),
                "vector": [round(value, _SCORE_DECIMALS) for value in query_embedding],
            },
            "vector-search": {
                "candidates": len(chunks),
                "matches": [result.chunk.id for result in results],
                "similarities": [
                    round(result.similarity, _SCORE_DECIMALS) for result in results
                ],
            },
            "rerank": {
                "mode": mode.value,
                "scores": [round(result.score, _SCORE_DECIMALS) for result in results],
            },
            "compose": (
                {
                    "prompt_tokens": answer.prompt_tokens,
                    "response_tokens": answer.response_tokens,
                    "citations": len(answer.citations),
                }
                if answer is not None
                else {}
            ),
        }
        return [
            PipelineStageTrace(step=step, detail=details.get(step.id, {}))
            for step in SANDBOX_STAGES
        ]
